from __future__ import annotations

from project_matcher.analytics.insights import format_inr, summarize
from project_matcher.recommendations.models import Insights, Recommendation, Survey

SURVEY = Survey(
    project_type="saas",
    tech_stack=["python"],
    budget_range="50000-150000",
    domain="finance",
    requirements="Subscription billing platform for small banks",
)


def _rec(pid: str, score: int, technologies: list[str], budget: float) -> Recommendation:
    return Recommendation(
        id=pid,
        title=f"Project {pid}",
        description="",
        technologies=technologies,
        budget=budget,
        category="SaaS",
        match_score=score,
        explanation="",
    )


def test_empty_recommendations():
    insights = summarize(SURVEY, [])
    assert insights == Insights()
    assert insights.total_matches == 0
    assert insights.average_match_score == 0
    assert insights.top_technologies == []


def test_average_score_rounds_half_up():
    recs = [_rec("a", 80, [], 1000), _rec("b", 71, [], 1000)]
    assert summarize(SURVEY, recs).average_match_score == 76


def test_top_technologies_by_frequency_then_first_seen():
    recs = [
        _rec("a", 90, ["Django", "React", "Stripe"], 1000),
        _rec("b", 80, ["React", "Postgres", "AWS"], 1000),
        _rec("c", 70, ["Postgres", "Redis", "Celery"], 1000),
    ]
    insights = summarize(SURVEY, recs)
    assert insights.top_technologies == ["React", "Postgres", "Django", "Stripe", "AWS"]


def test_budget_and_domain_insights():
    recs = [_rec("a", 90, [], 100000), _rec("b", 80, [], 200000)]
    insights = summarize(SURVEY, recs)

    assert insights.total_matches == 2
    assert insights.budget_insight == "Average project budget in your range: ₹1,50,000"
    assert insights.domain_insight == "Found 2 projects matching your finance domain preference"


class TestFormatInr:
    def test_small_numbers(self):
        assert format_inr(0) == "0"
        assert format_inr(999) == "999"

    def test_thousands(self):
        assert format_inr(15000) == "15,000"

    def test_lakhs_and_crores(self):
        assert format_inr(150000) == "1,50,000"
        assert format_inr(12345678) == "1,23,45,678"

    def test_negative(self):
        assert format_inr(-2500) == "-2,500"
