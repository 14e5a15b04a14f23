from __future__ import annotations

from collections import Counter

from ..recommendations.models import Insights, Recommendation, Survey
from ..recommendations.scoring import round_half_up

TOP_TECHNOLOGIES = 5


def format_inr(amount: int) -> str:
    """Group digits the Indian way: 1234567 -> "12,34,567"."""
    sign = "-" if amount < 0 else ""
    digits = str(abs(amount))
    if len(digits) <= 3:
        return sign + digits

    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return sign + ",".join(groups + [tail])


def summarize(survey: Survey, recommendations: list[Recommendation]) -> Insights:
    if not recommendations:
        return Insights()

    total = len(recommendations)
    average_score = round_half_up(sum(r.match_score for r in recommendations) / total)

    # Counter keeps insertion order, so most_common() breaks ties by first appearance.
    tech_counter: Counter[str] = Counter()
    for rec in recommendations:
        for tech in rec.technologies:
            tech_counter[tech] += 1
    top_technologies = [tech for tech, _ in tech_counter.most_common(TOP_TECHNOLOGIES)]

    avg_budget = sum(r.budget or 0 for r in recommendations) / total

    return Insights(
        total_matches=total,
        average_match_score=average_score,
        top_technologies=top_technologies,
        budget_insight=f"Average project budget in your range: ₹{format_inr(round_half_up(avg_budget))}",
        domain_insight=f"Found {total} projects matching your {survey.domain} domain preference",
    )
