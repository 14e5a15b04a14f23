from __future__ import annotations

from project_matcher.recommendations.models import Candidate, ScoreBreakdown, ScoredCandidate
from project_matcher.recommendations.ranking import rank_candidates


def _scored(pid: str, score: int) -> ScoredCandidate:
    return ScoredCandidate(
        candidate=Candidate(id=pid, title=f"Project {pid}"),
        breakdown=ScoreBreakdown(),
        match_score=score,
    )


def test_sorted_descending():
    ranked = rank_candidates([_scored("a", 40), _scored("b", 90), _scored("c", 65)], 10)
    assert [sc.match_score for sc in ranked] == [90, 65, 40]


def test_ties_keep_input_order():
    items = [_scored("a", 50), _scored("b", 80), _scored("c", 50), _scored("d", 80), _scored("e", 50)]
    ranked = rank_candidates(items, 10)
    assert [sc.candidate.id for sc in ranked] == ["b", "d", "a", "c", "e"]


def test_truncates_to_top_n():
    items = [_scored(str(i), i) for i in range(10)]
    ranked = rank_candidates(items, 3)
    assert [sc.match_score for sc in ranked] == [9, 8, 7]


def test_empty_input():
    assert rank_candidates([], 5) == []


def test_non_positive_top_n():
    assert rank_candidates([_scored("a", 10)], 0) == []


def test_does_not_mutate_input():
    items = [_scored("a", 10), _scored("b", 20)]
    rank_candidates(items, 5)
    assert [sc.candidate.id for sc in items] == ["a", "b"]
