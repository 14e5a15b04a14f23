from __future__ import annotations

from .models import ScoredCandidate


def rank_candidates(scored: list[ScoredCandidate], top_n: int) -> list[ScoredCandidate]:
    """
    Order candidates best-first by match score and keep the first *top_n*.

    ``sorted`` is stable, so candidates with equal scores keep the order the
    store returned them in.
    """
    if not scored or top_n <= 0:
        return []
    return sorted(scored, key=lambda sc: sc.match_score, reverse=True)[:top_n]
