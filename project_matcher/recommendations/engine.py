from __future__ import annotations

import asyncio
import logging
import time

from ..analytics.insights import summarize
from .data_store import CandidateStore
from .exceptions import CandidateStoreError
from .explanations import Explainer, TemplateExplainer
from .models import (
    Candidate,
    Insights,
    Recommendation,
    RecommendationResult,
    ScoreBreakdown,
    ScoredCandidate,
    Survey,
)
from .ranking import rank_candidates
from .scoring import score_candidate

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 5


def _safe_score(survey: Survey, candidate: Candidate) -> ScoredCandidate:
    try:
        return score_candidate(survey, candidate)
    except Exception:
        logger.warning("Scoring failed for project %s, scoring it as 0", candidate.id, exc_info=True)
        return ScoredCandidate(candidate=candidate, breakdown=ScoreBreakdown(), match_score=0)


def _to_recommendation(scored: ScoredCandidate, explanation: str) -> Recommendation:
    project = scored.candidate
    return Recommendation(
        id=project.id,
        title=project.title,
        description=project.description,
        technologies=project.technologies,
        budget=project.budget,
        category=project.category,
        match_score=scored.match_score,
        explanation=explanation,
        seller=project.seller,
    )


class RecommendationEngine:
    """Ranks active project listings against a survey and explains the top matches."""

    def __init__(self, store: CandidateStore, explainer: Explainer | None = None) -> None:
        self.store = store
        self.explainer = explainer or TemplateExplainer()

    async def _fetch_candidates(self) -> list[Candidate]:
        try:
            return await asyncio.to_thread(self.store.fetch_active_candidates)
        except CandidateStoreError:
            raise
        except Exception as exc:
            raise CandidateStoreError(f"Failed to fetch active projects: {exc}") from exc

    async def get_recommendations(self, survey: Survey, top_n: int = DEFAULT_TOP_N) -> list[Recommendation]:
        start_time = time.time()

        candidates = await self._fetch_candidates()
        if not candidates:
            logger.info("No active projects to recommend")
            return []

        scored = [_safe_score(survey, c) for c in candidates]
        top = rank_candidates(scored, top_n)

        logger.info("Generating explanations for top %d of %d projects", len(top), len(candidates))
        # gather() returns results in argument order, keeping the ranking intact.
        explanations = await asyncio.gather(
            *(self.explainer.explain(sc.candidate, survey, sc.breakdown) for sc in top)
        )

        recommendations = [_to_recommendation(sc, text) for sc, text in zip(top, explanations)]

        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        logger.info("Generated %d recommendations in %.1f ms", len(recommendations), elapsed_ms)
        return recommendations

    def generate_insights(self, survey: Survey, recommendations: list[Recommendation]) -> Insights:
        return summarize(survey, recommendations)

    async def process_survey(self, survey: Survey, top_n: int = DEFAULT_TOP_N) -> RecommendationResult:
        recommendations = await self.get_recommendations(survey, top_n)
        return RecommendationResult(
            survey=survey,
            recommendations=recommendations,
            insights=self.generate_insights(survey, recommendations),
        )
