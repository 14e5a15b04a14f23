from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import GroqTextGenerator, TextGenerator
from .models import Candidate, ScoreBreakdown, Survey
from .scoring import matching_technologies

logger = logging.getLogger(__name__)

DEFAULT_EXPLANATION = "This project aligns with your general preferences and requirements"


class Explainer(Protocol):
    async def explain(self, candidate: Candidate, survey: Survey, breakdown: ScoreBreakdown) -> str: ...


def _format_budget(budget: float | None) -> str:
    if budget is None:
        return "N/A"
    return str(int(budget)) if float(budget).is_integer() else str(budget)


def build_explanation_prompt(candidate: Candidate, survey: Survey, breakdown: ScoreBreakdown) -> str:
    pct = breakdown.as_percentages()
    lines = [
        "Analyze why this project matches the user's requirements and provide "
        "a concise explanation (2-3 sentences maximum).",
        "",
        "## User Requirements",
        f"- Project Type: {survey.project_type}",
        f"- Tech Stack: {', '.join(survey.tech_stack)}",
        f"- Budget Range: {survey.budget_range}",
        f"- Domain: {survey.domain}",
        f"- Requirements: {survey.requirements}",
        "",
        "## Project Details",
        f"- Title: {candidate.title}",
        f"- Description: {candidate.description}",
        f"- Technologies: {', '.join(candidate.technologies)}",
        f"- Budget: ₹{_format_budget(candidate.budget)}",
        f"- Category: {candidate.category}",
        "",
        "## Match Scores",
        f"- Tech Stack Match: {pct['tech_stack']}%",
        f"- Budget Match: {pct['budget']}%",
        f"- Domain Match: {pct['domain']}%",
        f"- Project Type Match: {pct['project_type']}%",
        f"- Requirements Similarity: {pct['semantic']}%",
    ]
    return "\n".join(lines)


class TemplateExplainer:
    """Rule-based explanations built from the score breakdown alone."""

    def build(self, candidate: Candidate, survey: Survey, breakdown: ScoreBreakdown) -> str:
        clauses: list[str] = []

        if breakdown.tech_stack > 0.7:
            techs = matching_technologies(survey.tech_stack, candidate.technologies)
            clauses.append(f"Strong tech stack alignment with {', '.join(techs)}")
        elif breakdown.tech_stack > 0.4:
            clauses.append("Partial tech stack match with your preferences")

        budget = _format_budget(candidate.budget)
        if breakdown.budget > 0.8:
            clauses.append(f"Budget (₹{budget}) fits perfectly within your range")
        elif breakdown.budget > 0.5:
            clauses.append(f"Budget (₹{budget}) is close to your target range")

        if breakdown.domain > 0.7:
            clauses.append("Excellent domain alignment with your requirements")

        if breakdown.project_type == 1.0:
            clauses.append("Matches your desired project type exactly")

        if breakdown.semantic > 0.5:
            clauses.append("Project description closely matches your stated requirements")

        if not clauses:
            clauses.append(DEFAULT_EXPLANATION)

        return ". ".join(clauses) + "."

    async def explain(self, candidate: Candidate, survey: Survey, breakdown: ScoreBreakdown) -> str:
        return self.build(candidate, survey, breakdown)


class LLMExplainer:
    """
    Explanations written by a text generator.

    Any generator failure (exception, timeout or empty reply) is logged and
    answered with the fallback explainer instead, so callers never see it.
    """

    def __init__(
        self,
        generator: TextGenerator,
        fallback: Explainer | None = None,
        timeout: float | None = DEFAULT_LLM_CONFIG.timeout,
    ) -> None:
        self.generator = generator
        self.fallback = fallback or TemplateExplainer()
        self.timeout = timeout

    async def explain(self, candidate: Candidate, survey: Survey, breakdown: ScoreBreakdown) -> str:
        prompt = build_explanation_prompt(candidate, survey, breakdown)
        try:
            text = await asyncio.wait_for(self.generator.generate(prompt), timeout=self.timeout)
        except Exception:
            logger.warning(
                "Explanation generation failed for project %s, using template fallback",
                candidate.id,
                exc_info=True,
            )
            return await self.fallback.explain(candidate, survey, breakdown)

        text = (text or "").strip()
        if not text:
            logger.warning("Empty explanation for project %s, using template fallback", candidate.id)
            return await self.fallback.explain(candidate, survey, breakdown)
        return text


def build_explainer(
    config: LLMConfig = DEFAULT_LLM_CONFIG,
    generator: TextGenerator | None = None,
) -> Explainer:
    """Pick the LLM-backed explainer when a generator is available, else templates."""
    if generator is None and config.is_configured:
        generator = GroqTextGenerator(config)

    if generator is None:
        logger.info("LLM explanations disabled, using template explanations")
        return TemplateExplainer()

    logger.info("LLM explanations enabled (model=%s)", config.model)
    return LLMExplainer(generator, fallback=TemplateExplainer(), timeout=config.timeout)
