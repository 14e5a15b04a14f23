from __future__ import annotations

import math
import re

from .models import Candidate, ScoreBreakdown, ScoredCandidate, Survey

SCORE_WEIGHTS: dict[str, float] = {
    "tech_stack": 0.30,
    "budget": 0.20,
    "project_type": 0.20,
    "domain": 0.20,
    "semantic": 0.10,
}

NEUTRAL_SCORE = 0.5
BUDGET_FLOOR_SCORE = 0.3
OPEN_BUDGET_NEAR_SCORE = 0.7
OPEN_BUDGET_TOLERANCE = 0.3

PROJECT_TYPE_KEYWORDS: dict[str, list[str]] = {
    "website": ["web", "website", "frontend", "fullstack", "landing"],
    "mobile-app": ["mobile", "app", "android", "ios", "flutter", "react native"],
    "saas": ["saas", "platform", "cloud", "service", "subscription"],
    "automation": ["automation", "tool", "script", "bot", "workflow"],
    "ai-app": ["ai", "ml", "machine learning", "artificial intelligence", "nlp", "computer vision"],
}

DOMAIN_KEYWORDS: dict[str, list[str]] = {
    "ecommerce": [
        "ecommerce", "e-commerce", "shop", "store", "retail",
        "cart", "product", "marketplace", "buy", "sell",
    ],
    "education": [
        "education", "learning", "course", "student",
        "teacher", "school", "university", "training",
    ],
    "finance": [
        "finance", "banking", "payment", "wallet",
        "transaction", "investment", "trading", "crypto",
    ],
    "ai-ml": [
        "ai", "ml", "machine learning", "deep learning",
        "neural", "nlp", "computer vision", "data science",
    ],
    "productivity": [
        "productivity", "task", "project management",
        "collaboration", "workflow", "efficiency",
    ],
    "marketplace": ["marketplace", "platform", "listing", "vendor", "buyer", "seller", "auction"],
    "healthcare": [
        "health", "medical", "hospital", "patient",
        "doctor", "clinic", "wellness", "fitness",
    ],
    "social": ["social", "community", "chat", "messaging", "feed", "network", "connect"],
}

_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def _tokenize(text: str) -> set[str]:
    words = _NON_WORD_RE.sub(" ", text.lower()).split()
    return {w for w in words if len(w) > 2}


def text_similarity(text_a: str | None, text_b: str | None) -> float:
    """Jaccard similarity of the word sets of two texts, in [0, 1]."""
    if not text_a or not text_b:
        return 0.0

    words_a = _tokenize(text_a)
    words_b = _tokenize(text_b)
    if not words_a or not words_b:
        return 0.0

    return len(words_a & words_b) / len(words_a | words_b)


def _tech_matches(tech: str, offered_lower: list[str]) -> bool:
    # Containment in either direction; a short tag like "c" will match widely.
    return any(tech in offered or offered in tech for offered in offered_lower)


def match_tech_stack(requested: list[str] | None, offered: list[str] | None) -> float:
    if not requested or offered is None:
        return 0.0

    offered_lower = [t.lower() for t in offered]
    matches = sum(1 for tech in requested if _tech_matches(tech.lower(), offered_lower))
    return matches / len(requested)


def matching_technologies(requested: list[str], offered: list[str]) -> list[str]:
    """Requested technologies (in survey order) that the offered list covers."""
    offered_lower = [t.lower() for t in offered]
    return [tech for tech in requested if _tech_matches(tech.lower(), offered_lower)]


def _parse_budget_range(budget_range: str) -> tuple[int, int | None] | None:
    parts = budget_range.split("-")
    try:
        minimum = int(parts[0].strip().replace("+", ""))
        maximum = int(parts[1].strip().replace("+", "")) if len(parts) > 1 else None
    except ValueError:
        return None
    return minimum, maximum


def match_budget(budget_range: str | None, budget: float | None) -> float:
    if not budget_range or not budget:
        return 0.0

    parsed = _parse_budget_range(budget_range)
    if parsed is None:
        return 0.0
    minimum, maximum = parsed

    # A zero maximum is treated like the open-ended "<min>+" form.
    if maximum:
        if minimum <= budget <= maximum:
            return 1.0

        midpoint = (minimum + maximum) / 2
        spread = maximum - minimum
        distance = abs(budget - midpoint)
        if distance < spread:
            return 1.0 - (distance / spread) * 0.5
    else:
        if budget >= minimum:
            return 1.0
        if minimum - budget < minimum * OPEN_BUDGET_TOLERANCE:
            return OPEN_BUDGET_NEAR_SCORE

    return BUDGET_FLOOR_SCORE


def match_project_type(project_type: str | None, category: str | None) -> float:
    if not project_type or not category:
        return NEUTRAL_SCORE

    category_lower = category.lower()
    keywords = PROJECT_TYPE_KEYWORDS.get(project_type, [])
    if any(keyword in category_lower for keyword in keywords):
        return 1.0
    return NEUTRAL_SCORE


def match_domain(domain: str | None, category: str | None, description: str | None) -> float:
    if not domain:
        return NEUTRAL_SCORE

    keywords = DOMAIN_KEYWORDS.get(domain, [])
    search_text = f"{category or ''} {description or ''}".lower()
    count = sum(1 for keyword in keywords if keyword in search_text)
    return min(count / 3, 1.0)


def aggregate_score(breakdown: ScoreBreakdown) -> int:
    """Weighted sum of the component scores as a 0-100 percentage."""
    total = sum(weight * getattr(breakdown, name) for name, weight in SCORE_WEIGHTS.items())
    return max(0, min(100, round_half_up(total * 100)))


def score_candidate(survey: Survey, candidate: Candidate) -> ScoredCandidate:
    breakdown = ScoreBreakdown(
        tech_stack=match_tech_stack(survey.tech_stack, candidate.technologies),
        budget=match_budget(survey.budget_range, candidate.budget),
        project_type=match_project_type(survey.project_type, candidate.category),
        domain=match_domain(survey.domain, candidate.category, candidate.description),
        semantic=text_similarity(
            survey.requirements,
            f"{candidate.title} {candidate.description} {candidate.requirements}",
        ),
    )
    return ScoredCandidate(
        candidate=candidate,
        breakdown=breakdown,
        match_score=aggregate_score(breakdown),
    )
