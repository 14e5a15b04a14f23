from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Survey(BaseModel):
    project_type: str = Field(..., description='Requested project type, e.g. "website" or "ai-app"')
    tech_stack: list[str] = Field(default_factory=list)
    budget_range: str = Field(
        default="", description='Budget as "<min>-<max>" or open-ended "<min>+"'
    )
    domain: str = ""
    requirements: str = ""


class Seller(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    email: str = ""
    role: str = "developer"


class Candidate(BaseModel):
    id: str
    title: str
    description: str = ""
    technologies: list[str] = Field(default_factory=list)
    budget: float | None = Field(default=None, ge=0)
    category: str = ""
    requirements: str = ""
    status: str = "active"
    seller: Seller | None = None


class ScoreBreakdown(BaseModel):
    tech_stack: float = Field(default=0.0, ge=0.0, le=1.0)
    budget: float = Field(default=0.0, ge=0.0, le=1.0)
    project_type: float = Field(default=0.0, ge=0.0, le=1.0)
    domain: float = Field(default=0.0, ge=0.0, le=1.0)
    semantic: float = Field(default=0.0, ge=0.0, le=1.0)

    def as_percentages(self) -> dict[str, int]:
        return {name: int(value * 100 + 0.5) for name, value in self.model_dump().items()}


class ScoredCandidate(BaseModel):
    candidate: Candidate
    breakdown: ScoreBreakdown
    match_score: int = Field(..., ge=0, le=100)


class Recommendation(BaseModel):
    id: str
    title: str
    description: str
    technologies: list[str]
    budget: float | None
    category: str
    match_score: int = Field(..., ge=0, le=100)
    explanation: str
    seller: Seller | None = None


class Insights(BaseModel):
    total_matches: int = 0
    average_match_score: int = 0
    top_technologies: list[str] = Field(default_factory=list)
    budget_insight: str = ""
    domain_insight: str = ""


class RecommendationResult(BaseModel):
    survey: Survey
    recommendations: list[Recommendation]
    insights: Insights
