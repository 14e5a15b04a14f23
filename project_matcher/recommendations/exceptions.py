"""Recommendation engine exceptions.

All engine errors inherit from RecommendationError so callers can catch
them with a single except clause.
"""


class RecommendationError(Exception):
    """Base exception for recommendation engine errors."""


class CandidateStoreError(RecommendationError):
    """Raised when the candidate store cannot be read.

    Examples:
    - Catalog file missing or unreadable
    - Backing database unavailable
    """
