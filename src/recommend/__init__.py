"""Ranked job and course recommendations.

Public API:
    - RecommendationService: Score, adjust, rank and truncate a catalog
    - RecommendOptions: Caller preferences (limit, location, salary floor)
    - Recommendation: Ranked result item
    - RecommendationConfig: Configuration settings
"""

from src.recommend.config import (
    RecommendationConfig,
    get_recommendation_config,
    reset_recommendation_config,
)
from src.recommend.models import DEFAULT_LIMIT, Recommendation, RecommendOptions
from src.recommend.service import RecommendationService

__all__ = [
    "RecommendationService",
    "RecommendOptions",
    "Recommendation",
    "DEFAULT_LIMIT",
    "RecommendationConfig",
    "get_recommendation_config",
    "reset_recommendation_config",
]
