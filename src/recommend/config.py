"""Configuration settings for recommendation ranking."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecommendationConfig(BaseSettings):
    """Recommendation ranking configuration settings.

    Overridable via environment variables with `RECOMMEND_` prefix or a
    .env file. Penalties are points on the 0-100 score scale.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECOMMEND_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    location_penalty: Annotated[int, Field(ge=0, le=100)] = Field(
        default=15,
        description="Points removed from on-site jobs outside the preferred location",
    )
    salary_penalty: Annotated[int, Field(ge=0, le=100)] = Field(
        default=10,
        description="Points removed from jobs paying below the salary floor",
    )
    guide_course_limit: Annotated[int, Field(gt=0)] = Field(
        default=6,
        description="Courses recommended in a career guide",
    )


# Singleton instance for easy import
_recommendation_config: RecommendationConfig | None = None


def get_recommendation_config() -> RecommendationConfig:
    """Get the recommendation configuration singleton."""
    global _recommendation_config
    if _recommendation_config is None:
        _recommendation_config = RecommendationConfig()
    return _recommendation_config


def reset_recommendation_config() -> None:
    """Reset the recommendation configuration singleton (useful for testing)."""
    global _recommendation_config
    _recommendation_config = None
