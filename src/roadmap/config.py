"""Configuration settings for roadmap and starter goal generation."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RoadmapConfig(BaseSettings):
    """Roadmap configuration settings.

    Overridable via environment variables with `ROADMAP_` prefix or a .env
    file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROADMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    courses_per_phase: Annotated[int, Field(ge=0)] = Field(
        default=2,
        description="Courses assigned to each roadmap phase",
    )
    foundation_skill_count: Annotated[int, Field(ge=0)] = Field(
        default=2,
        description="Priority skills covered by the foundation phase",
    )
    project_skill_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Skill gaps covered by the projects phase",
    )
    learning_goal_days: Annotated[int, Field(gt=0)] = Field(
        default=21,
        description="Days until the course-completion starter goal is due",
    )
    project_goal_days: Annotated[int, Field(gt=0)] = Field(
        default=30,
        description="Days until the project starter goal is due",
    )
    goal_related_skill_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Skills attached to each starter goal",
    )


# Singleton instance for easy import
_roadmap_config: RoadmapConfig | None = None


def get_roadmap_config() -> RoadmapConfig:
    """Get the roadmap configuration singleton."""
    global _roadmap_config
    if _roadmap_config is None:
        _roadmap_config = RoadmapConfig()
    return _roadmap_config


def reset_roadmap_config() -> None:
    """Reset the roadmap configuration singleton (useful for testing)."""
    global _roadmap_config
    _roadmap_config = None
