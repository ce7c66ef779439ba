"""Configuration settings for match scoring."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringConfig(BaseSettings):
    """Match scoring configuration settings.

    The default weights and partial credits reproduce the heuristics the
    product has always used; they are placeholders rather than tuned values,
    so every one of them can be overridden via environment variables with the
    `SCORING_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Job scoring weights (must sum to 1.0)
    job_weight_skills: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.35,
        description="Weight for required skills coverage",
    )
    job_weight_experience: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.25,
        description="Weight for experience tenure vs. minimum years",
    )
    job_weight_location: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.15,
        description="Weight for location match",
    )
    job_weight_salary: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.15,
        description="Weight for salary vs. desired minimum",
    )
    job_weight_education: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.10,
        description="Weight for education level",
    )

    # Course scoring weights (must sum to 1.0)
    course_weight_skills: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.40,
        description="Weight for taught-skill overlap with the profile",
    )
    course_weight_career: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.30,
        description="Weight for target role alignment",
    )
    course_weight_quality: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.20,
        description="Weight for course quality score",
    )
    course_weight_popularity: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.10,
        description="Weight for course popularity",
    )

    # Partial credits
    location_partial_credit: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.3,
        description="Location subscore when an on-site job is in another city",
    )
    education_partial_credit: Annotated[float, Field(ge=0.0, le=1.0)] = Field(
        default=0.5,
        description="Education subscore when the profile is below the requirement",
    )

    @model_validator(mode="after")
    def validate_weights_sum_to_one(self) -> ScoringConfig:
        """Ensure each domain's weights sum to 1.0 (within tolerance)."""
        job_sum = (
            self.job_weight_skills
            + self.job_weight_experience
            + self.job_weight_location
            + self.job_weight_salary
            + self.job_weight_education
        )
        if abs(job_sum - 1.0) > 1e-6:
            raise ValueError(
                "Job scoring weights must sum to 1.0. "
                f"Got {job_sum:.6f} "
                f"(skills={self.job_weight_skills}, "
                f"experience={self.job_weight_experience}, "
                f"location={self.job_weight_location}, "
                f"salary={self.job_weight_salary}, "
                f"education={self.job_weight_education})."
            )

        course_sum = (
            self.course_weight_skills
            + self.course_weight_career
            + self.course_weight_quality
            + self.course_weight_popularity
        )
        if abs(course_sum - 1.0) > 1e-6:
            raise ValueError(
                "Course scoring weights must sum to 1.0. "
                f"Got {course_sum:.6f} "
                f"(skills={self.course_weight_skills}, "
                f"career={self.course_weight_career}, "
                f"quality={self.course_weight_quality}, "
                f"popularity={self.course_weight_popularity})."
            )
        return self


# Singleton instance for easy import
_scoring_config: ScoringConfig | None = None


def get_scoring_config() -> ScoringConfig:
    """Get the scoring configuration singleton."""
    global _scoring_config
    if _scoring_config is None:
        _scoring_config = ScoringConfig()
    return _scoring_config


def reset_scoring_config() -> None:
    """Reset the scoring configuration singleton (useful for testing)."""
    global _scoring_config
    _scoring_config = None
