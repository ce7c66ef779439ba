"""Configuration settings for skill-gap analysis."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GapConfig(BaseSettings):
    """Skill-gap analysis configuration settings.

    Overridable via environment variables with `GAPS_` prefix or a .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="GAPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_role: str = Field(
        default="Frontend Developer",
        min_length=1,
        description="Role analyzed when no target role is given",
    )
    readiness_penalty_per_gap: Annotated[int, Field(ge=0, le=100)] = Field(
        default=15,
        description="Readiness points lost per missing skill",
    )
    priority_skill_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of leading gaps reported as priority skills",
    )
    months_per_gap_min: Annotated[int, Field(ge=0)] = Field(
        default=2,
        description="Lower bound of months needed per missing skill",
    )
    months_per_gap_max: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Upper bound of months needed per missing skill",
    )

    # Learning path step estimates (weeks) per skill priority
    weeks_high_priority: Annotated[int, Field(gt=0)] = Field(default=5)
    weeks_medium_priority: Annotated[int, Field(gt=0)] = Field(default=4)
    weeks_low_priority: Annotated[int, Field(gt=0)] = Field(default=2)

    @model_validator(mode="after")
    def validate_month_range(self) -> GapConfig:
        """Ensure the per-gap month range is ordered."""
        if self.months_per_gap_min > self.months_per_gap_max:
            raise ValueError(
                "months_per_gap_min must not exceed months_per_gap_max "
                f"(got {self.months_per_gap_min} > {self.months_per_gap_max})."
            )
        return self

    def weeks_for_priority(self, priority: str) -> int:
        """Estimated weeks to learn a skill of the given priority."""
        return {
            "high": self.weeks_high_priority,
            "medium": self.weeks_medium_priority,
            "low": self.weeks_low_priority,
        }.get(priority, self.weeks_medium_priority)


# Singleton instance for easy import
_gap_config: GapConfig | None = None


def get_gap_config() -> GapConfig:
    """Get the gap analysis configuration singleton."""
    global _gap_config
    if _gap_config is None:
        _gap_config = GapConfig()
    return _gap_config


def reset_gap_config() -> None:
    """Reset the gap analysis configuration singleton (useful for testing)."""
    global _gap_config
    _gap_config = None
