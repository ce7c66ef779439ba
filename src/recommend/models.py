"""Data models for recommendation ranking."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from src.scoring.models import CatalogEntity, MatchResult

DEFAULT_LIMIT = 10


class RecommendOptions(BaseModel):
    """Caller preferences applied after base scoring."""

    limit: int | None = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        description="Maximum results to return (None = all)",
    )
    location_preference: str | None = Field(
        default=None, description="Preferred city, state or country for on-site jobs"
    )
    salary_min: float | None = Field(
        default=None, ge=0, description="Salary floor for job minimum salary"
    )
    suitable_only: bool = Field(
        default=False,
        description="Drop courses whose prerequisites or difficulty do not fit",
    )


@dataclass
class Recommendation:
    """A scored catalog entity with its preference adjustments."""

    entity: CatalogEntity
    match: MatchResult
    base_score: int
    score: int
    adjustments: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")

    @property
    def entity_id(self) -> str:
        return self.entity.id

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "entity": self.entity.to_dict(),
            "score": self.score,
            "base_score": self.base_score,
            "adjustments": list(self.adjustments),
            "match": self.match.to_dict(),
        }
