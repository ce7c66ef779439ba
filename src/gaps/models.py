"""Data models for skill-gap analysis."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field

from src.scoring.matchers import normalize_skill
from src.scoring.models import Priority, ProficiencyLevel


class SkillRequirement(BaseModel):
    """One entry of a role's required-skill template."""

    name: str = Field(..., min_length=1, description="Skill name")
    level: ProficiencyLevel | None = Field(
        default=None, description="Expected proficiency"
    )
    priority: Priority = Field(default="medium", description="Learning priority")

    @property
    def key(self) -> str:
        return normalize_skill(self.name)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")


@dataclass
class LearningStep:
    """A single step of the per-gap learning path."""

    step: int
    skill: str
    estimated_weeks: int
    resources: list[str] = field(default_factory=list)
    priority: str = "medium"

    def to_dict(self) -> dict:
        return {
            "step": self.step,
            "skill": self.skill,
            "estimated_weeks": self.estimated_weeks,
            "resources": list(self.resources),
            "priority": self.priority,
        }


@dataclass
class SkillGapReport:
    """Comparison of a profile's skills against a role template.

    Attributes:
        target_role: Role that was analyzed (after default resolution).
        overall_readiness: 0-100, lowered by a fixed amount per gap.
        skill_gaps: Missing template entries, highest priority first.
        existing_strengths: Template entries the profile already has.
        priority_skills: Leading slice of `skill_gaps`.
        estimated_time_months: (low, high) months to close every gap.
        learning_path: One step per gap, in gap order.
    """

    target_role: str
    overall_readiness: int
    skill_gaps: list[SkillRequirement] = field(default_factory=list)
    existing_strengths: list[SkillRequirement] = field(default_factory=list)
    priority_skills: list[SkillRequirement] = field(default_factory=list)
    estimated_time_months: tuple[int, int] = (0, 0)
    learning_path: list[LearningStep] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not (0 <= self.overall_readiness <= 100):
            raise ValueError(
                "overall_readiness must be between 0 and 100 "
                f"(got {self.overall_readiness})"
            )
        low, high = self.estimated_time_months
        if low > high:
            raise ValueError(
                f"estimated_time_months must be ordered (got {low}-{high})"
            )

    @property
    def estimated_time_display(self) -> str:
        low, high = self.estimated_time_months
        return f"{low}-{high} months"

    @property
    def gap_names(self) -> list[str]:
        return [gap.name for gap in self.skill_gaps]

    @property
    def priority_skill_names(self) -> list[str]:
        return [skill.name for skill in self.priority_skills]

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "target_role": self.target_role,
            "overall_readiness": self.overall_readiness,
            "skill_gaps": [gap.to_dict() for gap in self.skill_gaps],
            "existing_strengths": [s.to_dict() for s in self.existing_strengths],
            "priority_skills": [s.to_dict() for s in self.priority_skills],
            "estimated_time_months": list(self.estimated_time_months),
            "estimated_time_to_readiness": self.estimated_time_display,
            "learning_path": [step.to_dict() for step in self.learning_path],
        }
