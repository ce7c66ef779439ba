"""Data models for match scoring.

Profiles and catalog entities are validated snapshots handed in by the
storage layer. Field names are snake_case; the camelCase names used by the
stored documents (``targetJobTitle``, ``requiredSkills`` ...) are accepted as
aliases so raw records validate without a translation step.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from src.scoring.matchers import normalize_skill, skill_keys

ProficiencyLevel = Literal["beginner", "intermediate", "advanced", "expert"]
Priority = Literal["low", "medium", "high"]
DegreeName = Literal[
    "none", "high_school", "associate", "bachelor", "master", "doctorate"
]
ExperienceLevel = Literal["entry", "mid", "senior", "executive"]
Difficulty = Literal["Beginner", "Intermediate", "Advanced"]

PROFICIENCY_ORDER: dict[str, int] = {
    "beginner": 0,
    "intermediate": 1,
    "advanced": 2,
    "expert": 3,
}

DEGREE_LEVELS: dict[str, int] = {
    "none": 0,
    "high_school": 1,
    "associate": 2,
    "bachelor": 3,
    "master": 4,
    "doctorate": 5,
}

PRIORITY_RANK: dict[str, int] = {"low": 0, "medium": 1, "high": 2}

# Course popularity blend
POPULARITY_ENROLLMENT_CAP = 10_000
POPULARITY_WEIGHT_ENROLLMENT = 0.4
POPULARITY_WEIGHT_RATING = 0.3
POPULARITY_WEIGHT_COMPLETION = 0.3

_DAYS_PER_YEAR = 365.0


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict):
        """Deserialize from a dictionary."""
        return cls.model_validate(data)


def _named_items(value: Any) -> Any:
    """Allow plain strings wherever a `{name: ...}` item is expected."""
    if value is None:
        return []
    if isinstance(value, list):
        return [{"name": item} if isinstance(item, str) else item for item in value]
    return value


class Skill(_SnapshotModel):
    """A skill held by a user."""

    name: str = Field(..., min_length=1, description="Skill name")
    category: Literal["technical", "soft", "language", "certification"] = Field(
        default="technical", description="Skill category"
    )
    proficiency_level: ProficiencyLevel = Field(
        default="intermediate", description="Self-assessed proficiency"
    )
    verification_status: Literal["unverified", "pending", "verified"] = Field(
        default="unverified", description="Verification state"
    )
    endorsements: int = Field(default=0, ge=0, description="Endorsement count")

    @property
    def key(self) -> str:
        """Identity key used for matching (the normalized name only)."""
        return normalize_skill(self.name)

    def is_at_least(self, level: str) -> bool:
        """Return True if the proficiency is at or above `level`."""
        return PROFICIENCY_ORDER[self.proficiency_level] >= PROFICIENCY_ORDER[level]


class ExperienceEntry(_SnapshotModel):
    """Work experience entry."""

    company: str = Field(..., description="Company name")
    position: str = Field(..., description="Position held")
    start_date: date = Field(..., description="Start date")
    end_date: date | None = Field(default=None, description="End date (None = ongoing)")
    description: str = Field(default="", description="Role description")
    technologies: list[str] = Field(default_factory=list)

    def tenure_years(self, as_of: date | None = None) -> float:
        """Years spent in this position, counting ongoing roles up to `as_of`."""
        end = self.end_date or as_of or date.today()
        days = (end - self.start_date).days
        return max(0.0, days / _DAYS_PER_YEAR)


class EducationEntry(_SnapshotModel):
    """Education entry."""

    institution: str = Field(..., description="Institution name")
    degree: str = Field(..., description="Degree text, e.g. 'Bachelor of Science'")
    field: str = Field(default="", description="Field of study")
    start_date: date | None = None
    end_date: date | None = None

    @property
    def level(self) -> int:
        """Degree level inferred from the degree text (1 when unrecognized)."""
        return degree_level(self.degree) or DEGREE_LEVELS["high_school"]


class Location(_SnapshotModel):
    """Where a user lives and whether they prefer remote work."""

    city: str | None = None
    state: str | None = None
    country: str | None = None
    is_remote_preferred: bool = False


class SalaryRange(_SnapshotModel):
    """A salary band."""

    min: float | None = Field(default=None, ge=0)
    max: float | None = Field(default=None, ge=0)
    currency: str = "USD"


class Profile(_SnapshotModel):
    """Normalized view of a user used for scoring."""

    skills: list[Skill] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    location: Location | None = None
    desired_salary_range: SalaryRange | None = None
    target_job_title: str | None = None
    experience_level: ExperienceLevel = "entry"

    # Identity and contact details (profile completeness only)
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    headline: str | None = None
    summary: str | None = None
    target_industry: str | None = None

    @field_validator("skills", mode="before")
    @classmethod
    def _coerce_skills(cls, v: Any) -> Any:
        return _named_items(v)

    @property
    def skill_keys(self) -> set[str]:
        """Identity keys of all profile skills."""
        return skill_keys(self.skills)

    @property
    def education_level(self) -> int:
        """Highest education level across entries (0 with no entries)."""
        return max((entry.level for entry in self.education), default=0)

    @property
    def desired_salary_min(self) -> float | None:
        if self.desired_salary_range is None:
            return None
        return self.desired_salary_range.min

    def total_experience_years(self, as_of: date | None = None) -> float:
        """Aggregate tenure across all experience entries."""
        return sum(entry.tenure_years(as_of) for entry in self.experience)


class JobSkillRequirement(_SnapshotModel):
    name: str = Field(..., min_length=1)
    level: ProficiencyLevel | None = None
    priority: Priority = "medium"


class PreferredSkill(_SnapshotModel):
    name: str = Field(..., min_length=1)
    level: ProficiencyLevel | None = None


class ExperienceRequirements(_SnapshotModel):
    minimum_years: float | None = Field(default=None, ge=0)
    preferred_years: float | None = Field(default=None, ge=0)


class EducationRequirements(_SnapshotModel):
    minimum_degree: DegreeName | None = None
    preferred_fields: list[str] = Field(default_factory=list)

    @property
    def required_level(self) -> int:
        if self.minimum_degree is None:
            return 0
        return DEGREE_LEVELS[self.minimum_degree]


class JobLocation(_SnapshotModel):
    city: str | None = None
    state: str | None = None
    country: str | None = None
    is_remote: bool = False
    is_hybrid: bool = False

    def mentions(self, place: str) -> bool:
        """True if `place` appears (case-insensitively) in city, state or country."""
        needle = place.strip().lower()
        if not needle:
            return False
        parts = [self.city, self.state, self.country]
        return any(needle in part.lower() for part in parts if part)


class JobPosting(_SnapshotModel):
    """A job posting normalized for scoring."""

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        description="Catalog identifier",
    )
    title: str = Field(..., description="Job title")
    company: str = Field(default="", description="Hiring company")
    industry: str | None = None
    experience_level: ExperienceLevel | None = None
    required_skills: list[JobSkillRequirement] = Field(default_factory=list)
    preferred_skills: list[PreferredSkill] = Field(default_factory=list)
    experience_requirements: ExperienceRequirements = Field(
        default_factory=ExperienceRequirements
    )
    education_requirements: EducationRequirements = Field(
        default_factory=EducationRequirements
    )
    salary: SalaryRange | None = None
    location: JobLocation | None = None

    @field_validator("required_skills", "preferred_skills", mode="before")
    @classmethod
    def _coerce_skill_lists(cls, v: Any) -> Any:
        return _named_items(v)

    @property
    def required_skill_names(self) -> list[str]:
        return [skill.name for skill in self.required_skills]

    @property
    def is_remote(self) -> bool:
        return self.location is not None and self.location.is_remote


class CourseSkill(_SnapshotModel):
    name: str = Field(..., min_length=1)
    level: Literal["beginner", "intermediate", "advanced"] | None = None


class Course(_SnapshotModel):
    """A course normalized for scoring."""

    id: str = Field(
        ...,
        validation_alias=AliasChoices("id", "_id"),
        description="Catalog identifier",
    )
    title: str = Field(..., description="Course title")
    provider: str = Field(default="", description="Course provider")
    skills_taught: list[CourseSkill] = Field(default_factory=list)
    career_paths: list[str] = Field(default_factory=list)
    job_roles: list[str] = Field(default_factory=list)
    quality_score: float = Field(default=0.0, ge=0.0, le=10.0)
    enrollment_count: int = Field(default=0, ge=0)
    rating_average: float = Field(default=0.0, ge=0.0, le=5.0)
    completion_rate: float = Field(default=0.0, ge=0.0, le=1.0)
    difficulty: Difficulty = "Beginner"
    prerequisites: list[str] = Field(default_factory=list)
    duration_hours: float | None = Field(default=None, ge=0)

    @model_validator(mode="before")
    @classmethod
    def _flatten_stored_metrics(cls, data: Any) -> Any:
        """Lift nested metrics from stored course documents.

        Stored courses keep `rating: {average, count}`,
        `aiMetrics: {completionRate}` and `duration: {hours}`. A plain numeric
        `rating` is taken as the average.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        rating = data.pop("rating", None)
        if isinstance(rating, dict):
            rating = rating.get("average") or 0.0
        if isinstance(rating, int | float) and "ratingAverage" not in data:
            data.setdefault("rating_average", rating)
        metrics = data.pop("aiMetrics", None)
        if isinstance(metrics, dict) and "completionRate" not in data:
            data.setdefault("completion_rate", metrics.get("completionRate") or 0.0)
        duration = data.pop("duration", None)
        if isinstance(duration, dict) and "durationHours" not in data:
            data.setdefault("duration_hours", duration.get("hours"))
        return data

    @field_validator("skills_taught", mode="before")
    @classmethod
    def _coerce_skills_taught(cls, v: Any) -> Any:
        return _named_items(v)

    @property
    def skill_names(self) -> list[str]:
        return [skill.name for skill in self.skills_taught]

    @property
    def popularity_score(self) -> float:
        """Blend of normalized enrollment, rating and completion rate (0-1)."""
        enrollment = min(self.enrollment_count / POPULARITY_ENROLLMENT_CAP, 1.0)
        rating = self.rating_average / 5.0
        return (
            enrollment * POPULARITY_WEIGHT_ENROLLMENT
            + rating * POPULARITY_WEIGHT_RATING
            + self.completion_rate * POPULARITY_WEIGHT_COMPLETION
        )


CatalogEntity = JobPosting | Course


class MatchDomain(str, Enum):
    """Kind of catalog entity being scored."""

    JOB = "job"
    COURSE = "course"


@dataclass
class MatchResult:
    """Fit between one profile and one catalog entity."""

    score: int
    missing_skills: list[str] = field(default_factory=list)
    match_reasons: list[str] = field(default_factory=list)
    subscores: dict[str, float] = field(default_factory=dict)
    domain: MatchDomain = MatchDomain.JOB

    def __post_init__(self) -> None:
        if not (0 <= self.score <= 100):
            raise ValueError(f"score must be between 0 and 100 (got {self.score})")
        for name, value in self.subscores.items():
            if not (0.0 <= value <= 1.0):
                raise ValueError(
                    f"subscore {name} must be between 0.0 and 1.0 (got {value})"
                )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "score": self.score,
            "missing_skills": list(self.missing_skills),
            "match_reasons": list(self.match_reasons),
            "subscores": dict(self.subscores),
            "domain": self.domain.value,
        }


def degree_level(value: str) -> int | None:
    """Map free-text degree wording to a level, or None if unrecognized."""
    normalized = value.lower().strip()
    if "phd" in normalized or "doctor" in normalized:
        return DEGREE_LEVELS["doctorate"]
    if "master" in normalized:
        return DEGREE_LEVELS["master"]
    if "bachelor" in normalized:
        return DEGREE_LEVELS["bachelor"]
    if "associate" in normalized:
        return DEGREE_LEVELS["associate"]
    if "high school" in normalized:
        return DEGREE_LEVELS["high_school"]
    return None
