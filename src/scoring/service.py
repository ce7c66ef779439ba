"""Match scoring service implementation."""

from __future__ import annotations

import logging
import math
from datetime import date

from src.scoring.config import ScoringConfig, get_scoring_config
from src.scoring.errors import InvalidInputError
from src.scoring.matchers import find_matching_skills, normalize_skill, overlap_ratio
from src.scoring.models import (
    CatalogEntity,
    Course,
    JobPosting,
    MatchDomain,
    MatchResult,
    Profile,
)

logger = logging.getLogger(__name__)

# Course difficulties appropriate for each experience level
_DIFFICULTY_BY_LEVEL: dict[str, set[str]] = {
    "entry": {"Beginner", "Intermediate"},
    "mid": {"Intermediate", "Advanced"},
    "senior": {"Advanced"},
    "executive": {"Advanced"},
}


class MatchScorer:
    """Compute a 0-100 fit between a profile and a single catalog entity.

    The scorer is stateless apart from its configuration: the same inputs
    always produce the same result. It is the seam where a learned model
    could replace the weighted formulas without touching callers.
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or get_scoring_config()

    def score(
        self,
        profile: Profile,
        entity: CatalogEntity,
        domain: MatchDomain | str,
        *,
        as_of: date | None = None,
    ) -> MatchResult:
        """Score `entity` for `profile` in the given domain.

        Args:
            profile: Profile snapshot.
            entity: A JobPosting (domain "job") or Course (domain "course").
            domain: "job" or "course".
            as_of: Reference date for ongoing experience (defaults to today).

        Raises:
            InvalidInputError: If profile or entity is missing, the domain is
                unknown, or the entity does not belong to the domain.
        """
        if profile is None:
            raise InvalidInputError("profile is required", argument="profile")
        if entity is None:
            raise InvalidInputError("entity is required", argument="entity")
        resolved = resolve_domain(domain)

        if resolved is MatchDomain.JOB:
            if not isinstance(entity, JobPosting):
                raise InvalidInputError(
                    f"job domain requires a JobPosting (got {type(entity).__name__})",
                    argument="entity",
                )
            return self.score_job(profile, entity, as_of=as_of)

        if not isinstance(entity, Course):
            raise InvalidInputError(
                f"course domain requires a Course (got {type(entity).__name__})",
                argument="entity",
            )
        return self.score_course(profile, entity)

    # Job factors

    def score_skills(
        self, job: JobPosting, profile: Profile
    ) -> tuple[float, list[str], list[str]]:
        """Score required skill coverage.

        Returns:
            skills_score, matched, missing
        """
        required = job.required_skill_names
        if not required:
            return 1.0, [], []

        matched, missing = find_matching_skills(required, profile.skills)
        return len(matched) / len(required), matched, missing

    def score_experience(
        self, job: JobPosting, profile: Profile, *, as_of: date | None = None
    ) -> tuple[float, str]:
        """Score aggregate tenure against the job's minimum years."""
        minimum = job.experience_requirements.minimum_years
        if not minimum:
            return 1.0, "No minimum experience requirement"

        years = profile.total_experience_years(as_of)
        if years >= minimum:
            return 1.0, f"Experience meets the {minimum:g}-year requirement"
        return (
            min(years / minimum, 1.0),
            f"{years:.1f} years of experience against a {minimum:g}-year requirement",
        )

    def score_location(self, job: JobPosting, profile: Profile) -> tuple[float, str]:
        """Score location; remote jobs bypass the city check entirely."""
        if job.is_remote:
            return 1.0, "Remote position"

        job_city = (job.location.city or "").strip() if job.location else ""
        if not job_city:
            return 1.0, "No location constraint"

        if profile.location is None:
            return 1.0, f"Located in {job_city}"

        profile_city = (profile.location.city or "").strip()
        if not profile_city:
            return (
                self.config.location_partial_credit,
                f"Located in {job_city}, your city is not set",
            )

        if profile_city.lower() == job_city.lower():
            return 1.0, f"Located in your city ({job_city})"
        return (
            self.config.location_partial_credit,
            f"Located in {job_city}, outside your city ({profile_city})",
        )

    def score_salary(self, job: JobPosting, profile: Profile) -> tuple[float, str]:
        """Score the job's minimum salary against the desired minimum."""
        desired = profile.desired_salary_min
        if not desired:
            return 1.0, "No salary expectation"

        offered = job.salary.min if job.salary else None
        if offered is None:
            return 1.0, "Salary not specified"

        if offered >= desired:
            return 1.0, "Salary meets your expectations"
        ratio = max(0.0, min(offered / desired, 1.0))
        return ratio, f"Salary is {ratio:.0%} of your desired minimum"

    def score_education(self, job: JobPosting, profile: Profile) -> tuple[float, str]:
        """Score education level; falling short earns partial credit."""
        required_level = job.education_requirements.required_level
        if profile.education_level >= required_level:
            if required_level == 0:
                return 1.0, "No education requirement"
            return 1.0, "Meets education requirement"
        return self.config.education_partial_credit, "Below education requirement"

    def score_job(
        self, profile: Profile, job: JobPosting, *, as_of: date | None = None
    ) -> MatchResult:
        """Calculate the weighted job fit with a subscore breakdown."""
        skills_score, matched, missing = self.score_skills(job, profile)
        experience_score, experience_reason = self.score_experience(
            job, profile, as_of=as_of
        )
        location_score, location_reason = self.score_location(job, profile)
        salary_score, salary_reason = self.score_salary(job, profile)
        education_score, education_reason = self.score_education(job, profile)

        composite = (
            self.config.job_weight_skills * skills_score
            + self.config.job_weight_experience * experience_score
            + self.config.job_weight_location * location_score
            + self.config.job_weight_salary * salary_score
            + self.config.job_weight_education * education_score
        )

        required_count = len(job.required_skills)
        if required_count:
            skills_reason = (
                f"{len(matched)} of {required_count} required skills match your profile"
            )
        else:
            skills_reason = "No required skills listed"

        reasons = [skills_reason, experience_reason, location_reason]
        if profile.desired_salary_min:
            reasons.append(salary_reason)
        if job.education_requirements.required_level:
            reasons.append(education_reason)

        result = MatchResult(
            score=to_percent(composite),
            missing_skills=missing,
            match_reasons=reasons,
            subscores={
                "skills": skills_score,
                "experience": experience_score,
                "location": location_score,
                "salary": salary_score,
                "education": education_score,
            },
            domain=MatchDomain.JOB,
        )
        logger.debug("Scored job %s: %d", job.id, result.score)
        return result

    # Course factors

    def score_course(self, profile: Profile, course: Course) -> MatchResult:
        """Calculate the weighted course relevance for a profile."""
        taught = course.skill_names
        skills_score = overlap_ratio(taught, profile.skills)
        _matched, missing = find_matching_skills(taught, profile.skills)

        career_score = 1.0 if _serves_role(course, profile.target_job_title) else 0.0
        quality_score = course.quality_score / 10.0
        popularity_score = min(course.popularity_score, 1.0)

        composite = (
            self.config.course_weight_skills * skills_score
            + self.config.course_weight_career * career_score
            + self.config.course_weight_quality * quality_score
            + self.config.course_weight_popularity * popularity_score
        )

        if taught:
            matched_count = len(taught) - len(missing)
            reasons = [
                f"{matched_count} of {len(taught)} taught skills match your profile"
            ]
        else:
            reasons = ["No specific skills listed"]
        if career_score:
            reasons.append(f"Relevant to {profile.target_job_title} roles")
        else:
            reasons.append("Not specific to your target role")
        reasons.append(f"Quality score {course.quality_score:g}/10")

        result = MatchResult(
            score=to_percent(composite),
            missing_skills=missing,
            match_reasons=reasons,
            subscores={
                "skills": skills_score,
                "career": career_score,
                "quality": quality_score,
                "popularity": popularity_score,
            },
            domain=MatchDomain.COURSE,
        )
        logger.debug("Scored course %s: %d", course.id, result.score)
        return result


def resolve_domain(domain: MatchDomain | str) -> MatchDomain:
    """Coerce a domain value, raising InvalidInputError for unknown values."""
    if isinstance(domain, MatchDomain):
        return domain
    if isinstance(domain, str):
        try:
            return MatchDomain(domain.strip().lower())
        except ValueError:
            pass
    raise InvalidInputError(
        f"Unknown domain: {domain!r}. Must be one of: job, course",
        argument="domain",
    )


def to_percent(composite: float) -> int:
    """Scale a 0-1 composite to an integer score clamped to [0, 100].

    Halves round up, so 72.5 becomes 73.
    """
    if math.isnan(composite):
        return 0
    return max(0, min(100, math.floor(composite * 100 + 0.5)))


def course_suits_profile(course: Course, profile: Profile) -> bool:
    """Check course prerequisites and difficulty against the profile.

    A course without prerequisites always suits. Otherwise each prerequisite
    must appear in a profile skill held at intermediate level or above, and
    the difficulty must fit the profile's experience level.
    """
    if not course.prerequisites:
        return True

    qualified = [
        skill.key for skill in profile.skills if skill.is_at_least("intermediate")
    ]
    has_prerequisites = all(
        any(normalize_skill(prereq) in key for key in qualified)
        for prereq in course.prerequisites
    )
    difficulty_ok = course.difficulty in _DIFFICULTY_BY_LEVEL.get(
        profile.experience_level, set()
    )
    return has_prerequisites and difficulty_ok


def _serves_role(course: Course, role: str | None) -> bool:
    if not role or not role.strip():
        return False
    target = role.strip().lower()
    return any(
        target == candidate.strip().lower()
        for candidate in [*course.career_paths, *course.job_roles]
    )
