"""Match scoring between user profiles and catalog entities.

This module computes a 0-100 fit between a user profile and a job posting or
course using fixed weighted factors, and reports missing skills and
human-readable match reasons.

Public API:
    - MatchScorer: Entity-local scoring service
    - ProfileService: Load, validate and rate user profiles
    - Profile, JobPosting, Course: Input models
    - MatchResult, MatchDomain: Scoring output and domain selector
    - InvalidInputError: Raised on caller contract violations
    - ScoringConfig: Configuration settings
"""

from src.scoring.catalog import load_catalog
from src.scoring.config import ScoringConfig, get_scoring_config, reset_scoring_config
from src.scoring.errors import InvalidInputError
from src.scoring.models import (
    Course,
    EducationEntry,
    ExperienceEntry,
    JobPosting,
    Location,
    MatchDomain,
    MatchResult,
    Profile,
    SalaryRange,
    Skill,
)
from src.scoring.profile import ProfileService
from src.scoring.service import MatchScorer, course_suits_profile

__all__ = [
    "MatchScorer",
    "ProfileService",
    "Profile",
    "Skill",
    "ExperienceEntry",
    "EducationEntry",
    "Location",
    "SalaryRange",
    "JobPosting",
    "Course",
    "MatchDomain",
    "MatchResult",
    "InvalidInputError",
    "course_suits_profile",
    "load_catalog",
    "ScoringConfig",
    "get_scoring_config",
    "reset_scoring_config",
]
