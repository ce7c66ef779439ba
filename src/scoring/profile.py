"""Profile loading, validation and completeness utilities."""

from __future__ import annotations

import logging
from pathlib import Path

from src.config.settings import Settings, get_settings
from src.scoring.models import Profile
from src.utils.documents import load_mapping

logger = logging.getLogger(__name__)

# Completeness points per profile section
_COMPLETENESS_POINTS: dict[str, int] = {
    "name": 10,
    "email": 5,
    "phone": 5,
    "headline": 5,
    "summary": 5,
    "education": 20,
    "experience": 25,
    "skills_many": 15,
    "skills_some": 10,
    "career_objectives": 10,
}
_MANY_SKILLS = 5


class ProfileService:
    """Service for loading and validating user profiles."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    def load_profile(self, path: Path | str | None = None) -> Profile:
        """Load and validate a profile from YAML or JSON.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file is malformed or not a mapping.
            pydantic.ValidationError: If the data does not fit the model.
        """
        profile_path = Path(path) if path is not None else self.settings.profile_path
        data = load_mapping(profile_path)
        profile = Profile.model_validate(data)
        logger.debug(
            "Loaded profile from %s with %d skills", profile_path, len(profile.skills)
        )
        return profile

    def validate_profile(self, profile: Profile) -> list[str]:
        """Return warnings for profiles that will score poorly or vaguely."""
        warnings: list[str] = []

        if not profile.skills:
            warnings.append("Skills list is empty")
        if not profile.experience:
            warnings.append("No work experience listed")
        if not profile.education:
            warnings.append("No education listed")
        if not profile.target_job_title:
            warnings.append("Missing target job title")
        if profile.location is None or not profile.location.city:
            warnings.append("Missing location city")

        return warnings

    def calculate_completeness(self, profile: Profile) -> int:
        """Score how complete a profile is, from 0 to 100."""
        points = _COMPLETENESS_POINTS
        score = 0

        if profile.first_name and profile.last_name:
            score += points["name"]
        if profile.email:
            score += points["email"]
        if profile.phone:
            score += points["phone"]
        if profile.headline:
            score += points["headline"]
        if profile.summary:
            score += points["summary"]
        if profile.education:
            score += points["education"]
        if profile.experience:
            score += points["experience"]
        if len(profile.skills) >= _MANY_SKILLS:
            score += points["skills_many"]
        elif profile.skills:
            score += points["skills_some"]
        if profile.target_job_title and profile.target_industry:
            score += points["career_objectives"]

        return min(score, 100)
