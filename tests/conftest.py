"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest


@pytest.fixture(autouse=True)
def _reset_singletons():
    """Reset config singletons and logging so tests never share state."""
    from src.config.settings import reset_settings
    from src.gaps.config import reset_gap_config
    from src.recommend.config import reset_recommendation_config
    from src.roadmap.config import reset_roadmap_config
    from src.scoring.config import reset_scoring_config
    from src.utils.logging import reset_logging

    yield

    reset_settings()
    reset_scoring_config()
    reset_gap_config()
    reset_recommendation_config()
    reset_roadmap_config()
    reset_logging()


@pytest.fixture
def as_of() -> date:
    """Fixed reference date for tenure calculations."""
    return date(2024, 1, 1)


@pytest.fixture
def scoring_config():
    """Scoring config with defaults and no .env influence."""
    from src.scoring.config import ScoringConfig

    return ScoringConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def scorer(scoring_config):
    """MatchScorer using default weights."""
    from src.scoring.service import MatchScorer

    return MatchScorer(config=scoring_config)


@pytest.fixture
def sample_profile():
    """A mid-level developer profile in Austin."""
    from src.scoring.models import Profile

    return Profile.model_validate(
        {
            "firstName": "Jordan",
            "lastName": "Lee",
            "email": "jordan@example.com",
            "headline": "Frontend developer",
            "skills": [
                {"name": "React", "proficiencyLevel": "advanced"},
                {"name": "JavaScript", "proficiencyLevel": "advanced"},
                {"name": "Python", "proficiencyLevel": "intermediate"},
                {"name": "CSS", "proficiencyLevel": "beginner"},
            ],
            "experience": [
                {
                    "company": "Acme",
                    "position": "Developer",
                    "startDate": "2020-01-01",
                    "endDate": "2022-01-01",
                },
                {
                    "company": "Globex",
                    "position": "Senior Developer",
                    "startDate": "2022-01-01",
                },
            ],
            "education": [
                {"institution": "State University", "degree": "Bachelor of Science"}
            ],
            "location": {"city": "Austin", "state": "TX", "country": "USA"},
            "desiredSalaryRange": {"min": 100000, "max": 140000},
            "targetJobTitle": "Frontend Developer",
            "experienceLevel": "mid",
        }
    )


@pytest.fixture
def make_job():
    """Factory for JobPosting objects with sensible defaults."""
    from src.scoring.models import JobPosting

    def _make(**overrides):
        data = {"id": "job-1", "title": "Engineer", "company": "Initech"}
        data.update(overrides)
        return JobPosting.model_validate(data)

    return _make


@pytest.fixture
def make_course():
    """Factory for Course objects with sensible defaults."""
    from src.scoring.models import Course

    def _make(**overrides):
        data = {"id": "course-1", "title": "Course", "provider": "Coursera"}
        data.update(overrides)
        return Course.model_validate(data)

    return _make


@pytest.fixture
def gap_config():
    """Gap config with defaults and no .env influence."""
    from src.gaps.config import GapConfig

    return GapConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def analyzer(gap_config):
    """SkillGapAnalyzer with the built-in role templates."""
    from src.gaps.analyzer import SkillGapAnalyzer
    from src.gaps.registry import RoleSkillRegistry

    return SkillGapAnalyzer(
        registry=RoleSkillRegistry.with_defaults(), config=gap_config
    )


@pytest.fixture
def recommendation_config():
    """Recommendation config with defaults and no .env influence."""
    from src.recommend.config import RecommendationConfig

    return RecommendationConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def recommender(scorer, recommendation_config):
    """RecommendationService with default penalties."""
    from src.recommend.service import RecommendationService

    return RecommendationService(scorer=scorer, config=recommendation_config)


@pytest.fixture
def roadmap_config():
    """Roadmap config with defaults and no .env influence."""
    from src.roadmap.config import RoadmapConfig

    return RoadmapConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def builder(roadmap_config):
    """RoadmapBuilder with default phase sizes and goal offsets."""
    from src.roadmap.builder import RoadmapBuilder

    return RoadmapBuilder(config=roadmap_config)
