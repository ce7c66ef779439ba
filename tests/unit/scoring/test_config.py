"""Tests for scoring configuration."""

import pytest


class TestScoringConfig:
    """Test ScoringConfig settings."""

    def test_scoring_config_has_defaults(self):
        """ScoringConfig should load with the documented default weights."""
        from src.scoring.config import ScoringConfig

        config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.job_weight_skills == 0.35
        assert config.job_weight_experience == 0.25
        assert config.job_weight_location == 0.15
        assert config.job_weight_salary == 0.15
        assert config.job_weight_education == 0.10

        assert config.course_weight_skills == 0.40
        assert config.course_weight_career == 0.30
        assert config.course_weight_quality == 0.20
        assert config.course_weight_popularity == 0.10

        assert config.location_partial_credit == 0.3
        assert config.education_partial_credit == 0.5

    def test_scoring_config_reads_from_environment_variables(self, monkeypatch):
        """ScoringConfig should read from environment variables."""
        from src.scoring.config import ScoringConfig

        monkeypatch.setenv("SCORING_JOB_WEIGHT_SKILLS", "0.45")
        monkeypatch.setenv("SCORING_JOB_WEIGHT_EDUCATION", "0.0")
        monkeypatch.setenv("SCORING_LOCATION_PARTIAL_CREDIT", "0.0")

        config = ScoringConfig(_env_file=None)  # type: ignore[call-arg]

        assert config.job_weight_skills == 0.45
        assert config.job_weight_education == 0.0
        assert config.location_partial_credit == 0.0

    def test_scoring_config_validates_job_weights_sum_to_one(self):
        """Job weights that do not sum to 1.0 should be rejected."""
        from src.scoring.config import ScoringConfig

        with pytest.raises(ValueError, match="Job scoring weights must sum to 1.0"):
            ScoringConfig(_env_file=None, job_weight_skills=0.5)  # type: ignore[call-arg]

    def test_scoring_config_validates_course_weights_sum_to_one(self):
        """Course weights that do not sum to 1.0 should be rejected."""
        from src.scoring.config import ScoringConfig

        with pytest.raises(ValueError, match="Course scoring weights must sum to 1.0"):
            ScoringConfig(_env_file=None, course_weight_popularity=0.3)  # type: ignore[call-arg]

    def test_scoring_config_rejects_out_of_range_credit(self):
        """Partial credits must lie within 0-1."""
        from src.scoring.config import ScoringConfig

        with pytest.raises(ValueError):
            ScoringConfig(_env_file=None, location_partial_credit=1.5)  # type: ignore[call-arg]

    def test_custom_partial_credit_changes_location_subscore(
        self, sample_profile, make_job
    ):
        """The scorer should use the configured location partial credit."""
        from src.scoring.config import ScoringConfig
        from src.scoring.service import MatchScorer

        config = ScoringConfig(_env_file=None, location_partial_credit=0.0)  # type: ignore[call-arg]
        scorer = MatchScorer(config=config)

        job = make_job(location={"city": "Denver"})
        result = scorer.score(sample_profile, job, "job")

        assert result.subscores["location"] == 0.0


class TestScoringConfigSingleton:
    """Test get_scoring_config / reset_scoring_config."""

    def test_get_scoring_config_is_cached(self):
        """get_scoring_config should return the same instance."""
        from src.scoring.config import get_scoring_config

        assert get_scoring_config() is get_scoring_config()

    def test_reset_scoring_config(self):
        """reset_scoring_config should drop the cached instance."""
        from src.scoring.config import get_scoring_config, reset_scoring_config

        first = get_scoring_config()
        reset_scoring_config()

        assert get_scoring_config() is not first
