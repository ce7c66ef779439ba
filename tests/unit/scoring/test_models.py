"""Tests for scoring data models."""

from datetime import date

import pytest
from pydantic import ValidationError


class TestSkill:
    """Test Skill model."""

    def test_defaults(self):
        """Skill should default to a technical, intermediate, unverified skill."""
        from src.scoring.models import Skill

        skill = Skill(name="React")

        assert skill.category == "technical"
        assert skill.proficiency_level == "intermediate"
        assert skill.verification_status == "unverified"
        assert skill.endorsements == 0

    def test_key_is_normalized_name(self):
        """The identity key should be the normalized name only."""
        from src.scoring.models import Skill

        assert Skill(name=" React ", proficiency_level="expert").key == "react"

    def test_is_at_least(self):
        """is_at_least should compare proficiency ordinals."""
        from src.scoring.models import Skill

        skill = Skill(name="SQL", proficiency_level="advanced")

        assert skill.is_at_least("intermediate") is True
        assert skill.is_at_least("expert") is False

    def test_empty_name_rejected(self):
        """An empty skill name should fail validation."""
        from src.scoring.models import Skill

        with pytest.raises(ValidationError):
            Skill(name="")


class TestExperienceEntry:
    """Test ExperienceEntry tenure."""

    def test_tenure_for_closed_entry(self):
        """Closed entries should measure start to end."""
        from src.scoring.models import ExperienceEntry

        entry = ExperienceEntry(
            company="Acme",
            position="Dev",
            start_date=date(2020, 1, 1),
            end_date=date(2021, 12, 31),
        )

        assert entry.tenure_years() == pytest.approx(730 / 365)

    def test_tenure_for_ongoing_entry_uses_as_of(self):
        """Ongoing entries should be measured up to the reference date."""
        from src.scoring.models import ExperienceEntry

        entry = ExperienceEntry(
            company="Acme", position="Dev", start_date=date(2023, 1, 1)
        )

        assert entry.tenure_years(as_of=date(2024, 1, 1)) == pytest.approx(1.0)

    def test_tenure_never_negative(self):
        """An end date before the start date should count as zero years."""
        from src.scoring.models import ExperienceEntry

        entry = ExperienceEntry(
            company="Acme",
            position="Dev",
            start_date=date(2024, 1, 1),
            end_date=date(2023, 1, 1),
        )

        assert entry.tenure_years() == 0.0


class TestProfile:
    """Test Profile model."""

    def test_accepts_camel_case_documents(self, sample_profile):
        """Stored camelCase documents should validate without translation."""
        assert sample_profile.target_job_title == "Frontend Developer"
        assert sample_profile.desired_salary_min == 100000
        assert sample_profile.skills[0].proficiency_level == "advanced"

    def test_string_skills_are_coerced(self):
        """Plain skill strings should become Skill objects."""
        from src.scoring.models import Profile

        profile = Profile(skills=["Python", "SQL"])

        assert [skill.name for skill in profile.skills] == ["Python", "SQL"]
        assert profile.skill_keys == {"python", "sql"}

    def test_total_experience_years_sums_entries(self, sample_profile, as_of):
        """Tenure should be aggregated across all entries."""
        # 2020-2022 closed (731 days) plus 2022-01-01 to 2024-01-01 (730 days)
        assert sample_profile.total_experience_years(as_of) == pytest.approx(
            (731 + 730) / 365
        )

    def test_education_level(self, sample_profile):
        """Education level should be the highest recognized degree."""
        from src.scoring.models import Profile

        assert sample_profile.education_level == 3
        assert Profile().education_level == 0

    def test_unrecognized_degree_counts_as_high_school(self):
        """Unrecognized degree wording should count as level 1."""
        from src.scoring.models import EducationEntry

        entry = EducationEntry(institution="Bootcamp", degree="Certificate")

        assert entry.level == 1

    def test_desired_salary_min_absent(self):
        """No salary range means no desired minimum."""
        from src.scoring.models import Profile

        assert Profile().desired_salary_min is None


class TestJobPosting:
    """Test JobPosting model."""

    def test_string_required_skills_are_coerced(self, make_job):
        """Required skills given as strings should be accepted."""
        job = make_job(requiredSkills=["Python", "AWS"])

        assert job.required_skill_names == ["Python", "AWS"]
        assert job.required_skills[0].priority == "medium"

    def test_is_remote(self, make_job):
        """is_remote should follow the location flag."""
        assert make_job(location={"isRemote": True}).is_remote is True
        assert make_job(location={"city": "Austin"}).is_remote is False
        assert make_job().is_remote is False

    def test_education_required_level(self, make_job):
        """Minimum degree should map to its ordinal level."""
        job = make_job(educationRequirements={"minimumDegree": "master"})

        assert job.education_requirements.required_level == 4
        assert make_job().education_requirements.required_level == 0

    def test_location_mentions(self):
        """mentions should search city, state and country case-insensitively."""
        from src.scoring.models import JobLocation

        location = JobLocation(city="Austin", state="TX", country="USA")

        assert location.mentions("austin") is True
        assert location.mentions("usa") is True
        assert location.mentions("Denver") is False
        assert location.mentions("  ") is False


class TestCourse:
    """Test Course model."""

    def test_flattens_stored_metrics(self):
        """Nested rating, aiMetrics and duration should be lifted."""
        from src.scoring.models import Course

        course = Course.model_validate(
            {
                "id": "c1",
                "title": "React Basics",
                "rating": {"average": 4.5, "count": 120},
                "aiMetrics": {"completionRate": 0.6},
                "duration": {"hours": 12},
                "skillsTaught": ["React"],
            }
        )

        assert course.rating_average == 4.5
        assert course.completion_rate == 0.6
        assert course.duration_hours == 12
        assert course.skill_names == ["React"]

    def test_numeric_rating_is_the_average(self):
        """A plain numeric rating should feed the rating average."""
        from src.scoring.models import Course

        course = Course.model_validate(
            {"id": "c1", "title": "React Basics", "rating": 4.5}
        )

        assert course.rating_average == 4.5
        assert course.popularity_score == pytest.approx(0.3 * 4.5 / 5)

    def test_accepts_stored_identifier(self):
        """Stored records keyed by `_id` should validate."""
        from src.scoring.models import Course, JobPosting

        course = Course.model_validate({"_id": "c9", "title": "SQL"})
        job = JobPosting.model_validate({"_id": "j9", "title": "Analyst"})

        assert course.id == "c9"
        assert job.id == "j9"

    def test_popularity_score(self, make_course):
        """Popularity should blend capped enrollment, rating and completion."""
        course = make_course(
            enrollmentCount=20000, ratingAverage=5.0, completionRate=1.0
        )
        half = make_course(enrollmentCount=5000, ratingAverage=2.5, completionRate=0.5)

        assert course.popularity_score == pytest.approx(1.0)
        assert half.popularity_score == pytest.approx(0.5)

    def test_quality_score_bounds(self, make_course):
        """Quality scores above 10 should be rejected."""
        with pytest.raises(ValidationError):
            make_course(qualityScore=11)


class TestMatchResult:
    """Test MatchResult validation and serialization."""

    def test_rejects_out_of_range_score(self):
        """Scores outside 0-100 should be rejected."""
        from src.scoring.models import MatchResult

        with pytest.raises(ValueError):
            MatchResult(score=101)

    def test_rejects_out_of_range_subscore(self):
        """Subscores outside 0-1 should be rejected."""
        from src.scoring.models import MatchResult

        with pytest.raises(ValueError):
            MatchResult(score=50, subscores={"skills": 1.5})

    def test_to_dict(self):
        """to_dict should emit plain JSON-friendly values."""
        from src.scoring.models import MatchDomain, MatchResult

        result = MatchResult(
            score=80,
            missing_skills=["AWS"],
            match_reasons=["1 of 2 required skills match your profile"],
            subscores={"skills": 0.5},
            domain=MatchDomain.COURSE,
        )

        assert result.to_dict() == {
            "score": 80,
            "missing_skills": ["AWS"],
            "match_reasons": ["1 of 2 required skills match your profile"],
            "subscores": {"skills": 0.5},
            "domain": "course",
        }


class TestDegreeLevel:
    """Test degree_level."""

    def test_recognizes_degree_wording(self):
        """Free-text degree names should map to levels."""
        from src.scoring.models import degree_level

        assert degree_level("PhD in Physics") == 5
        assert degree_level("Master of Arts") == 4
        assert degree_level("Bachelor of Science") == 3
        assert degree_level("Associate Degree") == 2
        assert degree_level("High School Diploma") == 1
        assert degree_level("Bootcamp") is None
