"""Tests for roadmap and starter goal generation."""

from datetime import UTC, datetime, timedelta

import pytest

NOW = datetime(2024, 1, 1, 9, 30, tzinfo=UTC)


class TestBuildRoadmap:
    """Test RoadmapBuilder.build_roadmap."""

    def test_roadmap_has_three_fixed_phases(self, builder, analyzer):
        """The roadmap should always have foundation, projects, job readiness."""
        report = analyzer.analyze_gaps([], "Full Stack Developer")

        roadmap = builder.build_roadmap("Full Stack Developer", report)

        assert [phase.name for phase in roadmap.phases] == [
            "Foundation (Weeks 1-4)",
            "Projects (Weeks 5-8)",
            "Job Readiness (Weeks 9-12)",
        ]

    def test_phase_skill_slices(self, builder, analyzer):
        """Foundation takes two priority skills, projects take three gaps."""
        report = analyzer.analyze_gaps([], "Full Stack Developer")

        roadmap = builder.build_roadmap("Full Stack Developer", report)

        foundation, projects, readiness = roadmap.phases
        assert foundation.focus_skills == ["React", "Node.js"]
        assert projects.focus_skills == ["React", "Node.js", "API Development"]
        assert readiness.focus_skills == [
            "Communication",
            "Problem Solving",
            "System Design (basic)",
        ]

    def test_courses_do_not_overlap_between_phases(
        self, builder, analyzer, make_course
    ):
        """A cursor should hand out two courses per phase without repeats."""
        report = analyzer.analyze_gaps([], "Frontend Developer")
        courses = [make_course(id=f"c{i}") for i in range(1, 6)]

        roadmap = builder.build_roadmap("Frontend Developer", report, courses)

        assert [phase.recommended_courses for phase in roadmap.phases] == [
            ["c1", "c2"],
            ["c3", "c4"],
            ["c5"],
        ]

    def test_accepts_ranked_recommendations(
        self, builder, analyzer, recommender, sample_profile, make_course
    ):
        """Ranked Recommendation items should be usable as course input."""
        report = analyzer.analyze_gaps(sample_profile.skills, "Frontend Developer")
        ranked = recommender.recommend(
            sample_profile,
            [
                make_course(id="a"),
                make_course(id="b", careerPaths=["Frontend Developer"]),
            ],
            "course",
        )

        roadmap = builder.build_roadmap("Frontend Developer", report, ranked)

        assert roadmap.phases[0].recommended_courses == ["b", "a"]

    def test_short_gap_list_is_not_padded(self, builder, analyzer):
        """Fewer gaps than a slice needs should use what is available."""
        report = analyzer.analyze_gaps(
            ["React", "JavaScript", "CSS"], "Frontend Developer"
        )

        roadmap = builder.build_roadmap("Frontend Developer", report)

        assert roadmap.phases[0].focus_skills == ["TypeScript"]
        assert roadmap.phases[1].focus_skills == ["TypeScript"]
        assert all(phase.recommended_courses == [] for phase in roadmap.phases)

    def test_no_gaps_still_three_phases(self, builder, analyzer):
        """A fully ready profile should still get three phases."""
        report = analyzer.analyze_gaps(
            ["React", "JavaScript", "CSS", "TypeScript"], "Frontend Developer"
        )

        roadmap = builder.build_roadmap("Frontend Developer", report)

        assert len(roadmap.phases) == 3
        assert roadmap.phases[0].focus_skills == []

    def test_courses_per_phase_is_configurable(self, analyzer, make_course):
        """courses_per_phase should control the cursor step."""
        from src.roadmap.builder import RoadmapBuilder
        from src.roadmap.config import RoadmapConfig

        config = RoadmapConfig(_env_file=None, courses_per_phase=1)  # type: ignore[call-arg]
        report = analyzer.analyze_gaps([], "Frontend Developer")
        courses = [make_course(id=f"c{i}") for i in range(1, 6)]

        roadmap = RoadmapBuilder(config).build_roadmap(
            "Frontend Developer", report, courses
        )

        assert [phase.recommended_courses for phase in roadmap.phases] == [
            ["c1"],
            ["c2"],
            ["c3"],
        ]

    def test_roadmap_requires_three_phases(self):
        """Constructing a roadmap with another phase count should fail."""
        from src.roadmap.models import Roadmap, RoadmapPhase

        with pytest.raises(ValueError, match="exactly 3 phases"):
            Roadmap(target_role="X", phases=[RoadmapPhase(name="Only", focus="")])

    def test_missing_gap_report_raises(self, builder):
        """A None gap report should raise InvalidInputError."""
        from src.scoring.errors import InvalidInputError

        with pytest.raises(InvalidInputError) as exc_info:
            builder.build_roadmap("Frontend Developer", None, [])

        assert exc_info.value.argument == "gap_report"

    def test_missing_target_role_raises(self, builder, analyzer):
        """A None target role should raise InvalidInputError."""
        from src.scoring.errors import InvalidInputError

        report = analyzer.analyze_gaps([], "Frontend Developer")

        with pytest.raises(InvalidInputError) as exc_info:
            builder.build_roadmap(None, report)

        assert exc_info.value.argument == "target_role"


class TestBuildStarterGoals:
    """Test RoadmapBuilder.build_starter_goals."""

    def test_exactly_two_goals_after_now(self, builder, analyzer):
        """There should be two goals, both due strictly after now."""
        report = analyzer.analyze_gaps([], "Frontend Developer")

        goals = builder.build_starter_goals("Frontend Developer", report, now=NOW)

        assert len(goals) == 2
        assert all(goal.target_date > NOW for goal in goals)

    def test_goal_details(self, builder, analyzer):
        """Goals should be a learning goal then a project goal."""
        report = analyzer.analyze_gaps(["React"], "Frontend Developer")

        learning, project = builder.build_starter_goals(
            "Frontend Developer", report, now=NOW
        )

        assert learning.category == "learning"
        assert learning.priority == "high"
        assert learning.title == "Complete a beginner course for Frontend Developer"
        assert learning.target_date == NOW + timedelta(days=21)
        assert learning.milestones == ["Enroll", "Finish 50%", "Complete and summarize"]
        assert learning.related_skills == ["JavaScript", "CSS", "TypeScript"]

        assert project.category == "project"
        assert project.priority == "medium"
        assert project.target_date == NOW + timedelta(days=30)
        assert project.milestones == ["Plan", "Build", "Deploy", "Iterate"]

        assert learning.status == "not_started"
        assert learning.progress == 0

    def test_goal_ids_use_timestamp(self, builder, analyzer):
        """Goal ids should combine the creation time in ms and a sequence."""
        report = analyzer.analyze_gaps([], "Frontend Developer")

        goals = builder.build_starter_goals("Frontend Developer", report, now=NOW)

        stamp = int(NOW.timestamp() * 1000)
        assert [goal.id for goal in goals] == [f"goal-{stamp}-1", f"goal-{stamp}-2"]

    def test_goal_offsets_are_configurable(self, analyzer):
        """Due date offsets should come from configuration."""
        from src.roadmap.builder import RoadmapBuilder
        from src.roadmap.config import RoadmapConfig

        config = RoadmapConfig(  # type: ignore[call-arg]
            _env_file=None, learning_goal_days=7, project_goal_days=14
        )
        report = analyzer.analyze_gaps([], "Frontend Developer")

        learning, project = RoadmapBuilder(config).build_starter_goals(
            "Frontend Developer", report, now=NOW
        )

        assert learning.target_date == NOW + timedelta(days=7)
        assert project.target_date == NOW + timedelta(days=14)

    def test_goal_to_dict(self, builder, analyzer):
        """to_dict should serialize dates as ISO strings."""
        report = analyzer.analyze_gaps([], "Frontend Developer")

        goals = builder.build_starter_goals("Frontend Developer", report, now=NOW)
        data = goals[0].to_dict()

        assert data["target_date"] == "2024-01-22T09:30:00+00:00"
        assert data["status"] == "not_started"

    def test_missing_gap_report_raises(self, builder):
        """A None gap report should raise InvalidInputError."""
        from src.scoring.errors import InvalidInputError

        with pytest.raises(InvalidInputError) as exc_info:
            builder.build_starter_goals("Frontend Developer", None, now=NOW)

        assert exc_info.value.argument == "gap_report"
