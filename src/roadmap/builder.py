"""Roadmap and starter goal generation from gap reports."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta

from src.gaps.models import SkillGapReport
from src.recommend.models import Recommendation
from src.roadmap.config import RoadmapConfig, get_roadmap_config
from src.roadmap.models import Roadmap, RoadmapPhase, StarterGoal
from src.scoring.errors import InvalidInputError
from src.scoring.models import Course

logger = logging.getLogger(__name__)

FOUNDATION_PHASE = "Foundation (Weeks 1-4)"
PROJECTS_PHASE = "Projects (Weeks 5-8)"
JOB_READINESS_PHASE = "Job Readiness (Weeks 9-12)"

JOB_READINESS_SKILLS = ["Communication", "Problem Solving", "System Design (basic)"]

_FOUNDATION_ACTIONS = [
    "Complete a beginner-friendly course",
    "Set up a GitHub repo and make daily commits",
    "Build a basic project to apply fundamentals",
]
_PROJECT_ACTIONS = [
    "Build 2 small portfolio projects end-to-end",
    "Write clear README and deploy at least one project",
    "Ask for feedback and iterate",
]
_JOB_READINESS_ACTIONS = [
    "Optimize resume for ATS with targeted keywords",
    "Practice 20-30 interview questions",
    "Network and apply to 5-10 roles/week",
]


class RoadmapBuilder:
    """Turn a skill-gap report into a phased roadmap and starter goals."""

    def __init__(self, config: RoadmapConfig | None = None) -> None:
        self.config = config or get_roadmap_config()

    def build_roadmap(
        self,
        target_role: str,
        gap_report: SkillGapReport,
        ranked_courses: Sequence[Course | Recommendation] = (),
    ) -> Roadmap:
        """Build the three-phase roadmap.

        Each phase takes the next `courses_per_phase` courses from
        `ranked_courses`, so no course is assigned to two phases. Short gap or
        course lists are used as they are, without padding.
        """
        _require_inputs(target_role, gap_report)
        course_ids = [_course_id(item) for item in ranked_courses]
        per_phase = self.config.courses_per_phase
        cursor = 0

        def next_courses() -> list[str]:
            nonlocal cursor
            batch = course_ids[cursor : cursor + per_phase]
            cursor += len(batch)
            return batch

        phases = [
            RoadmapPhase(
                name=FOUNDATION_PHASE,
                focus="Core concepts and tooling",
                focus_skills=gap_report.priority_skill_names[
                    : self.config.foundation_skill_count
                ],
                actions=list(_FOUNDATION_ACTIONS),
                recommended_courses=next_courses(),
            ),
            RoadmapPhase(
                name=PROJECTS_PHASE,
                focus="Apply skills with real projects",
                focus_skills=gap_report.gap_names[: self.config.project_skill_count],
                actions=list(_PROJECT_ACTIONS),
                recommended_courses=next_courses(),
            ),
            RoadmapPhase(
                name=JOB_READINESS_PHASE,
                focus="Resume, interview prep, and polishing",
                focus_skills=list(JOB_READINESS_SKILLS),
                actions=list(_JOB_READINESS_ACTIONS),
                recommended_courses=next_courses(),
            ),
        ]

        logger.debug(
            "Built roadmap for %s with %d of %d courses assigned",
            target_role,
            cursor,
            len(course_ids),
        )
        return Roadmap(target_role=target_role, phases=phases)

    def build_starter_goals(
        self,
        target_role: str,
        gap_report: SkillGapReport,
        now: datetime | None = None,
    ) -> list[StarterGoal]:
        """Build the two starter goals: finish a course, then ship a project."""
        _require_inputs(target_role, gap_report)
        now = now or datetime.now(UTC)
        stamp = int(now.timestamp() * 1000)
        skill_count = self.config.goal_related_skill_count

        return [
            StarterGoal(
                id=f"goal-{stamp}-1",
                title=f"Complete a beginner course for {target_role}",
                description="Finish one curated course and take notes",
                category="learning",
                target_date=now + timedelta(days=self.config.learning_goal_days),
                priority="high",
                milestones=["Enroll", "Finish 50%", "Complete and summarize"],
                related_skills=gap_report.priority_skill_names[:skill_count],
                measurable_outcome="Certificate of completion and notes",
            ),
            StarterGoal(
                id=f"goal-{stamp}-2",
                title="Build and deploy one small project",
                description="End-to-end project with README and live link",
                category="project",
                target_date=now + timedelta(days=self.config.project_goal_days),
                priority="medium",
                milestones=["Plan", "Build", "Deploy", "Iterate"],
                related_skills=gap_report.gap_names[:skill_count],
                measurable_outcome="Live URL in portfolio",
            ),
        ]


def _require_inputs(target_role: str, gap_report: SkillGapReport) -> None:
    if target_role is None:
        raise InvalidInputError("target_role is required", argument="target_role")
    if gap_report is None:
        raise InvalidInputError("gap_report is required", argument="gap_report")

def _course_id(item: Course | Recommendation) -> str:
    if isinstance(item, Recommendation):
        return item.entity.id
    return item.id
