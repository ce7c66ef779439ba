"""Beginner career guide assembly."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime

from src.gaps.analyzer import SkillGapAnalyzer
from src.recommend.config import RecommendationConfig, get_recommendation_config
from src.recommend.models import RecommendOptions
from src.recommend.service import RecommendationService
from src.roadmap.builder import RoadmapBuilder
from src.roadmap.models import CareerGuide, ChecklistSection, FaqEntry, StarterProject
from src.scoring.errors import InvalidInputError
from src.scoring.models import Course, MatchDomain, Profile

logger = logging.getLogger(__name__)

# Headline keywords checked in order; first hit wins
_HEADLINE_ROLES: list[tuple[tuple[str, ...], str]] = [
    (("data",), "Data Analyst"),
    (("devops",), "DevOps Engineer"),
    (("backend",), "Backend Developer"),
    (("full stack", "full-stack"), "Full Stack Developer"),
    (("ai", "ml"), "Machine Learning Engineer"),
]

_ROLE_PROJECTS: dict[str, list[StarterProject]] = {
    "Frontend Developer": [
        StarterProject("Todo App with Filters", ["React", "State"], "Beginner"),
        StarterProject("Weather Dashboard", ["APIs", "Async"], "Beginner"),
    ],
    "Backend Developer": [
        StarterProject("Notes API with JWT", ["Node.js", "Auth"], "Beginner"),
        StarterProject(
            "Image Uploader Service", ["Storage", "Security"], "Intermediate"
        ),
    ],
    "Data Analyst": [
        StarterProject(
            "Exploratory Data Analysis", ["Pandas", "Visualization"], "Beginner"
        ),
        StarterProject("Sales Dashboard", ["Dashboards", "SQL"], "Intermediate"),
    ],
}

_COMMON_PROJECTS = [
    StarterProject(
        "Personal Portfolio Website",
        ["Git", "Deployment", "UI/UX"],
        "Beginner",
        "Showcase projects, skills, and contact info",
    ),
    StarterProject(
        "REST API + Frontend",
        ["APIs", "Auth", "State Management"],
        "Intermediate",
        "Simple CRUD app with authentication",
    ),
]

_NEXT_STEPS = [
    "Pick one priority skill and one course to start this week",
    "Create two small portfolio projects in the next month",
    "Update your resume with new skills as you complete milestones",
]


def infer_target_role(profile: Profile) -> str | None:
    """Guess a target role from the profile headline, or None."""
    headline = (profile.headline or "").lower()
    words = set(headline.replace("/", " ").replace(",", " ").split())
    for keywords, role in _HEADLINE_ROLES:
        for keyword in keywords:
            # Short keywords must be whole words ("ai" is not "maintain")
            if len(keyword) <= 2:
                if keyword in words:
                    return role
            elif keyword in headline:
                return role
    return None


def starter_projects_for(role: str) -> list[StarterProject]:
    """Role-specific starter projects followed by the common ones."""
    specific = _ROLE_PROJECTS.get(role) or _ROLE_PROJECTS["Frontend Developer"]
    return [*specific, *_COMMON_PROJECTS]


class CareerGuideService:
    """Combine gap analysis, course ranking and roadmap into one guide."""

    def __init__(
        self,
        analyzer: SkillGapAnalyzer | None = None,
        recommender: RecommendationService | None = None,
        builder: RoadmapBuilder | None = None,
        config: RecommendationConfig | None = None,
    ) -> None:
        self.analyzer = analyzer or SkillGapAnalyzer()
        self.recommender = recommender or RecommendationService()
        self.builder = builder or RoadmapBuilder()
        self.config = config or get_recommendation_config()

    def resolve_target_role(self, profile: Profile) -> str:
        """Profile target title, else a headline guess, else the default role."""
        if profile.target_job_title and profile.target_job_title.strip():
            return profile.target_job_title.strip()
        return infer_target_role(profile) or self.analyzer.resolve_role(None)

    def build_guide(
        self,
        profile: Profile,
        courses: Sequence[Course] = (),
        now: datetime | None = None,
    ) -> CareerGuide:
        """Build a career guide for `profile` from a course catalog."""
        if profile is None:
            raise InvalidInputError("profile is required", argument="profile")
        now = now or datetime.now(UTC)

        role = self.resolve_target_role(profile)
        gap_report = self.analyzer.analyze_gaps(profile.skills, role)

        # Course relevance is judged against the resolved role
        role_profile = profile.model_copy(update={"target_job_title": role})
        recommended = self.recommender.recommend(
            role_profile,
            list(courses),
            MatchDomain.COURSE,
            RecommendOptions(limit=self.config.guide_course_limit),
            as_of=now.date(),
        )

        guide = CareerGuide(
            target_role=role,
            experience_level=profile.experience_level,
            generated_at=now,
            summary=(
                f"A clear, step-by-step plan to go from beginner to job-ready {role}."
            ),
            gap_report=gap_report,
            roadmap=self.builder.build_roadmap(role, gap_report, recommended),
            recommended_courses=recommended,
            starter_goals=self.builder.build_starter_goals(role, gap_report, now=now),
            starter_projects=starter_projects_for(role),
            getting_started=_getting_started(role),
            faq=_faq(role),
            next_steps=list(_NEXT_STEPS),
        )
        logger.info(
            "Built career guide for %s (readiness %d, %d courses)",
            role,
            gap_report.overall_readiness,
            len(recommended),
        )
        return guide


def _getting_started(role: str) -> list[ChecklistSection]:
    return [
        ChecklistSection(
            "Set up your environment",
            ["Install VS Code", "Install Git", "Create GitHub account"],
        ),
        ChecklistSection(
            "Learn the basics",
            [
                f"Complete one beginner course related to {role}",
                "Build a simple project",
            ],
        ),
        ChecklistSection(
            "Build consistency",
            ["Study 1 hour/day or 6-8 hours/week", "Share weekly progress on GitHub"],
        ),
    ]


def _faq(role: str) -> list[FaqEntry]:
    return [
        FaqEntry(
            f"How long to become job-ready as a {role}?",
            "Typically 2-3 months with consistent effort (8-10 hours/week).",
        ),
        FaqEntry(
            "Do I need a degree?",
            "Not necessarily. A strong portfolio, fundamentals, and projects are "
            "often enough for entry-level roles.",
        ),
        FaqEntry(
            "What matters most for beginners?",
            "Consistency, building real projects, and demonstrating problem "
            "solving in your portfolio.",
        ),
    ]
