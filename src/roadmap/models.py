"""Data models for roadmaps, starter goals and career guides."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from src.gaps.models import SkillGapReport
from src.recommend.models import Recommendation

ROADMAP_PHASE_COUNT = 3


@dataclass
class RoadmapPhase:
    """One phase of a learning roadmap."""

    name: str
    focus: str
    focus_skills: list[str] = field(default_factory=list)
    actions: list[str] = field(default_factory=list)
    recommended_courses: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "focus": self.focus,
            "focus_skills": list(self.focus_skills),
            "actions": list(self.actions),
            "recommended_courses": list(self.recommended_courses),
        }


@dataclass
class Roadmap:
    """Three-phase plan: foundation, projects, job readiness."""

    target_role: str
    phases: list[RoadmapPhase]

    def __post_init__(self) -> None:
        if len(self.phases) != ROADMAP_PHASE_COUNT:
            raise ValueError(
                f"Roadmap must have exactly {ROADMAP_PHASE_COUNT} phases "
                f"(got {len(self.phases)})"
            )

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "target_role": self.target_role,
            "phases": [phase.to_dict() for phase in self.phases],
        }


@dataclass
class StarterGoal:
    """A dated, trackable first action derived from a gap report."""

    id: str
    title: str
    description: str
    category: Literal["learning", "project"]
    target_date: datetime
    priority: Literal["low", "medium", "high"]
    milestones: list[str] = field(default_factory=list)
    related_skills: list[str] = field(default_factory=list)
    measurable_outcome: str = ""
    status: Literal["not_started", "in_progress", "completed", "paused"] = (
        "not_started"
    )
    progress: int = 0

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "target_date": self.target_date.isoformat(),
            "priority": self.priority,
            "status": self.status,
            "progress": self.progress,
            "milestones": list(self.milestones),
            "related_skills": list(self.related_skills),
            "measurable_outcome": self.measurable_outcome,
        }


@dataclass
class StarterProject:
    title: str
    skills: list[str]
    difficulty: str
    description: str = ""

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "difficulty": self.difficulty,
            "skills": list(self.skills),
        }


@dataclass
class ChecklistSection:
    title: str
    items: list[str]

    def to_dict(self) -> dict:
        return {"title": self.title, "items": list(self.items)}


@dataclass
class FaqEntry:
    question: str
    answer: str

    def to_dict(self) -> dict:
        return {"question": self.question, "answer": self.answer}


@dataclass
class CareerGuide:
    """Beginner career guide assembled from gap analysis and recommendations."""

    target_role: str
    experience_level: str
    generated_at: datetime
    summary: str
    gap_report: SkillGapReport
    roadmap: Roadmap
    recommended_courses: list[Recommendation]
    starter_goals: list[StarterGoal]
    starter_projects: list[StarterProject] = field(default_factory=list)
    getting_started: list[ChecklistSection] = field(default_factory=list)
    faq: list[FaqEntry] = field(default_factory=list)
    next_steps: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Serialize to a dictionary."""
        return {
            "meta": {
                "target_role": self.target_role,
                "experience_level": self.experience_level,
                "generated_at": self.generated_at.isoformat(),
            },
            "overview": {
                "summary": self.summary,
                "overall_readiness": self.gap_report.overall_readiness,
                "estimated_time_to_readiness": self.gap_report.estimated_time_display,
                "priority_skills": [
                    skill.to_dict() for skill in self.gap_report.priority_skills
                ],
            },
            "getting_started": [section.to_dict() for section in self.getting_started],
            "roadmap": self.roadmap.to_dict(),
            "starter_projects": [
                project.to_dict() for project in self.starter_projects
            ],
            "recommended_courses": [rec.to_dict() for rec in self.recommended_courses],
            "skill_gap_analysis": self.gap_report.to_dict(),
            "faq": [entry.to_dict() for entry in self.faq],
            "next_steps": list(self.next_steps),
            "recommended_goals": [goal.to_dict() for goal in self.starter_goals],
        }
