"""Skill-gap analysis against role templates."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from src.gaps.config import GapConfig, get_gap_config
from src.gaps.models import LearningStep, SkillGapReport, SkillRequirement
from src.gaps.registry import RoleSkillRegistry
from src.scoring.errors import InvalidInputError
from src.scoring.matchers import skill_keys
from src.scoring.models import PRIORITY_RANK

logger = logging.getLogger(__name__)

LEARNING_RESOURCES = ["Online Course", "Practice Project", "Certification"]


class SkillGapAnalyzer:
    """Compare a set of skills against the template for a target role."""

    def __init__(
        self,
        registry: RoleSkillRegistry | None = None,
        config: GapConfig | None = None,
    ) -> None:
        self.config = config or get_gap_config()
        self.registry = registry or RoleSkillRegistry.with_defaults(
            default_role=self.config.default_role
        )

    def resolve_role(self, target_role: str | None) -> str:
        """Return `target_role`, or the configured default when it is blank."""
        if target_role is None or not target_role.strip():
            return self.config.default_role
        return target_role.strip()

    def readiness(self, gap_count: int) -> int:
        """Readiness percentage for a given number of gaps (never below 0)."""
        return max(0, 100 - self.config.readiness_penalty_per_gap * gap_count)

    def estimate_months(self, gap_count: int) -> tuple[int, int]:
        """Months needed to close `gap_count` gaps as a (low, high) range."""
        return (
            self.config.months_per_gap_min * gap_count,
            self.config.months_per_gap_max * gap_count,
        )

    def analyze_gaps(
        self, profile_skills: Iterable[Any], target_role: str | None
    ) -> SkillGapReport:
        """Partition the role template into gaps and existing strengths.

        Args:
            profile_skills: Skills held by the user (Skill objects, dicts with a
                `name`, or plain strings). Only names are compared.
            target_role: Role to analyze; unknown roles use the default
                template and blank roles use the default role.

        Raises:
            InvalidInputError: If profile_skills is missing.
        """
        if profile_skills is None:
            raise InvalidInputError(
                "profile_skills are required", argument="profile_skills"
            )
        role = self.resolve_role(target_role)
        template = self.registry.template_for(role)
        held = skill_keys(profile_skills)

        gaps: list[SkillRequirement] = []
        strengths: list[SkillRequirement] = []
        for requirement in template:
            (strengths if requirement.key in held else gaps).append(requirement)

        # Stable sort keeps template order among equal priorities
        gaps.sort(key=lambda req: PRIORITY_RANK[req.priority], reverse=True)

        report = SkillGapReport(
            target_role=role,
            overall_readiness=self.readiness(len(gaps)),
            skill_gaps=gaps,
            existing_strengths=strengths,
            priority_skills=gaps[: self.config.priority_skill_count],
            estimated_time_months=self.estimate_months(len(gaps)),
            learning_path=self.build_learning_path(gaps),
        )
        logger.info(
            "Gap analysis for %s: %d gaps, readiness %d",
            role,
            len(gaps),
            report.overall_readiness,
        )
        return report

    def build_learning_path(self, gaps: list[SkillRequirement]) -> list[LearningStep]:
        """One learning step per gap, in gap order."""
        return [
            LearningStep(
                step=index,
                skill=gap.name,
                estimated_weeks=self.config.weeks_for_priority(gap.priority),
                resources=list(LEARNING_RESOURCES),
                priority=gap.priority,
            )
            for index, gap in enumerate(gaps, start=1)
        ]
