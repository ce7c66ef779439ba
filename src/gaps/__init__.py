"""Skill-gap analysis.

Compares a user's skills with the required-skill template of a target role
and reports readiness, gaps, strengths and a per-gap learning path.

Public API:
    - SkillGapAnalyzer: Gap analysis service
    - RoleSkillRegistry: Role to skill-template mapping
    - SkillGapReport, SkillRequirement, LearningStep: Models
    - GapConfig: Configuration settings
"""

from src.gaps.analyzer import SkillGapAnalyzer
from src.gaps.config import GapConfig, get_gap_config, reset_gap_config
from src.gaps.models import LearningStep, SkillGapReport, SkillRequirement
from src.gaps.registry import DEFAULT_ROLE, RoleSkillRegistry

__all__ = [
    "SkillGapAnalyzer",
    "RoleSkillRegistry",
    "DEFAULT_ROLE",
    "SkillGapReport",
    "SkillRequirement",
    "LearningStep",
    "GapConfig",
    "get_gap_config",
    "reset_gap_config",
]
