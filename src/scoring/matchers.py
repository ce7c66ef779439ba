"""Skill matching utilities for match scoring.

Matching is exact on the normalized name: no aliases and no fuzzy
similarity, so "React" matches "react" but not "ReactJS".
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any


def normalize_skill(skill: str) -> str:
    """Normalize a skill name into its identity key.

    Lowercases, trims, and collapses inner whitespace. Punctuation such as
    "+", "#" and "." is kept (e.g. "C++", "C#", "Node.js").
    """
    value = str(skill).strip().lower()
    return re.sub(r"\s+", " ", value)


def skill_name(skill: Any) -> str:
    """Return the name of a skill given as a string or an object with `.name`."""
    if isinstance(skill, str):
        return skill
    if isinstance(skill, dict):
        return str(skill.get("name", ""))
    return str(getattr(skill, "name", ""))


def skill_keys(skills: Iterable[Any]) -> set[str]:
    """Build the set of identity keys for a collection of skills."""
    keys: set[str] = set()
    for skill in skills:
        key = normalize_skill(skill_name(skill))
        if key:
            keys.add(key)
    return keys


def skills_match(skill1: str, skill2: str) -> bool:
    """Return True if two skill names identify the same skill."""
    return normalize_skill(skill1) == normalize_skill(skill2)


def find_matching_skills(
    required: list[str], available: Iterable[Any]
) -> tuple[list[str], list[str]]:
    """Split required skill names into (matched, missing), preserving order."""
    keys = skill_keys(available)
    matched: list[str] = []
    missing: list[str] = []

    for requirement in required:
        if normalize_skill(requirement) in keys:
            matched.append(requirement)
        else:
            missing.append(requirement)

    return matched, missing


def overlap_ratio(required: list[str], available: Iterable[Any]) -> float:
    """Fraction of `required` present in `available`; 1.0 when nothing is required."""
    if not required:
        return 1.0
    matched, _missing = find_matching_skills(required, available)
    return len(matched) / len(required)
