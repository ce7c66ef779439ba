"""Role to required-skill template registry."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from src.gaps.models import SkillRequirement
from src.utils.documents import load_mapping

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "Frontend Developer"

DEFAULT_TEMPLATES: dict[str, list[dict[str, str]]] = {
    "Frontend Developer": [
        {"name": "React", "level": "advanced", "priority": "high"},
        {"name": "JavaScript", "level": "advanced", "priority": "high"},
        {"name": "CSS", "level": "intermediate", "priority": "medium"},
        {"name": "TypeScript", "level": "intermediate", "priority": "medium"},
    ],
    "Full Stack Developer": [
        {"name": "React", "level": "intermediate", "priority": "high"},
        {"name": "Node.js", "level": "intermediate", "priority": "high"},
        {"name": "Database Design", "level": "intermediate", "priority": "medium"},
        {"name": "API Development", "level": "intermediate", "priority": "high"},
    ],
}


class RoleSkillRegistry:
    """Maps role names to ordered required-skill templates.

    Role lookups are case-insensitive. Roles that are not registered resolve
    to the default role's template instead of failing.
    """

    def __init__(
        self,
        templates: Mapping[str, Iterable[Any]] | None = None,
        default_role: str = DEFAULT_ROLE,
    ) -> None:
        self._templates: dict[str, tuple[str, tuple[SkillRequirement, ...]]] = {}
        for role, requirements in (templates or {}).items():
            self.register(role, requirements)

        if _role_key(default_role) not in self._templates:
            raise ValueError(f"Default role has no template: {default_role}")
        self.default_role = default_role

    @classmethod
    def with_defaults(cls, default_role: str = DEFAULT_ROLE) -> RoleSkillRegistry:
        """Registry preloaded with the built-in role templates."""
        return cls(DEFAULT_TEMPLATES, default_role=default_role)

    @classmethod
    def from_file(
        cls,
        path: Path | str,
        *,
        include_defaults: bool = True,
        default_role: str = DEFAULT_ROLE,
    ) -> RoleSkillRegistry:
        """Load role templates from a YAML/JSON mapping of role -> skill list.

        File templates replace built-in templates with the same role name.
        """
        data = load_mapping(path)
        templates: dict[str, Any] = dict(DEFAULT_TEMPLATES) if include_defaults else {}
        for role, requirements in data.items():
            if not isinstance(requirements, list):
                raise ValueError(f"Template for role {role!r} must be a list: {path}")
            templates[str(role)] = requirements

        registry = cls(templates, default_role=default_role)
        logger.debug("Loaded %d role templates from %s", len(data), path)
        return registry

    def register(
        self,
        role: str,
        requirements: Iterable[SkillRequirement | Mapping[str, Any] | str],
    ) -> None:
        """Add or replace the template for `role`."""
        if not role or not role.strip():
            raise ValueError("Role name must not be empty")

        parsed: list[SkillRequirement] = []
        for item in requirements:
            if isinstance(item, SkillRequirement):
                parsed.append(item)
            elif isinstance(item, str):
                parsed.append(SkillRequirement(name=item))
            else:
                parsed.append(SkillRequirement.model_validate(item))
        self._templates[_role_key(role)] = (role.strip(), tuple(parsed))

    @property
    def roles(self) -> list[str]:
        return [name for name, _template in self._templates.values()]

    def __contains__(self, role: object) -> bool:
        return isinstance(role, str) and _role_key(role) in self._templates

    def get(self, role: str) -> list[SkillRequirement] | None:
        """Template for `role`, or None if the role is not registered."""
        entry = self._templates.get(_role_key(role))
        if entry is None:
            return None
        return list(entry[1])

    def template_for(self, role: str) -> list[SkillRequirement]:
        """Template for `role`, falling back to the default role's template."""
        template = self.get(role)
        if template is None:
            logger.debug(
                "No template for role %r; using %r template", role, self.default_role
            )
            template = self.get(self.default_role) or []
        return template


def _role_key(role: str) -> str:
    return " ".join(role.split()).lower()

