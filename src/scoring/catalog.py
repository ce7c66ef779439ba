"""Catalog loading for jobs and courses."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from src.scoring.models import CatalogEntity, Course, JobPosting, MatchDomain
from src.scoring.service import resolve_domain
from src.utils.documents import load_document

logger = logging.getLogger(__name__)

_COLLECTION_KEYS: dict[MatchDomain, tuple[str, ...]] = {
    MatchDomain.JOB: ("jobs", "items"),
    MatchDomain.COURSE: ("courses", "items"),
}


def load_catalog(path: Path | str, domain: MatchDomain | str) -> list[CatalogEntity]:
    """Load catalog entities of one domain from a file.

    Supported payloads:
    - A list of entity mappings
    - A mapping with a `jobs` / `courses` list (or a generic `items` list)
    """
    resolved = resolve_domain(domain)
    data = load_document(path)
    items = _extract_items(data, resolved, path)

    model = JobPosting if resolved is MatchDomain.JOB else Course
    entities: list[CatalogEntity] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Catalog item {index} is not a mapping: {path}")
        entities.append(model.model_validate(item))

    logger.debug("Loaded %d %s entities from %s", len(entities), resolved.value, path)
    return entities


def _extract_items(data: Any, domain: MatchDomain, path: Path | str) -> list[Any]:
    if data is None:
        return []
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        for key in _COLLECTION_KEYS[domain]:
            value = data.get(key)
            if isinstance(value, list):
                return value
        keys = " or ".join(_COLLECTION_KEYS[domain])
        raise ValueError(f"Catalog mapping has no {keys} list: {path}")
    raise ValueError(f"Invalid catalog payload: {path}")
