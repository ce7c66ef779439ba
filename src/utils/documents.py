"""YAML/JSON document loading shared by profile, catalog and registry loaders."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml


def load_document(path: Path | str) -> Any:
    """Load a YAML or JSON document, picking the parser from the extension.

    Files with an unknown extension are parsed as JSON when they look like
    JSON and as YAML otherwise. An empty YAML document loads as None.

    Raises:
        FileNotFoundError: If `path` does not exist.
        ValueError: If the content cannot be parsed.
    """
    doc_path = Path(path)
    if not doc_path.exists():
        raise FileNotFoundError(f"File not found: {doc_path}")

    raw = doc_path.read_text(encoding="utf-8")
    suffix = doc_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return _parse_yaml(raw, doc_path)
    if suffix == ".json":
        return _parse_json(raw, doc_path)

    stripped = raw.lstrip()
    if stripped.startswith("{") or stripped.startswith("["):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            pass
    return _parse_yaml(raw, doc_path)


def load_mapping(path: Path | str) -> dict:
    """Load a document that must be a mapping (an empty file loads as {})."""
    data = load_document(path)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Document must be a mapping/dict: {path}")
    return data


def _parse_yaml(raw: str, path: Path) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML document: {path}") from e


def _parse_json(raw: str, path: Path) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON document: {path}") from e
