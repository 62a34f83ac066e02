"""File-backed catalog repository for local mapping runs."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


class RepositoryFixtureError(Exception):
    """Raised when a repository fixture file is invalid."""


@dataclass(frozen=True)
class IdentifierMapping:
    """One content item known to the repository and its catalog counterpart."""

    content_id: str
    entity_id: str
    reference_id: str
    parent_id: str | None = None
    catalog_name: str | None = None


@dataclass
class StaticCatalogRepository:
    """In-memory repository built from identifier mappings and entity documents."""

    mappings: Sequence[IdentifierMapping] = ()
    entities: Mapping[tuple[str, int], Mapping[str, Any]] = field(default_factory=dict)
    variation_properties: str = ""

    def get_entity_id_from_mappings(self, content_id: str) -> str | None:
        mapping = self._by_content_id(content_id)
        return mapping.entity_id if mapping else None

    def get_content_id_from_mappings(self, entity_id: str) -> str | None:
        wanted = _normalize_id(entity_id)
        for mapping in self.mappings:
            if _normalize_id(mapping.entity_id) == wanted:
                return mapping.content_id
        return None

    def get_entity(self, content_id: str, version_number: int) -> Mapping[str, Any] | None:
        return self.entities.get((_normalize_id(content_id), version_number))

    def get_path_ids_for_content_id(
        self, reference_id: str, ancestor_id: str | None = None
    ) -> list[str]:
        wanted = _normalize_id(reference_id)
        path_ids: list[str] = []
        for mapping in self.mappings:
            if _normalize_id(mapping.reference_id) != wanted:
                continue
            if ancestor_id is not None and not self._is_below(mapping, ancestor_id):
                continue
            path_ids.append(mapping.content_id)
        return path_ids

    def get_catalog_name(self, content_id: str) -> str | None:
        mapping = self._by_content_id(content_id)
        return mapping.catalog_name if mapping else None

    def get_variation_properties(self) -> str:
        return self.variation_properties

    def _by_content_id(self, content_id: str) -> IdentifierMapping | None:
        wanted = _normalize_id(content_id)
        for mapping in self.mappings:
            if _normalize_id(mapping.content_id) == wanted:
                return mapping
        return None

    def _is_below(self, mapping: IdentifierMapping, ancestor_id: str) -> bool:
        wanted = _normalize_id(ancestor_id)
        visited: set[str] = set()
        parent_id = mapping.parent_id
        while parent_id and _normalize_id(parent_id) not in visited:
            normalized = _normalize_id(parent_id)
            if normalized == wanted:
                return True
            visited.add(normalized)
            parent = self._by_content_id(parent_id)
            parent_id = parent.parent_id if parent else None
        return False


def load_static_repository(fixture_path: Path | str) -> StaticCatalogRepository:
    """Load a repository fixture (YAML or JSON) with mappings and entity documents."""
    path = Path(fixture_path)
    if not path.exists():
        raise RepositoryFixtureError(f"Repository fixture not found: {path}")
    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise RepositoryFixtureError(f"Failed to parse repository fixture: {exc}") from exc
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise RepositoryFixtureError("Repository fixture root must be a mapping.")

    mappings = tuple(_parse_mapping(entry) for entry in _require_list(parsed, "mappings"))
    entities: dict[tuple[str, int], Mapping[str, Any]] = {}
    for entry in _require_list(parsed, "entities"):
        key, document = _parse_entity(entry, path.parent)
        entities[key] = document

    variation_properties = parsed.get("variation_properties") or ""
    if not isinstance(variation_properties, str):
        raise RepositoryFixtureError("variation_properties must be a string.")
    return StaticCatalogRepository(
        mappings=mappings,
        entities=entities,
        variation_properties=variation_properties,
    )


def _parse_mapping(entry: Any) -> IdentifierMapping:
    if not isinstance(entry, Mapping):
        raise RepositoryFixtureError("mappings entries must be mappings.")
    content_id = _require_string(entry.get("content_id"), "mappings.content_id")
    entity_id = _require_string(entry.get("entity_id"), "mappings.entity_id")
    return IdentifierMapping(
        content_id=content_id,
        entity_id=entity_id,
        reference_id=_optional_string(entry.get("reference_id")) or content_id,
        parent_id=_optional_string(entry.get("parent_id")),
        catalog_name=_optional_string(entry.get("catalog_name")),
    )


def _parse_entity(entry: Any, base_path: Path) -> tuple[tuple[str, int], Mapping[str, Any]]:
    if not isinstance(entry, Mapping):
        raise RepositoryFixtureError("entities entries must be mappings.")
    content_id = _require_string(entry.get("content_id"), "entities.content_id")
    version = entry.get("version", 1)
    if isinstance(version, bool) or not isinstance(version, int) or version <= 0:
        raise RepositoryFixtureError("entities.version must be a positive integer.")

    document = entry.get("document")
    document_path = entry.get("document_path")
    if document is None and isinstance(document_path, str):
        resolved = Path(document_path)
        if not resolved.is_absolute():
            resolved = (base_path / resolved).resolve()
        try:
            document = json.loads(resolved.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RepositoryFixtureError(f"Cannot read entity document {resolved}: {exc}") from exc
    if not isinstance(document, Mapping):
        raise RepositoryFixtureError(
            f"Entity '{content_id}' requires a document mapping or a document_path."
        )
    return (_normalize_id(content_id), version), document


def _require_list(section: Mapping[str, Any], name: str) -> Sequence[Any]:
    value = section.get(name) or []
    if not isinstance(value, list):
        raise RepositoryFixtureError(f"{name} must be a list.")
    return value


def _require_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise RepositoryFixtureError(f"{field_name} must be a non-empty string.")
    return value.strip()


def _optional_string(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise RepositoryFixtureError("Identifier values must be strings.")
    return value.strip() or None


def _normalize_id(identifier: str) -> str:
    return identifier.strip().strip("{}").lower()
