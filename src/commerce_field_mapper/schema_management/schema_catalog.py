"""Template schema provider backed by configuration data."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from .schema_models import (
    STANDARD_FIELD_PREFIX,
    FieldType,
    SchemaField,
    TemplateSchema,
    normalize_template_id,
)


class SchemaError(Exception):
    """Raised for schema parsing failures."""


class SchemaProvider(Protocol):
    """Supplies the ordered field definitions of a template."""

    def get_schema(self, template_id: str) -> TemplateSchema | None: ...


class SchemaCatalog:
    """Schema provider holding a fixed set of template schemas."""

    def __init__(self, schemas: Sequence[TemplateSchema] = ()) -> None:
        self._schemas = {normalize_template_id(schema.template_id): schema for schema in schemas}

    def get_schema(self, template_id: str) -> TemplateSchema | None:
        return self._schemas.get(normalize_template_id(template_id))

    def __len__(self) -> int:
        return len(self._schemas)


def parse_template_schemas(section: Any) -> SchemaCatalog:
    """Build a catalog from a `template id -> {base_templates, fields}` mapping."""
    if section is None:
        return SchemaCatalog()
    if not isinstance(section, Mapping):
        raise SchemaError("schemas must be a mapping of template IDs to definitions.")

    schemas: list[TemplateSchema] = []
    for template_id, definition in section.items():
        if not isinstance(definition, Mapping):
            raise SchemaError(f"Schema for template {template_id} must be a mapping.")
        fields = definition.get("fields") or []
        if not isinstance(fields, list):
            raise SchemaError(f"Schema fields for template {template_id} must be a list.")
        base_templates = definition.get("base_templates") or []
        if not isinstance(base_templates, list) or not all(
            isinstance(item, str) for item in base_templates
        ):
            raise SchemaError(f"base_templates for template {template_id} must be strings.")
        schemas.append(
            TemplateSchema(
                template_id=str(template_id),
                fields=_parse_fields(str(template_id), fields),
                base_template_ids=tuple(base_templates),
            )
        )
    return SchemaCatalog(schemas)


def _parse_fields(template_id: str, fields: Sequence[Any]) -> tuple[SchemaField, ...]:
    parsed: list[SchemaField] = []
    seen_ids: set[str] = set()
    for entry in fields:
        if not isinstance(entry, Mapping):
            raise SchemaError(f"Field definitions for template {template_id} must be mappings.")
        field_id = entry.get("id")
        name = entry.get("name")
        if not isinstance(field_id, str) or not field_id.strip():
            raise SchemaError(f"Field in template {template_id} is missing an id.")
        if not isinstance(name, str) or not name.strip():
            raise SchemaError(f"Field {field_id} in template {template_id} is missing a name.")
        normalized_id = normalize_template_id(field_id)
        if normalized_id in seen_ids:
            raise SchemaError(f"Duplicate field id {field_id} in template {template_id}.")
        seen_ids.add(normalized_id)

        data_field = entry.get("data_field")
        if data_field is None:
            data_field = not name.startswith(STANDARD_FIELD_PREFIX)
        raw_type = entry.get("type")
        parsed.append(
            SchemaField(
                field_id=field_id.strip(),
                name=name.strip(),
                field_type=FieldType.parse(raw_type if isinstance(raw_type, str) else None),
                is_data_field=bool(data_field),
            )
        )
    return tuple(parsed)
