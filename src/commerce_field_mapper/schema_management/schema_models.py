"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

STANDARD_FIELD_PREFIX = "__"


class FieldType(str, Enum):
    """Declared type of a schema field, as far as value coercion cares."""

    TEXT = "text"
    CHECKBOX = "checkbox"
    DATETIME = "datetime"
    GENERIC = "generic"

    @classmethod
    def parse(cls, raw: str | None) -> FieldType:
        """Map a content-repository type name such as `Checkbox` or `Single-Line Text`."""
        if not raw:
            return cls.GENERIC
        normalized = raw.strip().lower().replace("-", " ").replace("_", " ")
        if normalized in {"checkbox", "boolean", "bool"}:
            return cls.CHECKBOX
        if normalized in {"datetime", "date time", "date"}:
            return cls.DATETIME
        if normalized == "text" or normalized.endswith(" text"):
            return cls.TEXT
        return cls.GENERIC


@dataclass(frozen=True)
class SchemaField:
    """One typed slot of the flat record."""

    field_id: str
    name: str
    field_type: FieldType = FieldType.GENERIC
    is_data_field: bool = True


@dataclass(frozen=True)
class TemplateSchema:
    """Ordered field definitions of one template."""

    template_id: str
    fields: tuple[SchemaField, ...]
    base_template_ids: tuple[str, ...] = ()

    def field_named(self, name: str | None) -> SchemaField | None:
        """Return the first field with the given name."""
        if name is None:
            return None
        for schema_field in self.fields:
            if schema_field.name == name:
                return schema_field
        return None

    def data_fields(self) -> tuple[SchemaField, ...]:
        return tuple(schema_field for schema_field in self.fields if schema_field.is_data_field)

    def inherits_from(self, template_id: str) -> bool:
        """Return True when `template_id` is one of this template's base templates."""
        wanted = normalize_template_id(template_id)
        return any(normalize_template_id(base) == wanted for base in self.base_template_ids)


def normalize_template_id(template_id: str) -> str:
    return template_id.strip().strip("{}").lower()
