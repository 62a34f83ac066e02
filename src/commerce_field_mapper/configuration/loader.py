"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import fields
from pathlib import Path
from typing import Any

import yaml

from commerce_field_mapper.schema_management import SchemaError, parse_template_schemas

from .runtime_settings import (
    DEFAULT_SECURITY,
    Configuration,
    MappingSettings,
    StandardFieldIds,
    TemplateSettings,
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    templates = _parse_templates_section(parsed.get("templates"))
    standard_fields = _parse_standard_fields_section(parsed.get("standard_fields"))
    security = _parse_security_section(parsed.get("security"))
    try:
        schemas = parse_template_schemas(parsed.get("schemas"))
    except SchemaError as exc:
        raise ConfigurationError(str(exc)) from exc

    return Configuration(
        path=path,
        mapping=MappingSettings(
            templates=templates,
            standard_fields=standard_fields,
            default_security=security,
        ),
        schemas=schemas,
    )


def _parse_templates_section(value: Any) -> TemplateSettings:
    section = _require_mapping(value, "templates")
    managed = section.get("managed") or []
    if isinstance(managed, str):
        managed = [managed]
    if not isinstance(managed, list):
        raise ConfigurationError("templates.managed must be a string or list of strings.")
    managed_ids = tuple(
        _require_non_empty_string(item, "templates.managed entry") for item in managed
    )
    return TemplateSettings(
        catalog_folder_template_id=_require_non_empty_string(
            section.get("catalog_folder"), "templates.catalog_folder"
        ),
        navigation_item_template_id=_require_non_empty_string(
            section.get("navigation_item"), "templates.navigation_item"
        ),
        sellable_item_variant_template_id=_require_non_empty_string(
            section.get("sellable_item_variant"), "templates.sellable_item_variant"
        ),
        product_variant_template_id=_require_non_empty_string(
            section.get("product_variant"), "templates.product_variant"
        ),
        managed_template_ids=managed_ids,
    )


def _parse_standard_fields_section(value: Any) -> StandardFieldIds:
    if value is None:
        return StandardFieldIds()
    section = _require_mapping(value, "standard_fields")
    known = {item.name for item in fields(StandardFieldIds)}
    unknown = sorted(str(key) for key in section if key not in known)
    if unknown:
        raise ConfigurationError(f"Unknown standard_fields entries: {', '.join(unknown)}")
    overrides = {
        str(key): _require_non_empty_string(raw, f"standard_fields.{key}")
        for key, raw in section.items()
    }
    return StandardFieldIds(**overrides)


def _parse_security_section(value: Any) -> str:
    if value is None:
        return DEFAULT_SECURITY
    section = _require_mapping(value, "security")
    raw = section.get("default_acl", DEFAULT_SECURITY)
    return _require_non_empty_string(raw, "security.default_acl")


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
