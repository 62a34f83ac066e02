"""Safe navigation helpers over commerce entity documents."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

COMPONENT_TYPE_KEY = "@odata.type"
SHARED_SETTINGS_KEY = "shared"

ExternalSettings = dict[str, dict[str, str]]


class MalformedDocumentError(Exception):
    """Raised when an entity document lacks a part the mapping depends on."""


def get_property(node: Any, name: str) -> Any | None:
    """Return the named property of an object node, or None for any other node."""
    if not isinstance(node, Mapping):
        return None
    return node.get(name)


def component_collection(node: Any) -> Sequence[Any]:
    """Return the components of an entity (`Components`) or a variation (`ChildComponents`)."""
    components = get_property(node, "Components")
    if components is None:
        components = get_property(node, "ChildComponents")
    if _is_list(components):
        return components
    return ()


def find_component_by_kind(components: Sequence[Any], kind: str) -> Mapping[str, Any] | None:
    """Return the first component whose type discriminator contains `kind`."""
    for component in components:
        discriminator = get_property(component, COMPONENT_TYPE_KEY)
        if isinstance(discriminator, str) and kind in discriminator:
            return component
    return None


def iter_children(node: Any, name: str) -> Sequence[Any]:
    """Return the list stored under `name`, or an empty sequence."""
    children = get_property(node, name)
    return children if _is_list(children) else ()


def get_entity_property(tokens: Sequence[Any], name: str) -> Any | None:
    """Find a property on the first token that defines it.

    Each token is consulted directly first, then through its components, so a
    variation node shadows the entity it belongs to.
    """
    for token in tokens:
        value = get_property(token, name)
        if value is not None:
            return value
        for component in component_collection(token):
            value = get_property(component, name)
            if value is not None:
                return value
    return None


def get_entity_value(tokens: Sequence[Any], name: str) -> str | None:
    """Return the named property as a field string, or None when absent or structured."""
    return to_field_string(get_entity_property(tokens, name))


def to_field_string(value: Any) -> str | None:
    if value is None or isinstance(value, Mapping):
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, str):
        return value
    if isinstance(value, int | float):
        return str(value)
    if _is_list(value):
        parts = [to_field_string(item) for item in value]
        return "|".join(part for part in parts if part is not None)
    return str(value)


def split_piped_list(value: str | None) -> list[str]:
    """Split a `|` delimited identifier list, dropping blank entries."""
    if not value:
        return []
    return [part.strip() for part in value.split("|") if part.strip()]


def get_external_settings_collection(
    components: Sequence[Any], target_id: str
) -> dict[str, ExternalSettings]:
    """Collect external settings attached to the component collection for `target_id`.

    The returned collection always carries an entry for `target_id`. A
    settings document keyed by target identifiers is narrowed to that target;
    otherwise the document is taken as the target's locale mapping.
    """
    component = find_component_by_kind(components, "ExternalSettingsComponent")
    document = _parse_settings_document(get_property(component, "Settings"))

    scoped = _lookup_case_insensitive(document, target_id)
    if isinstance(scoped, Mapping):
        document = scoped

    settings: ExternalSettings = {}
    for locale, values in document.items():
        if not isinstance(values, Mapping):
            continue
        settings[str(locale)] = {
            str(key): text
            for key, raw in values.items()
            if (text := to_field_string(raw)) is not None
        }
    return {target_id: settings}


def _parse_settings_document(raw: Any) -> Mapping[str, Any]:
    if isinstance(raw, str):
        if not raw.strip():
            return {}
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(f"Invalid external settings document: {exc}") from exc
        return parsed if isinstance(parsed, Mapping) else {}
    if isinstance(raw, Mapping):
        return raw
    return {}


def _lookup_case_insensitive(document: Mapping[str, Any], key: str) -> Any | None:
    wanted = key.strip("{}").lower()
    for candidate, value in document.items():
        if str(candidate).strip("{}").lower() == wanted:
            return value
    return None


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes)
