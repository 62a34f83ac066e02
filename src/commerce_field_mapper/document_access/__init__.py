"""Entity document access exports."""

from .entity_tree import (
    SHARED_SETTINGS_KEY,
    ExternalSettings,
    MalformedDocumentError,
    component_collection,
    find_component_by_kind,
    get_entity_property,
    get_entity_value,
    get_external_settings_collection,
    get_property,
    iter_children,
    split_piped_list,
    to_field_string,
)

__all__ = [
    "SHARED_SETTINGS_KEY",
    "ExternalSettings",
    "MalformedDocumentError",
    "component_collection",
    "find_component_by_kind",
    "get_entity_property",
    "get_entity_value",
    "get_external_settings_collection",
    "get_property",
    "iter_children",
    "split_piped_list",
    "to_field_string",
]
