"""Rules that map whole components onto the record after the per-field pass."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from commerce_field_mapper.document_access import (
    SHARED_SETTINGS_KEY,
    find_component_by_kind,
    get_external_settings_collection,
    get_property,
    iter_children,
    to_field_string,
)
from commerce_field_mapper.identifier_resolution import IdentifierResolver, braced
from commerce_field_mapper.schema_management import TemplateSchema

from .field_record import FieldRecord
from .rule_table import LIST_DELIMITER
from .value_coercion import coerce_field_value

ITEM_DEFINITIONS_FIELD = "ItemDefinitions"
DEFINITIONS_SEPARATOR = "\r\n"


def merge_external_settings(
    record: FieldRecord,
    schema: TemplateSchema,
    components: Sequence[Any],
    target_id: str,
    language: str,
) -> None:
    """Fill unset fields from language settings, then from shared settings."""
    collection = get_external_settings_collection(components, target_id)
    settings = collection[target_id]
    for scope in (language, SHARED_SETTINGS_KEY):
        for name, value in settings.get(scope, {}).items():
            schema_field = schema.field_named(name)
            if schema_field is not None:
                record.add_if_absent(schema_field.field_id, value)


def map_relationships(
    record: FieldRecord, schema: TemplateSchema, components: Sequence[Any]
) -> None:
    relationships = find_component_by_kind(components, "RelationshipsComponent")
    for relationship in iter_children(relationships, "Relationships"):
        schema_field = schema.field_named(to_field_string(get_property(relationship, "Name")))
        if schema_field is None:
            continue
        targets = [
            target
            for item in iter_children(relationship, "RelationshipList")
            if (target := to_field_string(item)) is not None
        ]
        record.add_if_absent(schema_field.field_id, LIST_DELIMITER.join(targets))


def map_workflow(
    record: FieldRecord,
    components: Sequence[Any],
    resolver: IdentifierResolver,
    *,
    workflow_field_id: str,
    default_workflow_field_id: str,
    workflow_state_field_id: str,
) -> None:
    """Point the workflow fields at the deterministic workflow and state identifiers."""
    workflow = find_component_by_kind(components, "WorkflowComponent")
    if workflow is None:
        return
    workflow_target = get_property(workflow, "Workflow")
    workflow_ref = to_field_string(get_property(workflow_target, "EntityTarget"))
    state_name = to_field_string(get_property(workflow, "CurrentState"))
    if not workflow_ref or not state_name:
        return

    workflow_id = braced(resolver.compute_deterministic_id(workflow_ref))
    state_id = braced(resolver.compute_deterministic_id(f"{workflow_ref}|{state_name}"))
    record.set(workflow_field_id, workflow_id)
    record.set(default_workflow_field_id, workflow_id)
    record.set(workflow_state_field_id, state_id)


def map_item_definitions(
    record: FieldRecord,
    schema: TemplateSchema,
    components: Sequence[Any],
    catalog_name: str | None,
) -> None:
    """Map catalog item definitions; the definitions component wins over catalog membership."""
    item_field = schema.field_named(ITEM_DEFINITIONS_FIELD)
    if item_field is None:
        return

    definitions_component = find_component_by_kind(components, "ItemDefinitionsComponent")
    if get_property(definitions_component, "Definitions") is not None:
        values = [
            text
            for item in iter_children(definitions_component, "Definitions")
            if (text := to_field_string(item)) is not None
        ]
        record.add_if_absent(item_field.field_id, DEFINITIONS_SEPARATOR.join(values))

    catalogs = find_component_by_kind(components, "CatalogsComponent")
    for catalog in iter_children(catalogs, "ChildComponents"):
        if catalog_name is None or get_property(catalog, "Name") != catalog_name:
            continue
        item_definition = to_field_string(get_property(catalog, "ItemDefinition"))
        if item_definition is not None:
            record.add_if_absent(item_field.field_id, item_definition)
        break


def map_composer_templates(
    record: FieldRecord, schema: TemplateSchema, components: Sequence[Any]
) -> None:
    """Map composer view properties by declared field type; later properties win."""
    view = get_property(find_component_by_kind(components, "EntityViewComponent"), "View")
    for child_view in iter_children(view, "ChildViews"):
        for composer_property in iter_children(child_view, "Properties"):
            schema_field = schema.field_named(
                to_field_string(get_property(composer_property, "Name"))
            )
            if schema_field is None:
                continue
            value = coerce_field_value(
                schema_field.field_type, to_field_string(get_property(composer_property, "Value"))
            )
            if value is not None:
                record.set(schema_field.field_id, value)
