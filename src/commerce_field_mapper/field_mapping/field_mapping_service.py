"""Field mapping use-case service."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from commerce_field_mapper.configuration.runtime_settings import MappingSettings
from commerce_field_mapper.document_access import (
    MalformedDocumentError,
    component_collection,
    find_component_by_kind,
    get_entity_value,
    get_property,
    iter_children,
    to_field_string,
)
from commerce_field_mapper.field_rules import (
    FieldRecord,
    FieldRuleContext,
    apply_field_rule,
    map_composer_templates,
    map_item_definitions,
    map_relationships,
    map_workflow,
    merge_external_settings,
    normalize_date_string,
)
from commerce_field_mapper.identifier_resolution import CatalogRepository, IdentifierResolver
from commerce_field_mapper.schema_management import (
    SchemaProvider,
    TemplateSchema,
    normalize_template_id,
)

from .mapping_contracts import ItemDescriptor, MappingOutcome, VersionDescriptor

_DEFAULT_LOGGER = logging.getLogger("commerce_field_mapper.field_mapping")


class _MappingFailure(Exception):
    """Internal signal for a data gap that ends the mapping of one item."""


class FieldMappingService:
    """Maps commerce entity documents to the flat field records of content items.

    Every call is self-contained: the document, the resolver view over the
    repository and the record are built per call, and no failure escapes to
    the caller.
    """

    def __init__(
        self,
        settings: MappingSettings,
        schema_provider: SchemaProvider,
        repository: CatalogRepository,
        *,
        logger: logging.Logger | None = None,
        can_process_item: Callable[[ItemDescriptor], bool] | None = None,
    ) -> None:
        self._settings = settings
        self._schema_provider = schema_provider
        self._repository = repository
        self._logger = logger or _DEFAULT_LOGGER
        self._can_process_item = can_process_item or (
            lambda item: settings.templates.is_managed(item.template_id)
        )

    def get_item_fields(
        self, item: ItemDescriptor, version: VersionDescriptor
    ) -> FieldRecord | None:
        """Return the field record, or None when the item has no mapped fields."""
        return self.map_item_fields(item, version).record

    def map_item_fields(self, item: ItemDescriptor, version: VersionDescriptor) -> MappingOutcome:
        """Map one item's entity document to its field record."""
        try:
            return self._map_item_fields(item, version)
        except (_MappingFailure, MalformedDocumentError) as exc:
            self._logger.error(
                "%s Item ID: %s Template ID: %s", exc, item.item_id, item.template_id
            )
            return MappingOutcome.failed(str(exc))
        except Exception as exc:  # pylint: disable=broad-exception-caught
            self._logger.error(
                "There was an error mapping item fields. Item ID: %s Template ID: %s.",
                item.item_id,
                item.template_id,
                exc_info=exc,
            )
            return MappingOutcome.failed(f"Unexpected mapping error: {exc}")

    def _map_item_fields(self, item: ItemDescriptor, version: VersionDescriptor) -> MappingOutcome:
        not_applicable = self._not_applicable_reason(item)
        if not_applicable is not None:
            self._logger.debug("Skipping item %s: %s", item.item_id, not_applicable)
            return MappingOutcome.not_applicable(not_applicable)
        schema = self._schema_provider.get_schema(item.template_id)
        if schema is None:
            reason = f"No schema found for template {item.template_id}."
            self._logger.debug("Skipping item %s: %s", item.item_id, reason)
            return MappingOutcome.not_applicable(reason)

        resolver = IdentifierResolver(self._repository)
        composite_id = resolver.resolve_entity_id(item.item_id)
        if composite_id is None:
            raise _MappingFailure("Could not find the combined entity ID.")

        content_id = item.item_id
        variation_id: str | None = None
        if self._is_variant_template(item.template_id, schema):
            composite = resolver.split_composite_id(composite_id)
            parent_content_id = resolver.resolve_content_id(composite.entity_id)
            if parent_content_id is None:
                raise _MappingFailure(
                    f"Could not find the content ID of parent entity {composite.entity_id}."
                )
            content_id = parent_content_id
            variation_id = composite.variation_id

        entity = resolver.fetch_entity(content_id, version.number)
        if entity is None:
            raise _MappingFailure(
                f"Could not find entity for content ID {content_id} version {version.number}."
            )

        source: Mapping[str, Any] = entity
        tokens: list[Mapping[str, Any]] = [entity]
        if variation_id:
            variation = _find_variation(entity, variation_id)
            if variation is None:
                raise MalformedDocumentError(
                    f"Entity has no variation {variation_id} for composite ID {composite_id}."
                )
            source = variation
            tokens.insert(0, variation)

        record = FieldRecord()
        context = FieldRuleContext(tokens=tokens, resolver=resolver, scope_id=content_id)
        for schema_field in schema.data_fields():
            value = apply_field_rule(schema_field, context)
            if value is not None:
                record.set(schema_field.field_id, value)

        self._map_components(record, schema, item, version, source, resolver)
        self._map_standard_fields(record, source, entity)
        return MappingOutcome.mapped(record)

    def _not_applicable_reason(self, item: ItemDescriptor) -> str | None:
        if not self._can_process_item(item):
            return "The item is not managed by the catalog mapping."
        if self._settings.templates.is_structural(item.template_id):
            return "Folder and navigation item fields are managed as content items."
        return None

    def _is_variant_template(self, template_id: str, schema: TemplateSchema) -> bool:
        variant_template_id = self._settings.templates.sellable_item_variant_template_id
        if normalize_template_id(template_id) == normalize_template_id(variant_template_id):
            return True
        return schema.inherits_from(variant_template_id)

    def _map_components(
        self,
        record: FieldRecord,
        schema: TemplateSchema,
        item: ItemDescriptor,
        version: VersionDescriptor,
        source: Mapping[str, Any],
        resolver: IdentifierResolver,
    ) -> None:
        components = component_collection(source)
        merge_external_settings(record, schema, components, item.item_id, version.language)
        map_relationships(record, schema, components)

        templates = self._settings.templates
        if normalize_template_id(item.template_id) != normalize_template_id(
            templates.product_variant_template_id
        ):
            standard = self._settings.standard_fields
            map_workflow(
                record,
                components,
                resolver,
                workflow_field_id=standard.workflow,
                default_workflow_field_id=standard.default_workflow,
                workflow_state_field_id=standard.workflow_state,
            )

        catalog_name = None
        if find_component_by_kind(components, "CatalogsComponent") is not None:
            catalog_name = resolver.catalog_name_for(item.item_id)
        map_item_definitions(record, schema, components, catalog_name)
        map_composer_templates(record, schema, components)

    def _map_standard_fields(
        self,
        record: FieldRecord,
        source: Mapping[str, Any],
        entity: Mapping[str, Any],
    ) -> None:
        standard = self._settings.standard_fields
        display_name = to_field_string(get_property(source, "DisplayName"))
        if display_name is not None:
            record.set(standard.display_name, display_name)
        audit_dates = ((standard.created, "DateCreated"), (standard.updated, "DateUpdated"))
        for field_id, name in audit_dates:
            raw = get_entity_value([entity], name)
            if raw is not None:
                record.set(field_id, normalize_date_string(raw) or raw)
        record.set(standard.security, self._settings.default_security)

        created_by = get_entity_value([entity], "CreatedBy")
        updated_by = get_entity_value([entity], "UpdatedBy")
        if created_by:
            record.set(standard.created_by, created_by)
            updated_by = updated_by or created_by
        if updated_by:
            record.set(standard.updated_by, updated_by)


def _find_variation(entity: Mapping[str, Any], variation_id: str) -> Mapping[str, Any] | None:
    variations = find_component_by_kind(component_collection(entity), "ItemVariationsComponent")
    for variation in iter_children(variations, "ChildComponents"):
        if isinstance(variation, Mapping) and get_property(variation, "Id") == variation_id:
            return variation
    return None
