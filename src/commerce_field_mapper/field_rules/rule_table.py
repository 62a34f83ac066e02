"""Per-field-name rules deriving a field value from the entity document."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from commerce_field_mapper.document_access import (
    get_entity_property,
    get_entity_value,
    split_piped_list,
    to_field_string,
)
from commerce_field_mapper.identifier_resolution import IdentifierResolver
from commerce_field_mapper.schema_management import SchemaField

LIST_DELIMITER = "|"
LOCATION_SEPARATOR = ", "
LOCATION_PARTS: tuple[str, ...] = ("City", "Region", "PostalCode")


@dataclass(frozen=True)
class FieldRuleContext:
    """Document views and services shared by every rule of one mapping call.

    `tokens` lists the nodes consulted for values, the variation child first
    when the item is a variation. `scope_id` is the content identifier whose
    children are listed by the children rules.
    """

    tokens: Sequence[Mapping[str, Any]]
    resolver: IdentifierResolver
    scope_id: str


FieldRule = Callable[[SchemaField, FieldRuleContext], str | None]


def _variation_properties(field: SchemaField, context: FieldRuleContext) -> str | None:
    return context.resolver.variation_properties()


def _area_served(field: SchemaField, context: FieldRuleContext) -> str | None:
    location = get_entity_property(context.tokens, field.name)
    if not isinstance(location, Mapping):
        return None
    parts = [to_field_string(location.get(part)) for part in LOCATION_PARTS]
    return LOCATION_SEPARATOR.join(part for part in parts if part)


def _scoped_children(field: SchemaField, context: FieldRuleContext) -> str | None:
    path_ids: list[str] = []
    for reference_id in split_piped_list(get_entity_value(context.tokens, field.name)):
        path_ids.extend(context.resolver.resolve_path_ids(reference_id, context.scope_id))
    return LIST_DELIMITER.join(path_ids)


def _distinct_parents(field: SchemaField, context: FieldRuleContext) -> str | None:
    path_ids: list[str] = []
    seen: set[str] = set()
    for reference_id in split_piped_list(get_entity_value(context.tokens, field.name)):
        for path_id in context.resolver.resolve_path_ids(reference_id):
            if path_id.casefold() in seen:
                continue
            seen.add(path_id.casefold())
            path_ids.append(path_id)
    return LIST_DELIMITER.join(path_ids)


def _direct_value(field: SchemaField, context: FieldRuleContext) -> str | None:
    return get_entity_value(context.tokens, field.name)


FIELD_RULES: Mapping[str, FieldRule] = {
    "VariationProperties": _variation_properties,
    "AreaServed": _area_served,
    "ChildrenCategoryList": _scoped_children,
    "ChildrenSellableItemList": _scoped_children,
    "ParentCatalogList": _distinct_parents,
    "ParentCategoryList": _distinct_parents,
}


def rule_for(field: SchemaField) -> FieldRule:
    """Return the rule registered for the field's name, or the direct lookup."""
    return FIELD_RULES.get(field.name, _direct_value)


def apply_field_rule(field: SchemaField, context: FieldRuleContext) -> str | None:
    """Derive the field's value; None means the field stays unset."""
    return rule_for(field)(field, context)
