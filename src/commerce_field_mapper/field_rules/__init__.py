"""Field rule engine exports."""

from .component_rules import (
    map_composer_templates,
    map_item_definitions,
    map_relationships,
    map_workflow,
    merge_external_settings,
)
from .field_record import FieldRecord
from .rule_table import FIELD_RULES, FieldRule, FieldRuleContext, apply_field_rule, rule_for
from .value_coercion import coerce_field_value, normalize_date_string, to_iso_date

__all__ = [
    "FIELD_RULES",
    "FieldRecord",
    "FieldRule",
    "FieldRuleContext",
    "apply_field_rule",
    "coerce_field_value",
    "map_composer_templates",
    "map_item_definitions",
    "map_relationships",
    "map_workflow",
    "merge_external_settings",
    "normalize_date_string",
    "rule_for",
    "to_iso_date",
]
