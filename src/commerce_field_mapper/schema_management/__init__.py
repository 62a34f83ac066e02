"""Schema management exports."""

from .schema_catalog import SchemaCatalog, SchemaError, SchemaProvider, parse_template_schemas
from .schema_models import FieldType, SchemaField, TemplateSchema, normalize_template_id

__all__ = [
    "FieldType",
    "SchemaCatalog",
    "SchemaError",
    "SchemaField",
    "SchemaProvider",
    "TemplateSchema",
    "normalize_template_id",
    "parse_template_schemas",
]
