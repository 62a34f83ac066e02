"""Field mapping domain exports."""

from .field_mapping_service import FieldMappingService
from .mapping_contracts import ItemDescriptor, MappingOutcome, MappingStatus, VersionDescriptor

__all__ = [
    "FieldMappingService",
    "ItemDescriptor",
    "MappingOutcome",
    "MappingStatus",
    "VersionDescriptor",
]
