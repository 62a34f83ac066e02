"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from commerce_field_mapper.schema_management import SchemaCatalog, normalize_template_id

DEFAULT_SECURITY = "ar|Everyone|pe|+item:read|pd|+item:read|"


@dataclass(frozen=True)
class TemplateSettings:
    """Template identifiers with dedicated handling in the mapping."""

    catalog_folder_template_id: str
    navigation_item_template_id: str
    sellable_item_variant_template_id: str
    product_variant_template_id: str
    managed_template_ids: tuple[str, ...] = ()

    def is_managed(self, template_id: str) -> bool:
        """Return True when items of this template are served by the catalog mapping."""
        wanted = normalize_template_id(template_id)
        return any(
            normalize_template_id(managed) == wanted for managed in self.managed_template_ids
        )

    def is_structural(self, template_id: str) -> bool:
        """Return True for folder and navigation templates whose fields stay native."""
        wanted = normalize_template_id(template_id)
        return wanted in {
            normalize_template_id(self.catalog_folder_template_id),
            normalize_template_id(self.navigation_item_template_id),
        }


@dataclass(frozen=True)
class StandardFieldIds:  # pylint: disable=too-many-instance-attributes
    """Identifiers of the content repository's standard fields."""

    display_name: str = "{B5E02AD9-D56F-4C41-A065-A133DB87BDEB}"
    created: str = "{25BED78C-4957-4165-998A-CA1B52F67497}"
    created_by: str = "{5DD74568-4D4B-44C1-B513-0AF5F4CDA34F}"
    updated: str = "{D9CF14B1-FA16-4BA6-9288-E8A174D4D522}"
    updated_by: str = "{BADD9CF9-53E0-4D0C-BCC0-2D784C282F6A}"
    security: str = "{DEC8D2D5-E3CF-48B6-A653-8E69E2716641}"
    workflow: str = "{A4F985D9-98B3-4B52-AAAF-4344F6E747C6}"
    default_workflow: str = "{CA9B9F52-4FB0-4F87-A79F-24DEA62CDA65}"
    workflow_state: str = "{3E431DE1-525E-47A3-B6B0-1CCBEC3A8C98}"


@dataclass(frozen=True)
class MappingSettings:
    """Settings consumed by the field mapping service."""

    templates: TemplateSettings
    standard_fields: StandardFieldIds = field(default_factory=StandardFieldIds)
    default_security: str = DEFAULT_SECURITY


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    mapping: MappingSettings
    schemas: SchemaCatalog
