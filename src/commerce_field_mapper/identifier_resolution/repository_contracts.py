"""Contracts shared with the external catalog repository."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

COMPOSITE_ID_DELIMITER = "|"


class RepositoryLookupError(LookupError):
    """Raised by repositories when an identifier or document does not exist."""


class CatalogRepository(Protocol):
    """Identifier mapping and document store consumed by the resolver."""

    def get_entity_id_from_mappings(self, content_id: str) -> str | None: ...

    def get_content_id_from_mappings(self, entity_id: str) -> str | None: ...

    def get_entity(self, content_id: str, version_number: int) -> Mapping[str, Any] | None: ...

    def get_path_ids_for_content_id(
        self, reference_id: str, ancestor_id: str | None = None
    ) -> Sequence[str]: ...

    def get_catalog_name(self, content_id: str) -> str | None: ...

    def get_variation_properties(self) -> str: ...


@dataclass(frozen=True)
class CompositeEntityId:
    """Catalog identifier of an item, split into parent and variation parts."""

    entity_id: str
    variation_id: str | None = None

    @property
    def is_variation(self) -> bool:
        """Return True when the identifier addresses a variation child."""
        return bool(self.variation_id)
