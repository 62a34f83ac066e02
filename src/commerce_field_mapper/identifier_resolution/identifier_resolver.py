"""Bridge between content-repository identifiers and catalog entity identifiers."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from commerce_field_mapper.document_access import MalformedDocumentError

from .deterministic_ids import compute_deterministic_id
from .repository_contracts import (
    COMPOSITE_ID_DELIMITER,
    CatalogRepository,
    CompositeEntityId,
    RepositoryLookupError,
)

_T = TypeVar("_T")


class IdentifierResolver:
    """Resolves identifiers through a catalog repository, reporting misses as None.

    Lookup misses raised by the repository are converted to None or empty
    results; any other failure is left for the caller's error boundary.
    """

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    def resolve_entity_id(self, content_id: str) -> str | None:
        """Return the (possibly composite) catalog identifier for a content item."""
        return _blank_to_none(
            self._lookup(lambda: self._repository.get_entity_id_from_mappings(content_id), None)
        )

    def resolve_content_id(self, entity_id: str) -> str | None:
        """Return the content identifier mapped to a catalog identifier."""
        return _blank_to_none(
            self._lookup(lambda: self._repository.get_content_id_from_mappings(entity_id), None)
        )

    def fetch_entity(self, content_id: str, version_number: int) -> Mapping[str, Any] | None:
        """Return the entity document behind a content item at the given version."""
        return self._lookup(lambda: self._repository.get_entity(content_id, version_number), None)

    def resolve_path_ids(
        self, reference_id: str, ancestor_scope: str | None = None
    ) -> tuple[str, ...]:
        """Expand a catalog reference into every content identifier on its paths.

        With `ancestor_scope`, only path identifiers located below that content
        item are returned.
        """
        path_ids = self._lookup(
            lambda: self._repository.get_path_ids_for_content_id(reference_id, ancestor_scope),
            (),
        )
        return tuple(path_ids or ())

    def catalog_name_for(self, content_id: str) -> str | None:
        return self._lookup(lambda: self._repository.get_catalog_name(content_id), None)

    def variation_properties(self) -> str:
        return self._lookup(self._repository.get_variation_properties, "") or ""

    @staticmethod
    def compute_deterministic_id(seed: str) -> str:
        """Return the stable identifier derived from `seed`."""
        return compute_deterministic_id(seed)

    @staticmethod
    def split_composite_id(composite_id: str) -> CompositeEntityId:
        """Split `parent|variation` into its parts.

        Raises:
          MalformedDocumentError: If the identifier does not have exactly two parts.
        """
        parts = composite_id.split(COMPOSITE_ID_DELIMITER)
        if len(parts) != 2 or not all(part.strip() for part in parts):
            raise MalformedDocumentError(
                f"Composite entity ID '{composite_id}' must contain a parent and a variation ID."
            )
        return CompositeEntityId(entity_id=parts[0].strip(), variation_id=parts[1].strip())

    @staticmethod
    def _lookup(call: Callable[[], _T], missing: _T) -> _T:
        try:
            return call()
        except (RepositoryLookupError, KeyError):
            return missing


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value
