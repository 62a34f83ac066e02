"""Identifier resolution exports."""

from .deterministic_ids import braced, compute_deterministic_id
from .identifier_resolver import IdentifierResolver
from .repository_contracts import (
    COMPOSITE_ID_DELIMITER,
    CatalogRepository,
    CompositeEntityId,
    RepositoryLookupError,
)
from .static_repository import (
    IdentifierMapping,
    RepositoryFixtureError,
    StaticCatalogRepository,
    load_static_repository,
)

__all__ = [
    "COMPOSITE_ID_DELIMITER",
    "CatalogRepository",
    "CompositeEntityId",
    "IdentifierMapping",
    "IdentifierResolver",
    "RepositoryFixtureError",
    "RepositoryLookupError",
    "StaticCatalogRepository",
    "braced",
    "compute_deterministic_id",
    "load_static_repository",
]
