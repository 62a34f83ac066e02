"""Identifier resolver tests."""

from __future__ import annotations

import pytest
from commerce_field_mapper.document_access import MalformedDocumentError
from commerce_field_mapper.identifier_resolution import (
    IdentifierMapping,
    IdentifierResolver,
    RepositoryLookupError,
    StaticCatalogRepository,
    braced,
    compute_deterministic_id,
)


class _FailingRepository(StaticCatalogRepository):
    def __init__(self, error: Exception) -> None:
        super().__init__()
        self._error = error

    def get_entity_id_from_mappings(self, content_id: str) -> str | None:
        raise self._error

    def get_path_ids_for_content_id(self, reference_id, ancestor_id=None):
        raise self._error

    def get_variation_properties(self) -> str:
        raise self._error


def _repository() -> StaticCatalogRepository:
    return StaticCatalogRepository(
        mappings=(
            IdentifierMapping(
                content_id="item-1", entity_id="Entity-SellableItem-1", reference_id="item-1"
            ),
            IdentifierMapping(
                content_id="variant-7", entity_id="Entity-SellableItem-1|VAR7", reference_id="v7"
            ),
            IdentifierMapping(content_id="blank", entity_id=" ", reference_id="blank"),
        ),
        entities={("item-1", 1): {"Id": "Entity-SellableItem-1"}},
        variation_properties="Color|Size",
    )


def test_deterministic_id_matches_known_values() -> None:
    assert compute_deterministic_id("wf-1") == "ed2f29e2-eb19-1d69-e90c-8e5bf24f29ac"
    assert compute_deterministic_id("wf-1|Draft") == "eaec6618-e152-a4d3-009a-c3a05cbd5965"


def test_deterministic_id_is_stable_across_calls() -> None:
    first = IdentifierResolver.compute_deterministic_id("Entity-Workflow-Default|Approved")
    second = IdentifierResolver.compute_deterministic_id("Entity-Workflow-Default|Approved")

    assert first == second == "b1e65be0-24dd-c777-ffa6-a132b9d91d63"


def test_braced_wraps_identifier_once() -> None:
    assert braced("abc") == "{abc}"
    assert braced("{abc}") == "{abc}"


def test_resolver_resolves_both_identifier_spaces() -> None:
    resolver = IdentifierResolver(_repository())

    assert resolver.resolve_entity_id("item-1") == "Entity-SellableItem-1"
    assert resolver.resolve_content_id("entity-sellableitem-1") == "item-1"
    assert resolver.resolve_entity_id("unknown") is None
    assert resolver.resolve_entity_id("blank") is None
    assert resolver.fetch_entity("item-1", 1) == {"Id": "Entity-SellableItem-1"}
    assert resolver.fetch_entity("item-1", 2) is None
    assert resolver.variation_properties() == "Color|Size"


def test_split_composite_id_returns_parent_and_variation() -> None:
    composite = IdentifierResolver.split_composite_id("PARENT123|VAR7")

    assert composite.entity_id == "PARENT123"
    assert composite.variation_id == "VAR7"
    assert composite.is_variation


@pytest.mark.parametrize("composite_id", ["PARENT123", "A|B|C", "PARENT123|", "|VAR7"])
def test_split_composite_id_rejects_other_shapes(composite_id: str) -> None:
    with pytest.raises(MalformedDocumentError):
        IdentifierResolver.split_composite_id(composite_id)


def test_lookup_misses_from_repository_become_not_found() -> None:
    resolver = IdentifierResolver(_FailingRepository(RepositoryLookupError("missing")))

    assert resolver.resolve_entity_id("item-1") is None
    assert resolver.resolve_path_ids("cat-1", "item-1") == ()
    assert resolver.variation_properties() == ""


def test_unexpected_repository_errors_propagate() -> None:
    resolver = IdentifierResolver(_FailingRepository(RuntimeError("store offline")))

    with pytest.raises(RuntimeError, match="store offline"):
        resolver.resolve_entity_id("item-1")
