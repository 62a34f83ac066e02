"""Field mapping entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from commerce_field_mapper.field_rules import FieldRecord


@dataclass(frozen=True)
class ItemDescriptor:
    """Content item whose fields are requested."""

    item_id: str
    template_id: str


@dataclass(frozen=True)
class VersionDescriptor:
    """Language and version number of the requested fields."""

    language: str = "en"
    number: int = 1


class MappingStatus(str, Enum):
    """Outcome kinds of one mapping call."""

    MAPPED = "mapped"
    NOT_APPLICABLE = "not_applicable"
    FAILED = "failed"


@dataclass(frozen=True)
class MappingOutcome:
    """Result of mapping one item: a record, or the reason there is none."""

    status: MappingStatus
    record: FieldRecord | None = None
    reason: str | None = None

    @classmethod
    def mapped(cls, record: FieldRecord) -> MappingOutcome:
        return cls(status=MappingStatus.MAPPED, record=record)

    @classmethod
    def not_applicable(cls, reason: str) -> MappingOutcome:
        return cls(status=MappingStatus.NOT_APPLICABLE, reason=reason)

    @classmethod
    def failed(cls, reason: str) -> MappingOutcome:
        return cls(status=MappingStatus.FAILED, reason=reason)

    @property
    def is_mapped(self) -> bool:
        """Return True when a record was produced."""
        return self.status is MappingStatus.MAPPED
