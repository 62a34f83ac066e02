"""Flat field record produced by the mapping."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class FieldRecord(Mapping[str, str]):
    """Ordered field-id to value mapping with explicit write policies.

    Field identifiers compare case-insensitively and without braces, the way
    the content repository compares them; the first spelling written is kept.
    """

    def __init__(self) -> None:
        self._values: dict[str, tuple[str, str]] = {}

    def set(self, field_id: str, value: str) -> None:
        """Write `value`, replacing any earlier value for the field."""
        key = _normalize_field_id(field_id)
        original_id = self._values[key][0] if key in self._values else field_id
        self._values[key] = (original_id, value)

    def add_if_absent(self, field_id: str, value: str) -> bool:
        """Write `value` only when the field has no value yet; return True when written."""
        if field_id in self:
            return False
        self.set(field_id, value)
        return True

    def __getitem__(self, field_id: str) -> str:
        return self._values[_normalize_field_id(field_id)][1]

    def __contains__(self, field_id: object) -> bool:
        return isinstance(field_id, str) and _normalize_field_id(field_id) in self._values

    def __iter__(self) -> Iterator[str]:
        return (original_id for original_id, _ in self._values.values())

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"FieldRecord({dict(self.items())!r})"

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())


def _normalize_field_id(field_id: str) -> str:
    return field_id.strip().strip("{}").lower()
