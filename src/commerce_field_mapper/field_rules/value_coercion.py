"""Coercion of composer property values into field representations."""

from __future__ import annotations

from datetime import UTC, datetime

from commerce_field_mapper.schema_management import FieldType

ISO_DATE_FORMAT = "%Y%m%dT%H%M%S"
CHECKED = "1"
UNCHECKED = "0"

_FALLBACK_DATE_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
    "%Y-%m-%d %H:%M:%S",
)


def to_checkbox_value(raw: str | None) -> str:
    """Only the literal `true` checks the box."""
    return CHECKED if raw == "true" else UNCHECKED


def parse_date(raw: str) -> datetime | None:
    text = raw.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for date_format in _FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, date_format)
        except ValueError:
            continue
    return None


def to_iso_date(value: datetime) -> str:
    """Render the repository's canonical date value; aware values are stored as UTC."""
    if value.tzinfo is None:
        return value.strftime(ISO_DATE_FORMAT)
    return value.astimezone(UTC).strftime(ISO_DATE_FORMAT) + "Z"


def normalize_date_string(raw: str | None) -> str | None:
    """Return `raw` as a canonical date, or None when it is not a recognizable date."""
    if raw is None:
        return None
    parsed = parse_date(raw)
    return to_iso_date(parsed) if parsed is not None else None


def coerce_field_value(field_type: FieldType, raw: str | None) -> str | None:
    """Coerce a raw string for a field of the given type; None means no value."""
    if field_type is FieldType.CHECKBOX:
        return to_checkbox_value(raw)
    if field_type is FieldType.DATETIME:
        return normalize_date_string(raw)
    return raw
