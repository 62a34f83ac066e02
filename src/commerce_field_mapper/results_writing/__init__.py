"""Results writing exports."""

from .record_workbook_writer import (
    FIELD_COLUMNS,
    FIELDS_SHEET_NAME,
    ITEM_SHEET_NAME,
    write_record_workbook,
)

__all__ = [
    "FIELD_COLUMNS",
    "FIELDS_SHEET_NAME",
    "ITEM_SHEET_NAME",
    "write_record_workbook",
]
