"""Field record workbook writer service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from commerce_field_mapper.field_mapping import ItemDescriptor, VersionDescriptor
from commerce_field_mapper.schema_management import TemplateSchema

FIELDS_SHEET_NAME = "Fields"
ITEM_SHEET_NAME = "ItemInfo"
FIELD_COLUMNS: tuple[str, ...] = ("FieldID", "FieldName", "Value")


def write_record_workbook(
    record: Mapping[str, str],
    schema: TemplateSchema | None,
    item: ItemDescriptor,
    version: VersionDescriptor,
    output_path: Path | str,
) -> Path:
    """Write one mapped field record, in record order, with schema field names."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = FIELDS_SHEET_NAME

    names = _field_names(schema)
    for column_index, header in enumerate(FIELD_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=header).style = "Headline 3"
    for row_index, (field_id, value) in enumerate(record.items(), start=2):
        sheet.cell(row=row_index, column=1, value=field_id)
        sheet.cell(row=row_index, column=2, value=names.get(_normalize(field_id)))
        sheet.cell(row=row_index, column=3, value=value)
    for column_index, width in enumerate((42, 28, 60), start=1):
        sheet.column_dimensions[get_column_letter(column_index)].width = width

    _write_item_sheet(workbook, item, version, len(record))

    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(destination)
    return destination.resolve()


def _write_item_sheet(
    workbook: Workbook, item: ItemDescriptor, version: VersionDescriptor, field_count: int
) -> None:
    sheet = workbook.create_sheet(ITEM_SHEET_NAME)
    entries = [
        ("item_id", item.item_id),
        ("template_id", item.template_id),
        ("language", version.language),
        ("version", version.number),
        ("field_count", field_count),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)


def _field_names(schema: TemplateSchema | None) -> dict[str, str]:
    if schema is None:
        return {}
    return {_normalize(field.field_id): field.name for field in schema.fields}


def _normalize(field_id: str) -> str:
    return field_id.strip().strip("{}").lower()
