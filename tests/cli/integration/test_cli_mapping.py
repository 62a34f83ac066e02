"""CLI mapping integration tests against the sample catalog."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from commerce_field_mapper.cli import cli
from openpyxl import load_workbook

SELLABLE_ITEM_TEMPLATE = "{93AF861A-B6F4-45BE-887D-D93D4B95B39D}"
VARIANT_TEMPLATE = "{C92E6CD7-7F14-46E7-BBF5-29CE31262EF4}"
CATEGORY_TEMPLATE = "{4C4B3D1E-0A2D-4A7E-9E0B-6B5F1C1C0001}"
FOLDER_TEMPLATE = "{334E2B54-F913-411D-B159-A7B16D65242A}"
SELLABLE_ITEM_ID = "{6E1C0C57-0000-4000-8000-000000000100}"
VARIANT_ID = "{6E1C0C57-0000-4000-8000-000000000101}"
CATEGORY_ID = "{6E1C0C57-0000-4000-8000-000000000010}"
HEADPHONES_CATEGORY_ID = "{6E1C0C57-0000-4000-8000-000000000011}"


def _samples() -> Path:
    return Path(__file__).resolve().parents[3] / "samples"


def _invoke_map(item_id: str, template_id: str, *extra: str):
    runner = CliRunner()
    return runner.invoke(
        cli,
        [
            "map",
            "--config",
            str(_samples() / "mapper-config.yaml"),
            "--repository",
            str(_samples() / "repository.yaml"),
            "--item-id",
            item_id,
            "--template-id",
            template_id,
            *extra,
        ],
    )


def test_map_command_prints_sellable_item_record() -> None:
    result = _invoke_map(SELLABLE_ITEM_ID, SELLABLE_ITEM_TEMPLATE)

    assert result.exit_code == 0, result.output
    record = json.loads(result.output)
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000201}"] == "Closed-back studio headphones"
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000203}"] == HEADPHONES_CATEGORY_ID
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000204}"] == "Color|Size"
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000205}"] == "Springfield, 00000"
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000206}"] == "Entity-SellableItem-6042568"
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000207}"] == "Headphones"
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000208}"] == "1"
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000209}"] == "20240305T143000Z"
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000210}"] == "Two years"
    assert record["{A4F985D9-98B3-4B52-AAAF-4344F6E747C6}"] == (
        "{adafe57a-f4c2-cfc4-dc55-64d50614e4bc}"
    )
    assert record["{3E431DE1-525E-47A3-B6B0-1CCBEC3A8C98}"] == (
        "{b1e65be0-24dd-c777-ffa6-a132b9d91d63}"
    )
    assert record["{B5E02AD9-D56F-4C41-A065-A133DB87BDEB}"] == "Studio Headphones"
    assert record["{BADD9CF9-53E0-4D0C-BCC0-2D784C282F6A}"] == "sitecore\\merchandiser"


def test_map_command_resolves_variation_items() -> None:
    result = _invoke_map(VARIANT_ID, VARIANT_TEMPLATE)

    assert result.exit_code == 0, result.output
    record = json.loads(result.output)
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000301}"] == "Black"
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000302}"] == "Closed-back studio headphones"
    assert record["{B5E02AD9-D56F-4C41-A065-A133DB87BDEB}"] == "Studio Headphones Black"
    assert "{A4F985D9-98B3-4B52-AAAF-4344F6E747C6}" not in record


def test_map_command_expands_category_paths() -> None:
    result = _invoke_map(CATEGORY_ID, CATEGORY_TEMPLATE)

    assert result.exit_code == 0, result.output
    record = json.loads(result.output)
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000102}"] == HEADPHONES_CATEGORY_ID
    assert record["{2F6A1D8E-0C31-4C8B-9F41-000000000103}"] == (
        "{6E1C0C57-0000-4000-8000-000000000001}"
    )
    assert record["{5DD74568-4D4B-44C1-B513-0AF5F4CDA34F}"] == "sitecore\\catalogadmin"
    assert record["{BADD9CF9-53E0-4D0C-BCC0-2D784C282F6A}"] == "sitecore\\catalogadmin"


def test_map_command_reports_not_applicable_items() -> None:
    result = _invoke_map(CATEGORY_ID, FOLDER_TEMPLATE)

    assert result.exit_code == 1
    assert "not applicable" in str(result.exception)


def test_map_command_reports_failed_items() -> None:
    result = _invoke_map("{00000000-0000-0000-0000-000000000000}", SELLABLE_ITEM_TEMPLATE)

    assert result.exit_code == 1
    assert "failed" in str(result.exception)
    assert "combined entity ID" in str(result.exception)


def test_map_command_writes_record_workbook(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "record.xlsx"

    result = _invoke_map(
        SELLABLE_ITEM_ID, SELLABLE_ITEM_TEMPLATE, "--output", str(output_path)
    )

    assert result.exit_code == 0, result.output
    assert Path(result.output.strip()) == output_path.resolve()
    workbook = load_workbook(output_path)
    rows = list(workbook["Fields"].iter_rows(values_only=True))
    assert rows[0] == ("FieldID", "FieldName", "Value")
    assert ("{2F6A1D8E-0C31-4C8B-9F41-000000000202}", "Brand", "Fabrikam") in rows
    info = dict(workbook["ItemInfo"].iter_rows(values_only=True))
    assert info["item_id"] == SELLABLE_ITEM_ID
    assert info["version"] == 1
