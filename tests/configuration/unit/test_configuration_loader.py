"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from commerce_field_mapper.configuration.loader import ConfigurationError, load_configuration
from commerce_field_mapper.configuration.runtime_settings import DEFAULT_SECURITY
from commerce_field_mapper.schema_management import FieldType

_TEMPLATES = """
templates:
  catalog_folder: "{FOLDER}"
  navigation_item: "{NAVIGATION}"
  sellable_item_variant: "{VARIANT}"
  product_variant: "{PRODUCT-VARIANT}"
  managed:
    - "{SELLABLE-ITEM}"
    - "{variant}"
"""


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        _TEMPLATES
        + """
schemas:
  "{SELLABLE-ITEM}":
    fields:
      - id: "{F1}"
        name: "Description"
        type: "Multi-Line Text"
      - id: "{F2}"
        name: "OnSale"
        type: "Checkbox"
      - id: "{F3}"
        name: "__Sortorder"
""",
    )

    configuration = load_configuration(config_path)

    templates = configuration.mapping.templates
    assert templates.is_managed("sellable-item")
    assert templates.is_managed("{VARIANT}")
    assert not templates.is_managed("{FOLDER}")
    assert templates.is_structural("{folder}")
    assert templates.is_structural("NAVIGATION")
    assert configuration.mapping.default_security == DEFAULT_SECURITY
    assert configuration.mapping.standard_fields.workflow == (
        "{A4F985D9-98B3-4B52-AAAF-4344F6E747C6}"
    )

    schema = configuration.schemas.get_schema("{sellable-item}")
    assert schema is not None
    assert [field.name for field in schema.fields] == ["Description", "OnSale", "__Sortorder"]
    assert [field.name for field in schema.data_fields()] == ["Description", "OnSale"]
    assert schema.field_named("OnSale").field_type is FieldType.CHECKBOX


def test_loads_json_configuration_with_overrides(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps(
            {
                "templates": {
                    "catalog_folder": "{FOLDER}",
                    "navigation_item": "{NAVIGATION}",
                    "sellable_item_variant": "{VARIANT}",
                    "product_variant": "{PRODUCT-VARIANT}",
                    "managed": "{SELLABLE-ITEM}",
                },
                "standard_fields": {"display_name": "{CUSTOM-DISPLAY-NAME}"},
                "security": {"default_acl": "ar|Editors|pe|+item:write|"},
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.mapping.templates.managed_template_ids == ("{SELLABLE-ITEM}",)
    assert configuration.mapping.standard_fields.display_name == "{CUSTOM-DISPLAY-NAME}"
    assert configuration.mapping.standard_fields.created == (
        "{25BED78C-4957-4165-998A-CA1B52F67497}"
    )
    assert configuration.mapping.default_security == "ar|Editors|pe|+item:write|"
    assert len(configuration.schemas) == 0


def test_loads_sample_configuration() -> None:
    sample = Path(__file__).resolve().parents[3] / "samples" / "mapper-config.yaml"

    configuration = load_configuration(sample)

    variant = configuration.schemas.get_schema("{C92E6CD7-7F14-46E7-BBF5-29CE31262EF4}")
    assert variant is not None
    assert variant.inherits_from("{93af861a-b6f4-45be-887d-d93d4b95b39d}")
    assert len(configuration.schemas) == 3


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_missing_templates_section_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "schemas: {}\n")

    with pytest.raises(ConfigurationError, match="'templates' is required"):
        load_configuration(config_path)


def test_blank_template_id_raises(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        _TEMPLATES.replace('"{VARIANT}"', '"   "'),
    )

    with pytest.raises(ConfigurationError, match="sellable_item_variant must not be empty"):
        load_configuration(config_path)


def test_unknown_standard_field_raises(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        _TEMPLATES + 'standard_fields:\n  revision: "{REVISION}"\n',
    )

    with pytest.raises(ConfigurationError, match="Unknown standard_fields entries: revision"):
        load_configuration(config_path)


def test_schema_errors_surface_as_configuration_errors(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        _TEMPLATES
        + """
schemas:
  "{SELLABLE-ITEM}":
    fields:
      - id: "{F1}"
        name: "Description"
      - id: "{f1}"
        name: "Brand"
""",
    )

    with pytest.raises(ConfigurationError, match="Duplicate field id"):
        load_configuration(config_path)


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- just\n- a list\n")

    with pytest.raises(ConfigurationError, match="root must be a mapping"):
        load_configuration(config_path)
