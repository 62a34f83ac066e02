"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "mapper-config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Mapping configuration template for commerce-field-mapper.
# Replace every <REQUIRED> placeholder before running map.
# Uncomment and fill <OPTIONAL> entries only when your content repository needs them.

templates:
  # Templates whose fields stay native to the content repository.
  catalog_folder: "<REQUIRED>"
  navigation_item: "<REQUIRED>"
  # Variation items carry a composite "parent|variation" catalog ID.
  sellable_item_variant: "<REQUIRED>"
  # Workflow fields are never mapped for this template.
  product_variant: "<REQUIRED>"
  # Items of these templates are served by the catalog mapping.
  managed:
    - "<REQUIRED>"

# standard_fields:
#   display_name: "<OPTIONAL>"
#   created: "<OPTIONAL>"
#   created_by: "<OPTIONAL>"
#   updated: "<OPTIONAL>"
#   updated_by: "<OPTIONAL>"
#   security: "<OPTIONAL>"
#   workflow: "<OPTIONAL>"
#   default_workflow: "<OPTIONAL>"
#   workflow_state: "<OPTIONAL>"

# security:
#   default_acl: "<OPTIONAL>"

schemas:
  # One entry per managed template, fields in template order.
  "<REQUIRED>":
    # base_templates:
    #   - "<OPTIONAL>"
    fields:
      - id: "<REQUIRED>"
        name: "<REQUIRED>"
        # Checkbox, Datetime, Single-Line Text, ...
        # type: "<OPTIONAL>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML mapping configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder mapping configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Mapping configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
