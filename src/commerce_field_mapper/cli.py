"""Command line interface entry point."""

from __future__ import annotations

import json
import sys

import click

from commerce_field_mapper.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from commerce_field_mapper.field_mapping import (
    FieldMappingService,
    ItemDescriptor,
    MappingStatus,
    VersionDescriptor,
)
from commerce_field_mapper.identifier_resolution import (
    RepositoryFixtureError,
    load_static_repository,
)
from commerce_field_mapper.results_writing import write_record_workbook


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="commerce-field-mapper")
def cli() -> None:
    """Commerce entity to content field mapping utility."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML mapping configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML mapping configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="map")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON mapping configuration file",
)
@click.option(
    "--repository",
    "repository_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON repository fixture with identifier mappings and entities",
)
@click.option("--item-id", required=True, help="Content item ID to map")
@click.option("--template-id", required=True, help="Template ID of the content item")
@click.option("--language", default="en", show_default=True, help="Content language")
@click.option(
    "--version", "version_number", default=1, show_default=True, type=click.IntRange(min=1)
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional workbook path; the record is printed as JSON otherwise",
)
def map_item(  # pylint: disable=too-many-arguments
    config_path: str,
    repository_path: str,
    item_id: str,
    template_id: str,
    language: str,
    version_number: int,
    output_path: str | None,
) -> None:
    """Map one content item's entity document to its field record."""
    try:
        configuration = load_configuration(config_path)
        repository = load_static_repository(repository_path)
    except (ConfigurationError, RepositoryFixtureError, OSError) as exc:
        raise CliError(str(exc)) from exc

    service = FieldMappingService(configuration.mapping, configuration.schemas, repository)
    item = ItemDescriptor(item_id=item_id, template_id=template_id)
    version = VersionDescriptor(language=language, number=version_number)
    outcome = service.map_item_fields(item, version)
    if not outcome.is_mapped or outcome.record is None:
        label = "not applicable" if outcome.status is MappingStatus.NOT_APPLICABLE else "failed"
        raise CliError(f"Mapping {label} for item {item_id}: {outcome.reason}")

    if output_path:
        try:
            written = write_record_workbook(
                outcome.record,
                configuration.schemas.get_schema(template_id),
                item,
                version,
                output_path,
            )
        except OSError as exc:
            raise CliError(str(exc)) from exc
        click.echo(str(written))
        return
    click.echo(json.dumps(outcome.record.to_dict(), ensure_ascii=False, indent=2))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
