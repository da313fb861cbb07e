"""CLI for SCM Metadata."""

import json
import sys

import click
import structlog

from scm_metadata.config.logging import configure_logging
from scm_metadata.core.exceptions import ScmMetadataError

logger = structlog.get_logger(__name__)


def _parse_rename(values: tuple[str, ...]) -> dict[str, str]:
    rename = {}
    for value in values:
        old, sep, new = value.partition("=")
        if not sep or not old:
            raise click.BadParameter(f"expected OLD=NEW, got {value!r}", param_hint="--rename")
        rename[old] = new
    return rename


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """SCM Metadata: properties describing a version-control checkout."""
    from scm_metadata.config.settings import get_settings

    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)


@cli.command()
@click.option("--directory", "-d", help="Directory to start the SCM search in")
@click.option("--connection", "-c", help="SCM connection string, e.g. scm:git:https://host/org/repo.git")
@click.option("--type", "scm_type", help="SCM type: auto, none or a provider name")
@click.option("--prefix", help="Prefix prepended to every property name")
@click.option("--notation", "-n", help="Remote path notations: NONE, ARRAY, PROPERTY")
@click.option("--short-revision-length", type=click.IntRange(min=0), help="Length of the short revision")
@click.option("--rename", "-r", multiple=True, help="Rename a (prefixed) property: OLD=NEW")
@click.option("--skip", is_flag=True, help="Do not compute anything")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object")
def properties(
    directory: str | None,
    connection: str | None,
    scm_type: str | None,
    prefix: str | None,
    notation: str | None,
    short_revision_length: int | None,
    rename: tuple[str, ...],
    skip: bool,
    as_json: bool,
) -> None:
    """Compute and print the SCM properties of a checkout.

    Options not given fall back to SCM_METADATA_* environment variables.
    """
    from scm_metadata.config.settings import Settings, get_settings
    from scm_metadata.properties.builder import sorted_properties
    from scm_metadata.services.metadata import MetadataService

    overrides = {
        "directory": directory,
        "connection": connection,
        "scm_type": scm_type,
        "prefix": prefix,
        "notation": notation,
        "short_revision_length": short_revision_length,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if skip:
        overrides["skip"] = True
    if rename:
        overrides["rename"] = _parse_rename(rename)

    settings = Settings(**overrides) if overrides else get_settings()

    try:
        result = MetadataService(settings).execute()
    except ScmMetadataError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    entries = sorted_properties(result)
    if as_json:
        click.echo(json.dumps(dict(entries), indent=2))
        return
    for name, value in entries:
        click.echo(f"{name}={value}")


@cli.command()
@click.argument("connection")
def url(connection: str) -> None:
    """Show how a connection string is parsed."""
    from scm_metadata.scm.connection import parse_connection_url
    from scm_metadata.scm.remote_path import extract_path
    from scm_metadata.scm.segments import chunk_path, negative_index

    try:
        parsed = parse_connection_url(connection)
    except ScmMetadataError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    path = extract_path(parsed.specific_part)
    segments = chunk_path(path)

    click.echo(f"Provider:   {parsed.provider}")
    click.echo(f"Delimiter:  {parsed.delimiter}")
    click.echo(f"URL:        {parsed.specific_part}")
    click.echo(f"Path:       {path}")
    click.echo(f"Segments:   {len(segments)}")
    for position, segment in enumerate(segments):
        click.echo(f"  [{position:>2}] [{negative_index(segments, position):>3}] {segment}")


if __name__ == "__main__":
    cli()
