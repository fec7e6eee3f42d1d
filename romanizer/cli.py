"""Romanizer CLI - Main entry point."""

import json
import logging
import sys
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from romanizer.exceptions import ConfigurationError, RomanizerError
from romanizer.loader import list_schemas, load_schema, schema_path
from romanizer.models import Schemas
from romanizer.normalize.transliteration import Translator
from romanizer.qc.validate_schema import validate_definition_file
from romanizer.utils.io import write_text
from romanizer.utils.log import setup_logging
from romanizer.utils.parallel import map_parallel_ordered


PACKAGE_DIR = Path(__file__).parent
DEFAULT_SETTINGS_PATH = PACKAGE_DIR / "etc" / "settings.yaml"

SCHEMA_NAMES = [schema.value for schema in Schemas]


def _abort(
    logger: logging.Logger, action: str, error: Exception, traceback: bool = False
) -> NoReturn:
    logger.error(f"{action} failed: {error}", exc_info=traceback)
    click.echo(f"Error: {error}", err=True)
    sys.exit(1)


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """
    Load settings.yaml.

    Args:
        path: Settings file (default: bundled etc/settings.yaml)

    Returns:
        Settings dictionary

    Raises:
        ConfigurationError: If the file does not exist
    """
    settings_path = Path(path) if path else DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        raise ConfigurationError(
            f"Settings file not found: {settings_path}", code="settings-missing"
        )

    with settings_path.open(encoding="utf-8") as f:
        result: dict[str, Any] = yaml.safe_load(f) or {}
        return result


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Settings file (default: bundled settings.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings_path: Path | None) -> None:
    """Cyrillic to Latin romanization CLI."""
    try:
        settings = load_settings(settings_path)
    except (ConfigurationError, yaml.YAMLError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    log_settings = settings.get("logging") or {}
    log_level = "DEBUG" if verbose else log_settings.get("level", "WARNING")
    log_file = log_settings.get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_settings.get("format", "pretty"),
        log_file=Path(log_file) if log_file else None,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.command("translate")
@click.argument("text", required=False)
@click.option(
    "--schema",
    "-s",
    "schema_name",
    type=click.Choice(SCHEMA_NAMES, case_sensitive=False),
    help="Schema to use (default: translation.schema from settings)",
)
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.File("r", encoding="utf-8"),
    default="-",
    help="Read text from file (\"-\" for stdin, the default)",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Write result to file (default: stdout)",
)
@click.option("--workers", type=click.IntRange(min=1), help="Parallel workers for file input")
@click.pass_context
def translate_command(
    ctx: click.Context,
    text: str | None,
    schema_name: str | None,
    input_file: Any,
    output_path: Path | None,
    workers: int | None,
) -> None:
    """Transliterate TEXT, or every line of the input."""
    logger = ctx.obj["logger"]
    translation_settings = ctx.obj["settings"].get("translation") or {}

    schema_name = schema_name or translation_settings.get("schema", Schemas.WIKIPEDIA.value)
    workers = workers or translation_settings.get("workers", 1)

    try:
        translator = Translator(schema_name, logger)

        if text is not None:
            result = translator.translate(text)
            if output_path is None:
                click.echo(result)
                return
        else:
            lines = input_file.read().splitlines(keepends=True)
            logger.info(f"Translating {len(lines)} lines with {schema_name} ({workers} workers)")
            result = "".join(map_parallel_ordered(translator.translate, lines, max_workers=workers))
            if output_path is None:
                click.echo(result, nl=False)
                return

        write_text(output_path, result)
        logger.info(f"Wrote {len(result)} characters to {output_path}")

    except RomanizerError as e:
        _abort(logger, "Translation", e)
    except Exception as e:
        _abort(logger, "Translation", e, traceback=True)


@cli.group()
def schemas() -> None:
    """Inspect and check bundled schemas."""
    pass


@schemas.command("list")
@click.pass_context
def list_command(ctx: click.Context) -> None:
    """List available schemas."""
    logger = ctx.obj["logger"]

    try:
        for schema in list_schemas():
            click.echo(f"{schema.value:16s}  {load_schema(schema).description}")
    except RomanizerError as e:
        _abort(logger, "Listing schemas", e)


@schemas.command()
@click.argument("name", type=click.Choice(SCHEMA_NAMES, case_sensitive=False))
@click.pass_context
def show(ctx: click.Context, name: str) -> None:
    """Print the definition of schema NAME as JSON."""
    logger = ctx.obj["logger"]

    try:
        schema = load_schema(name)
    except RomanizerError as e:
        _abort(logger, "Loading schema", e)

    click.echo(json.dumps(schema.to_dict(), ensure_ascii=False, indent=2))


@schemas.command()
@click.option(
    "--schema",
    "-s",
    "schema_names",
    multiple=True,
    type=click.Choice(SCHEMA_NAMES, case_sensitive=False),
    help="Schema to check (repeatable, default: all)",
)
@click.pass_context
def check(ctx: click.Context, schema_names: tuple[str, ...]) -> None:
    """Validate schema definitions, samples and alphabet coverage."""
    logger = ctx.obj["logger"]

    selected = [Schemas.from_name(name) for name in schema_names] or list_schemas()
    failed = []

    for schema in tqdm(selected, desc="Checking schemas", unit="schema"):
        result = validate_definition_file(schema_path(schema), logger)

        if not result.valid:
            failed.append(schema.value)
            tqdm.write(f"  FAILED: {schema.value}")
            for error in result.errors:
                tqdm.write(f"    ERROR: {error}")

        for warning in result.warnings:
            tqdm.write(f"    WARNING: {schema.value}: {warning}")

    if failed:
        click.echo(f"{len(failed)}/{len(selected)} schemas failed: {', '.join(failed)}", err=True)
        sys.exit(1)

    click.echo(f"All {len(selected)} schema checks passed")


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
