"""Quality checks for bundled schema definitions."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from romanizer.loader import SCHEMA_DIR, schema_path
from romanizer.models import Schema, Schemas
from romanizer.normalize.transliteration import Translator
from romanizer.qc.unicode_sanity import check_schema_coverage
from romanizer.utils.io import read_json
from romanizer.utils.schema import validate_definition


@dataclass
class ValidationResult:
    """Outcome of checking one definition file."""

    valid: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def validate_samples(schema: Schema, logger: logging.Logger) -> list[str]:
    """
    Run the samples shipped with a schema through the engine.

    Args:
        schema: Schema to check
        logger: Logger instance

    Returns:
        One message per sample whose output differs from the expected text
    """
    translator = Translator(schema, logger)
    mismatches = []

    for idx, (source, expected) in enumerate(schema.samples):
        actual = translator.translate(source)
        if actual != expected:
            mismatches.append(f"Sample {idx}: expected {expected!r}, got {actual!r}")

    return mismatches


def validate_definition_file(
    definition_path: Path,
    logger: logging.Logger,
) -> ValidationResult:
    """
    Check one definition file.

    Structural problems (missing file, broken JSON, JSON Schema violations)
    stop the check early. A parsed definition is then checked for its name,
    its samples and its alphabet coverage.

    Args:
        definition_path: Path to the JSON definition
        logger: Logger instance

    Returns:
        Validation result
    """
    if not definition_path.exists():
        return ValidationResult(False, [f"Definition file not found: {definition_path}"])

    try:
        data = read_json(definition_path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        return ValidationResult(False, [f"Definition file unreadable: {definition_path}: {e}"])

    structural = validate_definition(data)
    if structural:
        return ValidationResult(False, structural)

    schema = Schema.from_dict(data)
    result = ValidationResult(True)

    if schema.name != definition_path.stem:
        result.errors.append(
            f"Schema name {schema.name!r} does not match file name {definition_path.name}"
        )

    if not schema.samples:
        result.warnings.append(f"Schema {schema.name} ships no samples")
    result.errors.extend(validate_samples(schema, logger))

    coverage = check_schema_coverage(schema, logger)
    if coverage.missing_letters:
        result.errors.append(f"No entry for letters: {', '.join(coverage.missing_letters)}")
    for letter, replacement in coverage.cyrillic_outputs.items():
        result.warnings.append(f"Letter {letter!r} maps to Cyrillic output {replacement!r}")

    result.valid = not result.errors
    return result


def validate_bundled_schemas(
    logger: logging.Logger,
    schema_dir: Path = SCHEMA_DIR,
    schemas: list[Schemas] | None = None,
) -> dict[Schemas, ValidationResult]:
    """
    Check the definition files of bundled schemas.

    Args:
        logger: Logger instance
        schema_dir: Directory holding definition files
        schemas: Schemas to check (default: all)

    Returns:
        Validation result per schema, in the order checked
    """
    results = {}
    for schema in schemas or list(Schemas):
        path = schema_path(schema, schema_dir)
        logger.info(f"Checking schema definition: {path}")
        results[schema] = validate_definition_file(path, logger)

    failed = [schema.value for schema, result in results.items() if not result.valid]
    if failed:
        logger.warning(
            f"{len(failed)}/{len(results)} schema definitions failed validation: {', '.join(failed)}"
        )

    return results
