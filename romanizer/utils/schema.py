"""JSON Schema checks for romanization definition files."""

from functools import lru_cache
from pathlib import Path
from typing import Any, cast

from jsonschema import Draft7Validator, ValidationError

from romanizer.utils.io import read_json


DEFINITION_SCHEMA_PATH = Path(__file__).parent.parent / "etc" / "definition.schema.json"


@lru_cache(maxsize=1)
def load_definition_schema(schema_path: Path = DEFINITION_SCHEMA_PATH) -> dict[str, Any]:
    """
    Load the JSON schema that definition files follow.

    Args:
        schema_path: Path to schema file

    Returns:
        Parsed schema dict
    """
    return cast(dict[str, Any], read_json(schema_path))


def _describe(error: ValidationError) -> str:
    location = ".".join(str(part) for part in error.absolute_path) or "root"
    return f"{location}: {error.message}"


def validate_against_schema(data: Any, schema: dict[str, Any]) -> list[str]:
    """
    Check data against a JSON schema.

    Args:
        data: Parsed JSON value
        schema: JSON schema

    Returns:
        Sorted "path: message" strings, empty if data is valid
    """
    return sorted(_describe(error) for error in Draft7Validator(schema).iter_errors(data))


def validate_definition(data: Any) -> list[str]:
    """Check a romanization definition against the bundled schema."""
    return validate_against_schema(data, load_definition_schema())
