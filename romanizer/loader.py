"""Loading of bundled romanization schemas."""

import json
import logging
from functools import lru_cache
from pathlib import Path

from romanizer.exceptions import ConfigurationError
from romanizer.models import Schema, Schemas
from romanizer.utils.io import read_json
from romanizer.utils.log import log_with_context
from romanizer.utils.schema import validate_definition


SCHEMA_DIR = Path(__file__).parent / "etc" / "schemas"

logger = logging.getLogger(__name__)


def schema_path(schema: Schemas, schema_dir: Path = SCHEMA_DIR) -> Path:
    """Path of the definition file for a schema."""
    return Path(schema_dir) / f"{schema.value}.json"


@lru_cache(maxsize=None)
def _load_schema(schema: Schemas, schema_dir: Path) -> Schema:
    path = schema_path(schema, schema_dir)
    if not path.exists():
        raise ConfigurationError(f"Schema data not found: {path}", code="schema-missing")

    try:
        data = read_json(path)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Schema data could not be read: {path}: {e}", code="schema-unreadable"
        ) from e

    errors = validate_definition(data)
    if errors:
        raise ConfigurationError(
            f"Schema data is malformed: {path}: {'; '.join(errors)}", code="schema-invalid"
        )

    loaded = Schema.from_dict(data)
    log_with_context(
        logger,
        "debug",
        f"Loaded schema {loaded.name}",
        schema=loaded.name,
        letters=len(loaded.mapping),
        prev_rules=len(loaded.prev_mapping),
        next_rules=len(loaded.next_mapping),
        endings=len(loaded.ending_mapping),
    )
    return loaded


def load_schema(selector: Schemas | str, schema_dir: Path | None = None) -> Schema:
    """
    Load a bundled schema, once per name and data directory.

    Args:
        selector: Schema enum member or name
        schema_dir: Directory holding definition files (default: bundled data)

    Returns:
        Immutable schema

    Raises:
        ConfigurationError: If the schema is unknown, missing or malformed
    """
    schema = Schemas.from_name(selector)
    return _load_schema(schema, Path(schema_dir) if schema_dir else SCHEMA_DIR)


def list_schemas() -> list[Schemas]:
    """All bundled schemas in declaration order."""
    return list(Schemas)


def clear_cache() -> None:
    """Forget loaded schemas."""
    _load_schema.cache_clear()
