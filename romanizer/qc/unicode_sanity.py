"""Unicode sanity checks for romanization schemas."""

import logging
from dataclasses import dataclass, field

from romanizer.models import Schema


# Modern Russian alphabet; every bundled schema must map each letter
RUSSIAN_ALPHABET = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"

# Cyrillic and Cyrillic Supplement blocks: U+0400 to U+052F
CYRILLIC_BLOCK_START = 0x0400
CYRILLIC_BLOCK_END = 0x052F


@dataclass
class CoverageResult:
    """Result of a schema coverage check."""

    schema: str
    missing_letters: list[str] = field(default_factory=list)
    cyrillic_outputs: dict[str, str] = field(default_factory=dict)

    @property
    def complete(self) -> bool:
        return not self.missing_letters


def is_cyrillic_codepoint(char: str) -> bool:
    """
    Check if a character is in the Cyrillic Unicode blocks.

    Args:
        char: Single character

    Returns:
        True if in Cyrillic or Cyrillic Supplement
    """
    if len(char) != 1:
        return False

    code = ord(char)
    return CYRILLIC_BLOCK_START <= code <= CYRILLIC_BLOCK_END


def find_cyrillic_chars(text: str) -> set[str]:
    """Cyrillic characters present in text."""
    return {char for char in text if is_cyrillic_codepoint(char)}


def check_schema_coverage(schema: Schema, logger: logging.Logger) -> CoverageResult:
    """
    Check that a schema maps the whole Russian alphabet to Latin.

    Args:
        schema: Schema to check
        logger: Logger instance

    Returns:
        Coverage result; letters whose replacement is still Cyrillic are
        listed separately from letters with no entry at all
    """
    result = CoverageResult(schema=schema.name)

    for letter in RUSSIAN_ALPHABET:
        replacement = schema.mapping.get(letter)
        if replacement is None:
            result.missing_letters.append(letter)
        elif find_cyrillic_chars(replacement):
            result.cyrillic_outputs[letter] = replacement

    if result.missing_letters:
        logger.warning(
            f"Schema {schema.name} has no entry for: {', '.join(result.missing_letters)}"
        )
    if result.cyrillic_outputs:
        logger.info(
            f"Schema {schema.name} keeps Cyrillic output for: {', '.join(result.cyrillic_outputs)}"
        )

    return result
