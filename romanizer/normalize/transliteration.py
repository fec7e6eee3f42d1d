"""Cyrillic to Latin transliteration engine."""

import logging

from romanizer.loader import load_schema
from romanizer.models import Schema, Schemas
from romanizer.normalize.segmentation import iter_segments


WORD_ENDING_LENGTH = 2


def split_word(word: str) -> tuple[str, str]:
    """
    Split a word into stem and ending.

    Args:
        word: Input word

    Returns:
        Tuple of (stem, ending); ending is empty for words of
        WORD_ENDING_LENGTH characters or fewer
    """
    if len(word) > WORD_ENDING_LENGTH:
        return word[:-WORD_ENDING_LENGTH], word[-WORD_ENDING_LENGTH:]
    return word, ""


class Translator:
    """
    Transliterates Cyrillic text into Latin with one fixed schema.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(
        self,
        schema: Schemas | str | Schema,
        logger: logging.Logger | None = None,
    ):
        """
        Bind a translator to a schema.

        Args:
            schema: Schema enum member, schema name, or a ready Schema
            logger: Logger instance

        Raises:
            ConfigurationError: If a named schema cannot be loaded
        """
        self.logger = logger or logging.getLogger(__name__)
        if isinstance(schema, Schema):
            self.schema = schema
        else:
            self.schema = load_schema(schema)
        self.logger.debug(f"Translator bound to schema {self.schema.name}")

    def translate(self, text: str | None) -> str | None:
        """
        Transliterate text.

        Separators between words are copied unchanged.

        Args:
            text: Input text, or None

        Returns:
            Transliterated text, or None for None input
        """
        if text is None:
            return None

        translated = []
        for segment in iter_segments(text):
            if segment.is_word:
                translated.append(self.translate_word(segment.text))
            else:
                translated.append(segment.text)
        return "".join(translated)

    def translate_word(self, word: str) -> str:
        """Transliterate a single word, honouring special endings."""
        stem, ending = split_word(word)
        translated_ending = self.schema.lookup_ending(ending)
        if translated_ending is None:
            # Whole word, so the context window spans the stem/ending split
            return self.translate_letters(word)
        return self.translate_letters(stem) + translated_ending

    def translate_letters(self, word: str) -> str:
        """Transliterate a word letter by letter with a prev/curr/next window."""
        prev = ""
        translated = []
        for i in range(len(word)):
            curr = word[i]
            next_ = word[i + 1] if i < len(word) - 1 else ""
            translated.append(self.schema.lookup_letter(prev, curr, next_))
            prev = curr
        return "".join(translated)


def translate(text: str | None, schema: Schemas | str = Schemas.WIKIPEDIA) -> str | None:
    """
    Transliterate text with a bundled schema.

    Args:
        text: Input text, or None
        schema: Schema enum member or name

    Returns:
        Transliterated text, or None for None input
    """
    return Translator(schema).translate(text)
