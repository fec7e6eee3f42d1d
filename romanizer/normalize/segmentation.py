"""Word segmentation utilities."""

from collections.abc import Iterator
from typing import NamedTuple

import regex


# Word characters follow Unicode rules: letters, marks, decimal digits and
# connector punctuation. Every boundary between a word run and a separator
# run is a word boundary.
WORD_OR_SEPARATOR_RUN = regex.compile(r"(\w+)|\W+")


class Segment(NamedTuple):
    """A run of text between two word boundaries."""

    text: str
    is_word: bool


def iter_segments(text: str) -> Iterator[Segment]:
    """
    Split text at word boundaries.

    Concatenating the text of all yielded segments gives back the input.

    Args:
        text: Input text

    Yields:
        Word and separator segments in original order
    """
    for match in WORD_OR_SEPARATOR_RUN.finditer(text):
        yield Segment(match.group(), match.group(1) is not None)


def split_words(text: str) -> list[str]:
    """
    Extract the words of a text, dropping separators.

    Args:
        text: Input text

    Returns:
        List of words
    """
    return [segment.text for segment in iter_segments(text) if segment.is_word]
