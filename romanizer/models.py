"""Data models for romanization schemas."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from romanizer.exceptions import ConfigurationError


class Schemas(str, Enum):
    """Bundled romanization schemas (value is the data file base name)."""

    ALA_LC = "ala_lc"
    ALA_LC_ALT = "ala_lc_alt"
    BGN_PCGN = "bgn_pcgn"
    BGN_PCGN_ALT = "bgn_pcgn_alt"
    BS_2979 = "bs_2979"
    BS_2979_ALT = "bs_2979_alt"
    GOST_779 = "gost_779"
    GOST_779_ALT = "gost_779_alt"
    GOST_7034 = "gost_7034"
    GOST_16876 = "gost_16876"
    GOST_16876_ALT = "gost_16876_alt"
    GOST_52290 = "gost_52290"
    GOST_52535 = "gost_52535"
    ICAO_DOC_9303 = "icao_doc_9303"
    ISO_9_1954 = "iso_9_1954"
    ISO_9_1968 = "iso_9_1968"
    ISO_9_1968_ALT = "iso_9_1968_alt"
    MOSMETRO = "mosmetro"
    MVD_310 = "mvd_310"
    MVD_310_FR = "mvd_310_fr"
    MVD_782 = "mvd_782"
    SCIENTIFIC = "scientific"
    TELEGRAM = "telegram"
    UNGEGN_1987 = "ungegn_1987"
    WIKIPEDIA = "wikipedia"
    YANDEX_MAPS = "yandex_maps"
    YANDEX_MONEY = "yandex_money"

    @classmethod
    def from_name(cls, selector: "Schemas | str") -> "Schemas":
        """
        Resolve a schema selector.

        Args:
            selector: Enum member, data file name ("ala_lc") or member name
                ("ALA_LC"); case-insensitive, "-" is accepted for "_"

        Returns:
            Matching enum member

        Raises:
            ConfigurationError: If the selector names no bundled schema
        """
        if isinstance(selector, cls):
            return selector

        key = str(selector).strip().lower().replace("-", "_")
        for member in cls:
            if member.value == key:
                return member

        raise ConfigurationError(f"Unknown schema: {selector!r}", code="unknown-schema")


def _lowercase_keys(mapping: Mapping[str, str]) -> MappingProxyType:
    return MappingProxyType({key.lower(): value for key, value in mapping.items()})


@dataclass(frozen=True, eq=False)
class Schema:
    """
    Immutable set of substitution tables for one romanization standard.

    Context keys are plain string concatenations: ``prev_mapping`` is keyed by
    previous + current character and ``next_mapping`` by current + next
    character. A one-character context key therefore matches at a word
    boundary (empty previous or next character).
    """

    name: str
    mapping: Mapping[str, str]
    prev_mapping: Mapping[str, str] = field(default_factory=dict)
    next_mapping: Mapping[str, str] = field(default_factory=dict)
    ending_mapping: Mapping[str, str] = field(default_factory=dict)
    description: str = ""
    url: str | None = None
    samples: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "mapping", _lowercase_keys(self.mapping))
        object.__setattr__(self, "prev_mapping", _lowercase_keys(self.prev_mapping))
        object.__setattr__(self, "next_mapping", _lowercase_keys(self.next_mapping))

        # Endings match exactly: lowercase and all-uppercase variants only
        endings = {key.lower(): value for key, value in self.ending_mapping.items()}
        endings.update({key.upper(): value.upper() for key, value in endings.items()})
        object.__setattr__(self, "ending_mapping", MappingProxyType(endings))

        object.__setattr__(
            self, "samples", tuple((source, expected) for source, expected in self.samples)
        )

    def lookup_letter(self, prev: str, curr: str, next_: str) -> str:
        """
        Translate one character given its neighbours.

        Args:
            prev: Previous character in the word, or "" at the word start
            curr: Character to translate
            next_: Next character in the word, or "" at the word end

        Returns:
            Replacement string; ``curr`` itself when no table knows it
        """
        key = curr.lower()
        letter = self.prev_mapping.get(prev.lower() + key)
        if letter is None:
            letter = self.next_mapping.get(key + next_.lower())
        if letter is None:
            letter = self.mapping.get(key)
        if letter is None:
            return curr
        if curr.isupper():
            return letter.capitalize()
        return letter

    def lookup_ending(self, ending: str) -> str | None:
        """Replacement for a word ending, or None if the ending is not special."""
        return self.ending_mapping.get(ending)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Schema":
        """Build a schema from its JSON definition layout."""
        return cls(
            name=data["name"],
            mapping=data["mapping"],
            prev_mapping=data.get("prev_mapping") or {},
            next_mapping=data.get("next_mapping") or {},
            ending_mapping=data.get("ending_mapping") or {},
            description=data.get("description", ""),
            url=data.get("url"),
            samples=tuple(tuple(sample) for sample in data.get("samples", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "url": self.url,
            "mapping": dict(self.mapping),
            "prev_mapping": dict(self.prev_mapping),
            "next_mapping": dict(self.next_mapping),
            "ending_mapping": {
                key: value for key, value in self.ending_mapping.items() if key == key.lower()
            },
            "samples": [list(sample) for sample in self.samples],
        }
