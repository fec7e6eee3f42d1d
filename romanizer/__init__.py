"""
Cyrillic to Latin romanization with selectable standard schemas.

Example:
    >>> from romanizer import Schemas, Translator
    >>> Translator(Schemas.WIKIPEDIA).translate("Йошкар-Ола")
    'Yoshkar-Ola'
"""

from romanizer.exceptions import ConfigurationError, RomanizerError
from romanizer.loader import list_schemas, load_schema
from romanizer.models import Schema, Schemas
from romanizer.normalize.transliteration import Translator, translate


__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "RomanizerError",
    "Schema",
    "Schemas",
    "Translator",
    "list_schemas",
    "load_schema",
    "translate",
]
