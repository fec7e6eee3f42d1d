"""
Exception hierarchy for the romanizer.

Translation itself never raises; everything here signals a problem with
configuration or bundled data, detected before the first translation.
"""


class RomanizerError(Exception):
    """Base exception for all romanizer errors."""

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(RomanizerError):
    """Schema or settings cannot be materialized (unknown, missing or corrupt data)."""

    pass
