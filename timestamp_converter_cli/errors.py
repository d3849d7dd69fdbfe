"""Exception hierarchy for timestamp conversion."""
from __future__ import annotations


class ConversionError(ValueError):
    """Base class for every error raised while converting a timestamp."""


class MissingInputError(ConversionError):
    def __init__(self) -> None:
        super().__init__("--input is required")


class UnsupportedFormatError(ConversionError):
    """Raised when a format identifier is not registered.

    ``direction`` is ``"in"`` for parser lookups and ``"out"`` for formatter
    lookups.
    """

    def __init__(self, format_name: str, direction: str = "in") -> None:
        super().__init__(f"Unsupported {direction}-format: {format_name}")
        self.format_name = format_name
        self.direction = direction


class FormatError(ConversionError):
    """Raised when input text does not match the selected format."""

    def __init__(self, message: str, format_name: str = "", text: str = "") -> None:
        super().__init__(message)
        self.format_name = format_name
        self.text = text


class TimestampRangeError(FormatError):
    """Raised when an instant outside years 0001-9999 is turned into a datetime."""
