"""Errors raised by the core pipeline."""

from __future__ import annotations

from typing import Optional


class AnalyzerError(ValueError):
    """Base class for every error the analyzer raises on bad input."""


class FormatError(AnalyzerError):
    """A line of the export does not have the expected delimited shape."""

    def __init__(self, message: str, row: Optional[int] = None) -> None:
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)
        self.row = row


class ParseError(AnalyzerError):
    """A field was present but its value could not be parsed."""

    def __init__(self, message: str, row: Optional[int] = None, value: Optional[str] = None) -> None:
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)
        self.row = row
        self.value = value


class ConfigError(AnalyzerError):
    """Configuration values are missing or out of range."""
