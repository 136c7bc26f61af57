"""Exceptions raised by the jsoncompare collaborators (loading and export).

The differ itself never raises on parsed JSON; only the CLI turns these
into exit statuses.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class JsonCompareError(Exception):
    """Base exception for jsoncompare errors."""

    pass


class InputError(JsonCompareError):
    """
    Raised when an input file cannot be used.

    Carries the offending path and, where there is one, the underlying
    reason (OS error text or parser message).
    """

    kind = "Input error"

    def __init__(self, path: Union[str, Path], reason: Optional[str] = None):
        super().__init__(str(path))
        self.path = str(path)
        self.reason = reason

    def __str__(self) -> str:
        if self.reason:
            return f"{self.kind}: {self.path}: {self.reason}"
        return f"{self.kind}: {self.path}"


class JsonFileNotFoundError(InputError):
    """Raised when a JSON input path does not exist."""

    kind = "File not found"


class JsonParseError(InputError):
    """Raised when a JSON input cannot be read or parsed."""

    kind = "Error reading JSON file"


class FilterFileError(InputError):
    """Raised when the filtered-fields file cannot be read."""

    kind = "Error reading filtered fields file"


class ExportError(JsonCompareError):
    """Raised when the spreadsheet cannot be written."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = str(path)
        self.reason = reason
