"""Exceptions raised by the converter.

Fatal errors derive from ConverterError and abort a run. TimestampError is the
only per-line error; the line processor folds it into the invalid count.
"""

from __future__ import annotations

from pathlib import Path


class ConverterError(Exception):
    """Base class for converter errors."""


class LogFileNotFoundError(ConverterError, FileNotFoundError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"File not found at path '{path}'")
        self.path = path


class NotALogFileError(ConverterError, IsADirectoryError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"The path '{path}' is not a file")
        self.path = path


class LogReadError(ConverterError, OSError):
    """The log file could not be opened or read to the end."""

    def __init__(self, path: Path, cause: str) -> None:
        super().__init__(f"Cannot read log file '{path}': {cause}")
        self.path = path


class TimestampError(ConverterError, ValueError):
    """Raw timestamp text could not be turned into one absolute local time."""
