"""Core data models for log conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class LogLevel(str, Enum):
    """Closed set of severity tags a log line may start with."""

    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    DEBUG = "DEBUG"
    TRACE = "TRACE"


@dataclass(frozen=True, slots=True)
class RawLine:
    """One physical line from the source file (1-based line number + byte length)."""

    line_no: int
    text: str
    byte_len: int


@dataclass(frozen=True, slots=True)
class ClassifiedLine:
    """A line that matched the `LEVEL [timestamp] message` shape."""

    level: LogLevel
    raw_timestamp: str
    message: str


@dataclass(frozen=True, slots=True)
class LogRecord:
    """Structured result of a fully parsed line."""

    level: LogLevel
    timestamp: datetime  # always timezone-aware
    message: str  # original message, attributes left in place
    attributes: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Counters for a finished run."""

    total: int
    valid: int
    year: int

    @property
    def invalid(self) -> int:
        return self.total - self.valid

    @property
    def invalid_percent(self) -> float:
        if self.total == 0:
            return 0.0
        return self.invalid / self.total * 100.0
