"""Parser interface used by the file driver."""

from __future__ import annotations

from typing import Protocol

from ..models import LogRecord, RawLine


class LineParser(Protocol):
    """Parser interface: return LogRecord if the line is valid, else None."""

    def parse(self, raw: RawLine) -> LogRecord | None:
        """Parse one raw line into a LogRecord if recognized."""
        ...
