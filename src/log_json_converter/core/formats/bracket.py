"""Classifier for `LEVEL [MM-DD|HH:MM:SS] message` lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..models import ClassifiedLine, LogLevel


def _line_pattern(levels: tuple[LogLevel, ...]) -> re.Pattern[str]:
    names = "|".join(re.escape(lvl.value) for lvl in levels)
    return re.compile(rf"^(?P<level>{names})\s*\[(?P<ts>[^\]]+?)\]\s+(?P<msg>.*)$", re.DOTALL)


@dataclass(frozen=True, slots=True)
class LineClassifier:
    """Recognize the level, bracketed timestamp text and message of a line.

    A line that does not have the expected shape yields None; that is an
    ordinary outcome, not an error.
    """

    levels: tuple[LogLevel, ...] = tuple(LogLevel)
    _re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_re", _line_pattern(self.levels))

    def classify(self, line: str) -> ClassifiedLine | None:
        """Split a line into its parts, or return None when it doesn't match."""
        m = self._re.match(line.rstrip("\r\n"))
        if not m:
            return None
        return ClassifiedLine(
            level=LogLevel(m.group("level")),
            raw_timestamp=m.group("ts"),
            message=m.group("msg"),
        )
