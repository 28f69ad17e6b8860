"""Extraction of `key=value` attributes embedded in a message."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_KV_RE = r'(?P<key>\w+)=(?P<value>"[^"]*"|\S+)'


def unquote(value: str) -> str:
    """Drop exactly one leading and one trailing double quote, if both present."""
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


@dataclass(frozen=True, slots=True)
class AttributeExtractor:
    """Collect `key=value` pairs from free text.

    Values are either a double-quoted span (may contain spaces and `=`) or a
    run of non-whitespace characters. Matches never overlap and a repeated key
    keeps its last value. No escape sequences are interpreted.
    """

    _re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_re", re.compile(_KV_RE))

    def extract(self, message: str) -> dict[str, str]:
        """Return the attributes found in message (possibly empty)."""
        out: dict[str, str] = {}
        for m in self._re.finditer(message):
            out[m.group("key")] = unquote(m.group("value"))
        return out
