from __future__ import annotations

from collections.abc import Callable
from datetime import tzinfo
from pathlib import Path

import pytest
from dateutil import tz

SAMPLE_LINES = [
    'INFO [03-15|14:22:05.123] user=alice action="log in" status=ok',
    "garbage text no structure",
    "WARN [03-15|14:22:06] disk usage high pct=91",
    "ERROR [02-30|10:00:00] impossible date",
    "DEBUG [03-15|14:22:07.5] cache miss key=user:42 key=user:43",
]


@pytest.fixture
def write_log() -> Callable[[Path, list[str]], None]:
    def _write(path: Path, lines: list[str]) -> None:
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    return _write


@pytest.fixture
def sample_log(tmp_path: Path, write_log) -> Path:
    path = tmp_path / "app.log"
    write_log(path, SAMPLE_LINES)
    return path


@pytest.fixture
def utc() -> tzinfo:
    return tz.UTC


@pytest.fixture
def eastern() -> tzinfo:
    # US Eastern rules: DST from the 2nd Sunday of March to the 1st Sunday of November.
    return tz.tzstr("EST5EDT,M3.2.0,M11.1.0")
