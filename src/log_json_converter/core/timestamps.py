"""Timestamp reconstruction.

Log lines carry `MM-DD|HH:MM:SS[.fff]` only. The caller supplies the year, and
the result is attributed to a local zone. Local times that fall into a
daylight-saving gap or overlap are rejected rather than resolved to an
arbitrary offset.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from dateutil import tz

from .errors import TimestampError

_RAW_PATTERN = r"^(?P<md>\d{2}-\d{2})\|(?P<hms>\d{2}:\d{2}:\d{2})(?:\.(?P<frac>\d{1,9}))?$"

# Year is prepended with '-' so the full text reads YYYY-MM-DD|HH:MM:SS.
_FULL_FORMAT = "%Y-%m-%d|%H:%M:%S"


def _fraction_to_micros(frac: str | None) -> int:
    """Convert fractional-second digits into microseconds (truncating past 6 digits)."""
    if not frac:
        return 0
    return int(frac[:6].ljust(6, "0"))


def format_timestamp(ts: datetime) -> str:
    """ISO-8601 with offset, using the shortest of s/ms/us precision that is exact."""
    if ts.microsecond == 0:
        timespec = "seconds"
    elif ts.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return ts.isoformat(timespec=timespec)


@dataclass(frozen=True, slots=True)
class TimestampReconstructor:
    """Combine raw timestamp text with a year and attach the zone offset.

    The reconstructor never looks up the current time; year is always an
    explicit argument.
    """

    zone: tzinfo = field(default_factory=tz.tzlocal)
    _re: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_re", re.compile(_RAW_PATTERN))

    def reconstruct(self, raw: str, year: int) -> datetime:
        """Return an aware datetime for raw text in the given year.

        Raises TimestampError when the text has the wrong shape, names an
        impossible date or time, or is not exactly one local time in `zone`.
        """
        m = self._re.match(raw)
        if not m:
            raise TimestampError(f"unexpected timestamp shape: {raw!r}")
        if not 1 <= year <= 9999:
            raise TimestampError(f"year out of range: {year}")

        full = f"{year:04d}-{m.group('md')}|{m.group('hms')}"
        try:
            naive = datetime.strptime(full, _FULL_FORMAT)
        except ValueError as e:
            raise TimestampError(f"invalid date/time {full!r}: {e}") from e
        naive = naive.replace(microsecond=_fraction_to_micros(m.group("frac")))

        if not tz.datetime_exists(naive, tz=self.zone):
            raise TimestampError(f"nonexistent local time {naive.isoformat()}")
        if tz.datetime_ambiguous(naive, tz=self.zone):
            raise TimestampError(f"ambiguous local time {naive.isoformat()}")

        return naive.replace(tzinfo=self.zone)
