"""Log file reading and conversion driver.

This module is the main integration point: it validates the input path,
reads the file line by line and runs each line through a parser, reporting
records and byte progress to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import aiofiles

from .errors import LogFileNotFoundError, LogReadError, NotALogFileError
from .formats import LineParser
from .models import LogRecord, RawLine, RunSummary
from .processor import LineProcessor

logger = logging.getLogger(__name__)

RecordSink = Callable[[LogRecord], None]
ProgressSink = Callable[[int, int], None]


def check_log_path(log_path: str | Path) -> int:
    """Validate that log_path names a regular file and return its size in bytes."""
    path = Path(log_path)
    if not path.exists():
        raise LogFileNotFoundError(path)
    if not path.is_file():
        raise NotALogFileError(path)
    try:
        return path.stat().st_size
    except OSError as e:
        raise LogReadError(path, e.strerror or str(e)) from e


async def iter_raw_lines(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> AsyncIterator[RawLine]:
    """Yield RawLine objects in file order.

    The file is read in binary mode so byte_len counts the bytes consumed,
    terminator included. Open, read and decode failures raise LogReadError.
    """
    path = Path(log_path)
    try:
        async with aiofiles.open(path, mode="rb") as f:
            logger.info("Successfully opened the log file %s", path)
            line_no = 0
            async for chunk in f:
                line_no += 1
                try:
                    text = chunk.decode(encoding, errors=decode_errors)
                except UnicodeDecodeError as e:
                    raise LogReadError(path, f"line {line_no}: {e}") from e
                yield RawLine(line_no=line_no, text=text.rstrip("\r\n"), byte_len=len(chunk))
    except LogReadError:
        raise
    except OSError as e:
        raise LogReadError(path, e.strerror or str(e)) from e


async def iter_records(
    log_path: str | Path,
    *,
    parser: LineParser,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> AsyncIterator[LogRecord]:
    """Yield parsed records in source order, skipping invalid lines."""
    check_log_path(log_path)
    async for raw in iter_raw_lines(log_path, encoding=encoding, decode_errors=decode_errors):
        record = parser.parse(raw)
        if record is not None:
            yield record


async def get_records(log_path: str | Path, **iter_kwargs) -> list[LogRecord]:
    """Collect iter_records into a list."""
    return [record async for record in iter_records(log_path, **iter_kwargs)]


async def convert_log(
    log_path: str | Path,
    *,
    processor: LineProcessor,
    on_record: RecordSink,
    on_progress: ProgressSink | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
) -> RunSummary:
    """Convert every line of a log file and return the run counters.

    on_record is called once per valid record, in source order.
    on_progress(consumed, total) is called after every line.
    """
    path = Path(log_path)
    size = check_log_path(path)
    logger.info("Processing log file at path: %s", path)

    total = 0
    valid = 0
    consumed = 0
    async for raw in iter_raw_lines(path, encoding=encoding, decode_errors=decode_errors):
        total += 1
        consumed += raw.byte_len
        record = processor.parse(raw)
        if record is not None:
            valid += 1
            on_record(record)
        if on_progress is not None:
            on_progress(consumed, size)

    return RunSummary(total=total, valid=valid, year=processor.year)
