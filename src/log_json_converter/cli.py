"""Command-line entrypoint.

Records go to stdout as JSON lines; progress, logs and the summary go to stderr.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from tqdm import tqdm

from log_json_converter.core.config import (
    DECODE_ERROR_MODES,
    LOG_LEVELS,
    ConverterConfig,
    resolve_config,
)
from log_json_converter.core.errors import ConverterError
from log_json_converter.core.log_service import check_log_path, convert_log
from log_json_converter.core.models import LogRecord, RunSummary
from log_json_converter.core.output import format_summary, record_to_json
from log_json_converter.core.processor import LineProcessor

LOGGER = logging.getLogger(__name__)


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name)
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="log-json",
        description="Convert `LEVEL [MM-DD|HH:MM:SS] message` log lines into JSON records.",
    )
    p.add_argument("log_path", help="The path to the log file to be processed")
    p.add_argument(
        "--year",
        type=int,
        default=None,
        help="Year for the month/day timestamps (default: $LOG_JSON_YEAR or the current year)",
    )
    p.add_argument("--encoding", default="utf-8", help="Text encoding of the log file")
    p.add_argument(
        "--decode-errors",
        choices=DECODE_ERROR_MODES,
        default="strict",
        help="How to handle undecodable bytes (default: strict, which aborts the run)",
    )
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Diagnostic log level (default: $LOG_JSON_LOG_LEVEL or INFO)",
    )
    return p


async def _convert(path: Path, cfg: ConverterConfig, size: int) -> RunSummary:
    processor = LineProcessor.for_year(cfg.year)
    out = sys.stdout

    with tqdm(
        total=size,
        unit="B",
        unit_scale=True,
        unit_divisor=1024,
        desc="Processing",
        file=sys.stderr,
        disable=not cfg.show_progress,
    ) as bar:

        def on_record(record: LogRecord) -> None:
            out.write(record_to_json(record) + "\n")

        def on_progress(consumed: int, total: int) -> None:
            bar.update(consumed - bar.n)

        summary = await convert_log(
            path,
            processor=processor,
            on_record=on_record,
            on_progress=on_progress,
            encoding=cfg.encoding,
            decode_errors=cfg.decode_errors,
        )

    out.flush()
    return summary


def _run(args: argparse.Namespace) -> int:
    try:
        cfg = resolve_config(
            year=args.year,
            encoding=args.encoding,
            decode_errors=args.decode_errors,
            show_progress=not args.no_progress,
            log_level=args.log_level,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    _configure_logging(cfg.log_level)
    LOGGER.info("Using year %d", cfg.year)

    path = Path(args.log_path)
    try:
        size = check_log_path(path)
        if size == 0:
            print(f"Log file '{path}' is empty; nothing to process.", file=sys.stderr)
            summary = RunSummary(total=0, valid=0, year=cfg.year)
        else:
            summary = asyncio.run(_convert(path, cfg, size))
    except ConverterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_summary(summary), file=sys.stderr)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return _run(args)
    except KeyboardInterrupt:
        return 130
    except BrokenPipeError:
        # Stdout is closed; route the final flush to devnull.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        return 0


if __name__ == "__main__":
    raise SystemExit(main())
