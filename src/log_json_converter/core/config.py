"""Run configuration and environment overrides."""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

DECODE_ERROR_MODES = ("strict", "replace", "ignore")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True, slots=True)
class ConverterConfig:
    year: int
    encoding: str = "utf-8"
    decode_errors: str = "strict"
    show_progress: bool = True
    log_level: str = "INFO"


def _parse_year(value: str, *, source: str) -> int:
    try:
        year = int(value)
    except ValueError as exc:
        raise ValueError(f"{source} must be an integer") from exc
    if not 1 <= year <= 9999:
        raise ValueError(f"{source} must be between 1 and 9999")
    return year


def resolve_config(
    *,
    year: int | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "strict",
    show_progress: bool = True,
    log_level: str | None = None,
    env: Mapping[str, str] | None = None,
    now: datetime | None = None,
) -> ConverterConfig:
    """Build the run config: explicit arguments, then environment, then defaults.

    When no year is given anywhere, the current calendar year is used.
    """
    env = os.environ if env is None else env

    if year is not None:
        year = _parse_year(str(year), source="year")
    elif env.get("LOG_JSON_YEAR"):
        year = _parse_year(env["LOG_JSON_YEAR"], source="LOG_JSON_YEAR")
    else:
        year = (now or datetime.now()).year

    if decode_errors not in DECODE_ERROR_MODES:
        raise ValueError(f"decode_errors must be one of: {', '.join(DECODE_ERROR_MODES)}")

    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ValueError(f"encoding '{encoding}' is unknown") from exc

    if env.get("LOG_JSON_NO_PROGRESS", "") not in ("", "0"):
        show_progress = False

    level_name = (log_level or env.get("LOG_JSON_LOG_LEVEL") or "INFO").upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"log level must be one of: {', '.join(LOG_LEVELS)}")

    return ConverterConfig(
        year=year,
        encoding=encoding,
        decode_errors=decode_errors,
        show_progress=show_progress,
        log_level=level_name,
    )
