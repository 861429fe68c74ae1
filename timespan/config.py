"""Configuration loading for the timespan command line tool."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_OUTPUT_FORMAT = "text"
_OUTPUT_FORMATS = ("text", "json")
_DEFAULT_UTC = True


@dataclass(frozen=True)
class TimespanConfig:
    log_level: str
    log_file: str | None
    output_format: str
    utc: bool


def _parse_bool(value: str | None, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("true", "1", "yes")


def _parse_log_level(value: str | None) -> str:
    level = (value or "").strip().upper()
    if not level or not isinstance(logging.getLevelName(level), int):
        return _DEFAULT_LOG_LEVEL
    return level


def load_config() -> TimespanConfig:
    """Load configuration from environment variables."""
    output_format = os.getenv("TIMESPAN_OUTPUT_FORMAT", _DEFAULT_OUTPUT_FORMAT).strip().lower()
    if output_format not in _OUTPUT_FORMATS:
        output_format = _DEFAULT_OUTPUT_FORMAT

    return TimespanConfig(
        log_level=_parse_log_level(os.getenv("TIMESPAN_LOG_LEVEL")),
        log_file=os.getenv("TIMESPAN_LOG_FILE", "").strip() or None,
        output_format=output_format,
        utc=_parse_bool(os.getenv("TIMESPAN_UTC"), _DEFAULT_UTC),
    )
