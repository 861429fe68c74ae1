#!/usr/bin/env python3
"""
Timespan command line tool

Parses, normalizes, sums and applies Timespan strings.

Usage:
    timespan parse TEXT [TEXT ...] [--json]
    timespan apply TEXT [--from ISO8601] [--json]
    timespan add TEXT TEXT [TEXT ...] [--json]

Timespans starting with a sign must follow "--", e.g. `timespan parse -- -1Y2M`.

Environment:
    TIMESPAN_LOG_LEVEL: Logging level (default WARNING)
    TIMESPAN_LOG_FILE: Also write logs to this file
    TIMESPAN_OUTPUT_FORMAT: "text" or "json" (default text)
    TIMESPAN_UTC: Use UTC for the default reference time (default true)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from functools import reduce

from timespan.config import TimespanConfig, load_config
from timespan.errors import TimespanError
from timespan.logging_setup import configure_logging
from timespan.timespan import Timespan
from timespan.timespan_parser import parse_timespan

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timespan",
        description="Parse and apply calendar-aware time spans such as '1Y2M3W4D5h6m7s'.",
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Emit JSON instead of text")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", parents=[common], help="Print the canonical form of each Timespan")
    parse_cmd.add_argument("texts", nargs="+", metavar="TEXT")

    apply_cmd = subparsers.add_parser("apply", parents=[common], help="Apply a Timespan to a point in time")
    apply_cmd.add_argument("text", metavar="TEXT")
    apply_cmd.add_argument(
        "--from",
        dest="start",
        type=datetime.fromisoformat,
        default=None,
        help="ISO 8601 reference time (default: now)",
    )

    add_cmd = subparsers.add_parser("add", parents=[common], help="Sum Timespans member by member")
    add_cmd.add_argument("texts", nargs="+", metavar="TEXT")

    return parser


def _now(config: TimespanConfig) -> datetime:
    if config.utc:
        return datetime.now(timezone.utc)
    return datetime.now().astimezone()


def _emit(payload: dict, text: str, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, ensure_ascii=False))
    else:
        print(text)


def _cmd_parse(args: argparse.Namespace, as_json: bool) -> None:
    for text in args.texts:
        ts = parse_timespan(text)
        _emit({"input": text, "timespan": str(ts), **ts.to_dict()}, str(ts), as_json)


def _cmd_apply(args: argparse.Namespace, as_json: bool, config: TimespanConfig) -> None:
    ts = parse_timespan(args.text)
    start = args.start if args.start is not None else _now(config)
    result = ts.from_time(start)
    logger.info(f"Applied {str(ts)!r} to {start.isoformat()}")
    _emit(
        {"timespan": str(ts), "from": start.isoformat(), "result": result.isoformat()},
        result.isoformat(),
        as_json,
    )


def _cmd_add(args: argparse.Namespace, as_json: bool) -> None:
    total = reduce(Timespan.add, (parse_timespan(text) for text in args.texts), Timespan())
    _emit({"timespan": str(total), **total.to_dict()}, str(total), as_json)


def main(argv: list[str] | None = None) -> int:
    config = load_config()
    configure_logging(config)

    args = build_parser().parse_args(argv)
    as_json = args.json or config.output_format == "json"

    try:
        if args.command == "parse":
            _cmd_parse(args, as_json)
        elif args.command == "apply":
            _cmd_apply(args, as_json, config)
        elif args.command == "add":
            _cmd_add(args, as_json)
    except TimespanError as e:
        logger.info(f"{e.error_type.name}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
