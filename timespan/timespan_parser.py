"""Parsing of Timespan strings.

A Timespan string is one or more periods (coefficient+magnitude pairs)
optionally followed by a duration literal:

    <timespan>    := <periods> | <duration> | <periods> <duration>
    <periods>     := <period> | <periods> <period>
    <period>      := <coefficient> MAGNITUDE | SIGN <coefficient> MAGNITUDE
    <coefficient> := DIGIT | <coefficient> DIGIT
    DIGIT         := '0' .. '9'
    SIGN          := '-' | '+'
    MAGNITUDE     := 'Y' | 'M' | 'W' | 'D' | 'd'
    <duration>    := {Anything accepted by timespan.duration.parse_duration}

Rules:
- Magnitudes appear in decreasing order (Y, M, W, D), each at most once.
- A negative sign is "sticky": once a coefficient is negative, later
  coefficients without an explicit sign are negative too. "-1Y2M" is
  {years: -1, months: -2}; "-1Y+2M" is {years: -1, months: 2}.
- Weeks are stored as multiples of 7 days.
- The duration, if present, ends the string.
- No whitespace is allowed anywhere.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from enum import Enum, auto

from timespan.coefficient import Coefficient
from timespan.duration import parse_duration
from timespan.errors import TimespanError, TimespanErrorType
from timespan.magnitude import MAGNITUDE_GLYPHS, MagnitudeSet
from timespan.timespan import Timespan, render_timespan

logger = logging.getLogger(__name__)

DAYS_PER_WEEK = 7


class ScanState(Enum):
    """States of a TimespanScanner."""
    SCANNING = auto()
    DURATION_MATCHED = auto()
    EXHAUSTED = auto()


class TimespanScanner:
    """Single-use, left-to-right scan over one Timespan string.

    At each position the scanner either matches the remainder of the string
    as a duration literal (which ends the scan) or consumes one character
    into the current coefficient, committing it to the magnitude registry
    when a magnitude letter arrives.
    """

    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.state = ScanState.SCANNING
        self.magnitudes = MagnitudeSet()
        self.coefficient = Coefficient()
        self.sign = 1
        self.valid = False
        self.duration = timedelta(0)

    def step(self) -> ScanState:
        """Advance the scan by one position and return the resulting state."""
        if self.state is not ScanState.SCANNING:
            return self.state

        if self.position >= len(self.text):
            self.state = ScanState.EXHAUSTED
        elif self._match_duration_suffix():
            self.state = ScanState.DURATION_MATCHED
        else:
            self._consume_character(self.text[self.position])
            self.position += 1

        return self.state

    def _match_duration_suffix(self) -> bool:
        try:
            self.duration = parse_duration(self.text[self.position:])
        except ValueError:
            return False
        self.valid = True
        return True

    def _consume_character(self, char: str) -> None:
        if self.coefficient.append_char(char):
            return

        value = self.coefficient.value(self.sign)
        self.magnitudes.set(char, value)

        self.sign = -1 if value < 0 else 1
        self.valid = True
        self.coefficient = Coefficient()

    def run(self) -> Timespan:
        """Scan to completion and build the resulting Timespan.

        Raises:
            TimespanError: On any malformed input (not yet annotated with
                the input string)
        """
        while self.step() is ScanState.SCANNING:
            pass

        if len(self.coefficient):
            raise TimespanError(
                TimespanErrorType.UNRECOGNIZED_MAGNITUDE,
                f"unrecognized magnitude: end of input after coefficient {str(self.coefficient)!r}",
            )

        if not self.valid:
            raise TimespanError(TimespanErrorType.NO_VALUE_DERIVED, "no value derived")

        return Timespan(
            years=self.magnitudes.get("Y"),
            months=self.magnitudes.get("M"),
            days=self.magnitudes.get("D") + self.magnitudes.get("W") * DAYS_PER_WEEK,
            duration=self.duration,
        )


def _parse_duration_only(text: str) -> Timespan:
    try:
        return Timespan(duration=parse_duration(text))
    except ValueError as e:
        raise TimespanError(TimespanErrorType.BAD_DURATION, str(e)) from e


def parse_timespan(text: str) -> Timespan:
    """Parse a Timespan string.

    Args:
        text: The string to parse, e.g. "1Y6M", "3W", "2D1h" or "90m"

    Returns:
        The parsed Timespan

    Raises:
        TimespanError: If the string is malformed; ``error_type`` identifies
            the failure and ``timespan`` holds the input string

    Examples:
        >>> parse_timespan("4W-1d")
        Timespan(years=0, months=0, days=27, duration=datetime.timedelta(0))
    """
    try:
        # Without any magnitude letters the whole string must be a duration.
        if text and not any(glyph in text for glyph in MAGNITUDE_GLYPHS):
            ts = _parse_duration_only(text)
        else:
            ts = TimespanScanner(text).run()
    except TimespanError as e:
        logger.debug(f"Failed to parse Timespan {text!r}: {e.error_type.name}: {e.message}")
        raise e.with_timespan(text)

    logger.debug(f"Parsed Timespan {text!r} as {ts!r}")
    return ts


__all__ = [
    "DAYS_PER_WEEK",
    "ScanState",
    "TimespanScanner",
    "parse_timespan",
    "render_timespan",
]
