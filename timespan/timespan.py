"""The Timespan value: calendar magnitudes plus a fine-grained duration."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jsonschema
from dateutil.relativedelta import relativedelta

from timespan.duration import format_duration, parse_duration

TIMESPAN_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Timespan",
    "type": "object",
    "properties": {
        "years": {"type": "integer"},
        "months": {"type": "integer"},
        "days": {"type": "integer"},
        "duration": {"type": "string", "minLength": 1},
    },
    "additionalProperties": False,
}


@dataclass(frozen=True)
class Timespan:
    """A span of time with wide and varying resolutions.

    Years, months and days are kept separately from the sub-day duration
    because their lengths depend on where in the calendar they are applied.
    "2 days" and "48 hours" are therefore different Timespans, even though
    they usually land on the same instant.

    Fields:
        years: Years in this Timespan
        months: Months in this Timespan
        days: Days in this Timespan (weeks are stored as multiples of 7 days)
        duration: A timedelta for finer resolutions
    """
    years: int = 0
    months: int = 0
    days: int = 0
    duration: timedelta = timedelta(0)

    @classmethod
    def parse(cls, text: str) -> Timespan:
        """Parse a Timespan string such as "1Y2M3W4D5h6m7s"."""
        # Import here to avoid circular dependencies
        from timespan.timespan_parser import parse_timespan

        return parse_timespan(text)

    def __str__(self) -> str:
        return render_timespan(self)

    def __add__(self, other: object) -> Timespan:
        if not isinstance(other, Timespan):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> datetime:
        if not isinstance(other, datetime):
            return NotImplemented
        return self.from_time(other)

    def __neg__(self) -> Timespan:
        return Timespan(
            years=-self.years,
            months=-self.months,
            days=-self.days,
            duration=-self.duration,
        )

    def __bool__(self) -> bool:
        return bool(self.years or self.months or self.days or self.duration)

    def from_time(self, t: datetime) -> datetime:
        """Return the point in time reached by applying this Timespan to ``t``.

        Years, months and days are applied on the calendar (month ends are
        clamped, e.g. Jan 31 + 1 month is Feb 28/29). The duration is then
        added as elapsed time, so for aware datetimes it spans any UTC
        offset change exactly.
        """
        shifted = t + relativedelta(years=self.years, months=self.months, days=self.days)
        if not self.duration:
            return shifted
        if shifted.tzinfo is None:
            return shifted + self.duration
        return (shifted.astimezone(timezone.utc) + self.duration).astimezone(shifted.tzinfo)

    def add(self, other: Timespan) -> Timespan:
        """Add each member of ``other`` to its counterpart in this Timespan.

        No combining, reduction or carry-over is performed: 8 months plus
        9 months is always 17 months, never 1 year 5 months.
        """
        return Timespan(
            years=self.years + other.years,
            months=self.months + other.months,
            days=self.days + other.days,
            duration=self.duration + other.duration,
        )

    def equal(self, other: Timespan) -> bool:
        """Return True if every member of both Timespans is identical."""
        return (
            self.duration == other.duration
            and self.days == other.days
            and self.months == other.months
            and self.years == other.years
        )

    def equal_at(self, other: Timespan, t: datetime) -> bool:
        """Return True if both Timespans, applied at ``t``, reach the same instant."""
        return _instant(self.from_time(t)) == _instant(other.from_time(t))

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for JSON serialization."""
        return {
            "years": self.years,
            "months": self.months,
            "days": self.days,
            "duration": format_duration(self.duration),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Timespan:
        """Build a Timespan from a dictionary produced by ``to_dict``.

        Raises:
            ValueError: If the dictionary does not match TIMESPAN_JSON_SCHEMA
                or holds an invalid duration literal
        """
        try:
            jsonschema.validate(instance=data, schema=TIMESPAN_JSON_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ValueError(f"Invalid Timespan: {e.message}") from e

        duration = timedelta(0)
        if "duration" in data:
            duration = parse_duration(data["duration"])

        return cls(
            years=int(data.get("years", 0)),
            months=int(data.get("months", 0)),
            days=int(data.get("days", 0)),
            duration=duration,
        )


def _instant(t: datetime) -> datetime:
    if t.tzinfo is None:
        return t
    return t.astimezone(timezone.utc)


def render_timespan(ts: Timespan) -> str:
    """Render a Timespan into the canonical string form.

    Zero members are omitted and an all-zero Timespan renders as "".
    Because a negative coefficient carries its sign forward when parsed, a
    positive member that follows a negative one is written with an explicit
    '+' so the output always parses back to an equal Timespan.

    Examples:
        >>> render_timespan(Timespan(years=2, months=2, days=14, duration=timedelta(hours=2, minutes=30)))
        '2Y2M14D2h30m0s'
        >>> render_timespan(Timespan(months=-2, days=5))
        '-2M+5D'
    """
    parts = []
    sign = 1

    for value, glyph in ((ts.years, "Y"), (ts.months, "M"), (ts.days, "D")):
        if value == 0:
            continue
        prefix = "+" if value > 0 and sign < 0 else ""
        parts.append(f"{prefix}{value}{glyph}")
        sign = -1 if value < 0 else 1

    if ts.duration:
        parts.append(format_duration(ts.duration))

    return "".join(parts)
