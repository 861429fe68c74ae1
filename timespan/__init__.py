"""
Timespan

Calendar-aware spans of time, written as compact strings like "1Y6M" or
"1Y2M3W4D5h6m7s89ms", providing:
- Parsing of Timespan strings into Timespan values (years, months, days
  and a sub-day timedelta)
- Rendering back to the canonical string form
- Member-wise addition and application to a point in time

Unlike a plain timedelta, a Timespan keeps each calendar magnitude
separately, so "2D" and "48h" stay distinct until applied to a concrete
datetime.
"""

from timespan.duration import format_duration, parse_duration
from timespan.errors import TimespanError, TimespanErrorType
from timespan.timespan import TIMESPAN_JSON_SCHEMA, Timespan, render_timespan
from timespan.timespan_parser import parse_timespan

__all__ = [
    "TIMESPAN_JSON_SCHEMA",
    "Timespan",
    "TimespanError",
    "TimespanErrorType",
    "format_duration",
    "parse_duration",
    "parse_timespan",
    "render_timespan",
]
