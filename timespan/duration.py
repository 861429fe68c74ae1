"""Sub-day duration literals such as "1h30m", "500ms" or "-2.5s".

These are the fine-grained tail of a Timespan string. Parsing is strict and
case-sensitive: "m" is minutes, "M" is not a duration unit at all, and no
whitespace is allowed.

Durations are represented as ``datetime.timedelta`` and therefore carry
microsecond resolution; nanosecond input is truncated toward zero.
"""

from __future__ import annotations

import re
from datetime import timedelta
from typing import Final

_NANOSECOND: Final = 1
_MICROSECOND: Final = 1000 * _NANOSECOND
_MILLISECOND: Final = 1000 * _MICROSECOND
_SECOND: Final = 1000 * _MILLISECOND
_MINUTE: Final = 60 * _SECOND
_HOUR: Final = 60 * _MINUTE

MICRO_SIGN: Final = "µ"
GREEK_MU: Final = "μ"

_UNIT_TO_NANOSECONDS: Final[dict[str, int]] = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    MICRO_SIGN + "s": _MICROSECOND,
    GREEK_MU + "s": _MICROSECOND,
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}

_COMPONENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<whole>[0-9]*)(?:\.(?P<frac>[0-9]*))?(?P<unit>[^0-9.]*)"
)


def parse_duration(text: str) -> timedelta:
    """Return the timedelta represented by a duration literal.

    Args:
        text: A signed sequence of number+unit pairs, e.g. "1h30m" or "-1.5s"

    Returns:
        The duration as a timedelta

    Raises:
        ValueError: If the text is not a valid duration literal

    Examples:
        >>> parse_duration("1h30m")
        datetime.timedelta(seconds=5400)
        >>> parse_duration("-500ms")
        datetime.timedelta(days=-1, seconds=86399, microseconds=500000)
    """
    if not text:
        raise ValueError(f"Invalid duration: {text!r}")

    body = text
    negative = False
    if body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]

    if body == "0":
        return timedelta(0)
    if not body:
        raise ValueError(f"Invalid duration: {text!r}")

    total_ns = 0
    cursor = 0

    while cursor < len(body):
        match = _COMPONENT_PATTERN.match(body, cursor)
        whole = match.group("whole")
        frac = match.group("frac") or ""
        unit = match.group("unit")

        if not whole and not frac:
            raise ValueError(f"Invalid duration: {text!r}")
        if not unit:
            raise ValueError(f"Missing unit in duration: {text!r}")

        scale = _UNIT_TO_NANOSECONDS.get(unit)
        if scale is None:
            raise ValueError(f"Unknown unit {unit!r} in duration: {text!r}")

        total_ns += int(whole or "0") * scale
        if frac:
            total_ns += int(frac) * scale // 10 ** len(frac)

        cursor = match.end()

    microseconds = total_ns // _MICROSECOND
    if negative:
        microseconds = -microseconds

    try:
        return timedelta(microseconds=microseconds)
    except OverflowError:
        raise ValueError(f"Duration out of range: {text!r}") from None


def _fraction(value: int, digits: int) -> str:
    if value == 0:
        return ""
    return "." + str(value).zfill(digits).rstrip("0")


def format_duration(duration: timedelta) -> str:
    """Render a timedelta in canonical duration-literal form.

    Hours are the largest unit; durations under one second use "ms" or "µs".

    Examples:
        >>> format_duration(timedelta(hours=2, minutes=30))
        '2h30m0s'
        >>> format_duration(timedelta(milliseconds=1.5))
        '1.5ms'
        >>> format_duration(timedelta(0))
        '0s'
    """
    microseconds = duration // timedelta(microseconds=1)
    if microseconds == 0:
        return "0s"

    sign = "-" if microseconds < 0 else ""
    microseconds = abs(microseconds)

    if microseconds < 1000:
        return f"{sign}{microseconds}{MICRO_SIGN}s"

    if microseconds < 1_000_000:
        return f"{sign}{microseconds // 1000}{_fraction(microseconds % 1000, 3)}ms"

    seconds, remainder = divmod(microseconds, 1_000_000)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)

    text = f"{seconds}{_fraction(remainder, 6)}s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text
