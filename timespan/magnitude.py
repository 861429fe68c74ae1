"""Registry of the calendar magnitudes (year, month, week, day) seen in a Timespan."""

from __future__ import annotations

from dataclasses import dataclass

from timespan.errors import TimespanError, TimespanErrorType

# Most coarse to most fine; magnitudes must appear in this order.
MAGNITUDE_ORDER = "YMWD"

MAGNITUDE_LABELS = {
    "Y": "year",
    "M": "month",
    "W": "week",
    "D": "day",
}

# Lowercase spellings accepted in place of the canonical glyph.
MAGNITUDE_ALIASES = {
    "d": "D",
}

MAGNITUDE_GLYPHS = MAGNITUDE_ORDER + "".join(MAGNITUDE_ALIASES)


@dataclass
class Magnitude:
    """A single magnitude slot and whether it has been assigned."""
    label: str
    is_set: bool = False
    value: int = 0

    def set(self, value: int) -> None:
        self.value = value
        self.is_set = True


class MagnitudeSet:
    """Tracks the magnitudes assigned while parsing one Timespan string.

    Each glyph may be set once, and only while no magnitude at or after its
    position in ``order`` has been set.
    """

    def __init__(self, entries: dict[str, Magnitude] | None = None, order: str = MAGNITUDE_ORDER):
        if entries is None:
            entries = {glyph: Magnitude(label=label) for glyph, label in MAGNITUDE_LABELS.items()}
        self.entries = entries
        self.order = order

    def __repr__(self) -> str:
        return f"MagnitudeSet({self.entries!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MagnitudeSet):
            return NotImplemented
        return self.entries == other.entries

    def __getitem__(self, glyph: str) -> Magnitude:
        return self.entries[glyph]

    def get(self, glyph: str) -> int:
        """Return the value stored for ``glyph``, or 0 if it was never set."""
        glyph = MAGNITUDE_ALIASES.get(glyph, glyph)
        entry = self.entries.get(glyph)
        if entry is None:
            return 0
        return entry.value

    def set(self, glyph: str, value: int) -> None:
        """Assign ``value`` to the magnitude named by ``glyph``.

        Args:
            glyph: Magnitude letter ('Y', 'M', 'W', 'D' or 'd')
            value: The resolved coefficient

        Raises:
            TimespanError: UNRECOGNIZED_MAGNITUDE, INDETERMINATE_ORDER,
                MAGNITUDE_RESTATED or MAGNITUDE_OUT_OF_ORDER
        """
        glyph = MAGNITUDE_ALIASES.get(glyph, glyph)

        entry = self.entries.get(glyph)
        if entry is None:
            raise TimespanError(
                TimespanErrorType.UNRECOGNIZED_MAGNITUDE,
                f"unrecognized magnitude: {glyph!r}",
            )

        position = self.order.find(glyph)
        if position < 0:
            raise TimespanError(
                TimespanErrorType.INDETERMINATE_ORDER,
                f"indeterminate order for magnitude: {glyph!r}",
            )

        if entry.is_set:
            raise TimespanError(
                TimespanErrorType.MAGNITUDE_RESTATED,
                f"magnitude {glyph} restated (current:{value}{glyph} previous:{entry.value}{glyph})",
            )

        for later in self.order[position:]:
            other = self.entries.get(later)
            if other is not None and other.is_set:
                raise TimespanError(
                    TimespanErrorType.MAGNITUDE_OUT_OF_ORDER,
                    f"magnitude out of order: {other.label} specified before {entry.label}",
                )

        entry.set(value)
