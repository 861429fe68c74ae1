"""Incremental scanner for the signed integer preceding a magnitude letter."""

from __future__ import annotations

from timespan.errors import TimespanError, TimespanErrorType

SIGNS = "+-"
DIGITS = "0123456789"


class Coefficient:
    """Accumulates the characters of one coefficient.

    A coefficient is an optional leading sign followed by decimal digits.
    Characters are fed one at a time by the parse driver; anything that is
    neither a sign nor a digit is handed back so the caller can treat it as
    a magnitude letter.
    """

    def __init__(self, chars: str = ""):
        self._chars: list[str] = list(chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"Coefficient({str(self)!r})"

    def __len__(self) -> int:
        return len(self._chars)

    def append_char(self, char: str) -> bool:
        """Offer a single character to the coefficient.

        Args:
            char: The next character of the input

        Returns:
            True if the character was accepted as a sign or digit,
            False if it is not part of a coefficient

        Raises:
            TimespanError: MISPLACED_SIGN if a sign follows other characters
        """
        if len(char) != 1:
            return False

        if char in SIGNS:
            if self._chars:
                raise TimespanError(
                    TimespanErrorType.MISPLACED_SIGN,
                    f"misplaced {char!r} in coefficient {str(self)!r}",
                )
            self._chars.append(char)
            return True

        if char in DIGITS:
            self._chars.append(char)
            return True

        return False

    def value(self, sign: int = 1) -> int:
        """Resolve the accumulated characters to an integer.

        A negative ``sign`` carries forward from an earlier coefficient: it
        negates a positive value unless this coefficient was explicitly
        written with a leading '+'.

        Args:
            sign: The running sign state (+1 or -1)

        Returns:
            The integer value of the coefficient

        Raises:
            TimespanError: MISSING_COEFFICIENT if nothing was accumulated,
                UNPARSEABLE_COEFFICIENT if the characters are not an integer
        """
        if not self._chars:
            raise TimespanError(TimespanErrorType.MISSING_COEFFICIENT, "missing coefficient")

        text = str(self)
        try:
            result = int(text)
        except ValueError:
            raise TimespanError(
                TimespanErrorType.UNPARSEABLE_COEFFICIENT,
                f"unparseable coefficient: {text!r}",
            ) from None

        if sign < 0 and result > 0 and text[0] != "+":
            result = -result

        return result
