"""Unit tests for the magnitude registry."""

import pytest

from timespan.errors import TimespanError, TimespanErrorType
from timespan.magnitude import MAGNITUDE_ORDER, Magnitude, MagnitudeSet


def test_new_magnitude_set_is_unset():
    """A fresh registry holds every magnitude, unset, with its label"""
    expected = MagnitudeSet({
        "Y": Magnitude(label="year"),
        "M": Magnitude(label="month"),
        "W": Magnitude(label="week"),
        "D": Magnitude(label="day"),
    })
    assert MagnitudeSet() == expected


def test_set_in_order():
    ms = MagnitudeSet()
    ms.set("Y", 1)
    ms.set("M", 2)
    ms.set("W", 3)
    ms.set("D", -4)

    assert ms == MagnitudeSet({
        "Y": Magnitude(label="year", is_set=True, value=1),
        "M": Magnitude(label="month", is_set=True, value=2),
        "W": Magnitude(label="week", is_set=True, value=3),
        "D": Magnitude(label="day", is_set=True, value=-4),
    })


def test_get_unset_is_zero():
    assert MagnitudeSet().get("W") == 0


def test_lowercase_day_is_day():
    ms = MagnitudeSet()
    ms.set("d", 5)
    assert ms.get("D") == 5
    assert ms["D"].is_set is True


def test_skipping_magnitudes_is_allowed():
    ms = MagnitudeSet()
    ms.set("Y", 1)
    ms.set("D", 2)
    assert ms.get("Y") == 1
    assert ms.get("M") == 0
    assert ms.get("D") == 2


def test_unknown_glyph_is_unrecognized():
    ms = MagnitudeSet({"A": Magnitude(label="one"), "B": Magnitude(label="two", is_set=True, value=42)})
    with pytest.raises(TimespanError) as exc_info:
        ms.set("C", 1)
    assert exc_info.value.error_type is TimespanErrorType.UNRECOGNIZED_MAGNITUDE


def test_glyph_without_order_is_indeterminate():
    ms = MagnitudeSet({"A": Magnitude(label="one"), "B": Magnitude(label="two", is_set=True, value=42)})
    with pytest.raises(TimespanError) as exc_info:
        ms.set("A", 1)
    assert exc_info.value.error_type is TimespanErrorType.INDETERMINATE_ORDER


def test_restated_message_includes_both_values():
    ms = MagnitudeSet()
    ms.set("W", 3)
    with pytest.raises(TimespanError) as exc_info:
        ms.set("W", 2)
    assert exc_info.value.error_type is TimespanErrorType.MAGNITUDE_RESTATED
    assert "current:2W" in exc_info.value.message
    assert "previous:3W" in exc_info.value.message


def test_out_of_order_scans_to_end_of_order():
    """Any later magnitude already set blocks an earlier one, not just the adjacent one"""
    ms = MagnitudeSet()
    ms.set("D", 1)
    with pytest.raises(TimespanError) as exc_info:
        ms.set("Y", 1)
    assert exc_info.value.error_type is TimespanErrorType.MAGNITUDE_OUT_OF_ORDER
    assert "day specified before year" in exc_info.value.message


def test_failed_set_leaves_registry_unchanged():
    ms = MagnitudeSet()
    ms.set("M", 2)
    with pytest.raises(TimespanError):
        ms.set("Y", 1)
    assert ms["Y"].is_set is False
    assert ms.get("M") == 2


@pytest.mark.parametrize("first_index, first", list(enumerate(MAGNITUDE_ORDER)))
@pytest.mark.parametrize("second_index, second", list(enumerate(MAGNITUDE_ORDER)))
def test_every_pair_of_magnitudes(first_index, first, second_index, second):
    ms = MagnitudeSet()
    ms.set(first, first_index)
    assert ms.get(first) == first_index

    if first_index < second_index:
        ms.set(second, second_index)
        assert ms.get(second) == second_index
        return

    expected = (
        TimespanErrorType.MAGNITUDE_RESTATED
        if first_index == second_index
        else TimespanErrorType.MAGNITUDE_OUT_OF_ORDER
    )
    with pytest.raises(TimespanError) as exc_info:
        ms.set(second, 2)
    assert exc_info.value.error_type is expected
