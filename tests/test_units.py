"""Tests for unit-aware sizing values."""

import pytest

from timeboard.units import ParseError, UnitValue, parse


def _time_size(magnitude: float = 16) -> UnitValue:
    return UnitValue(magnitude, "vw", 8, 25)


class TestClamp:
    def test_inside_range_unchanged(self):
        assert _time_size().clamp(12.5).magnitude == 12.5

    def test_below_min_returns_min(self):
        assert _time_size().clamp(2).magnitude == 8

    def test_above_max_returns_max(self):
        assert _time_size().clamp(100).magnitude == 25

    def test_bounds_are_inclusive(self):
        assert _time_size().clamp(8).magnitude == 8
        assert _time_size().clamp(25).magnitude == 25

    def test_preserves_unit_and_bounds(self):
        clamped = _time_size().clamp(30)
        assert clamped.unit == "vw"
        assert (clamped.min, clamped.max) == (8, 25)

    def test_original_is_not_mutated(self):
        value = _time_size()
        value.clamp(20)
        assert value.magnitude == 16


class TestParse:
    def test_number_and_unit(self):
        value = parse("16vw")
        assert value.magnitude == 16
        assert value.unit == "vw"

    def test_decimal_and_negative(self):
        assert parse("-2.5em").magnitude == -2.5
        assert parse(".5rem").magnitude == 0.5

    def test_percent_unit(self):
        assert parse("40%").unit == "%"

    def test_unitless(self):
        value = parse("12")
        assert value.magnitude == 12
        assert value.unit == ""

    def test_whitespace_ignored(self):
        assert parse("  16vw \n").format() == "16vw"

    def test_clamps_into_given_range(self):
        assert parse("40vw", 8, 25).magnitude == 25

    @pytest.mark.parametrize("text", ["", "vw", "abc12", "12 vw", "1.2.3vw"])
    def test_rejects_missing_number(self, text):
        with pytest.raises(ParseError):
            parse(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("big")


class TestFormat:
    def test_whole_number(self):
        assert _time_size(16).format() == "16vw"

    def test_trims_trailing_zeros(self):
        assert _time_size(24.5).format() == "24.5vw"

    def test_rounds_to_four_places(self):
        assert UnitValue(1 / 3, "vw").format() == "0.3333vw"

    def test_str_matches_format(self):
        assert str(_time_size(12)) == "12vw"


class TestProgress:
    def test_progress_of_bounds(self):
        note = UnitValue(3, "vw", 3, 9)
        assert note.progress == 0.0
        assert note.clamp(9).progress == 1.0

    def test_from_progress_linear(self):
        note = UnitValue(3, "vw", 3, 9)
        assert note.from_progress(0.2).magnitude == pytest.approx(4.2)
        assert note.from_progress(0.5).magnitude == pytest.approx(6.0)

    def test_from_progress_clamps_fraction(self):
        note = UnitValue(3, "vw", 3, 9)
        assert note.from_progress(1.7).magnitude == 9
        assert note.from_progress(-1).magnitude == 3

    def test_unbounded_progress_is_zero(self):
        assert UnitValue(5, "vw").progress == 0.0
