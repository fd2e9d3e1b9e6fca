"""Tests for unit conversion, length parsing and display formatting."""

import pytest

from fretomaton.errors import InvalidArgument
from fretomaton.units import (
    INCHES,
    MM,
    MM_PER_IN,
    convert,
    format_length,
    format_scale_label,
    normalize_unit,
    parse_length,
    split_length_text,
)


class TestConvert:
    def test_inches_to_mm(self):
        assert convert(1.0, "inches", "mm") == 25.4

    def test_mm_to_inches(self):
        assert convert(25.4, "mm", "inches") == 1.0

    def test_identity_returns_value_unchanged(self):
        for unit in (INCHES, MM):
            for x in [0.0, 0.1, 1.0 / 3.0, 25.5, 647.7]:
                assert convert(x, unit, unit) == x

    def test_round_trip(self):
        for x in [0.009, 1.375, 25.5, 34.0]:
            assert convert(convert(x, "inches", "mm"), "mm", "inches") == pytest.approx(x)

    def test_aliases(self):
        assert convert(2.0, "in", "MM") == pytest.approx(50.8)
        assert normalize_unit(" Inch ") == INCHES

    def test_unsupported_unit(self):
        with pytest.raises(InvalidArgument):
            convert(1.0, "cm", "mm")
        with pytest.raises(ValueError):
            convert(1.0, "inches", "feet")

    def test_constant(self):
        assert MM_PER_IN == 25.4


class TestParseLength:
    def test_suffixes(self):
        assert parse_length("25.5in", INCHES) == 25.5
        assert parse_length("25.5 inches", INCHES) == 25.5
        assert parse_length('25.5"', INCHES) == 25.5
        assert parse_length("  650 MM ", MM) == 650.0

    def test_bare_number_uses_default_unit(self):
        assert parse_length("648", MM) == 648.0
        assert split_length_text("1.375", INCHES) == (1.375, INCHES)

    def test_converts_into_default_unit(self):
        assert parse_length("25.5in", MM) == pytest.approx(647.7)
        assert parse_length("648mm", INCHES) == pytest.approx(648 / 25.4)

    @pytest.mark.parametrize("text", ["abc", "12ft", "", "nan", "inf mm"])
    def test_rejects_garbage(self, text):
        with pytest.raises(InvalidArgument):
            parse_length(text, INCHES)


class TestFormatting:
    def test_inches_four_places(self):
        assert format_length(25.5, INCHES) == "25.5000"

    def test_mm_two_places(self):
        assert format_length(647.7, MM) == "647.70"

    def test_scale_label(self):
        assert format_scale_label(25.5, INCHES) == '25.5"'
        assert format_scale_label(17, INCHES) == '17"'
        assert format_scale_label(25.5, MM) == "648mm"
        assert format_scale_label(17, MM) == "432mm"
