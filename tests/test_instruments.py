"""Tests for instrument family classification."""

import pytest

from fretomaton.errors import InvalidArgument
from fretomaton.instruments import InstrumentCategory, classify, coerce_category


class TestClassify:
    @pytest.mark.parametrize(
        "scale,frets,expected",
        [
            (25.5, 24, InstrumentCategory.ELECTRIC_GUITAR),
            (24.75, 22, InstrumentCategory.ELECTRIC_GUITAR),
            (25.4, 20, InstrumentCategory.ACOUSTIC_GUITAR),
            (24.9, 20, InstrumentCategory.ACOUSTIC_GUITAR),
            (34.0, 24, InstrumentCategory.BASS_GUITAR),
            (30.0, 21, InstrumentCategory.BASS_GUITAR),
            (17.0, 15, InstrumentCategory.UKULELE),
            (13.0, 12, InstrumentCategory.UKULELE),
            (25.6, 19, InstrumentCategory.CLASSICAL_GUITAR),
        ],
    )
    def test_known_instruments(self, scale, frets, expected):
        assert classify(scale, frets) is expected

    def test_classical_band_wins_over_fret_count(self):
        assert classify(25.6, 24) is InstrumentCategory.CLASSICAL_GUITAR
        assert classify(25.55, 22) is InstrumentCategory.CLASSICAL_GUITAR
        assert classify(25.65, 22) is InstrumentCategory.CLASSICAL_GUITAR

    def test_outside_bands_defaults_to_electric(self):
        assert classify(23.0, 12) is InstrumentCategory.ELECTRIC_GUITAR
        assert classify(27.0, 20) is InstrumentCategory.ELECTRIC_GUITAR

    def test_millimeters_detected_by_magnitude(self):
        assert classify(647.7, 24) is classify(25.5, 24)
        assert classify(431.8, 15) is InstrumentCategory.UKULELE
        assert classify(650.0, 19) is InstrumentCategory.CLASSICAL_GUITAR
        assert classify(864.0, 20) is InstrumentCategory.BASS_GUITAR

    def test_one_hundred_is_still_inches(self):
        assert classify(100.0, 24) is InstrumentCategory.BASS_GUITAR

    def test_bad_input(self):
        with pytest.raises(InvalidArgument):
            classify(-25.5, 22)
        with pytest.raises(InvalidArgument):
            classify(25.5, 21.5)


class TestCategory:
    def test_string_ids(self):
        assert InstrumentCategory("ukulele") is InstrumentCategory.UKULELE
        assert InstrumentCategory.BASS_GUITAR == "bassGuitar"

    def test_coerce(self):
        assert coerce_category("classicalGuitar") is InstrumentCategory.CLASSICAL_GUITAR
        assert coerce_category(InstrumentCategory.UKULELE) is InstrumentCategory.UKULELE
        with pytest.raises(InvalidArgument):
            coerce_category("banjo")
