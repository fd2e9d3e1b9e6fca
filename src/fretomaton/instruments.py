# -*- coding: utf-8 -*-
"""
instruments.py
==============

Instrument family detection from scale length and fret count.

The classifier has no unit parameter. A scale length above 100 is taken to be
millimeters (no fretted instrument has a 100 inch scale) and converted before
the thresholds are applied. A hypothetical scale over 100 inches would be
misread; this is the long-standing behaviour and callers rely on it.
"""

from __future__ import annotations

import logging
from enum import Enum

from .errors import InvalidArgument, check_count, check_length
from .units import MM_PER_IN

log = logging.getLogger(__name__)

MM_DETECTION_THRESHOLD = 100.0


class InstrumentCategory(str, Enum):
    ELECTRIC_GUITAR = "electricGuitar"
    ACOUSTIC_GUITAR = "acousticGuitar"
    BASS_GUITAR = "bassGuitar"
    CLASSICAL_GUITAR = "classicalGuitar"
    UKULELE = "ukulele"


def coerce_category(category) -> InstrumentCategory:
    """Accept an InstrumentCategory or its string id ("bassGuitar", ...)."""
    if isinstance(category, InstrumentCategory):
        return category
    try:
        return InstrumentCategory(category)
    except ValueError:
        raise InvalidArgument(f"Unknown instrument category: {category!r}") from None


def classify(scale_length: float, fret_count: int) -> InstrumentCategory:
    scale = check_length("scale_length", scale_length)
    frets = check_count("fret_count", fret_count)

    scale_in = scale
    if scale > MM_DETECTION_THRESHOLD:
        scale_in = scale / MM_PER_IN
        log.debug("scale length %s read as mm (%.4f in)", scale, scale_in)

    # Order matters: bass/ukulele, then the classical band, then 24-26.
    if scale_in >= 30:
        category = InstrumentCategory.BASS_GUITAR
    elif scale_in <= 17:
        category = InstrumentCategory.UKULELE
    elif 25.55 <= scale_in <= 25.65:
        category = InstrumentCategory.CLASSICAL_GUITAR
    elif 24 <= scale_in <= 26:
        if frets >= 22:
            category = InstrumentCategory.ELECTRIC_GUITAR
        else:
            category = InstrumentCategory.ACOUSTIC_GUITAR
    else:
        category = InstrumentCategory.ELECTRIC_GUITAR

    log.debug("classified scale=%s frets=%d as %s", scale, frets, category.value)
    return category
