# -*- coding: utf-8 -*-
"""
units.py
========

Linear unit handling for neck measurements.

Two units are supported: inches ("inches", alias "in") and millimeters ("mm").
Every engine function takes the unit explicitly; nothing here keeps state.

Text such as "25.5in", "25.5 inches", '25.5"' or "648mm" can be parsed with
`parse_length`; a bare number is read in the caller's default unit.
"""

from __future__ import annotations

import math
from typing import Tuple

from .errors import InvalidArgument

INCHES = "inches"
MM = "mm"

MM_PER_IN = 25.4
IN_PER_MM = 1.0 / 25.4

_UNIT_ALIASES = {
    "inches": INCHES,
    "inch": INCHES,
    "in": INCHES,
    "mm": MM,
}

# Longest suffixes first.
_INCH_SUFFIXES = ("inches", "inch", "in", '"')
_MM_SUFFIXES = ("mm",)

_DISPLAY_DECIMALS = {INCHES: 4, MM: 2}


def normalize_unit(unit: str) -> str:
    """Map a unit identifier (or alias) to INCHES or MM."""
    if isinstance(unit, str):
        key = unit.strip().lower()
        if key in _UNIT_ALIASES:
            return _UNIT_ALIASES[key]
    raise InvalidArgument(f"Unsupported unit: {unit!r} (expected 'inches' or 'mm')")


def convert(value: float, from_unit: str, to_unit: str) -> float:
    src = normalize_unit(from_unit)
    dst = normalize_unit(to_unit)
    if src == dst:
        return value
    if src == INCHES:
        return value * MM_PER_IN
    return value / MM_PER_IN


def to_inches(value: float, unit: str) -> float:
    return convert(value, unit, INCHES)


def from_inches(value: float, unit: str) -> float:
    return convert(value, INCHES, unit)


def split_length_text(text: str, default_unit: str) -> Tuple[float, str]:
    """
    Split "25.5in" into (25.5, "inches"). Without a suffix the unit is
    `default_unit`.
    """
    t = text.strip().lower()
    unit = normalize_unit(default_unit)
    number = t
    for suf in _INCH_SUFFIXES:
        if t.endswith(suf):
            number, unit = t[: -len(suf)].strip(), INCHES
            break
    else:
        for suf in _MM_SUFFIXES:
            if t.endswith(suf):
                number, unit = t[: -len(suf)].strip(), MM
                break
    try:
        value = float(number)
    except ValueError:
        raise InvalidArgument(f"Cannot parse length: {text!r}") from None
    if not math.isfinite(value):
        raise InvalidArgument(f"Length must be finite: {text!r}")
    return value, unit


def parse_length(text: str, default_unit: str) -> float:
    """Parse unit-suffixed text and return the value expressed in `default_unit`."""
    value, unit = split_length_text(text, default_unit)
    return convert(value, unit, default_unit)


def format_length(value: float, unit: str) -> str:
    # Table precision: 4 places for inches, 2 for millimeters.
    decimals = _DISPLAY_DECIMALS[normalize_unit(unit)]
    return f"{value:.{decimals}f}"


def format_scale_label(scale_length_inches: float, unit: str) -> str:
    """Preset-list label for a scale length stored in inches: 25.5" or 648mm."""
    if normalize_unit(unit) == INCHES:
        return f'{scale_length_inches:g}"'
    return f"{scale_length_inches * MM_PER_IN:.0f}mm"
