# -*- coding: utf-8 -*-
"""
errors.py
=========

Error kinds raised by the fretomaton calculation engine.
"""

from __future__ import annotations

import math
import numbers


class InvalidArgument(ValueError):
    """
    A caller handed the engine something it cannot compute with: an
    unsupported unit, a negative or non-numeric length, a fractional fret
    count, an empty gauge set, and so on.

    Subclasses ValueError so plain `except ValueError` handlers still work.
    """


def check_length(name: str, value, allow_zero: bool = False) -> float:
    """Return `value` as float if it is a finite, positive (or zero) number."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"{name} must be a number, got {value!r}")
    v = float(value)
    if not math.isfinite(v):
        raise InvalidArgument(f"{name} must be finite, got {value!r}")
    if v < 0 or (v == 0 and not allow_zero):
        bound = ">= 0" if allow_zero else "> 0"
        raise InvalidArgument(f"{name} must be {bound}, got {value!r}")
    return v


def check_count(name: str, value) -> int:
    """Return `value` if it is a non-negative integer (bools rejected)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidArgument(f"{name} must be >= 0, got {value!r}")
    return int(value)
