# -*- coding: utf-8 -*-
"""
params.py
=========

The full set of neck inputs a template is drawn from, in one unit.

Switching units converts every length together (scale, nut and bridge
spread, neck width, fret wire width); the fret count is unit-free. Neck width
and fret wire width are carried for the drawing side only and are not used
by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence, Union

from .compensation import BridgeRecommendation, compute_bridge_recommendation
from .errors import check_count, check_length
from .frets import FretPosition, FretTableRow, build_fret_table, compute_fret_positions
from .gauges import StringGaugeSet
from .units import INCHES, convert, normalize_unit

_LENGTH_FIELDS = ("scale_length", "nut_width", "bridge_width", "neck_width", "fret_wire_width")


@dataclass(frozen=True)
class NeckParameters:
    scale_length: float = 25.5
    nut_width: float = 1.375
    bridge_width: float = 2.0625
    fret_count: int = 24
    neck_width: float = 1.75
    fret_wire_width: float = 0.04
    unit: str = INCHES

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit", normalize_unit(self.unit))
        check_length("scale_length", self.scale_length)
        for name in _LENGTH_FIELDS[1:]:
            check_length(name, getattr(self, name), allow_zero=True)
        check_count("fret_count", self.fret_count)

    def to_unit(self, unit: str) -> "NeckParameters":
        unit = normalize_unit(unit)
        if unit == self.unit:
            return self
        converted = {
            name: convert(getattr(self, name), self.unit, unit) for name in _LENGTH_FIELDS
        }
        return replace(self, unit=unit, **converted)

    def fret_positions(self) -> List[FretPosition]:
        return compute_fret_positions(self.scale_length, self.fret_count)

    def fret_table(self) -> List[FretTableRow]:
        return build_fret_table(
            self.scale_length, self.fret_count, self.nut_width, self.bridge_width
        )

    def bridge_recommendation(
        self, gauge_set: Union[None, StringGaugeSet, Sequence[float]] = None
    ) -> BridgeRecommendation:
        return compute_bridge_recommendation(
            self.scale_length, self.fret_count, self.unit, gauge_set
        )
