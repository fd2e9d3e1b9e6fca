# -*- coding: utf-8 -*-
"""
gauges.py
=========

Catalog of commercial string gauge sets, per instrument category.

Gauges are string diameters in inches, listed in the order the strings are
numbered for compensation (string 1 first). Exactly one set per category is
flagged as the default; the catalog is built once at import and is read-only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple

from .errors import InvalidArgument
from .instruments import InstrumentCategory, coerce_category

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StringGaugeSet:
    id: str
    name: str
    description: str
    gauges: Tuple[float, ...]
    is_default: bool = False

    def __post_init__(self) -> None:
        if not self.gauges:
            raise InvalidArgument(f"gauge set {self.id!r} has no gauges")
        if any(g <= 0 for g in self.gauges):
            raise InvalidArgument(f"gauge set {self.id!r} has a non-positive gauge")

    @property
    def display_name(self) -> str:
        return self.description


def _set(id_, name, description, gauges, is_default=False) -> StringGaugeSet:
    return StringGaugeSet(id_, name, description, tuple(gauges), is_default)


STRING_GAUGE_SETS: Mapping[InstrumentCategory, Tuple[StringGaugeSet, ...]] = MappingProxyType(
    {
        InstrumentCategory.ELECTRIC_GUITAR: (
            _set("light", "Light", "Light (9-42)",
                 [0.009, 0.011, 0.016, 0.024, 0.032, 0.042], is_default=True),
            _set("regular", "Regular", "Regular (10-46)",
                 [0.010, 0.013, 0.017, 0.026, 0.036, 0.046]),
            _set("medium", "Medium", "Medium (11-49)",
                 [0.011, 0.014, 0.018, 0.028, 0.038, 0.049]),
            _set("heavy", "Heavy", "Heavy (12-54)",
                 [0.012, 0.016, 0.024, 0.032, 0.042, 0.054]),
        ),
        InstrumentCategory.ACOUSTIC_GUITAR: (
            _set("extraLight", "Extra Light", "Extra Light (10-47)",
                 [0.010, 0.014, 0.023, 0.030, 0.039, 0.047]),
            _set("light", "Light", "Light (12-53)",
                 [0.012, 0.016, 0.025, 0.032, 0.042, 0.053], is_default=True),
            _set("medium", "Medium", "Medium (13-56)",
                 [0.013, 0.017, 0.026, 0.035, 0.045, 0.056]),
            _set("heavy", "Heavy", "Heavy (14-59)",
                 [0.014, 0.018, 0.027, 0.039, 0.049, 0.059]),
        ),
        InstrumentCategory.BASS_GUITAR: (
            _set("light", "Light", "Light (40-95)",
                 [0.040, 0.060, 0.075, 0.095]),
            _set("medium", "Medium", "Medium (45-105)",
                 [0.045, 0.065, 0.085, 0.105], is_default=True),
            _set("heavy", "Heavy", "Heavy (50-110)",
                 [0.050, 0.070, 0.090, 0.110]),
            _set("extraHeavy", "Extra Heavy", "Extra Heavy (55-115)",
                 [0.055, 0.075, 0.095, 0.115]),
        ),
        InstrumentCategory.CLASSICAL_GUITAR: (
            _set("normalTension", "Normal Tension", "Normal Tension",
                 [0.028, 0.032, 0.040, 0.029, 0.035, 0.043], is_default=True),
            _set("highTension", "High Tension", "High Tension",
                 [0.029, 0.033, 0.041, 0.030, 0.036, 0.044]),
            _set("extraHighTension", "Extra High Tension", "Extra High Tension",
                 [0.030, 0.034, 0.042, 0.031, 0.037, 0.045]),
        ),
        InstrumentCategory.UKULELE: (
            _set("standard", "Standard", "Standard",
                 [0.024, 0.031, 0.037, 0.026], is_default=True),
            _set("concert", "Concert", "Concert",
                 [0.025, 0.032, 0.038, 0.027]),
            _set("tenor", "Tenor", "Tenor",
                 [0.026, 0.033, 0.040, 0.029]),
        ),
    }
)


def pick_default(sets: Sequence[StringGaugeSet]) -> StringGaugeSet:
    """The flagged default of `sets`, else the first set."""
    if not sets:
        raise InvalidArgument("cannot pick a default from an empty gauge catalog")
    for s in sets:
        if s.is_default:
            return s
    log.warning("no default gauge set flagged; using %r", sets[0].id)
    return sets[0]


def list_gauge_sets(category) -> Tuple[StringGaugeSet, ...]:
    return STRING_GAUGE_SETS[coerce_category(category)]


def get_default_gauge_set(category) -> StringGaugeSet:
    return pick_default(list_gauge_sets(category))


def get_gauge_set_by_id(category, gauge_set_id: str) -> Optional[StringGaugeSet]:
    """
    Look up a set by id within one category only. Returns None when the id is
    unknown there, even if another category has a set with that id.
    """
    for s in list_gauge_sets(category):
        if s.id == gauge_set_id:
            return s
    return None
