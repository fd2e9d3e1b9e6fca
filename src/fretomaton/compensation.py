# -*- coding: utf-8 -*-
"""
compensation.py
===============

Empirical bridge (saddle) compensation estimates.

Per string:

    comp = gauge * base_factor * wound_multiplier * sqrt(tension) * (L_in / 25.5)

with base_factor 0.5, wound_multiplier 2.5 for wound strings (1.0 for plain),
tension 1.0 and L_in the scale length in inches. The 25.5in baseline applies
to every instrument family. Gauges are inches; results are converted to the
caller's display unit.

The recommended bridge position is the scale length as supplied plus the
mean per-string compensation, both in the display unit.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple, Union

from .errors import InvalidArgument, check_count, check_length
from .gauges import StringGaugeSet, get_default_gauge_set
from .instruments import InstrumentCategory, classify
from .units import INCHES, from_inches, normalize_unit, to_inches

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompensationModel:
    """Coefficients of the compensation formula."""

    base_factor: float = 0.5
    wound_multiplier: float = 2.5
    reference_scale_inches: float = 25.5
    tension: float = 1.0


DEFAULT_MODEL = CompensationModel()

# Gauge (inches) at and above which a string is treated as wound.
WOUND_THRESHOLDS: Mapping[InstrumentCategory, float] = MappingProxyType(
    {
        InstrumentCategory.ELECTRIC_GUITAR: 0.024,
        InstrumentCategory.ACOUSTIC_GUITAR: 0.024,
        InstrumentCategory.CLASSICAL_GUITAR: 0.029,
    }
)
DEFAULT_WOUND_THRESHOLD = 0.024


@dataclass(frozen=True)
class StringCompensation:
    string_index: int
    compensation: float
    explanation: str


@dataclass(frozen=True)
class CompensationRange:
    min: float
    max: float


@dataclass(frozen=True)
class BridgeRecommendation:
    category: InstrumentCategory
    recommended_bridge_position: float
    compensations: Tuple[StringCompensation, ...]
    compensation_range: CompensationRange
    explanation: str
    tips: Tuple[str, ...]


CATEGORY_TIPS: Mapping[InstrumentCategory, Tuple[str, ...]] = MappingProxyType(
    {
        InstrumentCategory.ELECTRIC_GUITAR: (
            "Electric guitars typically need 1-3mm of compensation",
            "Tremolo bridges may require additional setup considerations",
            "Check intonation after adjusting string height or pickup height",
        ),
        InstrumentCategory.ACOUSTIC_GUITAR: (
            "Acoustic guitars often need slightly more compensation than electrics",
            "Consider the bridge saddle angle for optimal intonation",
            "Heavier string gauges will require more compensation",
        ),
        InstrumentCategory.CLASSICAL_GUITAR: (
            "Classical guitars with nylon strings need minimal compensation",
            "Wound bass strings still require more compensation than treble strings",
            "Temperature and humidity can affect nylon string intonation",
        ),
        InstrumentCategory.BASS_GUITAR: (
            "Bass guitars typically need 3-6mm of compensation",
            "All strings are wound and require significant compensation",
            "Longer scale lengths may need proportionally more compensation",
        ),
        InstrumentCategory.UKULELE: (
            "Ukuleles need minimal compensation due to plain strings",
            "Compensation is usually less than 1mm per string",
            "Re-entrant tuning (high G) may affect compensation needs",
        ),
    }
)


def is_wound_string(gauge: float, category) -> bool:
    try:
        category = InstrumentCategory(category)
    except ValueError:
        return gauge >= DEFAULT_WOUND_THRESHOLD
    if category is InstrumentCategory.BASS_GUITAR:
        return True
    if category is InstrumentCategory.UKULELE:
        return False
    return gauge >= WOUND_THRESHOLDS.get(category, DEFAULT_WOUND_THRESHOLD)


def calculate_string_compensation(
    gauge: float,
    wound: bool,
    scale_length_inches: float,
    model: CompensationModel = DEFAULT_MODEL,
) -> float:
    """Compensation in inches for one string."""
    multiplier = model.wound_multiplier if wound else 1.0
    scale_factor = scale_length_inches / model.reference_scale_inches
    return gauge * model.base_factor * multiplier * math.sqrt(model.tension) * scale_factor


def _resolve_gauges(
    category: InstrumentCategory,
    gauge_set: Union[None, StringGaugeSet, Sequence[float]],
) -> List[float]:
    if gauge_set is None:
        return list(get_default_gauge_set(category).gauges)
    if isinstance(gauge_set, StringGaugeSet):
        return list(gauge_set.gauges)
    gauges = [check_length(f"gauge[{i}]", g) for i, g in enumerate(gauge_set)]
    if not gauges:
        raise InvalidArgument("gauge_set must contain at least one gauge")
    return gauges


def compute_bridge_recommendation(
    scale_length: float,
    fret_count: int,
    unit: str = INCHES,
    gauge_set: Union[None, StringGaugeSet, Sequence[float]] = None,
    model: CompensationModel = DEFAULT_MODEL,
) -> BridgeRecommendation:
    unit = normalize_unit(unit)
    scale = check_length("scale_length", scale_length)
    frets = check_count("fret_count", fret_count)

    scale_in = to_inches(scale, unit)
    category = classify(scale_in, frets)
    gauges = _resolve_gauges(category, gauge_set)
    log.debug(
        "bridge recommendation: scale=%s %s frets=%d category=%s gauges=%s",
        scale, unit, frets, category.value, gauges,
    )

    compensations: List[StringCompensation] = []
    for index, gauge in enumerate(gauges, start=1):
        wound = is_wound_string(gauge, category)
        comp_in = calculate_string_compensation(gauge, wound, scale_in, model)
        comp = from_inches(comp_in, unit)
        kind = "Wound" if wound else "Plain"
        compensations.append(
            StringCompensation(
                string_index=index,
                compensation=comp,
                explanation=f'{kind} string ({gauge}" gauge) requires {comp:.3f}{unit} compensation',
            )
        )

    amounts = [c.compensation for c in compensations]
    low, high = min(amounts), max(amounts)
    position = scale + sum(amounts) / len(amounts)

    explanation = (
        "For optimal intonation, individual bridge saddles should be positioned "
        f"with compensation ranging from {low:.3f}{unit} to {high:.3f}{unit} "
        "behind the theoretical bridge position."
    )
    tips = (
        f"Start with the bridge positioned at {position:.3f}{unit} from the nut",
        "Adjust individual saddles: plain strings need less compensation, wound strings need more",
        "Use a tuner to fine-tune each string's intonation at the 12th fret",
        "The thickest strings typically need the most compensation",
        "Check intonation after any string gauge changes",
    )
    return BridgeRecommendation(
        category=category,
        recommended_bridge_position=position,
        compensations=tuple(compensations),
        compensation_range=CompensationRange(min=low, max=high),
        explanation=explanation,
        tips=tips,
    )


def get_category_specific_tips(category) -> Tuple[str, ...]:
    """Three setup hints for the family; empty for an unknown category."""
    try:
        return CATEGORY_TIPS[InstrumentCategory(category)]
    except ValueError:
        return ()
