# -*- coding: utf-8 -*-
"""
fretomaton
==========

Fret layout and bridge compensation calculator for guitars, basses and
ukuleles. Pure functions over plain numbers; no I/O apart from the optional
preset file loader.
"""

import logging

from .compensation import (
    CATEGORY_TIPS,
    DEFAULT_MODEL,
    BridgeRecommendation,
    CompensationModel,
    CompensationRange,
    StringCompensation,
    calculate_string_compensation,
    compute_bridge_recommendation,
    get_category_specific_tips,
    is_wound_string,
)
from .errors import InvalidArgument
from .frets import (
    SEMITONE_RATIO,
    FretPosition,
    FretTableRow,
    build_fret_table,
    compute_fret_positions,
    string_spacing_at_fret,
)
from .gauges import (
    STRING_GAUGE_SETS,
    StringGaugeSet,
    get_default_gauge_set,
    get_gauge_set_by_id,
    list_gauge_sets,
)
from .instruments import InstrumentCategory, classify
from .params import NeckParameters
from .presets import Preset, load_presets, parse_presets
from .units import (
    INCHES,
    MM,
    MM_PER_IN,
    convert,
    format_length,
    format_scale_label,
    parse_length,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # errors
    "InvalidArgument",
    # units
    "INCHES",
    "MM",
    "MM_PER_IN",
    "convert",
    "parse_length",
    "format_length",
    "format_scale_label",
    # frets
    "SEMITONE_RATIO",
    "FretPosition",
    "FretTableRow",
    "compute_fret_positions",
    "string_spacing_at_fret",
    "build_fret_table",
    # instruments
    "InstrumentCategory",
    "classify",
    # gauges
    "STRING_GAUGE_SETS",
    "StringGaugeSet",
    "list_gauge_sets",
    "get_default_gauge_set",
    "get_gauge_set_by_id",
    # compensation
    "CATEGORY_TIPS",
    "DEFAULT_MODEL",
    "CompensationModel",
    "StringCompensation",
    "CompensationRange",
    "BridgeRecommendation",
    "is_wound_string",
    "calculate_string_compensation",
    "compute_bridge_recommendation",
    "get_category_specific_tips",
    # params / presets
    "NeckParameters",
    "Preset",
    "parse_presets",
    "load_presets",
]
