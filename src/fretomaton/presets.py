# -*- coding: utf-8 -*-
"""
presets.py
==========

Named instrument presets (Fender Standard, Concert Ukulele, ...).

A preset document groups presets by family, every length in inches:

    {
      "electricGuitars": {
        "fenderStandard": {"scaleLength": 25.5, "nutWidth": 1.375,
                           "bridgeWidth": 2.0625, "frets": 22,
                           "name": "Fender Standard", "description": "..."}
      },
      "ukuleles": {...}
    }

Families are flattened into one key -> Preset mapping in document order; a
key repeated in a later family replaces the earlier one. The engine never
reads presets itself: callers resolve a preset to NeckParameters and pass
plain numbers on.
"""

from __future__ import annotations

import json
import logging
import numbers
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .errors import InvalidArgument, check_count, check_length
from .params import NeckParameters
from .units import INCHES, format_scale_label

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Preset:
    key: str
    family: str
    name: str
    description: str
    scale_length: float
    nut_width: float
    bridge_width: float
    fret_count: int

    def to_params(self, unit: str = INCHES) -> NeckParameters:
        params = NeckParameters(
            scale_length=self.scale_length,
            nut_width=self.nut_width,
            bridge_width=self.bridge_width,
            fret_count=self.fret_count,
        )
        return params.to_unit(unit)

    def display_length(self, unit: str = INCHES) -> str:
        return format_scale_label(self.scale_length, unit)


def _get_number(entry: Mapping[str, Any], field: str, where: str) -> float:
    if field not in entry:
        raise InvalidArgument(f"preset {where}: missing {field!r}")
    value = entry[field]
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgument(f"preset {where}: {field!r} must be a number, got {value!r}")
    return value


def _whole(value):
    # JSON writers may emit 22.0 for a whole number.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _parse_entry(family: str, key: str, entry: Any) -> Preset:
    where = f"{family}.{key}"
    if not isinstance(entry, Mapping):
        raise InvalidArgument(f"preset {where}: expected an object")
    return Preset(
        key=key,
        family=family,
        name=str(entry.get("name", key)),
        description=str(entry.get("description", "")),
        scale_length=check_length(f"{where}.scaleLength", _get_number(entry, "scaleLength", where)),
        nut_width=check_length(f"{where}.nutWidth", _get_number(entry, "nutWidth", where), allow_zero=True),
        bridge_width=check_length(f"{where}.bridgeWidth", _get_number(entry, "bridgeWidth", where), allow_zero=True),
        fret_count=check_count(f"{where}.frets", _whole(_get_number(entry, "frets", where))),
    )


def parse_presets(document: Mapping[str, Any]) -> Dict[str, Preset]:
    if not isinstance(document, Mapping):
        raise InvalidArgument("preset document must be an object of families")
    presets: Dict[str, Preset] = {}
    for family, entries in document.items():
        if not isinstance(entries, Mapping):
            raise InvalidArgument(f"preset family {family!r} must be an object")
        for key, entry in entries.items():
            if key in presets:
                log.debug("preset %r in %s replaces the one in %s", key, family, presets[key].family)
            presets[key] = _parse_entry(family, key, entry)
    return presets


def load_presets(path: Union[str, Path]) -> Dict[str, Preset]:
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)
    presets = parse_presets(document)
    log.debug("loaded %d presets from %s", len(presets), path)
    return presets
