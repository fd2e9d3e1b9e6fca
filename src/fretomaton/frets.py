# -*- coding: utf-8 -*-
"""
frets.py
========

12-TET fret placement and string-spread interpolation
-----------------------------------------------------
Along-string distance of fret n from the nut uses the closed form:

    pos(n) = L - L / (2 ** (1/12)) ** n

where L is the scale length. Distances are stored rounded to 4 decimals.

The incremental spacing ("from previous") of fret n is the unrounded
distance of fret n minus the *stored* (rounded) distance of fret n-1; fret 1
keeps its unrounded distance. Printed tables depend on these exact digits.

Because of the rounding, distances stop being strictly below L once
L / 2 ** (n/12) drops under 0.00005 (past fret 227 for a 25.5in scale),
where the stored value becomes L itself. Real necks stop long before that.

String spread between the outer strings is linearly interpolated between the
nut width and the bridge width by the fret's fraction of the scale length.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import check_count, check_length

log = logging.getLogger(__name__)

SEMITONE_RATIO = 2.0 ** (1.0 / 12.0)
DISPLAY_DECIMALS = 4


@dataclass(frozen=True)
class FretPosition:
    fret_number: int
    distance_from_nut: float
    distance_from_previous_fret: float


@dataclass(frozen=True)
class FretTableRow:
    """One line of the fret table: the nut, a fret, or the bridge."""

    label: str
    fret_number: Optional[int]
    distance_from_nut: float
    string_spacing: float
    from_previous: Optional[float]


def compute_fret_positions(scale_length: float, fret_count: int) -> List[FretPosition]:
    scale = check_length("scale_length", scale_length)
    count = check_count("fret_count", fret_count)
    log.debug("fret positions: scale=%s frets=%d", scale, count)

    positions: List[FretPosition] = []
    for n in range(1, count + 1):
        distance = scale - scale / (SEMITONE_RATIO**n)
        if n == 1:
            from_previous = distance
        else:
            from_previous = distance - positions[n - 2].distance_from_nut
        positions.append(
            FretPosition(
                fret_number=n,
                distance_from_nut=round(distance, DISPLAY_DECIMALS),
                distance_from_previous_fret=from_previous,
            )
        )
    return positions


def string_spacing_at_fret(
    fret_number: int,
    nut_width: float,
    bridge_width: float,
    scale_length: float,
    fret_positions: Sequence[FretPosition],
) -> float:
    n = check_count("fret_number", fret_number)
    nut = check_length("nut_width", nut_width, allow_zero=True)
    bridge = check_length("bridge_width", bridge_width, allow_zero=True)
    scale = check_length("scale_length", scale_length)
    if n == 0:
        return nut
    # Frets past the end of the table fall back to the nut spread.
    if n <= len(fret_positions):
        ratio = fret_positions[n - 1].distance_from_nut / scale
    else:
        ratio = 0.0
    return nut + (bridge - nut) * ratio


def build_fret_table(
    scale_length: float,
    fret_count: int,
    nut_width: float,
    bridge_width: float,
) -> List[FretTableRow]:
    """
    Assemble the printable fret table: a nut row, one row per fret, and a
    bridge row. All values are in the unit the caller supplied.
    """
    positions = compute_fret_positions(scale_length, fret_count)
    rows = [
        FretTableRow(
            label="0 (Nut)",
            fret_number=0,
            distance_from_nut=0.0,
            string_spacing=string_spacing_at_fret(
                0, nut_width, bridge_width, scale_length, positions
            ),
            from_previous=None,
        )
    ]
    for p in positions:
        rows.append(
            FretTableRow(
                label=str(p.fret_number),
                fret_number=p.fret_number,
                distance_from_nut=p.distance_from_nut,
                string_spacing=string_spacing_at_fret(
                    p.fret_number, nut_width, bridge_width, scale_length, positions
                ),
                from_previous=p.distance_from_previous_fret,
            )
        )
    rows.append(
        FretTableRow(
            label="Bridge",
            fret_number=None,
            distance_from_nut=float(scale_length),
            string_spacing=float(bridge_width),
            from_previous=None,
        )
    )
    return rows
