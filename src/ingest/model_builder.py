"""Radar graph assembly from sanitized rows.

This module builds the ring map in a dedicated first pass, then groups
blips into quadrants in row order. A ring overflow is detected before
any quadrant or blip exists, so no partial radar is ever built.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from core.constants import MAX_RINGS, TOO_MANY_RINGS_MESSAGE
from core.logging_config import get_logger
from core.types import Blip, Quadrant, Radar, RadarFailure, Ring, SanitizedRow

_LOGGER = get_logger(__name__)


def build_ring_map(rows: Sequence[SanitizedRow]) -> dict[str, Ring] | RadarFailure:
    """Map distinct ring names to shared rings in first-seen order.

    Args:
        rows: Sanitized rows in source order.

    Returns:
        Ordered ring map, or a malformed-data failure on the fifth distinct name.
    """
    ring_map: dict[str, Ring] = {}
    for row in rows:
        if row.ring in ring_map:
            continue
        if len(ring_map) == MAX_RINGS:
            _LOGGER.warning("radar_ring_overflow", ring=row.ring, max_rings=MAX_RINGS)
            return RadarFailure(kind="malformed-data", message=TOO_MANY_RINGS_MESSAGE)
        ring_map[row.ring] = Ring(name=row.ring, order=len(ring_map))
    return ring_map


def assemble_radar(rows: Sequence[SanitizedRow]) -> Radar | RadarFailure:
    """Build the radar graph from the full sanitized row set.

    Args:
        rows: Sanitized rows in source order.

    Returns:
        Assembled radar, or the ring-overflow failure.
    """
    ring_map = build_ring_map(rows)
    if isinstance(ring_map, RadarFailure):
        return ring_map
    quadrants = _build_quadrants(_group_rows(rows), ring_map)
    return Radar(quadrants=quadrants, rings=tuple(ring_map.values()))


def quadrant_display_name(raw_quadrant: str) -> str:
    """Return the capitalized display form of a raw quadrant label."""
    return raw_quadrant.capitalize()


def _group_rows(rows: Sequence[SanitizedRow]) -> dict[str, list[SanitizedRow]]:
    """Group rows by quadrant display name, keeping first-creation order."""
    quadrant_rows: dict[str, list[SanitizedRow]] = {}
    for row in rows:
        quadrant_rows.setdefault(quadrant_display_name(row.quadrant), []).append(row)
    return quadrant_rows


def _build_quadrants(
    quadrant_rows: Mapping[str, Sequence[SanitizedRow]],
    ring_map: Mapping[str, Ring],
) -> tuple[Quadrant, ...]:
    """Build quadrants, numbering blips quadrant by quadrant from one."""
    quadrants: list[Quadrant] = []
    number = 0
    for name, rows in quadrant_rows.items():
        blips: list[Blip] = []
        for row in rows:
            number += 1
            blips.append(
                Blip(
                    name=row.name,
                    ring=ring_map[row.ring],
                    is_new=row.is_new,
                    topic=row.topic,
                    description=row.description,
                    number=number,
                )
            )
        quadrants.append(Quadrant(name=name, blips=tuple(blips)))
    return tuple(quadrants)
