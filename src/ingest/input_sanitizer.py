"""Row normalization for tabular radar sources.

Malformed cell values are absorbed into defaults; structural problems
are the validator's concern, so sanitizing never raises.
"""

from __future__ import annotations

from typing import Mapping

from core.constants import (
    DESCRIPTION_HEADER,
    IS_NEW_HEADER,
    IS_NEW_TRUE_LITERAL,
    NAME_HEADER,
    QUADRANT_HEADER,
    RING_HEADER,
    TOPIC_HEADER,
)
from core.types import SanitizedRow


def sanitize(raw_row: Mapping[str, object]) -> SanitizedRow:
    """Normalize one raw row.

    Args:
        raw_row: Mapping from column label to raw cell value.

    Returns:
        Trimmed text fields and a parsed ``is_new`` flag.
    """
    cells = _normalize_keys(raw_row)
    return SanitizedRow(
        name=_text(cells.get(NAME_HEADER.lower())),
        ring=_text(cells.get(RING_HEADER.lower())),
        quadrant=_text(cells.get(QUADRANT_HEADER.lower())),
        is_new=parse_is_new(cells.get(IS_NEW_HEADER.lower())),
        topic=_text(cells.get(TOPIC_HEADER.lower())),
        description=_text(cells.get(DESCRIPTION_HEADER.lower())),
    )


def parse_is_new(raw_value: object) -> bool:
    """Return True only for the text ``true``, ignoring case."""
    if raw_value is None:
        return False
    return str(raw_value).lower() == IS_NEW_TRUE_LITERAL


def _normalize_keys(raw_row: Mapping[str, object]) -> dict[str, object]:
    # first occurrence wins when two labels differ only by case or padding
    cells: dict[str, object] = {}
    for key, value in raw_row.items():
        cells.setdefault(str(key).strip().lower(), value)
    return cells


def _text(raw_value: object) -> str:
    if raw_value is None:
        return ""
    return str(raw_value).strip()
