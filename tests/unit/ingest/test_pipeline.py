"""Unit tests for ingest pipeline orchestration."""

from __future__ import annotations

import pytest

from core.constants import MISSING_CONTENT_MESSAGE, TOO_MANY_RINGS_MESSAGE
from core.types import RadarDocument, RadarFailure, RetrievedTable
from ingest.pipeline import build_radar_document

_HEADERS = ("name", "ring", "quadrant", "isNew", "description")


def _table(column_names: tuple[str, ...], rows: list[dict[str, str]]) -> RetrievedTable:
    return RetrievedTable(column_names=column_names, rows=tuple(rows), title="Demo radar")


def test_build_radar_document_returns_titled_radar() -> None:
    """Pipeline should return the assembled radar with the source title."""
    table = _table(
        _HEADERS,
        [{"name": "pytest", "ring": "Adopt", "quadrant": "tools", "isNew": "true"}],
    )

    result = build_radar_document(table)

    assert isinstance(result, RadarDocument)
    assert result.title == "Demo radar"
    assert result.radar.quadrants[0].name == "Tools"


def test_missing_header_stops_before_any_row_is_sanitized(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A header failure should prevent row processing entirely."""
    sanitized: list[object] = []
    monkeypatch.setattr("ingest.pipeline.sanitize", sanitized.append)
    table = _table(
        ("name", "quadrant", "isNew"),
        [{"name": "pytest", "quadrant": "Tools", "isNew": "true"}],
    )

    result = build_radar_document(table)

    assert isinstance(result, RadarFailure) and result.kind == "malformed-data"
    assert sanitized == []


def test_empty_column_set_fails_with_missing_content() -> None:
    """A source without columns should fail with the missing-content reason."""
    result = build_radar_document(_table((), []))

    assert result == RadarFailure(kind="malformed-data", message=MISSING_CONTENT_MESSAGE)


def test_ring_overflow_produces_no_document() -> None:
    """Five distinct rings should fail the whole run."""
    rows = [
        {"name": str(index), "ring": ring, "quadrant": "Tools", "isNew": "false"}
        for index, ring in enumerate(["Adopt", "Trial", "Assess", "Hold", "Retire"])
    ]

    result = build_radar_document(_table(_HEADERS, rows))

    assert result == RadarFailure(kind="malformed-data", message=TOO_MANY_RINGS_MESSAGE)


def test_header_only_table_fails_with_missing_content() -> None:
    """A table with headers but no rows should not produce an empty radar."""
    result = build_radar_document(_table(_HEADERS, []))

    assert result == RadarFailure(kind="malformed-data", message=MISSING_CONTENT_MESSAGE)
