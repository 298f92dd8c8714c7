"""Ingest orchestration for radar sources.

This module runs validation, sanitization, and model assembly in a
fixed order over a fully retrieved table. Each stage completes for the
whole dataset before the next one starts.
"""

from __future__ import annotations

from core.logging_config import get_logger
from core.types import BuildResult, RadarDocument, RadarFailure, RetrievedTable
from ingest.content_validator import ContentValidator
from ingest.input_sanitizer import sanitize
from ingest.model_builder import assemble_radar

_LOGGER = get_logger(__name__)


def build_radar_document(table: RetrievedTable) -> BuildResult:
    """Validate, sanitize, and assemble one retrieved table.

    Args:
        table: Column names, raw rows, and display title.

    Returns:
        Radar document, or the first structured failure.
    """
    failure = ContentValidator(table.column_names, row_count=len(table.rows)).verify()
    if failure is not None:
        _log_failure(table, failure)
        return failure
    sanitized_rows = [sanitize(row) for row in table.rows]
    radar = assemble_radar(sanitized_rows)
    if isinstance(radar, RadarFailure):
        _log_failure(table, radar)
        return radar
    _LOGGER.info(
        "radar_assembled",
        title=table.title,
        row_count=len(sanitized_rows),
        quadrant_count=len(radar.quadrants),
        ring_count=len(radar.rings),
    )
    return RadarDocument(title=table.title, radar=radar)


def _log_failure(table: RetrievedTable, failure: RadarFailure) -> None:
    """Log a pipeline failure with contextual metadata."""
    _LOGGER.warning(
        "radar_pipeline_failed",
        title=table.title,
        kind=failure.kind,
        reason=failure.message,
        column_names=list(table.column_names),
    )
