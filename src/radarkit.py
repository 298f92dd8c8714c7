"""Public SDK surface for radarkit.

This module provides a stable import path for library users.
It re-exports the source adapters, pipeline entry points, and typed models.
"""

from __future__ import annotations

from core.config import RadarConfig
from core.error_reporting import render_failure_message
from core.types import (
    Blip,
    Quadrant,
    Radar,
    RadarDocument,
    RadarFailure,
    RetrievedTable,
    Ring,
    SanitizedRow,
)
from ingest.content_validator import ContentValidator
from ingest.csv_source import CsvSource
from ingest.input_sanitizer import sanitize
from ingest.model_builder import assemble_radar
from ingest.pipeline import build_radar_document
from ingest.radar_catalog import RadarCatalogEntry, load_radar_catalog
from ingest.source_adapter import SourceAdapter
from ingest.source_selection import select_source, select_source_from_query
from ingest.spreadsheet_source import SpreadsheetSource

__all__ = [
    "Blip",
    "ContentValidator",
    "CsvSource",
    "Quadrant",
    "Radar",
    "RadarCatalogEntry",
    "RadarConfig",
    "RadarDocument",
    "RadarFailure",
    "RetrievedTable",
    "Ring",
    "SanitizedRow",
    "SourceAdapter",
    "SpreadsheetSource",
    "assemble_radar",
    "build_radar_document",
    "load_radar_catalog",
    "render_failure_message",
    "sanitize",
    "select_source",
    "select_source_from_query",
]
