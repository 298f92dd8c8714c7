"""Choose the source variant for a radar reference.

CSV references are recognized by their suffix, spreadsheet references
by their Google domain. Anything else selects no source, and callers
fall back to showing the radar menu.
"""

from __future__ import annotations

from core.config import RadarConfig
from core.constants import CSV_REFERENCE_SUFFIX, GOOGLE_DOMAIN_SUFFIX
from ingest.csv_source import CsvSource
from ingest.source_adapter import SourceAdapter
from ingest.source_reference import domain_name, parse_query_params
from ingest.spreadsheet_source import SpreadsheetSource


def select_source(
    sheet_reference: str | None,
    sheet_name: str | None = None,
    config: RadarConfig | None = None,
) -> SourceAdapter | None:
    """Return the source adapter matching a reference, or None.

    Args:
        sheet_reference: CSV URL or spreadsheet URL.
        sheet_name: Optional sub-sheet name for spreadsheet sources.
        config: Runtime configuration passed to the transport clients.

    Returns:
        A CSV or spreadsheet source, or None when neither applies.
    """
    if not sheet_reference:
        return None
    domain = domain_name(sheet_reference)
    if domain is None:
        return None
    runtime_config = config or RadarConfig()
    if sheet_reference.endswith(CSV_REFERENCE_SUFFIX):
        return CsvSource(sheet_reference, config=runtime_config)
    if domain.endswith(GOOGLE_DOMAIN_SUFFIX):
        return SpreadsheetSource(sheet_reference, sheet_name, config=runtime_config)
    return None


def select_source_from_query(
    query_string: str,
    config: RadarConfig | None = None,
) -> SourceAdapter | None:
    """Select a source from a ``sheetId=...&sheetName=...`` query string."""
    params = parse_query_params(query_string)
    return select_source(params.get("sheetId"), params.get("sheetName"), config)
