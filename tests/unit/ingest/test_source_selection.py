"""Unit tests for source variant selection."""

from __future__ import annotations

from ingest.csv_source import CsvSource
from ingest.source_selection import select_source, select_source_from_query
from ingest.spreadsheet_source import SpreadsheetSource


def test_select_source_picks_csv_by_suffix() -> None:
    """References ending in csv should use the CSV source."""
    source = select_source("https://example.com/radar.csv")

    assert isinstance(source, CsvSource)


def test_select_source_picks_spreadsheet_by_domain() -> None:
    """Google references should use the spreadsheet source."""
    source = select_source("https://docs.google.com/spreadsheets/d/1AbC/edit", "Q3")

    assert isinstance(source, SpreadsheetSource)


def test_select_source_prefers_csv_for_published_google_csv() -> None:
    """Published CSV exports on Google domains should still use the CSV source."""
    source = select_source("https://docs.google.com/spreadsheets/d/e/1AbC/pub?output=csv")

    assert isinstance(source, CsvSource)


def test_select_source_returns_none_for_unsupported_references() -> None:
    """Bare ids, other domains, and empty references select no source."""
    assert select_source("1AbC") is None
    assert select_source("https://example.com/radar.xlsx") is None
    assert select_source(None) is None


def test_select_source_from_query_reads_sheet_params() -> None:
    """Query-string selection should pass sheet id and name through."""
    source = select_source_from_query(
        "sheetId=https%3A%2F%2Fdocs.google.com%2Fspreadsheets%2Fd%2F1AbC&sheetName=Q3"
    )

    assert isinstance(source, SpreadsheetSource)
    assert source.describe() == "sheet:https://docs.google.com/spreadsheets/d/1AbC"
