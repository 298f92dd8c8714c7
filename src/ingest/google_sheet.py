"""Google spreadsheet reference resolution and retrieval.

This module resolves a sheet reference to a document id, checks that
the document exists, and downloads one sub-sheet through the public
CSV export endpoint.
"""

from __future__ import annotations

import html
import re

import httpx

from core.config import RadarConfig
from core.constants import (
    GOOGLE_SHEETS_TITLE_SUFFIX,
    SHEET_MISSING_STATUS_CODES,
    SHEET_NOT_FOUND_MESSAGE,
)
from core.errors import RadarRetrievalError, RadarSheetNotFoundError
from core.logging_config import get_logger
from ingest.csv_source import parse_csv_table
from ingest.http_fetch import fetch_response, fetch_text

_LOGGER = get_logger(__name__)
_SHEET_URL_PATTERN = re.compile(r"/spreadsheets/d/([A-Za-z0-9_-]+)")
_SHEET_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
_TITLE_PATTERN = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE | re.DOTALL)


def parse_sheet_id(sheet_reference: str) -> str:
    """Resolve a spreadsheet URL or bare id to the document id.

    Args:
        sheet_reference: Full ``docs.google.com`` URL or a bare id.

    Returns:
        Spreadsheet document id.

    Raises:
        RadarSheetNotFoundError: If the reference holds no recognizable id.
    """
    reference = sheet_reference.strip()
    match = _SHEET_URL_PATTERN.search(reference)
    if match:
        return match.group(1)
    if _SHEET_ID_PATTERN.match(reference):
        return reference
    raise RadarSheetNotFoundError(f"{SHEET_NOT_FOUND_MESSAGE} Reference: '{sheet_reference}'.")


def extract_document_title(page_html: str, fallback: str) -> str:
    """Extract the spreadsheet title from its HTML page, or return fallback."""
    match = _TITLE_PATTERN.search(page_html)
    if not match:
        return fallback
    title = html.unescape(match.group(1)).strip().removesuffix(GOOGLE_SHEETS_TITLE_SUFFIX)
    return title.strip() or fallback


class GoogleSheetsClient:
    """Async client for published Google spreadsheets."""

    def __init__(self, config: RadarConfig, http_client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._http_client = http_client

    async def resolve_title(self, sheet_id: str) -> str:
        """Check that the spreadsheet exists and return its document title.

        Raises:
            RadarSheetNotFoundError: If the document page is not available.
            RadarRetrievalError: If the request fails or the server errors.
        """
        url = f"{self._config.sheets_base_url}/{sheet_id}"
        response = await fetch_response(url, self._config, self._http_client)
        if response.status_code in SHEET_MISSING_STATUS_CODES:
            raise RadarSheetNotFoundError(
                f"{SHEET_NOT_FOUND_MESSAGE} Sheet '{sheet_id}' "
                f"returned HTTP {response.status_code}."
            )
        if response.status_code >= 400:
            raise RadarRetrievalError(
                f"Failed to check sheet '{sheet_id}': server returned HTTP {response.status_code}."
            )
        title = extract_document_title(response.text, fallback=sheet_id)
        _LOGGER.info("sheet_resolved", sheet_id=sheet_id, title=title)
        return title

    async def fetch_sheet(
        self,
        sheet_id: str,
        sheet_name: str | None = None,
    ) -> tuple[tuple[str, ...], tuple[dict[str, str], ...]]:
        """Download one sub-sheet as column names and rows.

        Args:
            sheet_id: Spreadsheet document id.
            sheet_name: Sub-sheet to read; the first sub-sheet when omitted.

        Returns:
            Column names and rows keyed by column name.

        Raises:
            RadarRetrievalError: If the export cannot be fetched.
        """
        params = {"tqx": "out:csv"}
        if sheet_name:
            params["sheet"] = sheet_name
        url = f"{self._config.sheets_base_url}/{sheet_id}/gviz/tq"
        text = await fetch_text(url, self._config, self._http_client, params=params)
        return parse_csv_table(text)
