"""CSV-backed radar source.

This module fetches a CSV resource over HTTP and parses it into the
column list and raw rows consumed by the ingest pipeline.
"""

from __future__ import annotations

import csv
import io
from typing import Protocol

import httpx

from core.config import RadarConfig
from core.types import RetrievedTable
from ingest.http_fetch import fetch_text
from ingest.source_adapter import SourceAdapter
from ingest.source_reference import file_name


class CsvClient(Protocol):
    """Transport contract required by the CSV source."""

    async def fetch_text(self, url: str) -> str: ...


class HttpCsvClient:
    """Fetch CSV text with httpx."""

    def __init__(self, config: RadarConfig, http_client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._http_client = http_client

    async def fetch_text(self, url: str) -> str:
        """Return the body of a CSV resource.

        Raises:
            RadarRetrievalError: If the resource cannot be fetched.
        """
        return await fetch_text(url, self._config, self._http_client)


class CsvSource(SourceAdapter):
    """Radar source reading a CSV resource by URL."""

    def __init__(
        self,
        url: str,
        client: CsvClient | None = None,
        config: RadarConfig | None = None,
    ) -> None:
        self._url = url
        self._client = client or HttpCsvClient(config or RadarConfig())

    def describe(self) -> str:
        return f"csv:{self._url}"

    async def _fetch_table(self) -> RetrievedTable:
        text = await self._client.fetch_text(self._url)
        column_names, rows = parse_csv_table(text)
        return RetrievedTable(column_names=column_names, rows=rows, title=file_name(self._url))


def parse_csv_table(text: str) -> tuple[tuple[str, ...], tuple[dict[str, str], ...]]:
    """Parse CSV text into header labels and row mappings.

    Rows whose cells are all blank are skipped. Cells beyond the header
    width are dropped; missing trailing cells become empty strings.

    Args:
        text: Full CSV document.

    Returns:
        Column names and rows keyed by column name.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    column_names = tuple(reader.fieldnames or ())
    rows: list[dict[str, str]] = []
    for raw_row in reader:
        row = {
            key: value or ""
            for key, value in raw_row.items()
            if key is not None and not isinstance(value, list)
        }
        if any(value.strip() for value in row.values()):
            rows.append(row)
    return column_names, tuple(rows)
