"""Spreadsheet-backed radar source."""

from __future__ import annotations

from typing import Protocol

from core.config import RadarConfig
from core.types import RetrievedTable
from ingest.google_sheet import GoogleSheetsClient, parse_sheet_id
from ingest.source_adapter import SourceAdapter


class SheetClient(Protocol):
    """Transport contract required by the spreadsheet source."""

    async def resolve_title(self, sheet_id: str) -> str: ...

    async def fetch_sheet(
        self,
        sheet_id: str,
        sheet_name: str | None = None,
    ) -> tuple[tuple[str, ...], tuple[dict[str, str], ...]]: ...


class SpreadsheetSource(SourceAdapter):
    """Radar source reading one sub-sheet of a published spreadsheet.

    The reference is resolved and checked for existence before any
    content is requested, so a missing document is reported as
    sheet-not-found rather than as malformed data.
    """

    def __init__(
        self,
        sheet_reference: str,
        sheet_name: str | None = None,
        client: SheetClient | None = None,
        config: RadarConfig | None = None,
    ) -> None:
        self._sheet_reference = sheet_reference
        self._sheet_name = sheet_name or None
        self._client = client or GoogleSheetsClient(config or RadarConfig())

    def describe(self) -> str:
        return f"sheet:{self._sheet_reference}"

    async def _fetch_table(self) -> RetrievedTable:
        sheet_id = parse_sheet_id(self._sheet_reference)
        title = await self._client.resolve_title(sheet_id)
        column_names, rows = await self._client.fetch_sheet(sheet_id, self._sheet_name)
        return RetrievedTable(column_names=tuple(column_names), rows=tuple(rows), title=title)
