"""Unit tests for spreadsheet resolution and retrieval."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import httpx
import pytest

from core.config import RadarConfig
from core.errors import RadarRetrievalError, RadarSheetNotFoundError
from ingest.google_sheet import GoogleSheetsClient, extract_document_title, parse_sheet_id
from tests.fixture_paths import fixture_text

_BASE_URL = "https://docs.google.com/spreadsheets/d"


def _run_with_transport(
    handler: Callable[[httpx.Request], httpx.Response],
    action: Callable[[GoogleSheetsClient], Awaitable[Any]],
) -> Any:
    async def _run() -> Any:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            client = GoogleSheetsClient(RadarConfig(), http_client)
            return await action(client)

    return asyncio.run(_run())


def test_parse_sheet_id_reads_document_url() -> None:
    """Full spreadsheet URLs should resolve to the document id."""
    reference = f"{_BASE_URL}/1AbC-def_2/edit#gid=0"

    assert parse_sheet_id(reference) == "1AbC-def_2"


def test_parse_sheet_id_accepts_bare_id() -> None:
    """A bare id should resolve to itself."""
    assert parse_sheet_id(" 1AbC-def_2 ") == "1AbC-def_2"


def test_parse_sheet_id_rejects_unrecognized_reference() -> None:
    """References without an id should be reported as sheet not found."""
    with pytest.raises(RadarSheetNotFoundError):
        parse_sheet_id("https://example.com/not a sheet")


def test_extract_document_title_strips_service_suffix() -> None:
    """Titles should be unescaped and lose the service suffix."""
    title = extract_document_title(fixture_text("sheet_page.html"), fallback="id")

    assert title == "Platform Radar & Friends"


def test_extract_document_title_falls_back_without_title() -> None:
    """Pages without a title element should use the fallback."""
    assert extract_document_title("<html></html>", fallback="1AbC") == "1AbC"


def test_resolve_title_raises_not_found_for_error_status() -> None:
    """A missing document page should raise sheet not found."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    with pytest.raises(RadarSheetNotFoundError):
        _run_with_transport(handler, lambda client: client.resolve_title("missing"))


def test_resolve_title_reads_page_title() -> None:
    """An existing document should resolve to its page title."""

    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == f"{_BASE_URL}/1AbC"
        return httpx.Response(200, text=fixture_text("sheet_page.html"))

    title = _run_with_transport(handler, lambda client: client.resolve_title("1AbC"))

    assert title == "Platform Radar & Friends"


def test_fetch_sheet_requests_named_sub_sheet_as_csv() -> None:
    """Sub-sheet retrieval should use the CSV export with the sheet name."""
    seen_params: list[dict[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_params.append(dict(request.url.params))
        return httpx.Response(200, text="name,ring,quadrant,isNew\npytest,Adopt,Tools,true\n")

    column_names, rows = _run_with_transport(
        handler, lambda client: client.fetch_sheet("1AbC", "Q3 2026")
    )

    assert seen_params == [{"tqx": "out:csv", "sheet": "Q3 2026"}]
    assert column_names == ("name", "ring", "quadrant", "isNew")
    assert rows[0]["name"] == "pytest"


def test_fetch_sheet_omits_sheet_parameter_for_first_sub_sheet() -> None:
    """Without a sheet name the export should default to the first sub-sheet."""
    seen_params: list[dict[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen_params.append(dict(request.url.params))
        return httpx.Response(200, text="name,ring,quadrant,isNew\n")

    _run_with_transport(handler, lambda client: client.fetch_sheet("1AbC"))

    assert seen_params == [{"tqx": "out:csv"}]


def test_fetch_sheet_wraps_transport_errors() -> None:
    """Transport errors should surface as retrieval errors."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RadarRetrievalError):
        _run_with_transport(handler, lambda client: client.fetch_sheet("1AbC"))


@pytest.mark.parametrize("status_code", [403, 404])
def test_resolve_title_treats_missing_statuses_as_not_found(status_code: int) -> None:
    """Forbidden and missing pages should mean the sheet cannot be found."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code)

    with pytest.raises(RadarSheetNotFoundError):
        _run_with_transport(handler, lambda client: client.resolve_title("1AbC"))


@pytest.mark.parametrize("status_code", [429, 500, 503])
def test_resolve_title_reports_server_errors_as_retrieval_failures(status_code: int) -> None:
    """Rate limits and outages should not be reported as a missing sheet."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code)

    with pytest.raises(RadarRetrievalError) as error_info:
        _run_with_transport(handler, lambda client: client.resolve_title("1AbC"))

    assert not isinstance(error_info.value, RadarSheetNotFoundError)
    assert f"HTTP {status_code}" in str(error_info.value)
