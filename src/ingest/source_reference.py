"""URL and query-string helpers for radar source references.

This module parses page query strings and source URLs the same way
for source selection, catalog links, and CSV titles.
"""

from __future__ import annotations

import re
from urllib.parse import quote, unquote

_QUERY_PAIR_PATTERN = re.compile(r"([^&=]+)=?([^&]*)")
_DOMAIN_PATTERN = re.compile(r".+://([^/]+)")
_FILE_NAME_PATTERN = re.compile(r"([^/]+)$")


def decode_component(value: str) -> str:
    """Decode a URL component, treating ``+`` as a space."""
    return unquote(value.replace("+", " "))


def parse_query_params(query_string: str) -> dict[str, str]:
    """Parse ``a=b&c=d`` into a mapping; later keys override earlier ones.

    Args:
        query_string: Query string without the leading ``?``.

    Returns:
        Decoded parameter mapping.
    """
    params: dict[str, str] = {}
    for match in _QUERY_PAIR_PATTERN.finditer(query_string.removeprefix("?")):
        params[decode_component(match.group(1))] = decode_component(match.group(2))
    return params


def domain_name(url: str) -> str | None:
    """Return the host part of ``scheme://host/...`` or None."""
    match = _DOMAIN_PATTERN.match(decode_component(url))
    return match.group(1) if match else None


def file_name(url: str) -> str:
    """Return the decoded last path segment of a URL, or the URL itself."""
    match = _FILE_NAME_PATTERN.search(decode_component(url))
    return match.group(1) if match else url


def build_sheet_link(sheet_reference: str, sheet_name: str | None = None) -> str:
    """Build the ``?sheetId=...&sheetName=...`` link for a radar source."""
    link = f"?sheetId={quote(sheet_reference, safe='')}"
    if sheet_name:
        link += f"&sheetName={quote(sheet_name, safe='')}"
    return link
