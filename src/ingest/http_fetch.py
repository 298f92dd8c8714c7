"""Shared async HTTP retrieval for radar sources.

This module wraps httpx so transport failures surface as domain errors.
"""

from __future__ import annotations

from typing import Mapping

import httpx

from core.config import RadarConfig
from core.errors import RadarRetrievalError


async def fetch_response(
    url: str,
    config: RadarConfig,
    http_client: httpx.AsyncClient | None = None,
    params: Mapping[str, str] | None = None,
) -> httpx.Response:
    """Issue one GET request and return the response, whatever its status.

    Args:
        url: Absolute URL to fetch.
        config: Runtime configuration providing the timeout.
        http_client: Optional shared client; a short-lived one is used otherwise.
        params: Optional query parameters.

    Returns:
        The HTTP response.

    Raises:
        RadarRetrievalError: If the request cannot be completed.
    """
    try:
        if http_client is not None:
            return await http_client.get(url, params=params)
        async with httpx.AsyncClient(
            timeout=config.http_timeout_seconds,
            follow_redirects=True,
        ) as client:
            return await client.get(url, params=params)
    except httpx.HTTPError as error:
        raise RadarRetrievalError(
            f"Failed to fetch {url}: {error}. Check the address and your network connection."
        ) from error


async def fetch_text(
    url: str,
    config: RadarConfig,
    http_client: httpx.AsyncClient | None = None,
    params: Mapping[str, str] | None = None,
) -> str:
    """Fetch a URL and return its body text.

    Raises:
        RadarRetrievalError: If the request fails or returns an error status.
    """
    response = await fetch_response(url, config, http_client, params)
    if response.status_code >= 400:
        raise RadarRetrievalError(
            f"Failed to fetch {url}: server returned HTTP {response.status_code}."
        )
    return response.text
