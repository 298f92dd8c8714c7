"""Runtime configuration model for radar ingestion.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_FAQ_URL,
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    DEFAULT_SHEETS_BASE_URL,
)
from core.errors import RadarConfigError


@dataclass(frozen=True)
class RadarConfig:
    """Validated runtime configuration.

    Attributes:
        http_timeout_seconds: Timeout applied to every HTTP retrieval.
        faq_url: Help link appended to user-facing failure messages.
        sheets_base_url: Root URL of the spreadsheet document endpoint.
    """

    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS
    faq_url: str = DEFAULT_FAQ_URL
    sheets_base_url: str = DEFAULT_SHEETS_BASE_URL

    @classmethod
    def from_env(cls) -> "RadarConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            RadarConfigError: If environment values are invalid.
        """
        timeout_value = os.getenv("RADAR_HTTP_TIMEOUT_SECONDS", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
        faq_url = os.getenv("RADAR_FAQ_URL", DEFAULT_FAQ_URL)
        sheets_base_url = os.getenv("RADAR_SHEETS_BASE_URL", DEFAULT_SHEETS_BASE_URL)
        return cls(
            http_timeout_seconds=_parse_timeout(timeout_value),
            faq_url=faq_url,
            sheets_base_url=_parse_base_url(sheets_base_url),
        )


def _parse_timeout(raw_value: str) -> float:
    """Parse the HTTP timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        RadarConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise RadarConfigError(
            "Invalid RADAR_HTTP_TIMEOUT_SECONDS value: "
            f"expected a number, got '{raw_value}'. "
            "Set RADAR_HTTP_TIMEOUT_SECONDS to a positive number of seconds."
        ) from error
    if timeout <= 0:
        raise RadarConfigError(
            "Invalid RADAR_HTTP_TIMEOUT_SECONDS value: "
            f"expected a positive number, got '{raw_value}'."
        )
    return timeout


def _parse_base_url(raw_value: str) -> str:
    """Validate the spreadsheet base URL and strip a trailing slash."""
    if not raw_value.startswith(("http://", "https://")):
        raise RadarConfigError(
            f"Invalid RADAR_SHEETS_BASE_URL value '{raw_value}': "
            "expected an http:// or https:// URL."
        )
    return raw_value.rstrip("/")
