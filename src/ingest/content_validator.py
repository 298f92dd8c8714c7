"""Column schema validation for tabular radar sources.

This module checks the declared header set before any row is read.
Checks return a structured failure instead of raising.
"""

from __future__ import annotations

from typing import Sequence

from core.constants import MISSING_CONTENT_MESSAGE, MISSING_HEADERS_MESSAGE, REQUIRED_HEADERS
from core.types import RadarFailure


class ContentValidator:
    """Validate the declared column names of one tabular source.

    When a row count is given, a source without data rows also counts as
    having no content.
    """

    def __init__(self, column_names: Sequence[str], row_count: int | None = None) -> None:
        self._column_names = tuple(str(name).strip() for name in column_names)
        self._row_count = row_count

    def verify(self) -> RadarFailure | None:
        """Run content then header checks and return the first failure."""
        return self.verify_content() or self.verify_headers()

    def verify_content(self) -> RadarFailure | None:
        """Fail when the source is empty or holds only a header row.

        Returns:
            Malformed-data failure, or None when at least one label is non-blank
            and, if a row count was given, at least one data row exists.
        """
        if not any(self._column_names) or self._row_count == 0:
            return RadarFailure(kind="malformed-data", message=MISSING_CONTENT_MESSAGE)
        return None

    def verify_headers(self) -> RadarFailure | None:
        """Fail when required headers are absent.

        Headers match case-insensitively after trimming.

        Returns:
            Malformed-data failure naming the missing headers, or None.
        """
        missing_headers = self.missing_headers()
        if not missing_headers:
            return None
        return RadarFailure(
            kind="malformed-data",
            message=f"{MISSING_HEADERS_MESSAGE} Missing: {', '.join(missing_headers)}.",
        )

    def missing_headers(self) -> tuple[str, ...]:
        """Return required headers that are not declared, in schema order."""
        declared = {name.lower() for name in self._column_names}
        return tuple(header for header in REQUIRED_HEADERS if header.lower() not in declared)
