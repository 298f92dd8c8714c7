"""Shared capability of tabular radar sources.

Every source retrieves raw content asynchronously, then hands it to the
ingest pipeline. This module owns the single boundary where retrieval
errors and unexpected exceptions become structured failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from core.constants import SHEET_NOT_FOUND_MESSAGE
from core.errors import RadarRetrievalError, RadarSheetNotFoundError
from core.logging_config import get_logger
from core.types import (
    BuildResult,
    RadarDocument,
    RadarFailure,
    RetrievalResult,
    RetrievedTable,
)
from ingest.pipeline import build_radar_document

_LOGGER = get_logger(__name__)

SuccessCallback = Callable[[RadarDocument], None]
FailureCallback = Callable[[RadarFailure], None]


class SourceAdapter(ABC):
    """Base class for tabular sources feeding the radar pipeline.

    Variants implement ``_fetch_table``; this class owns retrieval error
    handling and the callback contract.
    """

    def describe(self) -> str:
        """Return a short source description for logs."""
        return type(self).__name__

    async def build(self, on_success: SuccessCallback, on_failure: FailureCallback) -> None:
        """Run retrieval and the pipeline, then call exactly one callback once.

        Args:
            on_success: Receives the assembled radar document.
            on_failure: Receives the structured failure.
        """
        result = await self.run()
        if isinstance(result, RadarFailure):
            on_failure(result)
            return
        on_success(result)

    async def run(self) -> BuildResult:
        """Retrieve content and run the pipeline, returning its result."""
        retrieved = await self.retrieve()
        if isinstance(retrieved, RadarFailure):
            return retrieved
        try:
            return build_radar_document(retrieved)
        except Exception as error:
            return self._unexpected_failure(error)

    async def retrieve(self) -> RetrievalResult:
        """Fetch raw tabular content, converting errors into failures."""
        try:
            table = await self._fetch_table()
        except RadarSheetNotFoundError as error:
            _LOGGER.warning("radar_sheet_not_found", source=self.describe(), reason=str(error))
            return RadarFailure(kind="sheet-not-found", message=SHEET_NOT_FOUND_MESSAGE)
        except RadarRetrievalError as error:
            _LOGGER.error("radar_retrieval_failed", source=self.describe(), reason=str(error))
            return RadarFailure(kind="unknown", message=str(error))
        except Exception as error:
            return self._unexpected_failure(error)
        _LOGGER.info(
            "radar_source_retrieved",
            source=self.describe(),
            column_count=len(table.column_names),
            row_count=len(table.rows),
        )
        return table

    @abstractmethod
    async def _fetch_table(self) -> RetrievedTable:
        """Fetch raw content, raising retrieval errors on failure."""

    def _unexpected_failure(self, error: Exception) -> RadarFailure:
        _LOGGER.error(
            "radar_build_unexpected_error",
            source=self.describe(),
            error_type=type(error).__name__,
            reason=str(error),
        )
        return RadarFailure(kind="unknown", message=str(error) or type(error).__name__)
