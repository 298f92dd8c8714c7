"""Radar exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Transport and configuration code raise these; source adapters convert
them into structured failures before they reach callers.
"""

from __future__ import annotations


class RadarError(Exception):
    """Base exception for all radar failures."""


class RadarConfigError(RadarError):
    """Raised for invalid runtime configuration."""


class RadarRetrievalError(RadarError):
    """Raised when tabular content cannot be fetched or parsed."""


class RadarSheetNotFoundError(RadarRetrievalError):
    """Raised when a spreadsheet reference does not resolve to a sheet."""


class RadarCatalogError(RadarError):
    """Raised for unreadable or invalid radar catalog files."""
