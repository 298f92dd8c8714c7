"""Radar catalog loading.

This module reads the list of published radars offered on the menu.
The file is YAML; plain JSON files load through the same parser.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, cast

import yaml

from core.errors import RadarCatalogError
from ingest.source_reference import build_sheet_link


@dataclass(frozen=True)
class RadarCatalogEntry:
    """One radar offered on the menu.

    Attributes:
        name: Display name of the radar.
        sheet_url: Spreadsheet or CSV reference.
        sheet_name: Optional sub-sheet name.
    """

    name: str
    sheet_url: str
    sheet_name: str | None = None


def load_radar_catalog(catalog_path: str) -> tuple[RadarCatalogEntry, ...]:
    """Load and validate a radar catalog file.

    Args:
        catalog_path: Path to a YAML or JSON file with a ``radars`` list.

    Returns:
        Catalog entries in file order.

    Raises:
        RadarCatalogError: If the file is missing, unparsable, or invalid.
    """
    catalog_file = Path(catalog_path).expanduser().resolve()
    if not catalog_file.exists():
        raise RadarCatalogError(
            f"Radar catalog does not exist at {catalog_file}. Provide a valid file path."
        )
    try:
        payload = cast(object, yaml.safe_load(catalog_file.read_text(encoding="utf-8")))
    except OSError as error:
        raise RadarCatalogError(
            f"Failed to read radar catalog at {catalog_file}: {error}."
        ) from error
    except yaml.YAMLError as error:
        raise RadarCatalogError(
            f"Failed to parse radar catalog at {catalog_file}: {error}. Fix the syntax and retry."
        ) from error
    if not isinstance(payload, Mapping) or not isinstance(payload.get("radars"), list):
        raise RadarCatalogError(
            f"Invalid radar catalog at {catalog_file}: expected a 'radars' list."
        )
    return tuple(
        _parse_entry(item, index) for index, item in enumerate(payload["radars"], 1)
    )


def build_entry_link(entry: RadarCatalogEntry) -> str:
    """Return the menu link that opens a catalog entry."""
    return build_sheet_link(entry.sheet_url, entry.sheet_name)


def _parse_entry(item: object, index: int) -> RadarCatalogEntry:
    if not isinstance(item, Mapping):
        raise RadarCatalogError(f"Invalid radar catalog entry #{index}: expected a mapping.")
    name = item.get("name")
    sheet_url = item.get("gsheetUrl")
    sheet_name = item.get("sheetName")
    if not isinstance(name, str) or not name.strip():
        raise RadarCatalogError(f"Invalid radar catalog entry #{index}: 'name' is required.")
    if not isinstance(sheet_url, str) or not sheet_url.strip():
        raise RadarCatalogError(f"Invalid radar catalog entry #{index}: 'gsheetUrl' is required.")
    if sheet_name is not None and not isinstance(sheet_name, str):
        raise RadarCatalogError(
            f"Invalid radar catalog entry #{index}: 'sheetName' must be a string."
        )
    return RadarCatalogEntry(name=name.strip(), sheet_url=sheet_url.strip(), sheet_name=sheet_name)
