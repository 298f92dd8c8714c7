"""Radar CLI entry points.
This module exposes commands that build a radar from a source reference
and list the radars of a catalog file.
"""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any, Sequence

from core.config import RadarConfig
from core.error_reporting import render_failure_message
from core.errors import RadarCatalogError, RadarConfigError
from core.types import BuildResult, Radar, RadarDocument
from ingest.radar_catalog import build_entry_link, load_radar_catalog
from ingest.source_selection import select_source


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="radar", description="Tech radar ingestion CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_build_command(subparsers)
    _add_catalog_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the radar CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = RadarConfig.from_env()
    except RadarConfigError as error:
        print(f"config_error={error}")
        return 2
    if args.command == "build":
        return _run_build_command(config, args)
    if args.command == "catalog":
        return _run_catalog_command(args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def radar_summary(document: RadarDocument) -> dict[str, Any]:
    """Convert a radar document into a JSON-serializable summary."""
    return {"title": document.title, **_radar_payload(document.radar)}


def _radar_payload(radar: Radar) -> dict[str, Any]:
    return {
        "rings": [{"name": ring.name, "order": ring.order} for ring in radar.rings],
        "quadrants": [
            {
                "name": quadrant.name,
                "blips": [
                    {
                        "number": blip.number,
                        "name": blip.name,
                        "ring": blip.ring.name,
                        "is_new": blip.is_new,
                        "topic": blip.topic,
                        "description": blip.description,
                    }
                    for blip in quadrant.blips
                ],
            }
            for quadrant in radar.quadrants
        ],
    }


def _run_build_command(config: RadarConfig, args: argparse.Namespace) -> int:
    """Handle build command.

    Args:
        config: Runtime configuration.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    source = select_source(args.reference, args.sheet_name, config)
    if source is None:
        print(
            f"unsupported_reference={args.reference}. "
            "Provide a published Google Sheet URL or a URL ending in .csv."
        )
        return 2
    results: list[BuildResult] = []
    asyncio.run(source.build(results.append, results.append))
    result = results[0]
    if isinstance(result, RadarDocument):
        print(json.dumps(radar_summary(result), indent=2))
        return 0
    print(render_failure_message(result, config))
    return 1


def _run_catalog_command(args: argparse.Namespace) -> int:
    """Handle catalog command.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        entries = load_radar_catalog(args.path)
    except RadarCatalogError as error:
        print(f"catalog_error={error}")
        return 1
    for entry in entries:
        print(f"{entry.name}\t{build_entry_link(entry)}")
    return 0


def _add_build_command(subparsers: Any) -> None:
    """Register build subcommand."""
    parser = subparsers.add_parser("build", help="Build a radar from a sheet or CSV URL")
    parser.add_argument("reference", help="Published Google Sheet URL or CSV URL")
    parser.add_argument("--sheet-name", help="Sub-sheet to read; the first one when omitted")


def _add_catalog_command(subparsers: Any) -> None:
    """Register catalog subcommand."""
    parser = subparsers.add_parser("catalog", help="List radars from a catalog file")
    parser.add_argument("path", help="YAML or JSON catalog with a 'radars' list")
