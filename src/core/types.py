"""Shared typed models.

This module defines the immutable radar graph and the records passed
between retrieval, validation, sanitization, and model assembly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Mapping

FailureKind = Literal["malformed-data", "sheet-not-found", "unknown"]


@dataclass(frozen=True)
class Ring:
    """Named ring with its first-seen position.

    Attributes:
        name: Raw ring label from the source.
        order: Zero-based index in order of first appearance.
    """

    name: str
    order: int


@dataclass(frozen=True)
class Blip:
    """One item placed on the radar.

    Attributes:
        name: Display name of the item.
        ring: Shared ring this blip sits in.
        is_new: Whether the item is flagged as new.
        topic: Free-text topic or category.
        description: Free-text description.
        number: One-based position of the blip across the whole dataset.
    """

    name: str
    ring: Ring
    is_new: bool
    topic: str
    description: str
    number: int


@dataclass(frozen=True)
class Quadrant:
    """Quadrant with its blips in insertion order.

    Attributes:
        name: Display name, the capitalized raw quadrant value.
        blips: Blips added to the quadrant, in row order.
    """

    name: str
    blips: tuple[Blip, ...]


@dataclass(frozen=True)
class Radar:
    """Assembled radar graph.

    Attributes:
        quadrants: Quadrants in order of first appearance.
        rings: Distinct rings ordered by their index.
    """

    quadrants: tuple[Quadrant, ...]
    rings: tuple[Ring, ...]

    def blips(self) -> Iterator[Blip]:
        """Iterate all blips quadrant by quadrant."""
        for quadrant in self.quadrants:
            yield from quadrant.blips


@dataclass(frozen=True)
class SanitizedRow:
    """Normalized value set for one tabular row.

    Attributes:
        name: Trimmed item name.
        ring: Trimmed ring label.
        quadrant: Trimmed raw quadrant label.
        is_new: Parsed new-item flag.
        topic: Trimmed topic, empty when absent.
        description: Trimmed description, empty when absent.
    """

    name: str
    ring: str
    quadrant: str
    is_new: bool
    topic: str = ""
    description: str = ""


@dataclass(frozen=True)
class RetrievedTable:
    """Raw tabular content delivered by a source adapter.

    Attributes:
        column_names: Declared header labels in source order.
        rows: Mappings from header label to raw cell text.
        title: Display title for the radar.
    """

    column_names: tuple[str, ...]
    rows: tuple[Mapping[str, str], ...]
    title: str


@dataclass(frozen=True)
class RadarDocument:
    """Successful pipeline output handed to the renderer.

    Attributes:
        title: Display title for the radar.
        radar: Fully assembled radar graph.
    """

    title: str
    radar: Radar


@dataclass(frozen=True)
class RadarFailure:
    """Structured pipeline failure handed to the error reporter.

    Attributes:
        kind: Failure discriminant.
        message: Human-readable reason.
    """

    kind: FailureKind
    message: str


RetrievalResult = RetrievedTable | RadarFailure
BuildResult = RadarDocument | RadarFailure
