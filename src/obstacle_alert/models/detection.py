"""
Data models for a single scan: what the vision API saw and what we made of it.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from .categories import ObstacleCategory


@dataclass(frozen=True)
class NormalizedVertex:
    """A polygon vertex scaled to [0, 1] relative to the image size."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class DetectedObject:
    """
    A localized object returned by the vision API.

    Attributes:
        name: Object name as reported by the API (e.g. "Door")
        vertices: Normalized bounding polygon, typically 4 corners
        score: Detection score if the API reported one
    """

    name: str
    vertices: List[NormalizedVertex] = field(default_factory=list)
    score: float | None = None


@dataclass(frozen=True)
class DetectedLabel:
    """A scene label with its confidence in [0, 1]."""

    description: str
    score: float = 0.0


@dataclass(frozen=True)
class Annotations:
    """Objects and labels from one vision API response."""

    objects: List[DetectedObject] = field(default_factory=list)
    labels: List[DetectedLabel] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the API found neither objects nor labels."""
        return not self.objects and not self.labels


@dataclass(frozen=True)
class DetectionResult:
    """
    Outcome of one scan, consumed by the display and the feedback player.

    Attributes:
        category: Classified obstacle category
        display_label: Summary text, e.g. "STAIRS: Stairs, Handrail"
        confidence: Heuristic detection quality, 0-100
        volume: Playback volume in [0.1, 1.0]
        labels: Raw labels for the label panel, as a tuple so results hash
    """

    category: ObstacleCategory
    display_label: str
    confidence: int
    volume: float
    labels: Tuple[DetectedLabel, ...] = ()
