"""
Volume and confidence heuristics.

Volume grows with the bounding box of the first localized object (a bigger
box usually means a closer obstacle). Confidence blends the average label
score with bonuses for localized objects and a real distance estimate.
"""

import math
from collections.abc import Sequence

from ..models import Annotations, DetectedLabel, DetectedObject, NormalizedVertex
from ..utils.constants import (
    DEFAULT_OBJECT_VOLUME,
    LABEL_ONLY_VOLUME,
    MAX_VOLUME,
    MIN_POLYGON_VERTICES,
    MIN_VOLUME,
    OBJECT_BONUS,
    VOLUME_BONUS,
    VOLUME_SCALE,
)


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def bounding_area(vertices: Sequence[NormalizedVertex]) -> float | None:
    """
    Area of the box spanned by the first and third vertex.

    Returns None if the polygon has fewer than 4 vertices.
    """
    if len(vertices) < MIN_POLYGON_VERTICES:
        return None

    width = abs(vertices[2].x - vertices[0].x)
    height = abs(vertices[2].y - vertices[0].y)
    return width * height


def volume_from_vertices(vertices: Sequence[NormalizedVertex]) -> float | None:
    """
    Playback volume from a normalized bounding polygon.

    Args:
        vertices: Normalized polygon of the primary object

    Returns:
        clamp(sqrt(area) * 1.5, 0.1, 1.0), or None if the polygon is unusable
    """
    area = bounding_area(vertices)
    if area is None:
        return None
    return clamp(math.sqrt(area) * VOLUME_SCALE, MIN_VOLUME, MAX_VOLUME)


def select_volume(annotations: Annotations) -> float:
    """Pick the playback volume for a scan that detected something."""
    if not annotations.objects:
        return LABEL_ONLY_VOLUME

    volume = volume_from_vertices(annotations.objects[0].vertices)
    if volume is None:
        return DEFAULT_OBJECT_VOLUME
    return volume


def confidence_score(
    objects: Sequence[DetectedObject],
    labels: Sequence[DetectedLabel],
    volume: float,
) -> int:
    """
    Heuristic detection quality in 0-100.

    Args:
        objects: Localized objects
        labels: Scene labels
        volume: Volume actually used for playback

    Returns:
        0 when nothing was detected, otherwise
        min((avg label score + bonuses) * 100, 100) rounded to an integer
    """
    if not objects and not labels:
        return 0

    avg_label_score = (
        sum(label.score for label in labels) / len(labels) if labels else 0.0
    )
    object_bonus = OBJECT_BONUS if objects else 0.0
    # Strictly inside the range: neither the fallback nor a clamped value
    volume_bonus = VOLUME_BONUS if MIN_VOLUME < volume < MAX_VOLUME else 0.0

    score = min((avg_label_score + object_bonus + volume_bonus) * 100, 100)
    # Round half up; round() would send 72.5 to 72
    return int(score + 0.5)
