"""
Data models for obstacle detection.

This package contains the transient per-scan data structures and the
static obstacle category table.
"""

from .categories import (
    DEFAULT_SOUND_FILES,
    KEYWORD_TABLE,
    ObstacleCategory,
)
from .detection import (
    Annotations,
    DetectedLabel,
    DetectedObject,
    DetectionResult,
    NormalizedVertex,
)

__all__ = [
    # Vision API results
    "Annotations",
    # Categories
    "DEFAULT_SOUND_FILES",
    "DetectedLabel",
    "DetectedObject",
    "DetectionResult",
    "KEYWORD_TABLE",
    "NormalizedVertex",
    "ObstacleCategory",
]
