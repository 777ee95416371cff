"""
Detection-to-feedback pipeline: classification and heuristics.
"""

from .classifier import classify, classify_names
from .evaluate import evaluate, format_display_label
from .heuristics import (
    bounding_area,
    clamp,
    confidence_score,
    select_volume,
    volume_from_vertices,
)

__all__ = [
    "bounding_area",
    "clamp",
    # Classification
    "classify",
    "classify_names",
    # Heuristics
    "confidence_score",
    # Pipeline
    "evaluate",
    "format_display_label",
    "select_volume",
    "volume_from_vertices",
]
