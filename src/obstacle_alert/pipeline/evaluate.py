"""
Detection pipeline - turns annotations into a DetectionResult.

Pure function: no I/O, no state. The scan session performs capture,
network and playback around it.
"""

import logging

from ..models import Annotations, DetectionResult
from ..utils.constants import SUMMARY_LABEL_COUNT
from .classifier import classify
from .heuristics import confidence_score, select_volume

logger = logging.getLogger(__name__)


def format_display_label(category_name: str, annotations: Annotations) -> str:
    """
    Build the summary line shown on screen.

    Localized objects are all listed; label-only scans list the first few
    labels.
    """
    if annotations.objects:
        names = [obj.name for obj in annotations.objects]
    else:
        names = [
            label.description for label in annotations.labels[:SUMMARY_LABEL_COUNT]
        ]
    return f"{category_name.upper()}: {', '.join(names)}"


def evaluate(annotations: Annotations) -> DetectionResult | None:
    """
    Classify a scan and derive volume and confidence.

    Args:
        annotations: Parsed vision API response

    Returns:
        DetectionResult, or None if nothing at all was detected. A DEFAULT
        category in the result means "something unrecognized", never
        "nothing".
    """
    if annotations.is_empty():
        return None

    category = classify(annotations.objects, annotations.labels)
    volume = select_volume(annotations)
    confidence = confidence_score(annotations.objects, annotations.labels, volume)

    logger.debug(
        f"Evaluated scan: category={category.value} volume={volume:.2f} "
        f"confidence={confidence}"
    )

    return DetectionResult(
        category=category,
        display_label=format_display_label(category.value, annotations),
        confidence=confidence,
        volume=volume,
        labels=tuple(annotations.labels),
    )
