"""
Keyword classifier - maps detected names to one obstacle category.
"""

from collections.abc import Iterable, Sequence

from ..models import KEYWORD_TABLE, DetectedLabel, DetectedObject, ObstacleCategory


def classify_names(names: Iterable[str]) -> ObstacleCategory:
    """
    Return the first category whose keywords appear in any name.

    Categories are checked in KEYWORD_TABLE order and matching is substring
    containment on lower-cased names, so "Staircase" matches stairs and
    "Window blind" matches wall before head is ever considered.

    Args:
        names: Object names and label descriptions

    Returns:
        Matching category, or DEFAULT if nothing matches (including no names)
    """
    lowered = [name.lower() for name in names]

    for category, keywords in KEYWORD_TABLE:
        if any(keyword in name for name in lowered for keyword in keywords):
            return category

    return ObstacleCategory.DEFAULT


def classify(
    objects: Sequence[DetectedObject] = (),
    labels: Sequence[DetectedLabel] = (),
) -> ObstacleCategory:
    """Classify the combined object names and label descriptions."""
    names = [obj.name for obj in objects] + [label.description for label in labels]
    return classify_names(names)
