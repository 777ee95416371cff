"""
Response parsing for the images:annotate endpoint.

The API omits empty lists and zero-valued fields, so every lookup has a
default: a missing list is empty, a missing coordinate or score is 0.0.
"""

from typing import Any

from ..models import Annotations, DetectedLabel, DetectedObject, NormalizedVertex


def _parse_vertex(raw: dict[str, Any]) -> NormalizedVertex:
    return NormalizedVertex(x=float(raw.get("x", 0.0)), y=float(raw.get("y", 0.0)))


def parse_object(raw: dict[str, Any]) -> DetectedObject:
    """Parse one localizedObjectAnnotations entry."""
    poly = raw.get("boundingPoly") or {}
    vertices = [_parse_vertex(v) for v in poly.get("normalizedVertices") or []]
    score = raw.get("score")
    return DetectedObject(
        name=raw.get("name", ""),
        vertices=vertices,
        score=float(score) if score is not None else None,
    )


def parse_label(raw: dict[str, Any]) -> DetectedLabel:
    """Parse one labelAnnotations entry."""
    return DetectedLabel(
        description=raw.get("description", ""),
        score=float(raw.get("score") or 0.0),
    )


def first_response(payload: dict[str, Any]) -> dict[str, Any]:
    """Return responses[0], or an empty dict if there is none."""
    responses = payload.get("responses") or []
    if not responses:
        return {}
    return responses[0] or {}


def parse_response(payload: dict[str, Any]) -> Annotations:
    """
    Parse an images:annotate response body.

    Args:
        payload: Decoded JSON body

    Returns:
        Annotations from responses[0]; empty if the response has none
    """
    resp = first_response(payload)
    objects = [parse_object(o) for o in resp.get("localizedObjectAnnotations") or []]
    labels = [parse_label(lbl) for lbl in resp.get("labelAnnotations") or []]
    return Annotations(objects=objects, labels=labels)
