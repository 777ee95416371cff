"""
Vision API access - request building, HTTP call and response parsing.
"""

from .client import VisionAPIError, VisionClient, annotate_image, build_request
from .parser import parse_label, parse_object, parse_response

__all__ = [
    "VisionAPIError",
    "VisionClient",
    "annotate_image",
    "build_request",
    "parse_label",
    "parse_object",
    "parse_response",
]
