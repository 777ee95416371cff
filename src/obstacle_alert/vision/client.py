"""
Vision API client - sends a still image for object and label detection.

This client:
1. Builds an images:annotate request for a base64 image
2. POSTs it with the API key as a query parameter
3. Parses localized objects and labels from the response

Failures raise VisionAPIError; the scan session decides what to do with
them. There is no retry.
"""

import logging
from typing import Any

import requests

from ..models import Annotations
from ..utils.constants import (
    DEFAULT_MAX_LABELS,
    DEFAULT_MAX_OBJECTS,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_VISION_ENDPOINT,
)
from .parser import first_response, parse_response

logger = logging.getLogger(__name__)


class VisionAPIError(Exception):
    """Raised when the vision API call fails or returns an error."""


def build_request(
    image_b64: str,
    max_objects: int = DEFAULT_MAX_OBJECTS,
    max_labels: int = DEFAULT_MAX_LABELS,
) -> dict[str, Any]:
    """
    Build the annotate request body.

    Args:
        image_b64: Base64-encoded image
        max_objects: maxResults for OBJECT_LOCALIZATION
        max_labels: maxResults for LABEL_DETECTION

    Returns:
        JSON-serializable request body
    """
    return {
        "requests": [
            {
                "image": {"content": image_b64},
                "features": [
                    {"type": "OBJECT_LOCALIZATION", "maxResults": max_objects},
                    {"type": "LABEL_DETECTION", "maxResults": max_labels},
                ],
            }
        ]
    }


def annotate_image(
    image_b64: str,
    api_key: str,
    endpoint: str = DEFAULT_VISION_ENDPOINT,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    max_objects: int = DEFAULT_MAX_OBJECTS,
    max_labels: int = DEFAULT_MAX_LABELS,
) -> Annotations:
    """
    Send an image to the vision API and parse the result.

    Args:
        image_b64: Base64-encoded image
        api_key: API key, sent as the `key` query parameter
        endpoint: images:annotate URL
        timeout: Request timeout in seconds
        max_objects: maxResults for OBJECT_LOCALIZATION
        max_labels: maxResults for LABEL_DETECTION

    Returns:
        Parsed annotations (possibly empty)

    Raises:
        VisionAPIError: On transport errors, non-2xx status, invalid JSON,
            or an error object in the response
    """
    body = build_request(image_b64, max_objects, max_labels)

    # requests errors carry the full URL, key included: keep them out of
    # the message and the exception chain
    try:
        response = requests.post(
            endpoint,
            params={"key": api_key},
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except requests.Timeout:
        raise VisionAPIError(f"Vision API timeout after {timeout}s") from None
    except requests.RequestException as e:
        raise VisionAPIError(
            f"Vision API request failed: {type(e).__name__}"
        ) from None

    if not response.ok:
        raise VisionAPIError(
            f"Vision API returned {response.status_code}: {response.text[:100]}"
        )

    try:
        payload = response.json()
    except ValueError as e:
        raise VisionAPIError(f"Invalid JSON response: {e}") from e

    error = first_response(payload).get("error")
    if error:
        raise VisionAPIError(f"Vision API error: {error.get('message', error)}")

    annotations = parse_response(payload)
    logger.debug(
        f"Annotations received: {len(annotations.objects)} object(s), "
        f"{len(annotations.labels)} label(s)"
    )
    return annotations


class VisionClient:
    """
    Configured vision API client.

    Config options:
        api_key: API key (required)
        endpoint: images:annotate URL
        timeout_seconds: Request timeout
        max_objects / max_labels: Feature maxResults
    """

    def __init__(self, config: dict[str, Any]):
        self._api_key = config["api_key"]
        self._endpoint = config.get("endpoint", DEFAULT_VISION_ENDPOINT)
        self._timeout = config.get("timeout_seconds", DEFAULT_REQUEST_TIMEOUT)
        self._max_objects = config.get("max_objects", DEFAULT_MAX_OBJECTS)
        self._max_labels = config.get("max_labels", DEFAULT_MAX_LABELS)
        logger.debug(f"VisionClient initialized: {self._endpoint}")

    def annotate(self, image_b64: str) -> Annotations:
        return annotate_image(
            image_b64,
            api_key=self._api_key,
            endpoint=self._endpoint,
            timeout=self._timeout,
            max_objects=self._max_objects,
            max_labels=self._max_labels,
        )
