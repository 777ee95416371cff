"""
Camera initialization and still capture.
"""

import base64
import logging
import time

import cv2
import numpy as np

from ..utils.constants import (
    CAMERA_BUFFER_SIZE,
    CAMERA_RECONNECT_DELAY,
    DEFAULT_JPEG_QUALITY,
    FLUSH_FRAMES,
    MAX_CAMERA_RECONNECT_ATTEMPTS,
)

logger = logging.getLogger(__name__)


class CameraError(Exception):
    """Raised when the camera cannot be opened or a frame cannot be read."""


def parse_source(source: str | int) -> str | int:
    """Turn a numeric source string ("0") into a device index."""
    if isinstance(source, str) and source.strip().isdigit():
        return int(source)
    return source


def initialize_camera(source: str | int) -> cv2.VideoCapture:
    """
    Initialize camera with retry logic.

    Args:
        source: Camera URL, device path or device index

    Returns:
        OpenCV VideoCapture object

    Raises:
        CameraError: If camera cannot be opened after retries
    """
    source = parse_source(source)

    for attempt in range(MAX_CAMERA_RECONNECT_ATTEMPTS + 1):
        logger.info(f"Connecting to camera: {source} (attempt {attempt + 1})")
        cap = cv2.VideoCapture(source)

        if cap.isOpened():
            # Set buffer size to reduce latency between trigger and still
            cap.set(cv2.CAP_PROP_BUFFERSIZE, CAMERA_BUFFER_SIZE)
            logger.info("Camera connected successfully")
            return cap

        cap.release()
        if attempt < MAX_CAMERA_RECONNECT_ATTEMPTS:
            logger.warning(
                f"Failed to connect, retrying in {CAMERA_RECONNECT_DELAY}s..."
            )
            time.sleep(CAMERA_RECONNECT_DELAY)

    logger.error(
        f"Failed to connect to camera after {MAX_CAMERA_RECONNECT_ATTEMPTS + 1} attempts"
    )
    raise CameraError(f"No access to camera: {source}")


def encode_frame(frame: np.ndarray, quality: int = DEFAULT_JPEG_QUALITY) -> str:
    """
    JPEG-encode a BGR frame and return it as base64 text.

    Raises:
        CameraError: If encoding fails
    """
    ok, buffer = cv2.imencode(".jpg", frame, [cv2.IMWRITE_JPEG_QUALITY, quality])
    if not ok:
        raise CameraError("Failed to encode frame as JPEG")
    return base64.b64encode(buffer.tobytes()).decode("utf-8")


def capture_still(
    cap: cv2.VideoCapture, quality: int = DEFAULT_JPEG_QUALITY
) -> str:
    """
    Grab one frame from an open camera as a base64 JPEG.

    Frames queued while nobody was reading are dropped first, so the still
    shows the scene at trigger time.

    Raises:
        CameraError: If no frame could be read
    """
    for _ in range(FLUSH_FRAMES):
        cap.grab()

    ret, frame = cap.read()
    if not ret or frame is None:
        raise CameraError("Failed to read frame from camera")
    return encode_frame(frame, quality)


def load_image_file(path: str) -> str:
    """
    Read an image file as base64, without re-encoding.

    Raises:
        CameraError: If the file is missing or not a readable image
    """
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as e:
        raise CameraError(f"Failed to read image {path}: {e}") from e

    if cv2.imdecode(np.frombuffer(data, dtype=np.uint8), cv2.IMREAD_COLOR) is None:
        raise CameraError(f"Not a readable image: {path}")

    return base64.b64encode(data).decode("utf-8")


class CameraSource:
    """Live camera that captures stills on demand."""

    def __init__(self, source: str | int, quality: int = DEFAULT_JPEG_QUALITY):
        self._source = source
        self._quality = quality
        self._cap: cv2.VideoCapture | None = None

    def open(self) -> None:
        if self._cap is None:
            self._cap = initialize_camera(self._source)

    def capture(self) -> str:
        self.open()
        return capture_still(self._cap, self._quality)

    def close(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            logger.info("Camera released")


class ImageFileSource:
    """Still image on disk, used in place of a camera."""

    def __init__(self, path: str):
        self._path = path

    def capture(self) -> str:
        logger.info(f"Using image file: {self._path}")
        return load_image_file(self._path)

    def close(self) -> None:
        pass
