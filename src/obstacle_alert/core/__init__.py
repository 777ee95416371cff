"""
Core scan components.

This module contains the camera adapters and the scan session that ties
capture, the vision API, classification and playback together.
"""

from .camera import (
    CameraError,
    CameraSource,
    ImageFileSource,
    capture_still,
    encode_frame,
    initialize_camera,
    load_image_file,
)
from .session import ScanReport, ScanSession, ScanState, ScanStatus

__all__ = [
    # Camera
    "CameraError",
    "CameraSource",
    "ImageFileSource",
    # Session
    "ScanReport",
    "ScanSession",
    "ScanState",
    "ScanStatus",
    "capture_still",
    "encode_frame",
    "initialize_camera",
    "load_image_file",
]
