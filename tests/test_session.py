"""
Tests for the scan session state machine and error boundary
"""

import logging
import unittest
from unittest import mock

import requests

from src.obstacle_alert.core import ScanSession, ScanState, ScanStatus
from src.obstacle_alert.models import (
    Annotations,
    DetectedLabel,
    DetectedObject,
    NormalizedVertex,
    ObstacleCategory,
)
from src.obstacle_alert.vision import VisionAPIError, VisionClient

HALF_BOX = [
    NormalizedVertex(0.0, 0.0),
    NormalizedVertex(0.4, 0.0),
    NormalizedVertex(0.4, 0.4),
    NormalizedVertex(0.0, 0.4),
]


class FakeSource:
    def __init__(self, error=None):
        self.error = error
        self.calls = 0

    def capture(self):
        self.calls += 1
        if self.error:
            raise self.error
        return "aW1hZ2U="


class FakeAnnotator:
    def __init__(self, annotations=None, error=None):
        self.annotations = annotations or Annotations()
        self.error = error
        self.images = []

    def annotate(self, image_b64):
        self.images.append(image_b64)
        if self.error:
            raise self.error
        return self.annotations


class FakePlayer:
    def __init__(self, error=None):
        self.error = error
        self.played = []

    def play(self, category, volume):
        if self.error:
            raise self.error
        self.played.append((category, volume))


def door_annotations():
    return Annotations(
        objects=[DetectedObject("Door", HALF_BOX)],
        labels=[DetectedLabel("Door", 0.9), DetectedLabel("Wood", 0.7)],
    )


class TestScanSession(unittest.TestCase):
    """Test a scan cycle."""

    def test_detected_scan(self):
        """Test a detection plays the alert and updates the display."""
        player = FakePlayer()
        session = ScanSession(FakeSource(), FakeAnnotator(door_annotations()), player)

        report = session.scan()

        self.assertEqual(report.status, ScanStatus.DETECTED)
        self.assertEqual(report.result.category, ObstacleCategory.WALL)
        self.assertEqual(len(player.played), 1)
        category, volume = player.played[0]
        self.assertEqual(category, ObstacleCategory.WALL)
        self.assertAlmostEqual(volume, 0.6)
        self.assertEqual(session.display.obstacle_label, "WALL: Door")
        self.assertEqual(session.display.confidence, report.result.confidence)
        self.assertEqual(len(session.display.labels), 2)
        self.assertEqual(session.state, ScanState.IDLE)
        self.assertFalse(session.busy)

    def test_state_transitions(self):
        """Test states are visited strictly in order."""
        states = []
        session = ScanSession(
            FakeSource(),
            FakeAnnotator(door_annotations()),
            FakePlayer(),
            on_state=states.append,
        )

        session.scan()

        self.assertEqual(
            states,
            [
                ScanState.CAPTURING,
                ScanState.ANNOTATING,
                ScanState.CLASSIFYING,
                ScanState.PLAYING,
                ScanState.IDLE,
            ],
        )

    def test_nothing_detected(self):
        """Test an empty response clears the summary and plays nothing."""
        player = FakePlayer()
        session = ScanSession(FakeSource(), FakeAnnotator(Annotations()), player)
        session.display.obstacle_label = "WALL: Door"
        session.display.confidence = 80

        report = session.scan()

        self.assertEqual(report.status, ScanStatus.NOTHING)
        self.assertEqual(player.played, [])
        self.assertEqual(session.display.obstacle_label, "")
        self.assertEqual(session.display.confidence, 0)
        self.assertEqual(session.display.labels, [])

    def test_network_failure_resets_confidence(self):
        """Test a failed API call resets confidence and keeps the summary."""
        player = FakePlayer()
        annotator = FakeAnnotator(error=VisionAPIError("unreachable"))
        session = ScanSession(FakeSource(), annotator, player)
        session.display.obstacle_label = "WALL: Door"
        session.display.confidence = 80

        report = session.scan()

        self.assertEqual(report.status, ScanStatus.FAILED)
        self.assertIsInstance(report.error, VisionAPIError)
        self.assertEqual(session.display.confidence, 0)
        self.assertEqual(session.display.obstacle_label, "WALL: Door")
        self.assertEqual(player.played, [])
        self.assertEqual(session.state, ScanState.IDLE)
        self.assertFalse(session.busy)

    def test_capture_failure(self):
        """Test a camera failure never reaches the API."""
        annotator = FakeAnnotator(door_annotations())
        session = ScanSession(
            FakeSource(error=RuntimeError("no frame")), annotator, FakePlayer()
        )

        report = session.scan()

        self.assertEqual(report.status, ScanStatus.FAILED)
        self.assertEqual(annotator.images, [])

    def test_playback_failure(self):
        """Test a playback error is contained and confidence reset."""
        session = ScanSession(
            FakeSource(),
            FakeAnnotator(door_annotations()),
            FakePlayer(error=RuntimeError("device lost")),
        )

        report = session.scan()

        self.assertEqual(report.status, ScanStatus.FAILED)
        self.assertEqual(session.display.confidence, 0)
        self.assertFalse(session.busy)

    def test_no_retry(self):
        """Test a failed scan is attempted exactly once."""
        source = FakeSource(error=RuntimeError("no frame"))
        session = ScanSession(source, FakeAnnotator(), FakePlayer())

        session.scan()

        self.assertEqual(source.calls, 1)

    def test_busy_rejects_reentrant_scan(self):
        """Test a trigger during a scan is rejected."""
        nested = []

        def on_state(state):
            if state is ScanState.CAPTURING:
                nested.append(session.scan())

        session = ScanSession(
            FakeSource(),
            FakeAnnotator(door_annotations()),
            FakePlayer(),
            on_state=on_state,
        )

        report = session.scan()

        self.assertEqual(report.status, ScanStatus.DETECTED)
        self.assertEqual(len(nested), 1)
        self.assertEqual(nested[0].status, ScanStatus.BUSY)

    def test_state_callback_error_clears_busy(self):
        """Test a failing IDLE callback does not leave the session stuck busy."""

        def on_state(state):
            if state is ScanState.IDLE:
                raise RuntimeError("display gone")

        session = ScanSession(
            FakeSource(),
            FakeAnnotator(door_annotations()),
            FakePlayer(),
            on_state=on_state,
        )

        with self.assertRaises(RuntimeError):
            session.scan()

        self.assertFalse(session.busy)
        session._on_state = None
        self.assertEqual(session.scan().status, ScanStatus.DETECTED)

    @mock.patch("src.obstacle_alert.vision.client.requests.post")
    def test_failure_log_hides_api_key(self, mock_post):
        """Test the logged traceback of a transport error omits the API key."""
        mock_post.side_effect = requests.ConnectionError(
            "Max retries exceeded with url: /v1/images:annotate?key=SECRET123"
        )
        session = ScanSession(
            FakeSource(), VisionClient({"api_key": "SECRET123"}), FakePlayer()
        )

        with self.assertLogs("src.obstacle_alert.core.session", level="ERROR") as logs:
            report = session.scan()

        self.assertEqual(report.status, ScanStatus.FAILED)
        formatter = logging.Formatter()
        for record in logs.records:
            self.assertNotIn("SECRET123", formatter.format(record))

    def test_repeated_scans_identical(self):
        """Test two scans with identical input give identical results."""
        session = ScanSession(
            FakeSource(), FakeAnnotator(door_annotations()), FakePlayer()
        )

        first = session.scan()
        second = session.scan()

        self.assertEqual(first.result, second.result)


if __name__ == "__main__":
    unittest.main()
