"""
Scan session - one capture, annotate, classify, play cycle at a time.

State machine per scan:
    IDLE -> CAPTURING -> ANNOTATING -> CLASSIFYING -> PLAYING -> IDLE

The session is the single error boundary: any failure aborts the scan,
resets the confidence to 0 and returns to IDLE. No retry.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from ..models import Annotations, DetectionResult, ObstacleCategory
from ..pipeline import evaluate
from ..ui.display import DisplayState

logger = logging.getLogger(__name__)


class ImageSource(Protocol):
    """Anything that yields a base64 still image on demand."""

    def capture(self) -> str: ...


class Annotator(Protocol):
    """Anything that turns a base64 image into annotations."""

    def annotate(self, image_b64: str) -> Annotations: ...


class AlertPlayer(Protocol):
    """Anything that plays the alert for a category at a volume."""

    def play(self, category: ObstacleCategory, volume: float) -> object: ...


class ScanState(str, Enum):
    IDLE = "idle"
    CAPTURING = "capturing"
    ANNOTATING = "annotating"
    CLASSIFYING = "classifying"
    PLAYING = "playing"


class ScanStatus(str, Enum):
    DETECTED = "detected"  # Something classified and alert played
    NOTHING = "nothing"  # API found neither objects nor labels
    FAILED = "failed"  # Aborted by an error
    BUSY = "busy"  # Rejected, another scan in flight


@dataclass(frozen=True)
class ScanReport:
    """Outcome of ScanSession.scan()."""

    status: ScanStatus
    result: DetectionResult | None = None
    error: Exception | None = None


class ScanSession:
    """
    Runs scans against a camera, the vision API and the alert player.

    Attributes:
        display: Display state updated by every scan
        state: Current ScanState
        busy: True while a scan is in flight
    """

    def __init__(
        self,
        source: ImageSource,
        annotator: Annotator,
        player: AlertPlayer,
        display: DisplayState | None = None,
        on_state: Callable[[ScanState], None] | None = None,
    ):
        self._source = source
        self._annotator = annotator
        self._player = player
        self._on_state = on_state
        self.display = display or DisplayState()
        self.state = ScanState.IDLE
        self.busy = False

    def _enter(self, state: ScanState) -> None:
        self.state = state
        logger.debug(f"Scan state: {state.value}")
        if self._on_state:
            self._on_state(state)

    def scan(self) -> ScanReport:
        """
        Run one scan cycle.

        Returns:
            ScanReport describing what happened
        """
        if self.busy:
            logger.warning("Scan already in progress, ignoring trigger")
            return ScanReport(status=ScanStatus.BUSY)

        self.busy = True
        try:
            return self._run()
        except Exception as e:
            logger.error(f"Detection error: {e}", exc_info=True)
            self.display.reset_confidence()
            return ScanReport(status=ScanStatus.FAILED, error=e)
        finally:
            self.busy = False
            self._enter(ScanState.IDLE)

    def _run(self) -> ScanReport:
        self._enter(ScanState.CAPTURING)
        image_b64 = self._source.capture()

        self._enter(ScanState.ANNOTATING)
        annotations = self._annotator.annotate(image_b64)
        self.display.show_labels(annotations.labels)

        self._enter(ScanState.CLASSIFYING)
        result = evaluate(annotations)

        if result is None:
            logger.info("No obstacle detected")
            self.display.show_result(None)
            return ScanReport(status=ScanStatus.NOTHING)

        if annotations.objects:
            logger.info("== OBSTACLE DETECTED ==")
            logger.info(f"Localized objects: {[o.name for o in annotations.objects]}")
        else:
            logger.info("== LABELS DETECTED (NO OBJECTS) ==")
        label_names = [label.description for label in annotations.labels]
        logger.info(f"Label annotations: {label_names}")
        logger.info(f"Classified type: {result.category.value}")

        # Summary is shown before playback; confidence only once it succeeded
        self.display.obstacle_label = result.display_label

        self._enter(ScanState.PLAYING)
        self._player.play(result.category, result.volume)

        self.display.show_result(result)
        return ScanReport(status=ScanStatus.DETECTED, result=result)
