"""
Console display for scan results.

Renders the obstacle summary, the expandable label panel and the
confidence score. Purely presentational.
"""

import sys
from dataclasses import dataclass, field
from typing import List

from ..models import DetectedLabel, DetectionResult

NO_OBSTACLES_TEXT = "No obstacles detected"
NO_LABELS_TEXT = "No labels yet"


# ANSI color codes for terminal output
class Colors:
    TEXT = "\033[97m"
    ACCENT = "\033[93m"
    DETAIL = "\033[37m"
    SUCCESS = "\033[92m"
    ERROR = "\033[91m"
    MUTED = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls):
        """Disable colors for non-TTY output."""
        cls.TEXT = cls.ACCENT = cls.DETAIL = cls.SUCCESS = ""
        cls.ERROR = cls.MUTED = cls.BOLD = cls.RESET = ""


# Disable colors if not a TTY
if not sys.stdout.isatty():
    Colors.disable()


@dataclass
class DisplayState:
    """
    What the screen currently shows.

    Attributes:
        obstacle_label: Summary text, empty when nothing is detected
        labels: Raw labels from the last response
        confidence: Last confidence score, 0 hides it
        labels_expanded: Whether the label panel is open
    """

    obstacle_label: str = ""
    labels: List[DetectedLabel] = field(default_factory=list)
    confidence: int = 0
    labels_expanded: bool = False

    def toggle_labels(self) -> bool:
        """Open or close the label panel. Returns the new state."""
        self.labels_expanded = not self.labels_expanded
        return self.labels_expanded

    def show_labels(self, labels: List[DetectedLabel]) -> None:
        self.labels = list(labels)

    def show_result(self, result: DetectionResult | None) -> None:
        """Show a scan outcome; None means nothing was detected."""
        if result is None:
            self.obstacle_label = ""
            self.confidence = 0
            return
        self.obstacle_label = result.display_label
        self.labels = list(result.labels)
        self.confidence = result.confidence

    def reset_confidence(self) -> None:
        self.confidence = 0


def format_label(label: DetectedLabel) -> str:
    return f"{label.description} {label.score * 100:.1f}%"


def render(state: DisplayState) -> str:
    """
    Render the display as text.

    Args:
        state: Current display state

    Returns:
        Multi-line string ready to print
    """
    summary = state.obstacle_label or NO_OBSTACLES_TEXT
    lines = [f"{Colors.BOLD}{Colors.TEXT}{summary}{Colors.RESET}"]

    arrow = "◄" if state.labels_expanded else "►"
    if state.labels_expanded:
        lines.append(f"{Colors.ACCENT}{arrow}{Colors.RESET} Labels:")
        if state.labels:
            for label in state.labels:
                lines.append(f"  {Colors.DETAIL}{format_label(label)}{Colors.RESET}")
        else:
            lines.append(f"  {Colors.MUTED}{NO_LABELS_TEXT}{Colors.RESET}")
    else:
        count = len(state.labels)
        lines.append(f"{Colors.ACCENT}{arrow}{Colors.RESET} Labels ({count})")

    if state.confidence > 0:
        lines.append(f"{Colors.SUCCESS}Confidence: {state.confidence}%{Colors.RESET}")

    return "\n".join(lines)


def print_display(state: DisplayState) -> None:
    print()
    print("=" * 60)
    print(render(state))
    print("=" * 60)
