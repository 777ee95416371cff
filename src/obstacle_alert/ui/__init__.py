"""
UI Module - Console rendering of scan results.
"""

from .display import (
    NO_LABELS_TEXT,
    NO_OBSTACLES_TEXT,
    Colors,
    DisplayState,
    format_label,
    print_display,
    render,
)

__all__ = [
    "Colors",
    "DisplayState",
    "NO_LABELS_TEXT",
    "NO_OBSTACLES_TEXT",
    "format_label",
    "print_display",
    "render",
]
