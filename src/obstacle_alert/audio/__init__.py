"""
Audio Module - Alert sound playback.

This module provides:
- Mixer setup (init_audio / shutdown_audio)
- FeedbackPlayer: preloaded per-category alert sounds
"""

from .player import (
    AudioError,
    FeedbackPlayer,
    SoundHandle,
    init_audio,
    shutdown_audio,
)

__all__ = [
    "AudioError",
    "FeedbackPlayer",
    "SoundHandle",
    "init_audio",
    "shutdown_audio",
]
