"""
Alert sound playback.

Sounds are preloaded once, one handle per obstacle category, and replayed
on every scan. pygame has no per-sound mute, so SoundHandle keeps the mute
flag and the requested volume and applies both through set_volume().

HEADLESS MODE SUPPORT:
pygame's mixer does not need an X11 display, so this works on a
Raspberry Pi or other headless systems.
"""

import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import pygame

from ..models import DEFAULT_SOUND_FILES, ObstacleCategory

logger = logging.getLogger(__name__)

_mixer_ready = False


class AudioError(Exception):
    """Raised when the mixer or a required sound cannot be loaded or played."""


def init_audio() -> None:
    """
    Initialize the pygame mixer for audio only.

    Safe to call more than once; only the first call initializes.

    Raises:
        AudioError: If no audio device is available
    """
    global _mixer_ready
    if _mixer_ready:
        return

    try:
        pygame.mixer.pre_init(frequency=22050, size=-16, channels=2, buffer=512)
        pygame.mixer.init()
    except pygame.error as e:
        raise AudioError(f"Failed to initialize audio: {e}") from e

    _mixer_ready = True
    logger.info("Audio backend: pygame mixer")


def shutdown_audio() -> None:
    global _mixer_ready
    if _mixer_ready:
        pygame.mixer.quit()
        _mixer_ready = False


class SoundHandle:
    """A loaded sound with mute and volume state."""

    def __init__(self, sound: Any, name: str = ""):
        self.name = name
        self._sound = sound
        self._volume = 1.0
        self._muted = False

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def muted(self) -> bool:
        return self._muted

    def stop(self) -> None:
        self._sound.stop()

    def set_muted(self, muted: bool) -> None:
        self._muted = muted
        self._apply_volume()

    def set_volume(self, volume: float) -> None:
        self._volume = volume
        self._apply_volume()

    def play(self) -> None:
        self._sound.play()

    def _apply_volume(self) -> None:
        self._sound.set_volume(0.0 if self._muted else self._volume)


class FeedbackPlayer:
    """
    Plays the alert sound for a detected obstacle category.

    Every category shares the DEFAULT sound unless it has its own file.
    Only one scan runs at a time, so handles are mutated in place without
    locking.
    """

    def __init__(
        self,
        sounds_dir: str | Path,
        sound_files: Mapping[ObstacleCategory, str] | None = None,
        sound_factory: Callable[[str], Any] | None = None,
    ):
        """
        Load every sound up front.

        Args:
            sounds_dir: Directory holding the sound files
            sound_files: Category -> file name (defaults to DEFAULT_SOUND_FILES)
            sound_factory: Callable that loads a file path into a sound object
                with stop/set_volume/play (defaults to pygame.mixer.Sound)

        Raises:
            AudioError: If the default sound cannot be loaded
        """
        self._sounds_dir = Path(sounds_dir)
        self._sound_files = dict(sound_files or DEFAULT_SOUND_FILES)
        self._factory = sound_factory or pygame.mixer.Sound
        self._handles: dict[ObstacleCategory, SoundHandle] = {}
        self._load_sounds()

    def _load_sounds(self) -> None:
        for category, filename in self._sound_files.items():
            path = self._sounds_dir / filename

            if not path.exists():
                if category is ObstacleCategory.DEFAULT:
                    raise AudioError(f"Default sound not found: {path}")
                logger.warning(
                    f"Sound for '{category.value}' not found: {path} (using default)"
                )
                continue

            try:
                sound = self._factory(str(path))
            except pygame.error as e:
                if category is ObstacleCategory.DEFAULT:
                    raise AudioError(f"Failed to load default sound {path}: {e}") from e
                logger.warning(f"Failed to load sound {path}: {e} (using default)")
                continue

            self._handles[category] = SoundHandle(sound, name=filename)

        if ObstacleCategory.DEFAULT not in self._handles:
            raise AudioError("No default sound configured")

        logger.info(f"Loaded {len(self._handles)} sound(s) from {self._sounds_dir}")

    def handle_for(self, category: ObstacleCategory) -> SoundHandle:
        """Return the sound for a category, falling back to the default."""
        return self._handles.get(category) or self._handles[ObstacleCategory.DEFAULT]

    def play(self, category: ObstacleCategory, volume: float) -> SoundHandle:
        """
        Play the category's alert, replacing whatever that sound was doing.

        Order matters: stop, unmute, set volume, then play, so a quick
        second scan neither overlaps nor inherits an old mute or volume.
        """
        handle = self.handle_for(category)
        logger.info(f"Playing sound: {handle.name} at volume {volume:.2f}")

        try:
            handle.stop()
            handle.set_muted(False)
            handle.set_volume(volume)
            handle.play()
        except pygame.error as e:
            raise AudioError(f"Playback failed for {handle.name}: {e}") from e

        return handle

    def close(self) -> None:
        for handle in self._handles.values():
            handle.stop()
