"""
audio_manager.py: Sound effects through pygame.mixer. Never fatal.
"""

import logging
from typing import Dict, Optional

import pygame

from .constants import DEFAULT_VOLUME

logger = logging.getLogger(__name__)


class AudioManager:
    """
    Plays named sound effects. A missing mixer, a muted device or an
    unknown sound name only gets logged; gameplay never sees an error.
    """

    def __init__(self, muted: bool = False, default_volume: float = DEFAULT_VOLUME):
        self.sounds: Dict[str, "pygame.mixer.Sound"] = {}
        self.muted = muted
        self.default_volume = self._clamp(default_volume)

    @staticmethod
    def _clamp(volume: float) -> float:
        return max(0.0, min(1.0, volume))

    def init_mixer(self) -> bool:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            return True
        except pygame.error as e:
            logger.warning("Audio disabled, mixer unavailable: %s", e)
            return False

    def load_sound(self, name: str, path: str) -> bool:
        try:
            self.sounds[name] = pygame.mixer.Sound(path)
            return True
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Failed to load sound %s from %s: %s", name, path, e)
            return False

    def play_sound(self, name: str, volume: Optional[float] = None):
        if self.muted:
            return

        sound = self.sounds.get(name)
        if sound is None:
            logger.debug("Sound not found: %s", name)
            return

        try:
            sound.set_volume(self._clamp(self.default_volume if volume is None else volume))
            sound.play()
        except pygame.error as e:
            logger.debug("Audio playback prevented for %s: %s", name, e)

    def stop_sound(self, name: str):
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.stop()
        except pygame.error as e:
            logger.debug("Could not stop %s: %s", name, e)

    def set_muted(self, muted: bool):
        self.muted = bool(muted)

    def is_muted(self) -> bool:
        return self.muted

    def set_default_volume(self, volume: float):
        self.default_volume = self._clamp(volume)
