from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

import pygame

logger = logging.getLogger(__name__)


class SoundEffects:
    """
    Named one-shot sound effects on top of pygame.mixer.

    Playback is fire-and-forget: a missing mixer, an unloadable file or a
    failing channel only logs a warning and the sound is skipped.
    """

    def __init__(self, *, enabled: bool = True, volume: float = 0.8) -> None:
        self.enabled = enabled
        self.volume = max(0.0, min(1.0, float(volume)))
        self._sounds: Dict[str, pygame.mixer.Sound] = {}
        if not self.enabled:
            return
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("audio disabled, mixer init failed: %s", exc)
            self.enabled = False

    def load(self, name: str, path: Path) -> bool:
        if not self.enabled:
            return False
        if not Path(path).exists():
            logger.warning("sound %r not found at %s", name, path)
            return False
        try:
            sound = pygame.mixer.Sound(str(path))
        except pygame.error as exc:
            logger.warning("could not load sound %r from %s: %s", name, path, exc)
            return False
        sound.set_volume(self.volume)
        self._sounds[name] = sound
        return True

    def has(self, name: str) -> bool:
        return name in self._sounds

    def play(self, name: str) -> None:
        sound: Optional[pygame.mixer.Sound] = self._sounds.get(name)
        if not self.enabled or sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.warning("could not play sound %r: %s", name, exc)

    def close(self) -> None:
        self._sounds.clear()
        if self.enabled and pygame.mixer.get_init():
            pygame.mixer.quit()
