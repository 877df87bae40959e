from __future__ import annotations

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

import pygame
import pytest


class SeqRandom:
    """Random source that replays fixed draws, cycling when exhausted."""

    def __init__(self, draws: list[float]) -> None:
        self.draws = list(draws)
        self.calls = 0

    def random(self) -> float:
        value = self.draws[self.calls % len(self.draws)]
        self.calls += 1
        return value


@pytest.fixture
def pygame_headless():
    pygame.init()
    yield
    pygame.quit()
