from __future__ import annotations
import pygame
from typing import List, Tuple

from engine.api.config import EngineConfig
from engine.api.frame_data import Tap


class PointerInput:
    """
    Turns presses into discrete taps:
    - Left mouse button down -> one tap at the cursor.
    - Touch FINGERDOWN -> one tap (normalized finger coords scaled to the screen).
    - Mouse events that SDL synthesizes from touches are ignored so a finger
      never counts twice.
    - Respects --mirror by converting window coords -> logical coords.
    """

    def __init__(self, cfg: EngineConfig):
        self.mirror = cfg.mirror
        self._pending: List[Tap] = []

    def _to_logical(self, x: float, y: float, w: int, h: int) -> Tuple[float, float]:
        if self.mirror:
            x = (w - 1) - x
        return float(x), float(y)

    def handle_pygame_event(self, event: pygame.event.Event, screen_size: Tuple[int, int]) -> None:
        w, h = screen_size

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button != 1 or getattr(event, "touch", False):
                return
            self._pending.append(Tap(*self._to_logical(*event.pos, w, h)))

        elif event.type == pygame.FINGERDOWN:
            self._pending.append(
                Tap(*self._to_logical(event.x * w, event.y * h, w, h)))

        elif event.type == pygame.WINDOWFOCUSLOST:
            self._pending.clear()

    def emit_taps(self) -> List[Tap]:
        """Return the taps collected since the last call and forget them."""
        taps, self._pending = self._pending, []
        return taps
