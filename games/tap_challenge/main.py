from __future__ import annotations
import logging
import pygame
from typing import Optional

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.render.shapes import draw_button, draw_text_centered

from .const import *
from .scores import HighScoreTable
from .session import Session, SessionController, SessionEvent, summary_text

logger = logging.getLogger(__name__)


class TapChallenge(Game):
    def __init__(self, controller: Optional[SessionController] = None):
        # tests hand in a controller with a seeded random source
        self.controller = controller

    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest
        opts = manifest.get("options", {}) or {}
        storage = manifest.get("storage", {}) or {}

        if self.controller is None:
            self.controller = SessionController(
                duration_sec=int(opts.get("duration_sec", DURATION_SEC)),
                tick_ms=int(opts.get("tick_ms", TICK_MS)),
                reveal_delay_ms=int(opts.get("reveal_delay_ms", REVEAL_DELAY_MS)),
            )
        self.target_radius = int(opts.get("target_radius", TARGET_RADIUS))
        self.record_high_score = bool(opts.get("record_high_score", False))
        self.high_scores = HighScoreTable(
            ctx.store, key=storage.get("key", HIGH_SCORE_KEY))

        w, h = ctx.screen_size
        self.center = (w // 2, h // 2)
        self.start_rect = pygame.Rect(0, 0, BUTTON_WIDTH, BUTTON_HEIGHT)
        self.start_rect.center = self.center
        self.target_center = (w // 2, h // 2 + 40)
        self.dialog_rect = pygame.Rect(0, 0, min(DIALOG_WIDTH, w - 32), DIALOG_HEIGHT)
        self.dialog_rect.center = self.center
        self.restart_rect = pygame.Rect(0, 0, BUTTON_WIDTH - 60, BUTTON_HEIGHT - 12)
        self.restart_rect.midbottom = (self.dialog_rect.centerx, self.dialog_rect.bottom - 20)

        self.session: Session = self.controller.session
        self.best = self.high_scores.get_high_score()
        self.new_best = False
        self._unsubscribe = self.controller.subscribe(self._on_session_event)
        logger.info("tap challenge loaded, best score %d", self.best)

    # ------------- session observer -------------
    def _on_session_event(self, event: SessionEvent, session: Session) -> None:
        self.session = session
        if event == SessionEvent.SCORED:
            self.ctx.sfx.play("tap")
        elif event == SessionEvent.STARTED:
            self.new_best = False
        elif event == SessionEvent.FINISHED:
            if self.record_high_score:
                self.new_best = self.high_scores.submit(session.score)
            self.best = self.high_scores.get_high_score()

    # ------------- helpers -------------
    def _hits_target(self, x: float, y: float) -> bool:
        dx = x - self.target_center[0]
        dy = y - self.target_center[1]
        return dx * dx + dy * dy <= self.target_radius * self.target_radius

    def _start_or_restart(self) -> None:
        self.controller.start()

    # ------------- loop hooks -------------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        s = self.session
        for tap in frame.taps:
            if s.active:
                if self._hits_target(tap.x, tap.y):
                    self.controller.tap()
            elif s.finished:
                if self.restart_rect.collidepoint(tap.x, tap.y):
                    self._start_or_restart()
                    return
            elif self.start_rect.collidepoint(tap.x, tap.y):
                self._start_or_restart()
                return

        self.controller.advance(dt_ms)

    def on_draw(self, surface: pygame.Surface) -> None:
        surface.fill(BG_COLOR)
        s = self.session

        if s.active:
            cx, cy = self.center
            draw_text_centered(surface, f"Score: {s.score}", (cx, cy - 140),
                               HUD_COLOR, size=HUD_FONT_SIZE)
            draw_text_centered(surface, f"Time: {s.time_remaining}", (cx, cy - 100),
                               HUD_COLOR, size=TIME_FONT_SIZE)
            if s.target_visible:
                pygame.draw.circle(surface, TARGET_COLOR,
                                   self.target_center, self.target_radius)
            return

        if s.finished:
            self._draw_game_over(surface)
            return

        draw_button(surface, self.start_rect, "Start Game",
                    BUTTON_COLOR, BUTTON_TEXT_COLOR)

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        scrim = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        scrim.fill(SCRIM_COLOR)
        surface.blit(scrim, (0, 0))

        d = self.dialog_rect
        pygame.draw.rect(surface, DIALOG_COLOR, d, border_radius=24)
        draw_text_centered(surface, "Game Over", (d.centerx, d.top + 40),
                           HUD_COLOR, size=TITLE_FONT_SIZE)
        draw_text_centered(surface, summary_text(self.session.score),
                           (d.centerx, d.top + 95), HUD_COLOR, size=BODY_FONT_SIZE)
        best = f"New best: {self.best}" if self.new_best else f"Best: {self.best}"
        draw_text_centered(surface, best, (d.centerx, d.top + 130),
                           HUD_COLOR, size=BODY_FONT_SIZE)
        draw_button(surface, self.restart_rect, "Restart",
                    BUTTON_COLOR, BUTTON_TEXT_COLOR, size=26)

    def on_event(self, event: pygame.event.Event) -> None:
        # Keyboard fallback: space/enter starts or restarts
        if event.type == pygame.KEYDOWN and not self.session.active:
            if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self._start_or_restart()

    def on_unload(self) -> None:
        self.controller.end()
        self._unsubscribe()


def get_game():
    return TapChallenge()
