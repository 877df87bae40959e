from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Protocol

from .const import DURATION_SEC, REVEAL_DELAY_MS, TICK_MS

logger = logging.getLogger(__name__)


class SessionPhase(Enum):
    Idle = 1
    Active = 2
    Finished = 3


class SessionEvent(Enum):
    STARTED = "started"
    SCORED = "scored"
    TICKED = "ticked"
    VISIBILITY = "visibility"
    FINISHED = "finished"


@dataclass(frozen=True)
class Session:
    score: int = 0
    time_remaining: int = DURATION_SEC
    phase: SessionPhase = SessionPhase.Idle
    target_visible: bool = False

    @property
    def active(self) -> bool:
        return self.phase == SessionPhase.Active

    @property
    def finished(self) -> bool:
        return self.phase == SessionPhase.Finished


class RandomSource(Protocol):
    def random(self) -> float: ...


Listener = Callable[[SessionEvent, Session], None]


def summary_text(score: int) -> str:
    return f"Your score was {score}. Tap to restart!"


class SessionController:
    """
    Owns the current Session and runs its countdown.

    The countdown is cooperative: the host calls advance(dt_ms) once per
    frame and the controller fires tick() every tick_ms. After each tick
    that leaves time on the clock, the target visibility is redrawn (50/50)
    reveal_delay_ms later. tick() can also be called directly.
    """

    def __init__(
        self,
        duration_sec: int = DURATION_SEC,
        tick_ms: int = TICK_MS,
        reveal_delay_ms: int = REVEAL_DELAY_MS,
        rng: Optional[RandomSource] = None,
    ):
        if duration_sec <= 0:
            raise ValueError("duration_sec must be positive")
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self.duration_sec = int(duration_sec)
        self.tick_ms = int(tick_ms)
        self.reveal_delay_ms = max(0, int(reveal_delay_ms))
        self.rng: RandomSource = rng if rng is not None else random.Random()

        self._session = Session(time_remaining=self.duration_sec)
        self._listeners: List[Listener] = []
        self._since_tick_ms = 0.0
        self._reveal_in_ms: Optional[float] = None

    @property
    def session(self) -> Session:
        return self._session

    # ------------- observers -------------
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, event: SessionEvent, **changes) -> None:
        self._session = replace(self._session, **changes)
        for listener in list(self._listeners):
            try:
                listener(event, self._session)
            except Exception:
                logger.exception("session listener failed on %s", event.value)

    # ------------- operations -------------
    def start(self) -> None:
        self._since_tick_ms = 0.0
        self._reveal_in_ms = None
        logger.info("session started (%d s)", self.duration_sec)
        self._set(
            SessionEvent.STARTED,
            score=0,
            time_remaining=self.duration_sec,
            phase=SessionPhase.Active,
            target_visible=True,
        )

    def tap(self) -> bool:
        s = self._session
        if not (s.active and s.target_visible):
            return False
        self._set(SessionEvent.SCORED, score=s.score + 1)
        return True

    def tick(self) -> None:
        s = self._session
        if not s.active:
            return
        remaining = max(0, s.time_remaining - 1)
        logger.debug("tick: %d s left", remaining)
        self._set(SessionEvent.TICKED, time_remaining=remaining)
        if remaining == 0:
            self.end()
        elif self.reveal_delay_ms == 0:
            self._reveal()
        else:
            self._reveal_in_ms = float(self.reveal_delay_ms)

    def end(self) -> None:
        if not self._session.active:
            return
        self._since_tick_ms = 0.0
        self._reveal_in_ms = None
        logger.info("session finished with score %d", self._session.score)
        self._set(SessionEvent.FINISHED,
                  phase=SessionPhase.Finished, target_visible=False)

    def _reveal(self) -> None:
        self._reveal_in_ms = None
        visible = self.rng.random() < 0.5
        if visible != self._session.target_visible:
            self._set(SessionEvent.VISIBILITY, target_visible=visible)

    # ------------- loop -------------
    def advance(self, dt_ms: float) -> None:
        """Run the countdown loop for dt_ms of wall time."""
        if not self._session.active:
            return
        try:
            self._run_timers(float(dt_ms))
        except Exception:
            logger.exception("countdown loop failed; ending session early")
            self.end()

    def _run_timers(self, dt_ms: float) -> None:
        # Walk the frame in timer order so a long frame behaves like many short ones.
        while dt_ms > 0 and self._session.active:
            until_tick = self.tick_ms - self._since_tick_ms
            until_reveal = self._reveal_in_ms
            step = until_tick if until_reveal is None else min(until_tick, until_reveal)
            if step > dt_ms:
                self._since_tick_ms += dt_ms
                if self._reveal_in_ms is not None:
                    self._reveal_in_ms -= dt_ms
                return

            dt_ms -= step
            self._since_tick_ms += step
            if self._reveal_in_ms is not None:
                self._reveal_in_ms -= step
                if self._reveal_in_ms <= 0:
                    self._reveal()
            if self._since_tick_ms >= self.tick_ms:
                self._since_tick_ms = 0.0
                self.tick()
