from __future__ import annotations

import pytest

from games.tap_challenge.session import (
    Session,
    SessionController,
    SessionEvent,
    SessionPhase,
    summary_text,
)

from conftest import SeqRandom

VISIBLE = 0.1
HIDDEN = 0.9


def _started(draws: list[float] | None = None, **kw) -> SessionController:
    c = SessionController(rng=SeqRandom(draws or [VISIBLE]), **kw)
    c.start()
    return c


def test_new_controller_is_idle() -> None:
    c = SessionController()
    s = c.session
    assert s.phase == SessionPhase.Idle
    assert not s.active
    assert s.score == 0
    assert s.time_remaining == 30
    assert not s.target_visible


def test_start_resets_and_shows_target() -> None:
    c = _started()
    assert c.session == Session(score=0, time_remaining=30,
                                phase=SessionPhase.Active, target_visible=True)


@pytest.mark.parametrize("taps", [0, 1, 7, 25])
def test_score_counts_taps_while_visible(taps: int) -> None:
    c = _started()
    for _ in range(taps):
        assert c.tap() is True
    assert c.session.score == taps


def test_tap_while_hidden_is_noop() -> None:
    c = _started([HIDDEN], reveal_delay_ms=0)
    c.tick()
    assert not c.session.target_visible
    before = c.session
    assert c.tap() is False
    assert c.session == before


def test_tap_while_inactive_is_noop() -> None:
    c = SessionController()
    before = c.session
    assert c.tap() is False
    assert c.session == before


def test_thirty_ticks_end_the_session() -> None:
    c = _started()
    for i in range(29):
        c.tick()
        assert c.session.active
        assert c.session.time_remaining == 29 - i
    c.tick()
    s = c.session
    assert s.phase == SessionPhase.Finished
    assert s.time_remaining == 0
    assert not s.target_visible

    c.tick()
    assert c.session.time_remaining == 0


def test_scenario_three_taps_then_expiry() -> None:
    c = _started()
    for _ in range(3):
        c.tap()
    for _ in range(30):
        c.tick()
    s = c.session
    assert s.score == 3
    assert not s.active
    assert s.finished
    assert summary_text(s.score).startswith("Your score was 3")


def test_restart_after_finish() -> None:
    c = _started()
    c.tap()
    for _ in range(30):
        c.tick()
    c.start()
    s = c.session
    assert s.active
    assert s.score == 0
    assert s.time_remaining == 30


def test_score_frozen_after_finish() -> None:
    c = _started()
    c.tap()
    c.end()
    assert c.tap() is False
    assert c.session.score == 1


def test_visibility_redrawn_after_reveal_delay() -> None:
    rng = SeqRandom([HIDDEN, VISIBLE])
    c = _started()
    c.rng = rng
    c.advance(1000)
    assert c.session.time_remaining == 29
    assert c.session.target_visible
    c.advance(199)
    assert c.session.target_visible
    c.advance(1)
    assert not c.session.target_visible
    assert rng.calls == 1


def test_advance_drives_countdown_to_completion() -> None:
    c = _started([VISIBLE, HIDDEN])
    for _ in range(60):
        c.advance(500)
    assert c.session.finished
    assert c.session.time_remaining == 0


def test_single_long_frame_runs_every_tick() -> None:
    c = _started()
    c.advance(12_500)
    assert c.session.time_remaining == 18


def test_advance_is_noop_when_not_active() -> None:
    c = SessionController()
    c.advance(5000)
    assert c.session.phase == SessionPhase.Idle


def test_loop_error_ends_session() -> None:
    class _Broken:
        def random(self) -> float:
            raise RuntimeError("no entropy")

    c = SessionController(rng=_Broken())
    c.start()
    c.tap()
    c.advance(1300)
    s = c.session
    assert s.finished
    assert s.score == 1
    assert not s.target_visible


def test_listeners_see_every_change() -> None:
    c = SessionController(duration_sec=2, rng=SeqRandom([HIDDEN]), reveal_delay_ms=0)
    seen: list[tuple[SessionEvent, Session]] = []
    c.subscribe(lambda event, s: seen.append((event, s)))
    c.start()
    c.tap()
    c.tick()
    c.tick()
    assert [e for e, _ in seen] == [
        SessionEvent.STARTED,
        SessionEvent.SCORED,
        SessionEvent.TICKED,
        SessionEvent.VISIBILITY,
        SessionEvent.TICKED,
        SessionEvent.FINISHED,
    ]
    assert seen[-1][1].score == 1


def test_unsubscribe_and_failing_listener() -> None:
    c = SessionController()
    calls: list[SessionEvent] = []

    def boom(event, s):
        raise ValueError("listener bug")

    c.subscribe(boom)
    unsubscribe = c.subscribe(lambda event, s: calls.append(event))
    c.start()
    assert c.session.active
    unsubscribe()
    c.tap()
    assert calls == [SessionEvent.STARTED]


def test_end_only_from_active() -> None:
    c = SessionController()
    c.end()
    assert c.session.phase == SessionPhase.Idle


def test_rejects_bad_timing() -> None:
    with pytest.raises(ValueError):
        SessionController(duration_sec=0)
    with pytest.raises(ValueError):
        SessionController(tick_ms=0)
