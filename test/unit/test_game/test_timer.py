"""
Tests for the round timer.
"""

from alias_game.game import RoundTimer


def record(timer):
    events = []
    for name in ("tick", "low_time", "expired"):
        timer.on(name, lambda remaining, name=name: events.append((name, remaining)))
    return events


def test_start_resets_to_full_duration():
    """Restarting mid-countdown puts the clock back to the full duration."""
    timer = RoundTimer()
    timer.start()
    timer.tick()
    timer.start()
    assert timer.remaining == 60
    assert timer.active


def test_tick_is_noop_when_inactive():
    """An idle timer does not count down."""
    timer = RoundTimer()
    assert timer.tick() is False
    assert timer.remaining == 60


def test_expires_exactly_once():
    """The clock stops at zero and fires expired a single time."""
    timer = RoundTimer()
    events = record(timer)
    timer.start()
    for _ in range(70):
        timer.tick()
    assert timer.remaining == 0
    assert not timer.active
    assert [e for e in events if e[0] == "expired"] == [("expired", 0)]
    assert len([e for e in events if e[0] == "tick"]) == 60


def test_low_time_cue_in_last_seconds():
    """low_time fires for each of the last three seconds."""
    timer = RoundTimer()
    events = record(timer)
    timer.start()
    for _ in range(60):
        timer.tick()
    assert [r for name, r in events if name == "low_time"] == [3, 2, 1]


def test_stop_deactivates_and_invalidates_pending_ticks():
    """Stopping bumps the generation so queued ticks are dropped."""
    timer = RoundTimer()
    gen = timer.start()
    timer.stop()
    assert not timer.active
    assert timer.generation != gen
    assert timer.tick(gen) is False


def test_stale_generation_is_ignored():
    """A tick scheduled for an earlier round must not touch the new one."""
    timer = RoundTimer()
    old = timer.start()
    timer.tick(old)
    new = timer.start()
    assert timer.tick(old) is False
    assert timer.remaining == 60
    assert timer.tick(new) is True
    assert timer.remaining == 59


def test_fraction():
    """fraction() is the share of the round still left."""
    timer = RoundTimer(duration=4)
    timer.start()
    timer.tick()
    assert timer.fraction() == 0.75
