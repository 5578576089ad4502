"""
Pytest configuration and shared fixtures for the Alias game.
"""

import os
import random
import sys

import pytest

# pygame 相关测试使用无窗口、无声卡的驱动
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add src to path for testing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from alias_game.game import GameSession, JsonFileStore, SessionStore  # noqa: E402


@pytest.fixture
def rng():
    """Seeded random generator so draws are reproducible."""
    return random.Random(1234)


@pytest.fixture
def team_names():
    return ["T1", "T2", "T3"]


@pytest.fixture
def session(rng):
    """A fresh session in SETUP with a recorder for every emitted event."""
    s = GameSession(rng=rng)
    s.events = []
    for name in ("changed", "round_started", "tick", "low_time", "round_ended", "game_over"):
        s.on(name, lambda payload, name=name: s.events.append((name, payload)))
    return s


@pytest.fixture
def session_store(tmp_path):
    return SessionStore(JsonFileStore(tmp_path / "save.json"))
