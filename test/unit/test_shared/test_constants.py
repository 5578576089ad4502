"""
Tests for shared constants.
"""

from alias_game.shared import constants


def test_game_constants():
    """Round length, team count and cue threshold are fixed."""
    assert constants.TEAM_COUNT == 3
    assert constants.ROUND_TIME == 60
    assert constants.LOW_TIME_THRESHOLD == 3
    assert constants.TICK_INTERVAL_MS == 1000


def test_session_key():
    """The persistence key is fixed so old saves can be resumed."""
    assert constants.SESSION_KEY == "aliasGameState"
