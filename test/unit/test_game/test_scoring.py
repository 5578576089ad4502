"""
Tests for the score ledger.
"""

import pytest

from alias_game.game import ScoreLedger


def test_initial_scores_are_zero():
    assert ScoreLedger().snapshot() == {0: 0, 1: 0, 2: 0}


def test_increment():
    ledger = ScoreLedger()
    assert ledger.increment(1) == 1
    assert ledger.increment(1) == 2
    assert ledger.snapshot() == {0: 0, 1: 2, 2: 0}


def test_snapshot_is_a_copy():
    ledger = ScoreLedger()
    snap = ledger.snapshot()
    snap[0] = 99
    assert ledger.score(0) == 0


def test_out_of_range_team():
    with pytest.raises(IndexError):
        ScoreLedger().increment(3)


def test_restore_validates():
    ledger = ScoreLedger()
    ledger.restore([1, 2, 3])
    assert ledger.as_list() == [1, 2, 3]
    with pytest.raises(ValueError):
        ledger.restore([1, 2])
    with pytest.raises(ValueError):
        ledger.restore([1, -1, 0])
    assert ledger.as_list() == [1, 2, 3]


def test_reset():
    ledger = ScoreLedger(scores=[4, 5, 6])
    ledger.reset()
    assert ledger.as_list() == [0, 0, 0]
