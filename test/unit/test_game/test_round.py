"""
Tests for the round controller state machine.
"""

import random

import pytest

from alias_game.game import (
    InvalidStateError,
    RoundController,
    RoundPhase,
    RoundTimer,
    ScoreLedger,
    WordPool,
)


def make_round(words, seed=5):
    pool = WordPool(words, rng=random.Random(seed))
    ledger = ScoreLedger()
    controller = RoundController(pool, ledger, RoundTimer())
    controller.events = []
    for name in ("changed", "ended", "exhausted"):
        controller.on(name, lambda _c, name=name: controller.events.append(name))
    return controller


def run_out_clock(controller):
    while controller.timer.active:
        controller.timer.tick()


def test_start_round_draws_and_activates():
    """Starting a round draws an uppercase word with a full clock."""
    rc = make_round(["cat", "dog"])
    assert rc.start_round(0) is True
    assert rc.phase is RoundPhase.ACTIVE
    assert rc.current_word in {"CAT", "DOG"}
    assert rc.time_left == 60
    assert rc.round_score == 0


def test_start_round_while_active_is_an_error():
    """Only one round can be active at a time."""
    rc = make_round(["cat"])
    rc.start_round(0)
    with pytest.raises(InvalidStateError):
        rc.start_round(1)


def test_guess_scores_for_current_team_and_draws_again():
    """A guess scores for the playing team and shows the next word."""
    rc = make_round(["cat", "dog"])
    rc.start_round(2)
    assert rc.guess() is True
    assert rc.ledger.snapshot() == {0: 0, 1: 0, 2: 1}
    assert rc.round_score == 1
    assert rc.phase is RoundPhase.ACTIVE
    assert rc.current_word in {"CAT", "DOG"}


def test_guessed_words_stay_in_the_pool():
    """Guessed words are not removed and can come up again."""
    rc = make_round(["only"])
    rc.start_round(0)
    for _ in range(5):
        rc.guess()
    assert rc.current_word == "ONLY"
    assert rc.pool.skipped == frozenset()
    assert rc.round_score == 5


def test_skip_removes_word_without_scoring():
    """A skip takes the word out of the pool and scores nothing."""
    rc = make_round(["cat", "dog"])
    rc.start_round(0)
    first = rc.current_word
    rc.skip()
    assert rc.ledger.snapshot() == {0: 0, 1: 0, 2: 0}
    assert rc.pool.skipped == frozenset({first.lower()})
    assert rc.current_word != first


def test_skipping_last_word_exhausts():
    """Skipping the final word stops the clock and reports exhaustion."""
    rc = make_round(["only"])
    rc.start_round(0)
    rc.skip()
    assert rc.phase is RoundPhase.EXHAUSTED
    assert rc.current_word is None
    assert not rc.timer.active
    assert rc.events[-1] == "exhausted"


def test_start_round_on_exhausted_pool():
    """A round cannot start when every word has been skipped."""
    rc = make_round(["only"])
    rc.pool.mark_skipped("only")
    assert rc.start_round(0) is False
    assert rc.phase is RoundPhase.EXHAUSTED
    assert not rc.timer.active


def test_timer_expiry_ends_round_without_scoring():
    """Running out of time ends the round; the shown word is not scored."""
    rc = make_round(["cat", "dog"])
    rc.start_round(1)
    run_out_clock(rc)
    assert rc.phase is RoundPhase.ENDED
    assert rc.round_score == 0
    assert rc.ledger.snapshot() == {0: 0, 1: 0, 2: 0}
    assert rc.events.count("ended") == 1


def test_expiry_is_idempotent_once_ended():
    """Extra expiry signals after the end are ignored."""
    rc = make_round(["cat"])
    rc.start_round(0)
    run_out_clock(rc)
    rc.on_timer_expired()
    rc.timer.tick()
    assert rc.events.count("ended") == 1


def test_guess_at_zero_ends_round():
    """A guess landing when the clock already reads zero closes the round."""
    rc = make_round(["cat", "dog"])
    rc.start_round(0)
    rc.timer.remaining = 0
    rc.guess()
    assert rc.phase is RoundPhase.ENDED
    assert rc.round_score == 1
    assert rc.ledger.score(0) == 1
    rc.on_timer_expired()
    assert rc.events.count("ended") == 1


def test_actions_outside_active_are_ignored():
    """Guess and skip do nothing before a round starts or after it ends."""
    rc = make_round(["cat"])
    assert rc.guess() is False
    assert rc.skip() is False
    rc.start_round(0)
    run_out_clock(rc)
    assert rc.guess() is False
    assert rc.skip() is False
    assert rc.ledger.score(0) == 0
    assert rc.pool.skipped == frozenset()


def test_acknowledge_requires_ended_round():
    """A round can only be closed once it has ended."""
    rc = make_round(["cat"])
    rc.start_round(0)
    with pytest.raises(InvalidStateError):
        rc.acknowledge_round()
    run_out_clock(rc)
    rc.acknowledge_round()
    assert rc.phase is RoundPhase.CLOSED
    assert rc.start_round(1) is True


def test_round_score_resets_each_round():
    """Round score starts at zero each round while totals carry over."""
    rc = make_round(["cat"])
    rc.start_round(0)
    rc.guess()
    run_out_clock(rc)
    rc.acknowledge_round()
    rc.start_round(1)
    assert rc.round_score == 0
    assert rc.ledger.score(0) == 1
