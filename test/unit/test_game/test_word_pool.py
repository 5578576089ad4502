"""
Tests for the word pool.
"""

import random

import pytest

from alias_game.game import EXHAUSTED, InvalidInputError, WordPool


def test_load_filters_blank_entries():
    """Blank and whitespace-only lines are dropped, the rest kept as-is."""
    pool = WordPool(["cat", "", "   ", "dog", "\t"])
    assert pool.words == ("cat", "dog")
    assert pool.skipped == frozenset()


def test_load_empty_raises():
    """A list with nothing but blanks is rejected and the pool is unchanged."""
    pool = WordPool(["cat"])
    with pytest.raises(InvalidInputError):
        pool.load(["", "  "])
    assert pool.words == ("cat",)


def test_load_resets_skipped():
    pool = WordPool(["cat", "dog"])
    pool.mark_skipped("cat")
    pool.load(["cat", "dog"])
    assert pool.skipped == frozenset()


def test_draw_returns_uppercase_word():
    pool = WordPool(["cat", "dog"], rng=random.Random(7))
    assert pool.draw() in {"CAT", "DOG"}


def test_draw_does_not_mutate():
    """Drawing is a peek: the same single word can be drawn again and again."""
    pool = WordPool(["only"])
    assert [pool.draw() for _ in range(5)] == ["ONLY"] * 5
    assert not pool.is_exhausted()


def test_draw_never_returns_skipped_word():
    pool = WordPool(["a", "b", "c", "d"], rng=random.Random(3))
    pool.mark_skipped("B")
    pool.mark_skipped("d")
    drawn = {pool.draw() for _ in range(200)}
    assert drawn == {"A", "C"}


def test_draw_exhausted():
    pool = WordPool(["cat", "dog"])
    pool.mark_skipped("CAT")
    pool.mark_skipped("DOG")
    assert pool.draw() is EXHAUSTED
    assert pool.is_exhausted()
    assert not EXHAUSTED


def test_mark_skipped_is_idempotent():
    pool = WordPool(["cat", "dog"])
    assert pool.mark_skipped("CAT") is True
    assert pool.mark_skipped("CAT") is False
    assert pool.skipped == frozenset({"cat"})


def test_mark_skipped_keeps_subset_invariant():
    """Unknown words are ignored so skipped always stays inside words."""
    pool = WordPool(["cat"])
    assert pool.mark_skipped("HORSE") is False
    assert pool.mark_skipped(None) is False
    assert pool.skipped <= set(pool.words)


def test_display_form_skips_every_variant():
    """Entries that display identically leave the pool together."""
    pool = WordPool(["cat", "Cat", "dog"])
    pool.mark_skipped("CAT")
    assert pool.skipped == frozenset({"cat", "Cat"})
    assert pool.available() == ["dog"]


def test_raw_entry_can_be_skipped():
    pool = WordPool(["cat", "dog"])
    pool.mark_skipped("dog")
    assert pool.skipped == frozenset({"dog"})


def test_duplicates_do_not_bias_the_draw():
    """Availability is a set difference, duplicate lines count once."""
    pool = WordPool(["cat", "cat", "cat", "dog"])
    assert pool.available() == ["cat", "dog"]


def test_skipped_grows_monotonically():
    pool = WordPool(["a", "b", "c"], rng=random.Random(11))
    sizes = []
    for _ in range(6):
        word = pool.draw()
        if word is EXHAUSTED:
            break
        pool.mark_skipped(word)
        sizes.append(len(pool.skipped))
        assert pool.skipped <= set(pool.words)
    assert sizes == sorted(sizes)
    assert pool.is_exhausted()
