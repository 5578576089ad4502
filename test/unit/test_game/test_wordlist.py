"""
Tests for word list ingestion.
"""

import pytest

from alias_game.game import parse_word_list, read_word_file


def test_parse_one_word_per_line():
    assert parse_word_list("cat\ndog\n\n  \nbig house\n") == ["cat", "dog", "big house"]


def test_parse_windows_line_endings():
    assert parse_word_list("cat\r\ndog\r\n") == ["cat", "dog"]


def test_read_word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("măr\npară\n\n", encoding="utf-8")
    assert read_word_file(path) == ["măr", "pară"]


def test_read_strips_bom(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes("\ufeffcat\ndog".encode("utf-8"))
    assert read_word_file(path) == ["cat", "dog"]


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_word_file(tmp_path / "nope.txt")


def test_read_rejects_non_utf8_file(tmp_path):
    """A file in a legacy encoding (cp1250) is rejected instead of decoded with replacement characters."""
    path = tmp_path / "words.txt"
    path.write_bytes("pisică\ncâine\n".encode("cp1250"))
    with pytest.raises(UnicodeDecodeError):
        read_word_file(path)
