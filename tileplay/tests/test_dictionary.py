"""
Tests for the dictionary gate and word list loading.
"""

import logging

import pytest

from ..dictionary import Dictionary, DictionaryGate


class TestGate:
    """Tests for the ready flag."""

    def test_ready_gate_defers_to_predicate(self):
        gate = DictionaryGate(lambda w: w == "CAT")
        assert gate.is_valid_word("CAT")
        assert not gate.is_valid_word("DOG")
        assert gate.accepts(["CAT"])
        assert not gate.accepts(["CAT", "DOG"])

    def test_unready_gate_refuses_everything(self):
        gate = DictionaryGate(lambda w: True, ready=False)
        assert not gate.is_valid_word("CAT")
        assert not gate.accepts(["CAT"])


class TestDictionary:
    """Tests for the in-memory word list."""

    def test_words_normalised(self):
        d = Dictionary(["cat", " Dog\n", "a", "x-ray", "ZZZZZZZZZZZZZZZZ"])
        assert d.words == {"CAT", "DOG"}
        assert "cat" in d
        assert len(d) == 2

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\nacts\n\n", encoding="utf-8")
        d = Dictionary.from_file(str(path))
        assert d.words == {"CAT", "ACTS"}

    def test_from_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Dictionary.from_file(str(tmp_path / "nope.txt"))

    def test_load_falls_back_to_minimal(self, tmp_path, monkeypatch, caplog):
        monkeypatch.chdir(tmp_path)
        with caplog.at_level(logging.WARNING, logger="tileplay"):
            d = Dictionary.load(str(tmp_path / "nope.txt"))
        assert "GAME" in d
        assert "minimal" in caplog.text

    def test_load_prefers_given_path(self, tmp_path):
        path = tmp_path / "mine.txt"
        path.write_text("QI\n", encoding="utf-8")
        assert Dictionary.load(str(path)).words == {"QI"}

    def test_minimal_covers_puzzle_words(self):
        d = Dictionary.minimal()
        for word in ("GAME", "PLAY", "WORD", "QUIZ", "STAR", "TEAM", "TEA", "SUN"):
            assert word in d
