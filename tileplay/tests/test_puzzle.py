"""
Tests for Rush puzzle generation and submission matching.
"""

import random
from collections import Counter

import pytest

from ..bag import make_full_bag
from ..board import Board
from ..constants import CENTER_CELL, PUZZLE_TOP_MOVES, RACK_SIZE
from ..dictionary import Dictionary
from ..puzzle import _crossings, generate_puzzle, match_submission, place_seed_word
from ..tile import Tile
from ..validator import validate


def quick_puzzle(seed, **kwargs):
    kwargs.setdefault("max_attempts", 1)
    kwargs.setdefault("min_top_score", 0)
    kwargs.setdefault("max_permutations", 8)
    words = Dictionary.minimal()
    return generate_puzzle(words.is_valid_word, True, random.Random(seed), **kwargs)


@pytest.fixture(scope="module")
def puzzle():
    return quick_puzzle(11)


class TestGeneratedPuzzle:
    """Properties every generated puzzle has."""

    def test_board_covers_center(self, puzzle):
        assert CENTER_CELL in puzzle.to_board()

    def test_board_cells_unique(self, puzzle):
        positions = [t.pos for t in puzzle.board]
        assert len(positions) == len(set(positions))

    def test_rack_size(self, puzzle):
        assert 0 < len(puzzle.rack) <= RACK_SIZE

    def test_top_moves_sorted_and_capped(self, puzzle):
        scores = [m.score for m in puzzle.top_moves]
        assert len(scores) <= PUZZLE_TOP_MOVES
        assert scores == sorted(scores, reverse=True)
        assert puzzle.best_score == (scores[0] if scores else 0)

    def test_top_moves_are_legal(self, puzzle):
        board = puzzle.to_board()
        for move in puzzle.top_moves:
            assert validate(board, move.tiles).is_valid
            assert all(board.is_empty(t.row, t.col) for t in move.tiles)

    def test_top_moves_come_from_rack(self, puzzle):
        rack = Counter(puzzle.rack)
        for move in puzzle.top_moves:
            assert not Counter(t.to_tile() for t in move.tiles) - rack

    def test_hint_fields(self, puzzle):
        for move in puzzle.top_moves:
            assert move.anchor_cell == move.tiles[0].pos
            assert move.main_word_length == max(len(w) for w in move.words)
            assert list(move.letters_used) == sorted(t.letter for t in move.tiles)

    def test_same_seed_same_puzzle(self, puzzle):
        again = quick_puzzle(11)
        assert again.id == puzzle.id
        assert again.board == puzzle.board
        assert [m.key for m in again.top_moves] == [m.key for m in puzzle.top_moves]


class TestFallback:
    """Generation never fails outright."""

    def test_bar_too_high(self):
        puzzle = quick_puzzle(5, max_attempts=2, min_top_score=1000)
        assert puzzle.id.startswith("fallback-")
        assert puzzle.board

    def test_too_few_top_moves_falls_back(self):
        """More required top moves than a puzzle keeps can never be accepted."""
        puzzle = generate_puzzle(
            lambda w: True, True, random.Random(3),
            max_attempts=1, min_top_score=0,
            min_top_moves=PUZZLE_TOP_MOVES + 1, max_permutations=4,
        )
        assert puzzle.id.startswith("fallback-")
        assert len(puzzle.top_moves) == PUZZLE_TOP_MOVES

    def test_enough_top_moves_accepted(self):
        puzzle = generate_puzzle(
            lambda w: True, True, random.Random(3),
            max_attempts=1, min_top_score=0, min_top_moves=3, max_permutations=4,
        )
        assert not puzzle.id.startswith("fallback-")
        assert len(puzzle.top_moves) >= 3

    def test_unready_dictionary(self):
        puzzle = generate_puzzle(
            lambda w: True, False, random.Random(2), max_attempts=1, max_permutations=4,
        )
        assert puzzle.id.startswith("fallback-")
        assert puzzle.top_moves == ()
        assert puzzle.best_score == 0


class TestBoardBuilding:
    """Tests for the hand-placed starting words."""

    def test_seed_word_centered(self):
        board = Board()
        bag = make_full_bag()
        assert place_seed_word(board, bag, "GAME")
        assert "".join(t.letter for t in board.tiles()) == "GAME"
        assert [t.pos for t in board.tiles()][0] == (7, 5)
        assert len(bag) == 96

    def test_seed_word_needs_all_tiles(self):
        board = Board()
        bag = [Tile.of("G"), Tile.of("A")]
        assert not place_seed_word(board, bag, "GAME")
        assert board.is_board_empty()
        assert len(bag) == 2

    def test_crossings_share_a_letter(self):
        board = Board()
        place_seed_word(board, make_full_bag(), "GAME")
        options = _crossings(board, "TEA")
        assert options
        for tiles in options:
            assert validate(board, tiles).is_valid
            assert all(board.is_empty(t.row, t.col) for t in tiles)

    def test_no_crossing_without_common_letter(self):
        board = Board()
        place_seed_word(board, make_full_bag(), "GAME")
        assert _crossings(board, "SUN") == []


class TestMatchSubmission:
    """Tests for matching a submission to a top move."""

    def test_exact_match(self, cats_puzzle):
        move = match_submission(cats_puzzle, [Tile.of("S").place(7, 9)])
        assert move is not None
        assert move.words == ("CATS",)

    def test_valid_but_not_top(self, cats_puzzle):
        assert match_submission(cats_puzzle, [Tile.of("S").place(8, 7)]) is None

    def test_credited_once(self, cats_puzzle):
        tiles = [Tile.of("S").place(7, 5)]
        move = match_submission(cats_puzzle, tiles)
        assert match_submission(cats_puzzle, tiles, {move.key}) is None

    def test_blank_matches_by_letter_shown(self, cats_puzzle):
        """Keys carry the letter shown, so a blank played as S matches."""
        tiles = [Tile.of("?").place(7, 9, "S")]
        assert match_submission(cats_puzzle, tiles) is not None
