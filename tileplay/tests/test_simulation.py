"""
Tests for puzzle board building and synthetic move replay.

Tests:
- Replayed moves clear the score and tile-count bar
- Unused tiles go back to the bag
- No tile is lost or duplicated between board and bag
- Crossing words form exactly one word each
"""

import random

import pytest

from ..bag import TOTAL_TILES, make_bag
from ..board import Board
from ..constants import CENTER_CELL, PUZZLE_CROSS_WORDS, PUZZLE_REPLAY_MIN_SCORE
from ..dictionary import DictionaryGate
from ..engine import MoveEngine
from ..leave import remaining_rack
from ..puzzle import _crossings, build_board, place_cross_words, place_seed_word
from ..simulation import simulate_move, simulate_moves
from ..tile import Tile
from ..words import find_new_words


@pytest.fixture
def anything():
    """Gate accepting every word, so replays always find plays."""
    return DictionaryGate(lambda w: True)


def seeded_board(seed):
    rng = random.Random(seed)
    bag = make_bag(rng)
    board = Board()
    place_seed_word(board, bag, "GAME")
    return board, bag, rng


def tile_count(board, bag):
    return board.count_tiles() + len(bag)


class TestSimulateMove:
    """Tests for one replayed turn."""

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_move_clears_the_bar(self, anything, seed):
        board, bag, rng = seeded_board(seed)
        engine = MoveEngine(anything, max_permutations=24, rng=rng)
        move = simulate_move(engine, board, bag, rng)
        assert move is not None
        assert move.score >= PUZZLE_REPLAY_MIN_SCORE
        assert len(move.tiles) >= 2

    def test_move_committed_to_board(self, anything):
        board, bag, rng = seeded_board(0)
        engine = MoveEngine(anything, max_permutations=24, rng=rng)
        move = simulate_move(engine, board, bag, rng)
        for t in move.tiles:
            assert board.get(t.row, t.col) == t

    def test_leave_returned_to_front_of_bag(self, anything):
        board, bag, rng = seeded_board(1)
        rack = bag[:7]
        rest = bag[7:]
        engine = MoveEngine(anything, max_permutations=24, rng=rng)
        move = simulate_move(engine, board, bag, rng)
        leave = remaining_rack(rack, move.tiles)
        assert bag[:len(leave)] == leave
        assert bag[len(leave):] == rest

    def test_no_tile_lost(self, anything):
        board, bag, rng = seeded_board(2)
        engine = MoveEngine(anything, max_permutations=24, rng=rng)
        simulate_move(engine, board, bag, rng)
        assert tile_count(board, bag) == TOTAL_TILES

    def test_nothing_good_enough_is_a_pass(self, anything):
        """A pass leaves the board and the bag exactly as they were."""
        board, bag, rng = seeded_board(0)
        before = list(bag)
        engine = MoveEngine(anything, max_permutations=4, rng=rng)
        assert simulate_move(engine, board, bag, rng, min_score=10_000) is None
        assert bag == before
        assert board.count_tiles() == 4

    def test_short_bag_is_a_pass(self, anything, cat_board, rng):
        bag = [Tile.of("S"), Tile.of("E")]
        engine = MoveEngine(anything, rng=rng)
        assert simulate_move(engine, cat_board, bag, rng) is None
        assert bag == [Tile.of("S"), Tile.of("E")]
        assert cat_board.count_tiles() == 3


class TestSimulateMoves:
    """Tests for a run of replayed turns."""

    def test_two_replays(self, anything):
        board, bag, rng = seeded_board(0)
        engine = MoveEngine(anything, max_permutations=24, rng=rng)
        played = simulate_moves(engine, board, bag, rng, n_moves=2)
        assert 1 <= len(played) <= 2
        for move in played:
            assert move.score >= PUZZLE_REPLAY_MIN_SCORE
            assert len(move.tiles) >= 2
        assert tile_count(board, bag) == TOTAL_TILES

    def test_replays_never_overlap(self, anything):
        board, bag, rng = seeded_board(1)
        engine = MoveEngine(anything, max_permutations=24, rng=rng)
        played = simulate_moves(engine, board, bag, rng, n_moves=2)
        positions = [t.pos for m in played for t in m.tiles]
        assert len(positions) == len(set(positions))


class TestCrossWords:
    """Tests for the hand-placed crossing words."""

    def test_each_option_forms_exactly_the_word(self):
        board, _, _ = seeded_board(0)
        for word in ("TEA", "AGE", "MAP"):
            for tiles in _crossings(board, word):
                assert [w.text for w in find_new_words(board, tiles)] == [word]

    def test_place_cross_words(self):
        board, bag, rng = seeded_board(3)
        placed = place_cross_words(board, bag, rng, 3)
        assert 2 <= len(placed) <= 3
        assert set(placed) <= set(PUZZLE_CROSS_WORDS)
        assert board.count_tiles() > 4
        assert tile_count(board, bag) == TOTAL_TILES

    def test_respects_count(self):
        board, bag, rng = seeded_board(4)
        assert len(place_cross_words(board, bag, rng, 1)) == 1


class TestBuildBoard:
    """Tests for the whole starting position."""

    @pytest.mark.parametrize("seed", [0, 1])
    def test_build_board(self, anything, seed):
        rng = random.Random(seed)
        bag = make_bag(rng)
        engine = MoveEngine(anything, max_permutations=8, rng=rng)
        board = build_board(engine, bag, rng)
        assert CENTER_CELL in board
        assert board.count_tiles() > 4
        assert tile_count(board, bag) == TOTAL_TILES
