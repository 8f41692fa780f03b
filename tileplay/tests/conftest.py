"""
Pytest fixtures for tileplay tests.
"""

import random

import pytest

from ..board import Board
from ..dictionary import Dictionary
from ..move import BotMove
from ..puzzle import Puzzle, PuzzleMove
from ..scoring import score
from ..tile import rack_from_letters, tiles_from_word
from ..words import find_new_words

WORDS = [
    "AT", "TA", "AA", "AS", "AE", "EA", "ES", "RE", "ER", "TE", "ET",
    "CAT", "CATS", "SCAT", "ACT", "ACTS", "CAST", "SAT", "EAT", "TEA",
    "ATE", "ACE", "ACES", "CASE", "RAT", "RATS", "STAR", "ARTS", "TAR",
    "ART", "ARE", "EAR", "ERA", "SEA", "SET", "TEAR", "RATE", "RACE",
    "CARE", "CART", "CARTS", "CRATE", "CRATES", "REACT", "TRACE",
    "CASTER", "RECAST", "CATERS", "CRATERS",
]


@pytest.fixture
def dictionary() -> Dictionary:
    """Small word list covering the words the tests form."""
    return Dictionary(WORDS)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def empty_board() -> Board:
    return Board()


@pytest.fixture
def cat_board() -> Board:
    """CAT across the center: C(7,6) A(7,7) T(7,8)."""
    return Board(tiles_from_word("CAT", 7, 6, "H"))


def bot_move(board: Board, word: str, row: int, col: int, direction: str) -> BotMove:
    """Score a move laying *word* from (row, col), skipping occupied cells."""
    tiles = [t for t in tiles_from_word(word, row, col, direction) if board.is_empty(t.row, t.col)]
    words = find_new_words(board, tiles)
    return BotMove(tiles, [w.text for w in words], score(words, tiles), direction)


@pytest.fixture
def cats_puzzle(cat_board: Board) -> Puzzle:
    """Hand-built puzzle on the CAT board with two known top moves."""
    moves = [
        bot_move(cat_board, "CATS", 7, 6, "H"),  # S at (7,9)
        bot_move(cat_board, "SCAT", 7, 5, "H"),  # S at (7,5)
    ]
    moves.sort(key=lambda m: -m.score)
    return Puzzle(
        id="test-puzzle",
        board=tuple(cat_board.tiles()),
        rack=tuple(rack_from_letters("SERTAEO")),
        top_moves=tuple(PuzzleMove.from_bot_move(m) for m in moves),
    )
