"""Tileplay Engine: word-placement board game rules, bot and Rush puzzles."""

from tileplay.constants import BOARD_SIZE, TILE_VALUES, BONUS_SQUARES, BINGO_BONUS, CENTER
from tileplay.tile import PlacedTile, Tile, rack_from_letters, tiles_from_word
from tileplay.board import Board
from tileplay.dictionary import Dictionary, DictionaryGate
from tileplay.words import Word, find_new_words
from tileplay.scoring import rack_penalty, score
from tileplay.validator import PlayResult, Validation, validate, validate_play
from tileplay.move import BotMove, move_key
from tileplay.engine import MoveEngine, generate_moves
from tileplay.leave import rack_quality
from tileplay.bag import TILE_DISTRIBUTION, make_bag
from tileplay.selector import rank_moves, select_move
from tileplay.puzzle import Puzzle, PuzzleMove, generate_puzzle, match_submission
from tileplay.rush import RushSession, Submission

__all__ = [
    "BINGO_BONUS",
    "BOARD_SIZE",
    "BONUS_SQUARES",
    "CENTER",
    "TILE_DISTRIBUTION",
    "TILE_VALUES",
    "Board",
    "BotMove",
    "Dictionary",
    "DictionaryGate",
    "MoveEngine",
    "PlacedTile",
    "PlayResult",
    "Puzzle",
    "PuzzleMove",
    "RushSession",
    "Submission",
    "Tile",
    "Validation",
    "Word",
    "find_new_words",
    "generate_moves",
    "generate_puzzle",
    "make_bag",
    "match_submission",
    "move_key",
    "rack_from_letters",
    "rack_penalty",
    "rack_quality",
    "rank_moves",
    "score",
    "select_move",
    "tiles_from_word",
    "validate",
    "validate_play",
]
