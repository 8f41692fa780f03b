"""Move validation.

Placement rules are reported as data: every violated rule is listed so
the caller can show them all at once. Nothing here raises for a bad move
and nothing mutates the board or the candidate.
"""

from __future__ import annotations

from typing import Sequence

from tileplay.board import Board, in_bounds
from tileplay.constants import CENTER_CELL
from tileplay.dictionary import DictionaryGate
from tileplay.scoring import score
from tileplay.tile import PlacedTile
from tileplay.words import find_new_words

# Rule identifiers
EMPTY_MOVE = "empty_move"
NOT_IN_LINE = "not_in_line"
GAP_IN_LINE = "gap_in_line"
CENTER_NOT_COVERED = "center_not_covered"
NOT_CONNECTED = "not_connected"
OUT_OF_BOUNDS = "out_of_bounds"
CELL_OCCUPIED = "cell_occupied"
DUPLICATE_CELL = "duplicate_cell"
NO_WORD_FORMED = "no_word_formed"
INVALID_WORD = "invalid_word"
DICTIONARY_NOT_READY = "dictionary_not_ready"


class Validation:
    """Outcome of :func:`validate`."""

    __slots__ = ("errors",)

    def __init__(self, errors: list[str] | None = None):
        self.errors = errors or []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self) -> str:
        return f"Validation(is_valid={self.is_valid}, errors={self.errors})"


class PlayResult:
    """Placement check, words formed, dictionary check and score in one."""

    __slots__ = ("errors", "words", "invalid_words", "score")

    def __init__(
        self,
        errors: list[str],
        words: list[str],
        invalid_words: list[str] | None = None,
        score: int = 0,
    ):
        self.errors = errors
        self.words = words
        self.invalid_words = invalid_words or []
        self.score = score

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __repr__(self) -> str:
        return (
            f"PlayResult(is_valid={self.is_valid}, errors={self.errors}, "
            f"words={self.words}, score={self.score})"
        )


def _collinear(tiles: Sequence[PlacedTile]) -> str | None:
    """'H', 'V', or None. A lone tile counts as horizontal."""
    if all(t.row == tiles[0].row for t in tiles):
        return "H"
    if all(t.col == tiles[0].col for t in tiles):
        return "V"
    return None


def _run_is_contiguous(board: Board, tiles: Sequence[PlacedTile], direction: str) -> bool:
    """True if every cell between the outermost pending tiles is filled."""
    pending = {t.pos for t in tiles}
    if direction == "H":
        row = tiles[0].row
        cols = [t.col for t in tiles]
        return all(
            (row, c) in pending or board.is_occupied(row, c)
            for c in range(min(cols), max(cols) + 1)
        )
    col = tiles[0].col
    rows = [t.row for t in tiles]
    return all(
        (r, col) in pending or board.is_occupied(r, col)
        for r in range(min(rows), max(rows) + 1)
    )


def validate(board: Board, tiles: Sequence[PlacedTile]) -> Validation:
    """Check the placement rules for the pending *tiles* on *board*."""
    if not tiles:
        return Validation([EMPTY_MOVE])

    errors: list[str] = []

    if any(not in_bounds(t.row, t.col) for t in tiles):
        errors.append(OUT_OF_BOUNDS)
    if any(board.is_occupied(t.row, t.col) for t in tiles):
        errors.append(CELL_OCCUPIED)
    if len({t.pos for t in tiles}) != len(tiles):
        errors.append(DUPLICATE_CELL)

    direction = _collinear(tiles)
    if direction is None:
        errors.append(NOT_IN_LINE)
    elif not _run_is_contiguous(board, tiles, direction):
        errors.append(GAP_IN_LINE)

    if board.is_board_empty():
        # nothing to bridge on an empty board, so a tile must sit on the star
        if not any(t.pos == CENTER_CELL for t in tiles):
            errors.append(CENTER_NOT_COVERED)
    elif not any(board.has_neighbor(t.row, t.col) for t in tiles):
        errors.append(NOT_CONNECTED)

    return Validation(errors)


def validate_play(board: Board, tiles: Sequence[PlacedTile], gate: DictionaryGate) -> PlayResult:
    """Full check of a player's move, as the game screen needs it."""
    errors = list(validate(board, tiles).errors)
    if EMPTY_MOVE in errors or OUT_OF_BOUNDS in errors or CELL_OCCUPIED in errors:
        return PlayResult(errors, [])

    words = find_new_words(board, tiles)
    texts = [w.text for w in words]
    if not words:
        errors.append(NO_WORD_FORMED)

    invalid: list[str] = []
    if not gate.ready:
        errors.append(DICTIONARY_NOT_READY)
    else:
        invalid = [t for t in texts if not gate.is_valid_word(t)]
        if invalid:
            errors.append(INVALID_WORD)

    if errors:
        return PlayResult(errors, texts, invalid)
    return PlayResult(errors, texts, score=score(words, tiles))
