"""Word finder: the words a move newly forms."""

from __future__ import annotations

from typing import Sequence

from tileplay.board import Board, in_bounds
from tileplay.tile import PlacedTile


class Word:
    """A run of two or more cells along one row or column."""

    __slots__ = ("cells", "direction", "pending")

    def __init__(
        self,
        cells: Sequence[PlacedTile],
        direction: str,
        pending: frozenset[tuple[int, int]],
    ):
        self.cells = tuple(cells)
        self.direction = direction  # 'H' or 'V'
        self.pending = pending      # positions placed by this move

    @property
    def text(self) -> str:
        return "".join(t.letter for t in self.cells)

    @property
    def start(self) -> tuple[int, int]:
        return self.cells[0].pos

    def is_pending(self, tile: PlacedTile) -> bool:
        return tile.pos in self.pending

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.cells == other.cells and self.direction == other.direction

    def __hash__(self) -> int:
        return hash((self.cells, self.direction))

    def __repr__(self) -> str:
        arrow = "→" if self.direction == "H" else "↓"
        return f"Word({self.text} at {self.start} {arrow})"


def move_direction(tiles: Sequence[PlacedTile]) -> str | None:
    """``"H"`` or ``"V"`` for a collinear multi-tile move, None otherwise."""
    if len(tiles) < 2:
        return None
    if all(t.row == tiles[0].row for t in tiles):
        return "H"
    if all(t.col == tiles[0].col for t in tiles):
        return "V"
    return None


def _word_through(
    board: Board,
    pending: dict[tuple[int, int], PlacedTile],
    row: int,
    col: int,
    direction: str,
) -> Word | None:
    """The maximal run through (row, col) along *direction*, if ≥2 long."""
    dr = 1 if direction == "V" else 0
    dc = 1 if direction == "H" else 0

    def at(r: int, c: int) -> PlacedTile | None:
        return pending.get((r, c)) or board.get(r, c)

    r, c = row, col
    while in_bounds(r - dr, c - dc) and at(r - dr, c - dc):
        r, c = r - dr, c - dc

    cells: list[PlacedTile] = []
    while in_bounds(r, c):
        tile = at(r, c)
        if tile is None:
            break
        cells.append(tile)
        r, c = r + dr, c + dc

    if len(cells) < 2:
        return None
    new = frozenset(t.pos for t in cells if t.pos in pending)
    if not new:
        return None
    return Word(cells, direction, new)


def find_new_words(board: Board, tiles: Sequence[PlacedTile]) -> list[Word]:
    """Every word containing at least one of the pending *tiles*.

    The move's own line gives at most one main word; each pending tile
    may add one cross word perpendicular to it. A single tile has no
    axis of its own, so both of its lines are examined. Words already on
    the board and untouched by the move are never reported.
    """
    if not tiles:
        return []
    pending = {t.pos: t for t in tiles if board.is_empty(t.row, t.col)}
    if not pending:
        return []

    words: list[Word] = []
    seen: set[Word] = set()

    def add(word: Word | None) -> None:
        if word is not None and word not in seen:
            seen.add(word)
            words.append(word)

    direction = move_direction(tiles)
    ordered = sorted(pending.values(), key=lambda t: (t.row, t.col))
    first = ordered[0]

    if direction is None and len(ordered) == 1:
        add(_word_through(board, pending, first.row, first.col, "H"))
        add(_word_through(board, pending, first.row, first.col, "V"))
        return words

    if direction is None:
        # Not collinear: no main line, only what each tile forms on its own.
        for t in ordered:
            add(_word_through(board, pending, t.row, t.col, "H"))
            add(_word_through(board, pending, t.row, t.col, "V"))
        return words

    add(_word_through(board, pending, first.row, first.col, direction))
    cross = "V" if direction == "H" else "H"
    for t in ordered:
        add(_word_through(board, pending, t.row, t.col, cross))
    return words
