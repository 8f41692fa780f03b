"""15×15 game board."""

from __future__ import annotations

from typing import Iterable, Iterator

from tileplay.constants import BOARD_SIZE, BONUS_SQUARES
from tileplay.tile import PlacedTile


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Board:
    """15x15 game board stored sparsely as ``(row, col) -> PlacedTile``."""

    def __init__(self, tiles: Iterable[PlacedTile] = ()):
        self.cells: dict[tuple[int, int], PlacedTile] = {}
        self.place(tiles)

    def get(self, row: int, col: int) -> PlacedTile | None:
        """Tile at (row, col), or None."""
        return self.cells.get((row, col))

    def letter(self, row: int, col: int) -> str | None:
        tile = self.cells.get((row, col))
        return tile.letter if tile else None

    def place(self, tiles: Iterable[PlacedTile]) -> None:
        """Commit tiles to the board."""
        for tile in tiles:
            if not in_bounds(tile.row, tile.col):
                raise ValueError(f"({tile.row},{tile.col}) is off the board")
            if tile.pos in self.cells:
                raise ValueError(f"({tile.row},{tile.col}) is already occupied")
            self.cells[tile.pos] = tile

    def with_tiles(self, tiles: Iterable[PlacedTile]) -> Board:
        """A new board with *tiles* added; this board is left untouched."""
        b = self.copy()
        b.place(tiles)
        return b

    def is_empty(self, row: int, col: int) -> bool:
        """True if no tile at (row, col)."""
        return (row, col) not in self.cells

    def is_occupied(self, row: int, col: int) -> bool:
        """True if there's a tile at (row, col)."""
        return (row, col) in self.cells

    def is_board_empty(self) -> bool:
        """True if no tiles on the board."""
        return not self.cells

    def count_tiles(self) -> int:
        """Number of tiles on the board."""
        return len(self.cells)

    def has_neighbor(self, row: int, col: int) -> bool:
        """True if an orthogonal neighbour of (row, col) holds a tile."""
        return any(
            (row + dr, col + dc) in self.cells
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
        )

    def get_bonus(self, row: int, col: int) -> str | None:
        """Bonus type at (row, col) if uncovered, else None."""
        if self.is_occupied(row, col):
            return None
        return BONUS_SQUARES.get((row, col))

    def tiles(self) -> list[PlacedTile]:
        """Board tiles in reading order."""
        return [self.cells[pos] for pos in sorted(self.cells)]

    def copy(self) -> Board:
        b = Board()
        b.cells = dict(self.cells)
        return b

    def __iter__(self) -> Iterator[PlacedTile]:
        return iter(self.tiles())

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, pos: tuple[int, int]) -> bool:
        return pos in self.cells

    def __str__(self) -> str:
        header = "    " + " ".join(f"{c:>2}" for c in range(BOARD_SIZE))
        sep = "   " + "---" * BOARD_SIZE
        lines = [header, sep]
        for r in range(BOARD_SIZE):
            parts = [f"{r:>2} |"]
            for c in range(BOARD_SIZE):
                tile = self.cells.get((r, c))
                if tile:
                    shown = tile.letter.lower() if tile.is_blank else tile.letter
                    parts.append(f" {shown} ")
                else:
                    bonus = BONUS_SQUARES.get((r, c), ".")
                    if bonus in (".", "*"):
                        parts.append(f" {bonus} ")
                    else:
                        parts.append(f"{bonus:>3}")
            lines.append("".join(parts))
        return "\n".join(lines)
