"""Tile value types."""

from __future__ import annotations

from dataclasses import dataclass

from tileplay.constants import TILE_VALUES


@dataclass(frozen=True)
class Tile:
    """A rack tile. Blanks carry an empty letter until they are placed."""

    letter: str
    points: int
    is_blank: bool = False

    @classmethod
    def of(cls, letter: str) -> Tile:
        """Build a tile from a letter, using ``"?"`` for a blank."""
        if letter == "?":
            return cls("", 0, is_blank=True)
        letter = letter.upper()
        return cls(letter, TILE_VALUES[letter])

    @property
    def value(self) -> int:
        """Points this tile is worth on the board (always 0 for a blank)."""
        return 0 if self.is_blank else self.points

    def place(self, row: int, col: int, letter: str | None = None) -> PlacedTile:
        """Put this tile at (row, col); *letter* assigns a blank's letter."""
        if self.is_blank:
            if not letter:
                raise ValueError("a blank tile needs a letter to be placed")
            return PlacedTile(letter.upper(), 0, True, row, col)
        return PlacedTile(self.letter, self.points, False, row, col)

    def __str__(self) -> str:
        return "?" if self.is_blank and not self.letter else self.letter


@dataclass(frozen=True)
class PlacedTile(Tile):
    """A tile sitting on (or proposed for) a board cell."""

    row: int = 0
    col: int = 0

    @property
    def pos(self) -> tuple[int, int]:
        return (self.row, self.col)

    def to_tile(self) -> Tile:
        """The rack tile this placement came from (blanks lose their letter)."""
        if self.is_blank:
            return Tile("", 0, is_blank=True)
        return Tile(self.letter, self.points)


def rack_from_letters(letters: str) -> list[Tile]:
    """``"CATS?"`` -> five rack tiles, ``?`` being a blank."""
    return [Tile.of(ch) for ch in letters if not ch.isspace()]


def tiles_from_word(word: str, row: int, col: int, direction: str) -> list[PlacedTile]:
    """Lay *word* out from (row, col) going ``"H"`` or ``"V"``.

    Lowercase letters become blanks assigned that letter.
    """
    dr = 1 if direction == "V" else 0
    dc = 1 if direction == "H" else 0
    tiles: list[PlacedTile] = []
    for i, ch in enumerate(word):
        r, c = row + i * dr, col + i * dc
        if ch.islower():
            tiles.append(PlacedTile(ch.upper(), 0, True, r, c))
        else:
            tiles.append(Tile.of(ch).place(r, c))
    return tiles
