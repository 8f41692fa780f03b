"""Tile bag.

Defines the full tile distribution (how many of each letter exist in
the game) and helpers to build a shuffled bag and draw racks from it.
"""

from __future__ import annotations

import random

from tileplay.constants import RACK_SIZE
from tileplay.tile import Tile

# ── Tile distribution ───────────────────────────────────────────────────
# Total: 100 tiles (98 lettered + 2 blanks).

TILE_DISTRIBUTION: dict[str, int] = {
    "A": 9,  "B": 2,  "C": 2,  "D": 4,  "E": 12, "F": 2,  "G": 3,
    "H": 2,  "I": 9,  "J": 1,  "K": 1,  "L": 4,  "M": 2,  "N": 6,
    "O": 8,  "P": 2,  "Q": 1,  "R": 6,  "S": 4,  "T": 6,  "U": 4,
    "V": 2,  "W": 2,  "X": 1,  "Y": 2,  "Z": 1,  "?": 2,
}

TOTAL_TILES = sum(TILE_DISTRIBUTION.values())  # 100


def make_full_bag() -> list[Tile]:
    """Return a list of all tiles in the bag (unshuffled)."""
    bag: list[Tile] = []
    for letter, count in TILE_DISTRIBUTION.items():
        bag.extend(Tile.of(letter) for _ in range(count))
    return bag


def make_bag(rng: random.Random | None = None) -> list[Tile]:
    """A freshly shuffled full bag."""
    bag = make_full_bag()
    (rng or random.Random()).shuffle(bag)
    return bag


def draw(bag: list[Tile], n: int = RACK_SIZE) -> list[Tile]:
    """Take up to *n* tiles off the front of *bag*."""
    drawn = bag[:n]
    del bag[:n]
    return drawn


def take_letter(bag: list[Tile], letter: str) -> Tile | None:
    """Remove and return a tile showing *letter*, or None if none is left."""
    for i, tile in enumerate(bag):
        if not tile.is_blank and tile.letter == letter:
            return bag.pop(i)
    return None
