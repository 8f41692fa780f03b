"""Leave evaluation.

After playing a move, the tiles remaining on the rack (the "leave") have
strategic value: common, cheap letters combine into future words easily,
expensive ones tend to get stuck.

The quality of a leave is the sum of per-tile desirability:
  1. Common letters (vowels and L N R S T)   +3
  2. Other cheap tiles (worth 3 or less)     +2
  3. Mid-value tiles (worth 6 or less)       +1
  4. Power tiles (J Q X Z)                    0
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from tileplay.tile import PlacedTile, Tile

COMMON_LETTERS = frozenset("AEIOUNRTLS")


def tile_quality(tile: Tile) -> int:
    if tile.letter in COMMON_LETTERS:
        return 3
    if tile.points <= 3:
        return 2
    if tile.points <= 6:
        return 1
    return 0


def rack_quality(leave: Iterable[Tile]) -> int:
    """Heuristic value of the tiles left on the rack. Higher is better."""
    return sum(tile_quality(t) for t in leave)


def remaining_rack(rack: Sequence[Tile], used: Sequence[PlacedTile]) -> list[Tile]:
    """The rack after *used* tiles are played from it.

    Blanks are matched as blanks, whatever letter they were given.
    """
    spent = Counter(t.to_tile() for t in used)
    leave: list[Tile] = []
    for tile in rack:
        if spent[tile] > 0:
            spent[tile] -= 1
        else:
            leave.append(tile)
    return leave
