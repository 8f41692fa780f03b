"""Move scoring."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from tileplay.constants import (
    BINGO_BONUS,
    BONUS_SQUARES,
    LETTER_MULTIPLIERS,
    RACK_SIZE,
    WORD_MULTIPLIERS,
)
from tileplay.tile import PlacedTile, Tile

if TYPE_CHECKING:
    from tileplay.words import Word


def word_score(word: "Word") -> int:
    """Points for one word.

    Bonus squares count only under tiles placed this turn. The word is
    multiplied once, by the largest word bonus among those squares.
    """
    total = 0
    word_mult = 1
    for tile in word.cells:
        if word.is_pending(tile):
            bonus = BONUS_SQUARES.get(tile.pos)
            total += tile.value * LETTER_MULTIPLIERS.get(bonus, 1)
            word_mult = max(word_mult, WORD_MULTIPLIERS.get(bonus, 1))
        else:
            total += tile.value
    return total * word_mult


def score(words: Iterable["Word"], tiles: Sequence[PlacedTile]) -> int:
    """Total points for a move forming *words* with the pending *tiles*."""
    total = sum(word_score(w) for w in words)
    if len(tiles) == RACK_SIZE:
        total += BINGO_BONUS
    return total


def rack_penalty(rack: Iterable[Tile]) -> int:
    """Points deducted at game end for tiles still on a rack."""
    return sum(t.value for t in rack)
