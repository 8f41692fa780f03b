"""Move representation."""

from __future__ import annotations

from tileplay.constants import RACK_SIZE
from tileplay.tile import PlacedTile


def move_key(tiles: list[PlacedTile] | tuple[PlacedTile, ...]) -> str:
    """Canonical key for a set of placements: ``"7,6,C|7,7,A|7,8,T"``."""
    ordered = sorted(tiles, key=lambda t: (t.row, t.col))
    return "|".join(f"{t.row},{t.col},{t.letter}" for t in ordered)


class BotMove:
    """A candidate move found by the generator, later ranked."""

    __slots__ = (
        "tiles", "words", "score", "direction",
        "quality_score", "strategic_score", "total_score",
    )

    def __init__(
        self,
        tiles: list[PlacedTile],
        words: list[str],
        score: int,
        direction: str = "H",
        quality_score: float = 0.0,
        strategic_score: float = 0.0,
        total_score: float = 0.0,
    ):
        self.tiles = sorted(tiles, key=lambda t: (t.row, t.col))
        self.words = words
        self.score = score                      # raw points for the move
        self.direction = direction              # 'H' or 'V'
        self.quality_score = quality_score      # value of the rack left behind
        self.strategic_score = strategic_score  # bingo / length / power tiles
        self.total_score = total_score          # weighted blend of the three

    @property
    def key(self) -> str:
        return move_key(self.tiles)

    @property
    def main_word(self) -> str:
        """The longest word formed."""
        return max(self.words, key=len) if self.words else ""

    @property
    def is_bingo(self) -> bool:
        return len(self.tiles) == RACK_SIZE

    def __repr__(self) -> str:
        bingo = " +BINGO!" if self.is_bingo else ""
        arrow = "→" if self.direction == "H" else "↓"
        first = self.tiles[0]
        total = f"  total={self.total_score:.1f}" if self.total_score else ""
        return f"{self.main_word} at ({first.row},{first.col}) {arrow} = {self.score} pts{bingo}{total}"
