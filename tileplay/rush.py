"""Rush session: a player working through one puzzle."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from tileplay.dictionary import DictionaryGate, WordPredicate
from tileplay.move import move_key
from tileplay.puzzle import Puzzle, PuzzleMove, match_submission
from tileplay.tile import PlacedTile
from tileplay.validator import validate_play

INVALID = "invalid"
NOT_TOP = "not_top"
ALREADY_FOUND = "already_found"
CREDITED = "credited"

# Error for a submission using tiles the puzzle rack does not hold
NOT_ON_RACK = "not_on_rack"


class Submission:
    """What happened to one submitted move."""

    __slots__ = ("status", "errors", "words", "score", "move")

    def __init__(
        self,
        status: str,
        errors: list[str] | None = None,
        words: list[str] | None = None,
        score: int = 0,
        move: PuzzleMove | None = None,
    ):
        self.status = status
        self.errors = errors or []
        self.words = words or []
        self.score = score
        self.move = move

    @property
    def credited(self) -> bool:
        return self.status == CREDITED

    def __repr__(self) -> str:
        return f"Submission({self.status}, words={self.words}, score={self.score})"


class RushSession:
    """Tracks credited moves, the running score and the hint tiers.

    Hints always refer to the first top move not yet found: first its
    anchor cell, then its main word length, then the letters it uses.
    """

    def __init__(self, puzzle: Puzzle, is_valid_word: WordPredicate, dictionary_ready: bool = True):
        self.puzzle = puzzle
        self.gate = DictionaryGate(is_valid_word, dictionary_ready)
        self.board = puzzle.to_board()
        self.found: set[str] = set()
        self.total_score = 0
        self.hints_revealed = 0

    @property
    def is_complete(self) -> bool:
        return bool(self.puzzle.top_moves) and all(
            m.key in self.found for m in self.puzzle.top_moves
        )

    @property
    def current_target(self) -> PuzzleMove | None:
        for move in self.puzzle.top_moves:
            if move.key not in self.found:
                return move
        return None

    def _on_rack(self, tiles: Sequence[PlacedTile]) -> bool:
        """True if the puzzle rack holds every submitted tile (blanks as blanks)."""
        missing = Counter(t.to_tile() for t in tiles) - Counter(self.puzzle.rack)
        return not missing

    def submit(self, tiles: Sequence[PlacedTile]) -> Submission:
        if not self._on_rack(tiles):
            return Submission(INVALID, [NOT_ON_RACK])

        result = validate_play(self.board, tiles, self.gate)
        if not result.is_valid:
            return Submission(INVALID, result.errors, result.words)

        if move_key(tiles) in self.found:
            return Submission(ALREADY_FOUND, words=result.words, score=result.score)

        move = match_submission(self.puzzle, tiles, self.found)
        if move is None:
            return Submission(NOT_TOP, words=result.words, score=result.score)

        self.found.add(move.key)
        self.total_score += move.score
        self.hints_revealed = 0
        return Submission(CREDITED, words=list(move.words), score=move.score, move=move)

    # hints

    def _reveal(self, tier: int) -> PuzzleMove | None:
        target = self.current_target
        if target is not None:
            self.hints_revealed = max(self.hints_revealed, tier)
        return target

    def reveal_anchor(self) -> tuple[int, int] | None:
        target = self._reveal(1)
        return target.anchor_cell if target else None

    def reveal_length(self) -> int | None:
        target = self._reveal(2)
        return target.main_word_length if target else None

    def reveal_letters(self) -> tuple[str, ...] | None:
        target = self._reveal(3)
        return target.letters_used if target else None
