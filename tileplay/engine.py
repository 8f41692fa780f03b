"""Move engine: anchor-based generation over sampled rack permutations.

This is a bounded heuristic search, not an exhaustive solver. Every
search node, one (anchor, direction, run length, anchor offset) tuple,
tries at most ``max_permutations`` letter sequences from the rack. When
a node has more orderings than that (racks of 7 already give 210
three-letter orderings, before blanks), a random subset is drawn from
the injected RNG. The best move on the board can therefore be missed;
callers that need repeatable results pass a seeded ``random.Random``.
"""

from __future__ import annotations

import logging
import math
import random
import string
from itertools import permutations, product
from typing import Iterator, Sequence

from tileplay.board import Board, in_bounds
from tileplay.constants import (
    CENTER_CELL,
    MAX_PERMUTATIONS_PER_NODE,
    MAX_SAMPLE_ATTEMPTS_FACTOR,
    RACK_SIZE,
)
from tileplay.dictionary import DictionaryGate, WordPredicate
from tileplay.move import BotMove, move_key
from tileplay.scoring import score
from tileplay.tile import PlacedTile, Tile
from tileplay.validator import validate
from tileplay.words import find_new_words

log = logging.getLogger("tileplay.engine")

# (rack index, letter) per placed tile; the letter matters only for blanks
LetterSeq = tuple[tuple[int, str], ...]


class MoveEngine:
    """Finds legal, dictionary-valid moves for a rack on a board."""

    def __init__(
        self,
        gate: DictionaryGate,
        max_permutations: int = MAX_PERMUTATIONS_PER_NODE,
        rng: random.Random | None = None,
    ):
        self.gate = gate
        self.max_permutations = max_permutations
        self.rng = rng or random.Random()

    # public API

    def generate_moves(self, board: Board, rack: Sequence[Tile]) -> list[BotMove]:
        """Every move found, unranked. Empty if none (the player should pass)."""
        if not self.gate.ready or not rack:
            return []

        rack = list(rack)
        if board.is_board_empty():
            anchors = [CENTER_CELL]
        else:
            anchors = self._find_anchors(board)

        moves: list[BotMove] = []
        seen: set[str] = set()  # every placement evaluated, legal or not
        tried = 0
        max_length = min(len(rack), RACK_SIZE)
        for ar, ac in anchors:
            for direction in ("H", "V"):
                for length in range(1, max_length + 1):
                    for offset in range(length):
                        slots = self._slots(board, ar, ac, direction, length, offset)
                        if slots is None:
                            continue
                        for seq in self._letter_sequences(rack, length):
                            tried += 1
                            tiles = [
                                rack[i].place(r, c, letter)
                                for (i, letter), (r, c) in zip(seq, slots)
                            ]
                            key = move_key(tiles)
                            if key in seen:
                                continue
                            seen.add(key)
                            move = self._evaluate(board, tiles, direction)
                            if move is not None:
                                moves.append(move)

        log.debug(
            "Generated %d moves from %d anchors (%d placements tried)",
            len(moves), len(anchors), tried,
        )
        return moves

    def find_best_moves(self, board: Board, rack: Sequence[Tile], top_n: int = 10) -> list[BotMove]:
        """Top N moves by raw score."""
        moves = self.generate_moves(board, rack)
        moves.sort(key=lambda m: m.score, reverse=True)
        return moves[:top_n]

    # move generation

    @staticmethod
    def _find_anchors(board: Board) -> list[tuple[int, int]]:
        """An anchor is an empty square adjacent to at least one occupied square."""
        anchors: set[tuple[int, int]] = set()
        for r, c in board.cells:
            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                nr, nc = r + dr, c + dc
                if in_bounds(nr, nc) and board.is_empty(nr, nc):
                    anchors.add((nr, nc))
        return sorted(anchors)

    @staticmethod
    def _slots(
        board: Board,
        anchor_r: int,
        anchor_c: int,
        direction: str,
        length: int,
        offset: int,
    ) -> list[tuple[int, int]] | None:
        """Empty cells for a run of *length* new tiles with the anchor at
        index *offset*. Occupied cells along the line are stepped over,
        never covered. None if the board edge gets in the way."""
        dr = 1 if direction == "V" else 0
        dc = 1 if direction == "H" else 0

        before: list[tuple[int, int]] = []
        r, c = anchor_r - dr, anchor_c - dc
        while len(before) < offset:
            if not in_bounds(r, c):
                return None
            if board.is_empty(r, c):
                before.append((r, c))
            r, c = r - dr, c - dc

        after: list[tuple[int, int]] = []
        r, c = anchor_r + dr, anchor_c + dc
        while len(after) < length - 1 - offset:
            if not in_bounds(r, c):
                return None
            if board.is_empty(r, c):
                after.append((r, c))
            r, c = r + dr, c + dc

        before.reverse()
        return before + [(anchor_r, anchor_c)] + after

    def _letter_sequences(self, rack: list[Tile], length: int) -> Iterator[LetterSeq]:
        """At most ``max_permutations`` distinct letter orderings of *length*
        rack tiles. Small nodes are enumerated, large ones sampled."""
        n = len(rack)
        blanks = sum(1 for t in rack if t.is_blank)
        total = math.perm(n, length) * 26 ** min(blanks, length)
        seen: set[tuple[tuple[str, bool], ...]] = set()

        def signature(seq: LetterSeq) -> tuple[tuple[str, bool], ...]:
            return tuple((letter, rack[i].is_blank) for i, letter in seq)

        if total <= self.max_permutations:
            for idxs in permutations(range(n), length):
                choices = [
                    string.ascii_uppercase if rack[i].is_blank else (rack[i].letter,)
                    for i in idxs
                ]
                for letters in product(*choices):
                    seq = tuple(zip(idxs, letters))
                    sig = signature(seq)
                    if sig not in seen:
                        seen.add(sig)
                        yield seq
            return

        attempts = self.max_permutations * MAX_SAMPLE_ATTEMPTS_FACTOR
        for _ in range(attempts):
            if len(seen) >= self.max_permutations:
                return
            idxs = self.rng.sample(range(n), length)
            seq = tuple(
                (i, self.rng.choice(string.ascii_uppercase) if rack[i].is_blank else rack[i].letter)
                for i in idxs
            )
            sig = signature(seq)
            if sig not in seen:
                seen.add(sig)
                yield seq

    def _evaluate(self, board: Board, tiles: list[PlacedTile], direction: str) -> BotMove | None:
        """Validate, find words, check them against the gate and score."""
        if not validate(board, tiles).is_valid:
            return None
        words = find_new_words(board, tiles)
        if not words:
            return None
        texts = [w.text for w in words]
        if not self.gate.accepts(texts):
            return None
        if len(tiles) == 1:
            direction = max(words, key=len).direction
        return BotMove(tiles, texts, score(words, tiles), direction)


def generate_moves(
    board: Board,
    rack: Sequence[Tile],
    is_valid_word: WordPredicate,
    dictionary_ready: bool,
    rng: random.Random | None = None,
    max_permutations: int = MAX_PERMUTATIONS_PER_NODE,
) -> list[BotMove]:
    """Legal, dictionary-valid moves for *rack* on *board* (unranked)."""
    engine = MoveEngine(DictionaryGate(is_valid_word, dictionary_ready), max_permutations, rng)
    return engine.generate_moves(board, rack)
