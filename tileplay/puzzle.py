"""Rush puzzle generation.

A Rush puzzle is a mid-game looking board, a 7-tile rack and the five
best moves the engine can find for that pair. Players race to find those
moves; a submission counts when its tiles match a top move exactly.
"""

from __future__ import annotations

import logging
import random
import uuid
from dataclasses import dataclass, replace
from typing import Iterable, Sequence

from tileplay.bag import draw, make_bag, take_letter
from tileplay.board import Board, in_bounds
from tileplay.constants import (
    CENTER,
    PUZZLE_CROSS_WORDS,
    PUZZLE_MAX_ATTEMPTS,
    PUZZLE_MAX_PERMUTATIONS,
    PUZZLE_MIN_TOP_MOVES,
    PUZZLE_MIN_TOP_SCORE,
    PUZZLE_REPLAY_MIN_SCORE,
    PUZZLE_SEED_WORDS,
    PUZZLE_TOP_MOVES,
)
from tileplay.dictionary import DictionaryGate, WordPredicate
from tileplay.engine import MoveEngine
from tileplay.move import BotMove, move_key
from tileplay.simulation import simulate_moves
from tileplay.tile import PlacedTile, Tile
from tileplay.validator import validate
from tileplay.words import find_new_words

log = logging.getLogger("tileplay.puzzle")


@dataclass(frozen=True)
class PuzzleMove:
    """One of a puzzle's top moves, with the data the hint tiers reveal."""

    tiles: tuple[PlacedTile, ...]
    words: tuple[str, ...]
    score: int
    anchor_cell: tuple[int, int]
    main_word_length: int
    letters_used: tuple[str, ...]

    @classmethod
    def from_bot_move(cls, move: BotMove) -> PuzzleMove:
        tiles = tuple(sorted(move.tiles, key=lambda t: (t.row, t.col)))
        return cls(
            tiles=tiles,
            words=tuple(move.words),
            score=move.score,
            anchor_cell=tiles[0].pos,
            main_word_length=max((len(w) for w in move.words), default=0),
            letters_used=tuple(sorted(t.letter for t in tiles)),
        )

    @property
    def key(self) -> str:
        return move_key(self.tiles)


@dataclass(frozen=True)
class Puzzle:
    id: str
    board: tuple[PlacedTile, ...]
    rack: tuple[Tile, ...]
    top_moves: tuple[PuzzleMove, ...]

    @property
    def best_score(self) -> int:
        return self.top_moves[0].score if self.top_moves else 0

    def to_board(self) -> Board:
        return Board(self.board)


# board construction

def _take_tiles(bag: list[Tile], letters: Iterable[str]) -> list[Tile] | None:
    """Take one tile per letter from *bag*, all or nothing."""
    taken: list[Tile] = []
    for letter in letters:
        tile = take_letter(bag, letter)
        if tile is None:
            bag.extend(taken)
            return None
        taken.append(tile)
    return taken


def place_seed_word(board: Board, bag: list[Tile], word: str) -> bool:
    """Lay *word* horizontally through the center square."""
    tiles = _take_tiles(bag, word)
    if tiles is None:
        return False
    start_col = CENTER - len(word) // 2
    board.place(t.place(CENTER, start_col + i) for i, t in enumerate(tiles))
    return True


def _crossings(board: Board, word: str) -> list[list[PlacedTile]]:
    """New-tile placements that lay *word* across an existing tile.

    A placement qualifies only if it shares the letter at the crossing,
    adds at least one tile and forms *word* and nothing else.
    """
    options: list[list[PlacedTile]] = []
    seen: set[str] = set()
    for existing in board.tiles():
        for i, ch in enumerate(word):
            if ch != existing.letter:
                continue
            for dr, dc in ((1, 0), (0, 1)):
                r0, c0 = existing.row - i * dr, existing.col - i * dc
                new: list[PlacedTile] = []
                fits = True
                for j, letter in enumerate(word):
                    r, c = r0 + j * dr, c0 + j * dc
                    if not in_bounds(r, c):
                        fits = False
                        break
                    tile = board.get(r, c)
                    if tile is None:
                        new.append(Tile.of(letter).place(r, c))
                    elif tile.letter != letter:
                        fits = False
                        break
                if not fits or not new or move_key(new) in seen:
                    continue
                seen.add(move_key(new))
                if not validate(board, new).is_valid:
                    continue
                formed = find_new_words(board, new)
                if len(formed) == 1 and formed[0].text == word:
                    options.append(new)
    return options


def place_cross_words(board: Board, bag: list[Tile], rng: random.Random, count: int) -> list[str]:
    """Try to cross up to *count* words over what is on the board."""
    placed: list[str] = []
    candidates = list(PUZZLE_CROSS_WORDS)
    rng.shuffle(candidates)
    for word in candidates:
        if len(placed) >= count:
            break
        options = _crossings(board, word)
        if not options:
            continue
        choice = rng.choice(options)
        tiles = _take_tiles(bag, (t.letter for t in choice))
        if tiles is None:
            continue
        board.place(t.place(p.row, p.col) for t, p in zip(tiles, choice))
        placed.append(word)
    return placed


def build_board(
    engine: MoveEngine,
    bag: list[Tile],
    rng: random.Random,
    replay_min_score: int = PUZZLE_REPLAY_MIN_SCORE,
) -> Board:
    """Seed word, 2–3 crossings, then 1–2 replayed bot moves."""
    board = Board()
    seeds = list(PUZZLE_SEED_WORDS)
    rng.shuffle(seeds)
    for seed in seeds:
        if place_seed_word(board, bag, seed):
            break
    crossed = place_cross_words(board, bag, rng, rng.choice((2, 3)))
    played = simulate_moves(engine, board, bag, rng, rng.choice((1, 2)), replay_min_score)
    log.debug(
        "Board built: crossings=%s replayed=%d tiles=%d",
        crossed, len(played), board.count_tiles(),
    )
    return board


# top moves and matching

def top_moves(engine: MoveEngine, board: Board, rack: Sequence[Tile], n: int = PUZZLE_TOP_MOVES) -> list[PuzzleMove]:
    moves = engine.generate_moves(board, rack)
    moves.sort(key=lambda m: (-m.score, m.key))
    return [PuzzleMove.from_bot_move(m) for m in moves[:n]]


def match_submission(
    puzzle: Puzzle,
    tiles: Sequence[PlacedTile],
    found_keys: set[str] | frozenset[str] = frozenset(),
) -> PuzzleMove | None:
    """The top move *tiles* reproduce, unless it has already been credited."""
    key = move_key(tiles)
    if key in found_keys:
        return None
    for move in puzzle.top_moves:
        if move.key == key:
            return move
    return None


def _new_id(rng: random.Random) -> str:
    return str(uuid.UUID(int=rng.getrandbits(128), version=4))


def _attempt(engine: MoveEngine, rng: random.Random) -> Puzzle:
    bag = make_bag(rng)
    board = build_board(engine, bag, rng)
    rack = draw(bag)
    return Puzzle(
        id=_new_id(rng),
        board=tuple(board.tiles()),
        rack=tuple(rack),
        top_moves=tuple(top_moves(engine, board, rack)),
    )


def generate_puzzle(
    is_valid_word: WordPredicate,
    dictionary_ready: bool,
    rng: random.Random | None = None,
    max_attempts: int = PUZZLE_MAX_ATTEMPTS,
    min_top_score: int = PUZZLE_MIN_TOP_SCORE,
    min_top_moves: int = PUZZLE_MIN_TOP_MOVES,
    max_permutations: int = PUZZLE_MAX_PERMUTATIONS,
) -> Puzzle:
    """Build a Rush puzzle with at least *min_top_moves* top moves, the
    best scoring at least *min_top_score*.

    Each attempt runs the move generator for every replayed turn and once
    more for the rack, so cost grows with *max_permutations* and
    *max_attempts*. With a full word list and the defaults expect a few
    seconds per attempt.

    Never fails: when no attempt clears the bar, the best attempt is
    returned with a ``fallback-`` id. With an unready dictionary that
    puzzle has no top moves.
    """
    rng = rng or random.Random()
    engine = MoveEngine(DictionaryGate(is_valid_word, dictionary_ready), max_permutations, rng)

    best: Puzzle | None = None
    for attempt in range(1, max(1, max_attempts) + 1):
        puzzle = _attempt(engine, rng)
        if (
            puzzle.top_moves
            and len(puzzle.top_moves) >= min_top_moves
            and puzzle.best_score >= min_top_score
        ):
            log.info(
                "Puzzle %s accepted on attempt %d (best move %d pts)",
                puzzle.id, attempt, puzzle.best_score,
            )
            return puzzle
        if best is None or puzzle.best_score > best.best_score:
            best = puzzle

    log.warning(
        "No puzzle reached %d pts in %d attempts -- using fallback (best %d pts)",
        min_top_score, max(1, max_attempts), best.best_score,
    )
    return replace(best, id=f"fallback-{best.id}")
