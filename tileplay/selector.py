"""Bot move ranking and difficulty-based selection.

Each candidate gets a composite score:

    total = 0.7 * raw score + 0.2 * leave quality + 0.1 * strategic bonus

The selector keeps the top K candidates (K shrinks with difficulty) and
draws one from a softmax over their totals. A high temperature makes the
draw close to uniform, a low one makes it close to always picking the
best; at temperature 0 it is exactly the arg-max.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable, Sequence

import numpy as np

from tileplay.constants import (
    DIFFICULTIES,
    QUALITY_WEIGHT,
    RACK_SIZE,
    RAW_SCORE_WEIGHT,
    STRATEGIC_WEIGHT,
    TEMPERATURE,
    TOP_K_FRACTION,
)
from tileplay.leave import rack_quality, remaining_rack
from tileplay.move import BotMove
from tileplay.tile import Tile

log = logging.getLogger("tileplay")


def strategic_score(move: BotMove) -> int:
    """Bonus for bingos, long words and getting rid of power tiles."""
    strategic = 0
    if len(move.tiles) == RACK_SIZE:
        strategic += 50
    for word in move.words:
        if len(word) >= 6:
            strategic += len(word) * 2
        elif len(word) >= 4:
            strategic += len(word)
    for tile in move.tiles:
        if tile.value >= 8:
            strategic += tile.value
    return strategic


def rank_move(move: BotMove, rack: Sequence[Tile]) -> BotMove:
    """Fill in the quality, strategic and total scores of *move*."""
    move.quality_score = rack_quality(remaining_rack(rack, move.tiles))
    move.strategic_score = strategic_score(move)
    move.total_score = (
        move.score * RAW_SCORE_WEIGHT
        + move.quality_score * QUALITY_WEIGHT
        + move.strategic_score * STRATEGIC_WEIGHT
    )
    return move


def rank_moves(moves: Iterable[BotMove], rack: Sequence[Tile]) -> list[BotMove]:
    return [rank_move(m, rack) for m in moves]


def _check_difficulty(difficulty: str) -> None:
    if difficulty not in DIFFICULTIES:
        raise ValueError(
            f"unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}"
        )


def top_k(total_moves: int, difficulty: str) -> int:
    """How many of the best candidates stay in the draw."""
    _check_difficulty(difficulty)
    fraction, floor_k = TOP_K_FRACTION[difficulty]
    return min(max(math.floor(total_moves * fraction), floor_k), total_moves)


def softmax(scores: Sequence[float], temperature: float) -> np.ndarray:
    """Probabilities for *scores*; temperature must be positive."""
    arr = np.asarray(scores, dtype=float)
    exp = np.exp((arr - arr.max()) / temperature)
    return exp / exp.sum()


def select_move(
    candidates: Sequence[BotMove],
    difficulty: str,
    rng: random.Random | None = None,
    temperature: float | None = None,
) -> BotMove | None:
    """Pick the bot's move, or None when there is nothing to play.

    Candidates must already be ranked (see :func:`rank_moves`).
    *temperature* overrides the difficulty's default.
    """
    _check_difficulty(difficulty)
    if not candidates:
        return None

    ranked = sorted(candidates, key=lambda m: m.total_score, reverse=True)
    pool = ranked[:top_k(len(ranked), difficulty)]
    if len(pool) == 1:
        return pool[0]

    if temperature is None:
        temperature = TEMPERATURE[difficulty]
    if temperature <= 0:
        return pool[0]

    probs = softmax([m.total_score for m in pool], temperature)
    draw = (rng or random.Random()).random()
    idx = min(int(np.searchsorted(np.cumsum(probs), draw, side="left")), len(pool) - 1)
    chosen = pool[idx]
    log.debug(
        "Selected %s (%s, T=%.1f, top %d of %d, p=%.3f)",
        chosen, difficulty, temperature, len(pool), len(ranked), probs[idx],
    )
    return chosen
