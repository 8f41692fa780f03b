"""Synthetic move replay.

Puzzle boards start from a handful of hand-placed words, which looks
nothing like a real game. This module plays a few bot turns onto such a
board so it resembles a mid-game position:

  1. Draw a rack for the simulated player from the bag.
  2. Generate the moves available to that rack.
  3. Keep only moves worth at least ``min_score`` that place 2+ tiles.
  4. Let the selector pick one, and commit it to the board.
  5. Put the unused tiles back into the bag.
"""

from __future__ import annotations

import logging
import random

from tileplay.bag import draw
from tileplay.board import Board
from tileplay.constants import PUZZLE_REPLAY_MIN_SCORE
from tileplay.engine import MoveEngine
from tileplay.leave import remaining_rack
from tileplay.move import BotMove
from tileplay.selector import rank_moves, select_move
from tileplay.tile import Tile

logger = logging.getLogger("tileplay.sim")


def simulate_move(
    engine: MoveEngine,
    board: Board,
    bag: list[Tile],
    rng: random.Random,
    min_score: int = PUZZLE_REPLAY_MIN_SCORE,
    difficulty: str = "medium",
) -> BotMove | None:
    """Play one synthetic turn onto *board*, drawing from and returning to *bag*.

    Returns the move played, or None if the rack had nothing good enough.
    """
    rack = draw(bag)
    if len(rack) < 3:
        bag[:0] = rack
        return None

    candidates = [
        m for m in engine.generate_moves(board, rack)
        if m.score >= min_score and len(m.tiles) >= 2
    ]
    move = select_move(rank_moves(candidates, rack), difficulty, rng)
    if move is None:
        bag[:0] = rack
        logger.debug("SIM pass: no move worth %d+ for %s", min_score, "".join(map(str, rack)))
        return None

    board.place(move.tiles)
    bag[:0] = remaining_rack(rack, move.tiles)
    logger.debug("SIM played %s", move)
    return move


def simulate_moves(
    engine: MoveEngine,
    board: Board,
    bag: list[Tile],
    rng: random.Random,
    n_moves: int = 2,
    min_score: int = PUZZLE_REPLAY_MIN_SCORE,
) -> list[BotMove]:
    """Replay up to *n_moves* synthetic turns; returns the moves played."""
    played: list[BotMove] = []
    for _ in range(n_moves):
        move = simulate_move(engine, board, bag, rng, min_score)
        if move is not None:
            played.append(move)
    return played
