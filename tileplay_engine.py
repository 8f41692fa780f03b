#!/usr/bin/env python3
"""
Tileplay Engine

Validates and scores word-placement moves, finds bot moves at three
difficulty levels, and builds timed "Rush" puzzles.

Usage:
    python tileplay_engine.py                     # analyse a board you type in
    python tileplay_engine.py --difficulty hard   # ...and let the bot pick
    python tileplay_engine.py --puzzle --seed 7   # generate a Rush puzzle
"""

from __future__ import annotations

import argparse
import logging

from tileplay.cli import run_cli, run_puzzle
from tileplay.constants import DIFFICULTIES
from tileplay.dictionary import Dictionary

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("tileplay")


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Tileplay Engine -- move finder, bot and Rush puzzle generator",
    )
    parser.add_argument("--puzzle", action="store_true",
                        help="Generate a Rush puzzle instead of analysing a board")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default=None,
                        help="Let the bot pick a move at this difficulty")
    parser.add_argument("--top", type=int, default=10,
                        help="How many moves to list")
    parser.add_argument("--max-permutations", type=int, default=None,
                        help="Letter orderings tried per search node")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for repeatable searches")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    print("TILEPLAY ENGINE")

    dictionary = Dictionary.load(args.dict)

    if args.puzzle:
        run_puzzle(dictionary, seed=args.seed, max_permutations=args.max_permutations)
    else:
        run_cli(
            dictionary,
            top_n=args.top,
            difficulty=args.difficulty,
            max_permutations=args.max_permutations,
            seed=args.seed,
        )


if __name__ == "__main__":
    main()
