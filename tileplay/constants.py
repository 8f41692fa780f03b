"""Game constants: board geometry, letter values, bonus layout and tuning."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

BOARD_SIZE = 15
CENTER = 7  # 0-indexed center square
CENTER_CELL = (CENTER, CENTER)

RACK_SIZE = 7
BINGO_BONUS = 50  # 50 points for using all 7 tiles in one turn

# Standard English letter values
TILE_VALUES: dict[str, int] = {
    "A": 1, "B": 3, "C": 3, "D": 2, "E": 1, "F": 4, "G": 2,
    "H": 4, "I": 1, "J": 8, "K": 5, "L": 1, "M": 3, "N": 1,
    "O": 1, "P": 3, "Q": 10, "R": 1, "S": 1, "T": 1, "U": 1,
    "V": 4, "W": 4, "X": 8, "Y": 4, "Z": 10, "?": 0,
}

# Bonus square layout
# Key: . = normal, DL = double letter, TL = triple letter,
#      DW = double word, TW = triple word, * = center (star)
# fmt: off
BONUS_GRID: tuple[tuple[str, ...], ...] = (
    ("TW", ".",  ".",  "DL", ".",  ".",  ".",  "TW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"),
    (".",  "DW", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "DW", "." ),
    (".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DW", ".",  "." ),
    ("DL", ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  "DL"),
    (".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  "." ),
    (".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", "." ),
    (".",  ".",  "DL", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DL", ".",  "." ),
    ("TW", ".",  ".",  "DL", ".",  ".",  ".",  "*",  ".",  ".",  ".",  "DL", ".",  ".",  "TW"),
    (".",  ".",  "DL", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DL", ".",  "." ),
    (".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", "." ),
    (".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  ".",  ".",  "DW", ".",  ".",  ".",  "." ),
    ("DL", ".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  ".",  ".",  "DW", ".",  ".",  "DL"),
    (".",  ".",  "DW", ".",  ".",  ".",  "DL", ".",  "DL", ".",  ".",  ".",  "DW", ".",  "." ),
    (".",  "DW", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "TL", ".",  ".",  ".",  "DW", "." ),
    ("TW", ".",  ".",  "DL", ".",  ".",  ".",  "TW", ".",  ".",  ".",  "DL", ".",  ".",  "TW"),
)
# fmt: on

# Read-only lookup keyed by (row, col); plain squares are absent.
BONUS_SQUARES: Mapping[tuple[int, int], str] = MappingProxyType({
    (r, c): BONUS_GRID[r][c]
    for r in range(BOARD_SIZE)
    for c in range(BOARD_SIZE)
    if BONUS_GRID[r][c] != "."
})

LETTER_MULTIPLIERS: Mapping[str, int] = MappingProxyType({"DL": 2, "TL": 3})
# The center star doubles the opening word.
WORD_MULTIPLIERS: Mapping[str, int] = MappingProxyType({"DW": 2, "TW": 3, "*": 2})

# Move search
MAX_PERMUTATIONS_PER_NODE = 24
MAX_SAMPLE_ATTEMPTS_FACTOR = 4

# Bot selection
QUALITY_WEIGHT = 0.2
RAW_SCORE_WEIGHT = 0.7
STRATEGIC_WEIGHT = 0.1
DIFFICULTIES = ("easy", "medium", "hard")
TOP_K_FRACTION: Mapping[str, tuple[float, int]] = MappingProxyType({
    "easy": (0.6, 3),
    "medium": (0.3, 2),
    "hard": (0.1, 1),
})
TEMPERATURE: Mapping[str, float] = MappingProxyType({
    "easy": 50.0,   # high temperature = more randomness
    "medium": 20.0,
    "hard": 5.0,    # low temperature = more deterministic
})

# Rush puzzles
PUZZLE_TOP_MOVES = 5
PUZZLE_MIN_TOP_SCORE = 30
PUZZLE_MIN_TOP_MOVES = 3
# Puzzle building runs the generator several times per attempt, so it
# samples fewer orderings per node than a single bot turn.
PUZZLE_MAX_PERMUTATIONS = 8
PUZZLE_MAX_ATTEMPTS = 5
PUZZLE_REPLAY_MIN_SCORE = 15
PUZZLE_SEED_WORDS = ("GAME", "PLAY", "WORD", "QUIZ", "STAR", "TEAM")
PUZZLE_CROSS_WORDS = (
    "CAT", "DOG", "TOP", "SUN", "RUN", "ART", "EAR", "ONE",
    "TEA", "AGE", "OAR", "RAT", "MAP", "TEN", "ARE",
)
