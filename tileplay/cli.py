"""CLI / terminal mode for the tileplay engine."""

from __future__ import annotations

import random
import time

from tileplay.board import Board
from tileplay.constants import BOARD_SIZE, MAX_PERMUTATIONS_PER_NODE
from tileplay.dictionary import Dictionary
from tileplay.engine import MoveEngine
from tileplay.puzzle import Puzzle, generate_puzzle
from tileplay.selector import rank_moves, select_move
from tileplay.tile import PlacedTile, Tile, rack_from_letters, tiles_from_word


_ENTRY_HELP = """\
Lay out the current position, one entry per line:

  <row> <col> <letters> [H|V]   letters starting at (row, col), across (H,
                                the default) or down (V); squares already
                                holding a tile are skipped; lowercase = blank
  board                         show the position so far
  reset                         start over from an empty board
  help                          repeat this text
  (empty line)                  position complete, go on to the rack
"""


def _parse_entry(board: Board, parts: list[str]) -> list[PlacedTile]:
    """Tiles for one ``row col letters [H|V]`` entry; raises ValueError."""
    if len(parts) not in (3, 4):
        raise ValueError("expected: row col letters [H|V]")
    row, col = int(parts[0]), int(parts[1])
    letters = parts[2]
    direction = parts[3].upper() if len(parts) == 4 else "H"
    if direction not in ("H", "V"):
        raise ValueError(f"direction must be H or V, not {parts[3]!r}")
    if not letters.isalpha():
        raise ValueError(f"{letters!r} is not a run of letters")
    if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
        raise ValueError(f"({row},{col}) is off the board")
    return [t for t in tiles_from_word(letters, row, col, direction) if board.is_empty(t.row, t.col)]


def manual_board_input() -> tuple[Board, list[Tile]]:
    """Read a position and a rack typed at the terminal."""
    board = Board()
    print(f"\n--- tileplay: position entry {'-' * 32}\n")
    print(_ENTRY_HELP)

    while True:
        try:
            line = input("pos> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line:
            break
        word = line.lower()
        if word == "board":
            print(board)
        elif word == "reset":
            board = Board()
            print("  (empty board)")
        elif word == "help":
            print(_ENTRY_HELP)
        else:
            try:
                tiles = _parse_entry(board, line.split())
                board.place(tiles)
            except (ValueError, KeyError) as exc:
                print(f"  ! {exc}")
                continue
            print(f"  +{len(tiles)} tile(s), {board.count_tiles()} on the board")

    print()
    print(board)

    rack_input = input("\nRack letters (? for a blank): ").strip().upper()
    return board, rack_from_letters(rack_input)


def run_cli(
    dictionary: Dictionary,
    top_n: int = 10,
    difficulty: str | None = None,
    max_permutations: int | None = None,
    seed: int | None = None,
) -> None:
    """Run in terminal mode."""
    rng = random.Random(seed)
    engine = MoveEngine(dictionary, max_permutations or MAX_PERMUTATIONS_PER_NODE, rng)
    board, rack = manual_board_input()

    print(f"\nRack: {' '.join(str(t) for t in rack)}")
    print("Searching for moves...\n")

    t0 = time.time()
    moves = rank_moves(engine.generate_moves(board, rack), rack)
    elapsed = time.time() - t0

    print(f"Found {len(moves)} moves in {elapsed:.2f}s.\n")

    if not moves:
        print("No valid moves found -- pass this turn.")
        return

    best_moves = sorted(moves, key=lambda m: m.score, reverse=True)[:top_n]
    print("=" * 72)
    print(f" {'#':>2}  {'Score':>5}  {'Total':>6}  {'Word':<15} {'Position':<10} {'Dir':>3}  Extra")
    print("-" * 72)
    for i, m in enumerate(best_moves):
        arrow = ">" if m.direction == "H" else "v"
        first = m.tiles[0]
        extra_parts: list[str] = []
        if m.is_bingo:
            extra_parts.append("BINGO +50")
        others = [w for w in m.words if w != m.main_word]
        if others:
            extra_parts.append(f"Cross: {', '.join(others)}")
        extra = "  ".join(extra_parts)
        print(
            f" {i+1:>2}  {m.score:>5}  {m.total_score:>6.1f}  {m.main_word:<15} "
            f"({first.row},{first.col}){'':<5} {arrow}   {extra}"
        )
    print("=" * 72)

    if difficulty:
        pick = select_move(moves, difficulty, rng)
        print(f"\nBOT ({difficulty}) PLAYS: {pick}")
        return

    best = best_moves[0]
    print(f"\nBEST MOVE: {best}")
    print("   Tiles to place: ", end="")
    for t in best.tiles:
        print(f"{t.letter}>({t.row},{t.col}) ", end="")
    print()


def print_puzzle(puzzle: Puzzle) -> None:
    print(f"\nRUSH PUZZLE {puzzle.id}\n")
    print(puzzle.to_board())
    print(f"\nRack: {' '.join(str(t) for t in puzzle.rack)}")
    if not puzzle.top_moves:
        print("\nNo top moves -- is the dictionary loaded?")
        return
    print(f"\nTop {len(puzzle.top_moves)} moves:")
    for i, m in enumerate(puzzle.top_moves, 1):
        print(
            f" {i:>2}. {', '.join(m.words):<24} {m.score:>4} pts   "
            f"from {m.anchor_cell}  len {m.main_word_length}  letters {''.join(m.letters_used)}"
        )


def run_puzzle(
    dictionary: Dictionary,
    seed: int | None = None,
    max_permutations: int | None = None,
) -> Puzzle:
    """Generate and print a Rush puzzle."""
    kwargs = {"max_permutations": max_permutations} if max_permutations else {}
    t0 = time.time()
    puzzle = generate_puzzle(
        dictionary.is_valid_word, dictionary.ready, random.Random(seed), **kwargs,
    )
    print(f"Generated in {time.time() - t0:.2f}s.")
    print_puzzle(puzzle)
    return puzzle
