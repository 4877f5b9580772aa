from __future__ import annotations

import argparse
import random
from typing import List, Optional, Sequence

from .board import pretty
from .config import DEFAULT_DRAWS, DEFAULT_ROWS
from .engine import PyramidSolitaire
from .errors import PyramidError
from .logging_utils import setup_logging
from .moves import DISCARD, DRAW, PAIR, REMOVE, Move, apply_move, legal_moves

HELP = (
    "Commands: k r c (remove a King) | p r1 c1 r2 c2 (remove a pair) | "
    "d i r c (pair with draw i) | x i (discard draw i) | h (hints) | q (quit)"
)


def parse_command(text: str) -> Optional[Move]:
    """Parses a move command; returns None for anything that is not a move."""
    parts = text.replace(",", " ").split()
    if not parts:
        return None
    verb, args = parts[0].lower(), parts[1:]
    try:
        nums = [int(a) for a in args]
    except ValueError:
        return None
    if verb == "k" and len(nums) == 2:
        return Move(REMOVE, ((nums[0], nums[1]),))
    if verb == "p" and len(nums) == 4:
        return Move(PAIR, ((nums[0], nums[1]), (nums[2], nums[3])))
    if verb == "d" and len(nums) == 3:
        return Move(DRAW, ((nums[1], nums[2]),), nums[0])
    if verb == "x" and len(nums) == 1:
        return Move(DISCARD, (), nums[0])
    return None


def describe(move: Move) -> str:
    if move.kind == DISCARD:
        return f"x {move.draw_index}"
    coords = " ".join(f"{r} {c}" for r, c in move.positions)
    if move.kind == DRAW:
        return f"d {move.draw_index} {coords}"
    return f"{'k' if move.kind == REMOVE else 'p'} {coords}"


def play(game: PyramidSolitaire) -> int:
    """Interactive loop on stdin/stdout. Returns the final score."""
    print(HELP)
    while not game.is_game_over():
        print(pretty(game))
        text = input("> ").strip().lower()
        if text in ("q", "quit"):
            break
        if text in ("h", "help", "?"):
            hints: List[str] = [describe(m) for m in legal_moves(game)]
            print("Legal moves:", ", ".join(hints) if hints else "none")
            continue
        move = parse_command(text)
        if move is None:
            print("Could not parse. " + HELP)
            continue
        try:
            apply_move(game, move)
        except PyramidError as e:
            print(f"Illegal move ({e.kind}): {e}")
    print(pretty(game))
    if game.is_game_won():
        print("You cleared the pyramid!")
    elif game.is_game_over():
        print("No more moves.")
    score = game.score()
    print(f"Final score: {score}")
    return score


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Play pyramid solitaire in the terminal')
    parser.add_argument('--rows', type=int, default=DEFAULT_ROWS, help='Number of pyramid rows')
    parser.add_argument('--draws', type=int, default=DEFAULT_DRAWS, help='Number of draw pile slots')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the shuffle')
    parser.add_argument('--no-shuffle', action='store_true', help='Deal the deck in its standard order')
    parser.add_argument('--log-level', default=None, help='Logging level (overrides LOG_LEVEL)')
    args = parser.parse_args(argv)

    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging()

    game = PyramidSolitaire(rng=random.Random(args.seed))
    try:
        game.start(game.get_deck(), not args.no_shuffle, args.rows, args.draws)
    except PyramidError as e:
        parser.error(str(e))
    play(game)
