from __future__ import annotations

# Facade module that re-exports the pyramid solitaire core.
# Used by the Flask app and tests; single-responsibility modules live under pyramid_core/*.

import random

from pyramid_core.board import Coord, pretty
from pyramid_core.cards import RANKS, Card, Suit, build_deck, parse_card
from pyramid_core.deal import (
    DealingStrategy,
    DeckValidator,
    SinglePyramidDealer,
    StandardDeckValidator,
    shuffle_deck,
)
from pyramid_core.engine import PyramidSolitaire
from pyramid_core.errors import (
    CoveredError,
    EmptySlotError,
    InsufficientCardsError,
    InvalidDeckError,
    InvalidLayoutError,
    InvalidMoveError,
    NotStartedError,
    OutOfBoundsError,
    PyramidError,
)
from pyramid_core.moves import (
    DISCARD,
    DRAW,
    PAIR,
    REMOVE,
    Move,
    apply_move,
    legal_moves,
    move_from_json,
    move_to_json,
)
from pyramid_core.state import GameStatus


def new_game(num_rows: int, num_draws: int, shuffle: bool = True, seed: int | None = None) -> PyramidSolitaire:
    """Convenience constructor: a started game over a standard deck."""
    game = PyramidSolitaire(rng=random.Random(seed))
    game.start(build_deck(), shuffle, num_rows, num_draws)
    return game


def main() -> None:
    # CLI driver delegated to pyramid_core.cli
    from pyramid_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
