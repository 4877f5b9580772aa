from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .board import Coord
from .cards import Card
from .config import REMOVAL_TARGET
from .deal import DealingStrategy, DeckValidator, SinglePyramidDealer, StandardDeckValidator, shuffle_deck
from .errors import (
    CoveredError,
    EmptySlotError,
    InsufficientCardsError,
    InvalidDeckError,
    InvalidLayoutError,
    InvalidMoveError,
    NotStartedError,
    OutOfBoundsError,
)
from .logging_utils import get_logger
from .state import GameStatus

logger = get_logger(__name__)


class PyramidSolitaire:
    """
    Rules engine for pyramid solitaire.

    Owns the pyramid (rows of card slots, None once removed), the draw pile
    (fixed number of slots backed by the stock) and the stock. Every mutating
    operation validates completely before touching state, so a raised
    PyramidError always leaves the game as it was.

    Dealing and deck validation are delegated to pluggable strategies so that
    other layouts can reuse the removal and scoring rules.
    """

    def __init__(
        self,
        dealer: Optional[DealingStrategy] = None,
        validator: Optional[DeckValidator] = None,
        rng: Optional[random.Random] = None,
        removal_target: int = REMOVAL_TARGET,
    ) -> None:
        self.dealer = dealer or SinglePyramidDealer()
        self.validator = validator or StandardDeckValidator()
        self.rng = rng or random.Random()
        self.removal_target = removal_target
        self.status = GameStatus.NOT_STARTED
        self._pyramid: List[List[Optional[Card]]] = []
        self._draws: List[Optional[Card]] = []
        self._stock: List[Card] = []

    def get_deck(self) -> List[Card]:
        """A fresh valid deck for this game variant."""
        return self.validator.reference_deck()

    # ---------- lifecycle ----------

    def start(self, deck: Optional[Sequence[Card]], shuffle: bool, num_rows: int, num_draws: int) -> None:
        """Deals a new game from a copy of `deck`. Calling it again discards the previous game."""
        if deck is None or not self.validator.is_valid(deck):
            raise InvalidDeckError("The deck must be a complete deck with no duplicates.")
        if self.dealer.cards_required(num_rows, num_draws) > len(deck):
            raise InsufficientCardsError("Not enough cards in this deck for this deal.")
        if num_rows <= 0:
            raise InvalidLayoutError("Number of rows must be positive.")
        if num_draws < 0:
            raise InvalidLayoutError("Number of draw cards cannot be negative.")

        cards = list(deck)
        if shuffle:
            shuffle_deck(cards, self.rng)
        self._pyramid = self.dealer.deal(cards, num_rows)
        self._draws = list(cards[:num_draws])
        self._stock = cards[num_draws:]
        self.status = GameStatus.STARTED
        logger.info("Game started: rows=%d draws=%d stock=%d", num_rows, num_draws, len(self._stock))

    def _check_started(self) -> None:
        if self.status is not GameStatus.STARTED:
            raise NotStartedError("The game has not yet started.")

    # ---------- bounds and lookups ----------

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < len(self._pyramid) and 0 <= col < len(self._pyramid[row])

    def _checked_card(self, row: int, col: int) -> Card:
        """Returns the card at a position, raising for bad indices or an empty slot."""
        if not self._in_bounds(row, col):
            raise OutOfBoundsError(f"No pyramid position {row}, {col}.")
        card = self._pyramid[row][col]
        if card is None:
            raise EmptySlotError(f"No card at {row}, {col}.")
        return card

    def _checked_draw(self, draw_index: int) -> Card:
        if not 0 <= draw_index < len(self._draws):
            raise OutOfBoundsError(f"No draw position {draw_index}.")
        card = self._draws[draw_index]
        if card is None:
            raise EmptySlotError(f"No card at draw position {draw_index}.")
        return card

    def _covered(self, row: int, col: int) -> bool:
        if row == len(self._pyramid) - 1:
            return False
        below = self._pyramid[row + 1]
        return below[col] is not None or below[col + 1] is not None

    def is_covered(self, row: int, col: int) -> bool:
        """True when a card remains in either slot directly beneath (row, col)."""
        self._check_started()
        if not self._in_bounds(row, col):
            raise OutOfBoundsError(f"No pyramid position {row}, {col}.")
        return self._covered(row, col)

    # ---------- moves ----------

    def remove(self, row: int, col: int) -> None:
        """Removes a single uncovered card whose rank equals the removal target."""
        self._check_started()
        card = self._checked_card(row, col)
        if card.rank != self.removal_target:
            raise InvalidMoveError(f"{card} does not have a value of {self.removal_target}.")
        if self._covered(row, col):
            raise CoveredError(f"{card} at {row}, {col} is covered.")
        self._pyramid[row][col] = None
        logger.debug("Removed %s at %d,%d", card, row, col)

    def remove_two(self, row1: int, col1: int, row2: int, col2: int) -> None:
        """Removes two uncovered pyramid cards whose ranks sum to the removal target."""
        self._check_started()
        if not self._in_bounds(row1, col1) or not self._in_bounds(row2, col2):
            raise OutOfBoundsError(f"No pyramid position {row1}, {col1} or {row2}, {col2}.")
        first = self._checked_card(row1, col1)
        second = self._checked_card(row2, col2)
        if (row1, col1) == (row2, col2):
            raise InvalidMoveError("A card cannot be paired with itself.")
        if first.rank + second.rank != self.removal_target:
            raise InvalidMoveError(f"{first} and {second} do not sum to {self.removal_target}.")
        if self._covered(row1, col1) or self._covered(row2, col2):
            raise CoveredError("Both cards must be uncovered.")
        self._pyramid[row1][col1] = None
        self._pyramid[row2][col2] = None
        logger.debug("Removed pair %s, %s", first, second)

    def remove_using_draw(self, draw_index: int, row: int, col: int) -> None:
        """Removes a pyramid card together with a draw card, then replenishes that draw slot."""
        self._check_started()
        if not self._in_bounds(row, col):
            raise OutOfBoundsError(f"No pyramid position {row}, {col}.")
        if not 0 <= draw_index < len(self._draws):
            raise OutOfBoundsError(f"No draw position {draw_index}.")
        card = self._checked_card(row, col)
        drawn = self._checked_draw(draw_index)
        if card.rank + drawn.rank != self.removal_target:
            raise InvalidMoveError(f"{card} and {drawn} do not sum to {self.removal_target}.")
        if self._covered(row, col):
            raise CoveredError(f"{card} at {row}, {col} is covered.")
        self._pyramid[row][col] = None
        logger.debug("Removed %s with draw %s", card, drawn)
        self.discard_draw(draw_index)

    def discard_draw(self, draw_index: int) -> None:
        """Discards a draw card; the slot takes the front of the stock or stays empty."""
        self._check_started()
        drawn = self._checked_draw(draw_index)
        if self._stock:
            self._draws[draw_index] = self._stock.pop(0)
        else:
            self._draws[draw_index] = None
        logger.debug("Discarded %s from draw %d, stock=%d", drawn, draw_index, len(self._stock))

    # ---------- queries ----------

    def is_game_won(self) -> bool:
        self._check_started()
        return all(card is None for row in self._pyramid for card in row)

    def uncovered_positions(self) -> List[Coord]:
        """Positions of every pyramid card that could be removed right now, top row first."""
        self._check_started()
        return [
            (row, col)
            for row, cards in enumerate(self._pyramid)
            for col, card in enumerate(cards)
            if card is not None and not self._covered(row, col)
        ]

    def is_game_over(self) -> bool:
        """True once the pyramid is cleared or no removal or stock draw remains."""
        if self.is_game_won():
            return True
        values = [self._pyramid[r][c].rank for r, c in self.uncovered_positions()]
        values.extend(card.rank for card in self._draws if card is not None)
        target = self.removal_target
        if target in values:
            return False
        for i, first in enumerate(values):
            for second in values[i + 1:]:
                if first + second == target:
                    return False
        return not (self._stock and len(self._draws) > 0)

    def score(self) -> int:
        """Sum of ranks left in the pyramid; zero once it is cleared."""
        if self.is_game_won():
            return 0
        return sum(card.rank for row in self._pyramid for card in row if card is not None)

    def get_card_at(self, row: int, col: int) -> Optional[Card]:
        self._check_started()
        if not self._in_bounds(row, col):
            raise OutOfBoundsError(f"No pyramid position {row}, {col}.")
        return self._pyramid[row][col]

    def get_pyramid(self) -> List[List[Optional[Card]]]:
        """Row-major copy of the pyramid; None marks a removed card."""
        self._check_started()
        return [list(row) for row in self._pyramid]

    def get_draw_cards(self) -> List[Optional[Card]]:
        self._check_started()
        return list(self._draws)

    def get_num_rows(self) -> int:
        self._check_started()
        return len(self._pyramid)

    def get_num_draw(self) -> int:
        self._check_started()
        return len(self._draws)

    def get_row_width(self, row: int) -> int:
        self._check_started()
        if not 0 <= row < len(self._pyramid):
            raise OutOfBoundsError(f"No pyramid row {row}.")
        return len(self._pyramid[row])

    def stock_size(self) -> int:
        self._check_started()
        return len(self._stock)
