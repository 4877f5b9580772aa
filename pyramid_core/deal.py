from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .cards import Card, build_deck


def shuffle_deck(cards: List[Card], rng: Optional[random.Random] = None) -> List[Card]:
    """Shuffles the list in place (Fisher-Yates via random.Random.shuffle) and returns it."""
    (rng or random.Random()).shuffle(cards)
    return cards


class DeckValidator:
    """Decides which card sequences count as a legal deck for a game variant."""

    def reference_deck(self) -> List[Card]:
        raise NotImplementedError

    def is_valid(self, deck: Optional[Sequence[Card]]) -> bool:
        raise NotImplementedError


class StandardDeckValidator(DeckValidator):
    """Accepts any ordering of the 52-card standard deck, nothing else."""

    def reference_deck(self) -> List[Card]:
        return build_deck()

    def is_valid(self, deck: Optional[Sequence[Card]]) -> bool:
        if not deck:
            return False
        if any(not isinstance(card, Card) for card in deck):
            return False
        expected = self.reference_deck()
        if len(deck) != len(expected):
            return False
        # No duplicates and no gaps: the card sets must match exactly.
        return len(set(deck)) == len(deck) and set(deck) == set(expected)


class DealingStrategy:
    """Decides how a shuffled deck is laid out into pyramid rows."""

    def cards_required(self, num_rows: int, num_draws: int) -> int:
        raise NotImplementedError

    def deal(self, cards: List[Card], num_rows: int) -> List[List[Optional[Card]]]:
        raise NotImplementedError


class SinglePyramidDealer(DealingStrategy):
    """One triangular pyramid; row r holds r + 1 cards, dealt top row first, left to right."""

    def cards_required(self, num_rows: int, num_draws: int) -> int:
        return num_rows * (num_rows + 1) // 2 + num_draws

    def deal(self, cards: List[Card], num_rows: int) -> List[List[Optional[Card]]]:
        """Consumes cards from the front of `cards` (mutated) and returns the rows."""
        rows: List[List[Optional[Card]]] = []
        for row in range(num_rows):
            rows.append(list(cards[:row + 1]))
            del cards[:row + 1]
        return rows
