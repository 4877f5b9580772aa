from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List


class Suit(Enum):
    """The four suits of a standard deck, valued by their display glyph."""
    HEART = "♥"
    SPADE = "♠"
    CLUB = "♣"
    DIAMOND = "♦"

    def __str__(self) -> str:
        return self.value


RANKS = range(1, 14)

_FACE_LABELS = {1: "A", 11: "J", 12: "Q", 13: "K"}
_LABEL_RANKS = {label: rank for rank, label in _FACE_LABELS.items()}


@dataclass(frozen=True)
class Card:
    """A playing card: one suit and a rank from 1 (Ace) to 13 (King)."""
    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")
        if isinstance(self.rank, bool) or not isinstance(self.rank, int) or self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank!r}")

    @property
    def label(self) -> str:
        """Rank glyph followed by suit glyph, e.g. 'K♠', '10♥', 'A♦'."""
        return _FACE_LABELS.get(self.rank, str(self.rank)) + self.suit.value

    def __str__(self) -> str:
        return self.label


def build_deck() -> List[Card]:
    """Creates the 52 cards of a standard deck, unshuffled."""
    return [Card(suit, rank) for suit in Suit for rank in RANKS]


def parse_card(label: str) -> Card:
    """Parses a display label such as 'Q♣' or '10♦' back into a Card."""
    text = (label or "").strip()
    if len(text) < 2:
        raise ValueError(f"Invalid card label: {label!r}")
    rank_part, suit_part = text[:-1], text[-1]
    try:
        suit = Suit(suit_part)
    except ValueError:
        raise ValueError(f"Invalid card label: {label!r}") from None
    rank_part = rank_part.upper()
    if rank_part in _LABEL_RANKS:
        rank = _LABEL_RANKS[rank_part]
    elif rank_part.isdigit():
        rank = int(rank_part)
    else:
        raise ValueError(f"Invalid card label: {label!r}")
    return Card(suit, rank)
