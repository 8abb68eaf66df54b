"""
Cards - Identity-typed playing cards.

A card is a (rank, suit) pair with no score attached.
Its wire form is the rank string followed by the suit letter:
"AS", "10H", "2C".

Enum declaration order is the canonical order used for display:
- Suits: S < H < D < C
- Ranks: A < K < Q < J < 10 < 9 < ... < 2
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Suit(Enum):
    """Card suits, in display order."""
    SPADES = "S"
    HEARTS = "H"
    DIAMONDS = "D"
    CLUBS = "C"


class Rank(Enum):
    """Card ranks, highest first."""
    ACE = "A"
    KING = "K"
    QUEEN = "Q"
    JACK = "J"
    TEN = "10"
    NINE = "9"
    EIGHT = "8"
    SEVEN = "7"
    SIX = "6"
    FIVE = "5"
    FOUR = "4"
    THREE = "3"
    TWO = "2"


SUITS: tuple[Suit, ...] = tuple(Suit)
RANKS: tuple[Rank, ...] = tuple(Rank)

_SUIT_ORDER = {suit: idx for idx, suit in enumerate(SUITS)}
_RANK_ORDER = {rank: idx for idx, rank in enumerate(RANKS)}


@dataclass(frozen=True)
class Card:
    """
    A single playing card.

    Compared and hashed by (rank, suit) only.
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    @property
    def code(self) -> str:
        """Wire encoding, e.g. '10H'."""
        return str(self)

    @classmethod
    def parse(cls, text: str) -> Card:
        """
        Decode a card from its wire form.

        Raises ValueError for anything that is not exactly rank + suit.
        """
        if not isinstance(text, str) or len(text) < 2:
            raise ValueError(f"Invalid card: {text!r}")
        try:
            rank = Rank(text[:-1])
            suit = Suit(text[-1])
        except ValueError:
            raise ValueError(f"Invalid card: {text!r}") from None
        return cls(rank=rank, suit=suit)


def hand_sort_key(card: Card) -> tuple[int, int]:
    """Sort key: suit first (S, H, D, C), then rank (A down to 2)."""
    return (_SUIT_ORDER[card.suit], _RANK_ORDER[card.rank])


def sort_hand(cards: Iterable[Card]) -> list[Card]:
    """Return cards in canonical display order."""
    return sorted(cards, key=hand_sort_key)
