"""
Deck - Builds, shuffles and splits the 52-card deck.

Shuffling takes an explicit random.Random so tests can pass a seeded
instance and get the same permutation every time.
"""

from __future__ import annotations
import random

from .cards import Card, RANKS, SUITS

DECK_SIZE = len(SUITS) * len(RANKS)

# Seeded from OS entropy at import
_default_rng = random.Random()


def build_deck() -> list[Card]:
    """
    Build a fresh deck in canonical order.

    Suit-major: all spades A..2, then hearts, diamonds, clubs.
    """
    return [Card(rank=rank, suit=suit) for suit in SUITS for rank in RANKS]


def shuffle(deck: list[Card], rng: random.Random | None = None) -> list[Card]:
    """
    Shuffle the deck in place and return it.

    random.Random.shuffle is an unbiased Fisher-Yates pass
    (index i from last down to 1, swapped with a uniform index in [0, i]).
    """
    (rng or _default_rng).shuffle(deck)
    return deck


def deal_hands(
    deck: list[Card],
    num_hands: int,
    hand_size: int,
) -> list[tuple[Card, ...]]:
    """
    Split a deck into contiguous hands.

    Hand k gets deck[k * hand_size:(k + 1) * hand_size].

    Raises:
        ValueError: If the deck does not hold exactly num_hands * hand_size cards
    """
    if num_hands < 1 or hand_size < 1:
        raise ValueError("num_hands and hand_size must be positive")
    if len(deck) != num_hands * hand_size:
        raise ValueError(
            f"Cannot deal {num_hands} hands of {hand_size} from {len(deck)} cards"
        )
    return [
        tuple(deck[start:start + hand_size])
        for start in range(0, num_hands * hand_size, hand_size)
    ]
