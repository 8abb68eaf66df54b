"""
Engine Core - Cards and the deck.

The engine is the leaf layer that:
1. Defines cards and their wire encoding
2. Builds and shuffles a 52-card deck
3. Splits a shuffled deck into equal hands
"""

from .cards import Card, Rank, Suit, RANKS, SUITS, hand_sort_key, sort_hand
from .deck import build_deck, shuffle, deal_hands, DECK_SIZE

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "RANKS",
    "SUITS",
    "hand_sort_key",
    "sort_hand",
    "build_deck",
    "shuffle",
    "deal_hands",
    "DECK_SIZE",
]
