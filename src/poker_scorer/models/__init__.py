"""Data models for the hand scorer."""

from poker_scorer.models.card import Card, Rank, Suit
from poker_scorer.models.hand import HAND_SIZE, HandCategory, HandResult

__all__ = [
    "Card", "Rank", "Suit",
    "HAND_SIZE", "HandCategory", "HandResult",
]
