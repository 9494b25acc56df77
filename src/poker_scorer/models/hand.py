"""Hand category and evaluation result models."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple

from poker_scorer.models.card import Card

HAND_SIZE = 5


class HandCategory(IntEnum):
    """Hand categories from weakest to strongest."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    SET = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    QUAD = 8
    STRAIGHT_FLUSH = 9

    @property
    def display_name(self) -> str:
        return {
            HandCategory.HIGH_CARD: "High Card",
            HandCategory.PAIR: "Pair",
            HandCategory.TWO_PAIR: "Two Pair",
            HandCategory.SET: "Three of a Kind",
            HandCategory.STRAIGHT: "Straight",
            HandCategory.FLUSH: "Flush",
            HandCategory.FULL_HOUSE: "Full House",
            HandCategory.QUAD: "Four of a Kind",
            HandCategory.STRAIGHT_FLUSH: "Straight Flush",
        }[self]


@dataclass(frozen=True, order=True)
class HandResult:
    """The outcome of evaluating one five-card hand.

    Results order by ``score`` alone; the other fields are carried for
    display and do not take part in comparisons.
    """
    score: int
    category: HandCategory = field(compare=False)
    kickers: Tuple[int, ...] = field(compare=False)
    cards: Tuple[Card, ...] = field(compare=False)

    @property
    def name(self) -> str:
        return self.category.display_name

    @property
    def cards_str(self) -> str:
        return " ".join(str(c) for c in self.cards)
