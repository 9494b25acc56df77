"""Ordering of a five-card hand by ascending rank."""

from typing import Sequence, Tuple

from poker_scorer.exceptions import InvalidHandSizeError
from poker_scorer.models.card import Card
from poker_scorer.models.hand import HAND_SIZE


def check_hand_size(cards: Sequence[Card]) -> None:
    """Raise InvalidHandSizeError unless ``cards`` holds exactly five cards."""
    if len(cards) != HAND_SIZE:
        raise InvalidHandSizeError(len(cards), HAND_SIZE)


def sort_hand(cards: Sequence[Card]) -> Tuple[Card, ...]:
    """Return the cards in non-decreasing rank order.

    The sort is stable, so cards of equal rank keep their input order.
    The input sequence is left untouched.
    """
    check_hand_size(cards)
    return tuple(sorted(cards, key=lambda c: c.value))
