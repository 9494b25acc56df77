"""Structural predicates over a sorted five-card hand.

Every predicate expects the hand to be sorted by ascending rank already
(see :func:`poker_scorer.evaluation.sorter.sort_hand`). The predicates are
not mutually exclusive: a straight flush answers true to both
:func:`is_straight` and :func:`is_flush`. :func:`classify` resolves a single
category by checking them from the strongest to the weakest.

Pair and set are derived from the rank-count signature, i.e. how many cards
share each rank, rather than from scanning adjacent positions. The signature
cannot confuse a set or a quad with a lone pair. Two pair scans for disjoint
adjacent pairs, so it also holds for a full house and for a quad.
"""

import logging
from typing import Callable, Dict, List, Sequence, Tuple

from poker_scorer.evaluation.sorter import check_hand_size
from poker_scorer.models.card import Card
from poker_scorer.models.hand import HandCategory

logger = logging.getLogger(__name__)


def rank_counts(cards: Sequence[Card]) -> Dict[int, int]:
    """Map each rank value in the hand to how many cards carry it."""
    counts: Dict[int, int] = {}
    for c in cards:
        counts[c.value] = counts.get(c.value, 0) + 1
    return counts


def rank_signature(cards: Sequence[Card]) -> Tuple[int, ...]:
    """Rank-count signature, largest group first, e.g. (3, 2) or (2, 1, 1, 1)."""
    return tuple(sorted(rank_counts(cards).values(), reverse=True))


def is_pair(cards: Sequence[Card]) -> bool:
    return rank_signature(cards) == (2, 1, 1, 1)


def is_two_pair(cards: Sequence[Card]) -> bool:
    """Two disjoint adjacent pairs, scanning left to right.

    A matched pair is skipped past before the scan goes on. Also true for a
    full house (triple plus pair) and a quad (two pairs of the same rank).
    """
    pairs = 0
    i = 0
    while i < len(cards) - 1:
        if cards[i].value == cards[i + 1].value:
            pairs += 1
            i += 2
        else:
            i += 1
    return pairs == 2


def is_set(cards: Sequence[Card]) -> bool:
    return 3 in rank_signature(cards)


def is_quad(cards: Sequence[Card]) -> bool:
    return cards[0].value == cards[3].value or cards[1].value == cards[4].value


def is_straight(cards: Sequence[Card]) -> bool:
    # Ace counts high only; A-2-3-4-5 is not a straight here.
    for i in range(len(cards) - 1):
        if cards[i].value + 1 != cards[i + 1].value:
            return False
    return True


def is_flush(cards: Sequence[Card]) -> bool:
    return len({c.suit for c in cards}) == 1


def is_full_house(cards: Sequence[Card]) -> bool:
    return is_set(cards) and is_two_pair(cards)


def is_straight_flush(cards: Sequence[Card]) -> bool:
    return is_straight(cards) and is_flush(cards)


# Resolution order, strongest first. The first predicate that holds wins.
PREDICATES: List[Tuple[HandCategory, Callable[[Sequence[Card]], bool]]] = [
    (HandCategory.STRAIGHT_FLUSH, is_straight_flush),
    (HandCategory.QUAD, is_quad),
    (HandCategory.FULL_HOUSE, is_full_house),
    (HandCategory.FLUSH, is_flush),
    (HandCategory.STRAIGHT, is_straight),
    (HandCategory.SET, is_set),
    (HandCategory.TWO_PAIR, is_two_pair),
    (HandCategory.PAIR, is_pair),
]


def classify(cards: Sequence[Card]) -> HandCategory:
    """Resolve the category of a sorted five-card hand."""
    check_hand_size(cards)
    for category, predicate in PREDICATES:
        if predicate(cards):
            logger.debug("Classified %s as %s", list(cards), category.name)
            return category
    logger.debug("Classified %s as HIGH_CARD", list(cards))
    return HandCategory.HIGH_CARD


def describe(cards: Sequence[Card]) -> Dict[str, bool]:
    """Raw answer of every predicate, weakest pattern first."""
    check_hand_size(cards)
    return {
        "Pair": is_pair(cards),
        "Set": is_set(cards),
        "Two Pair": is_two_pair(cards),
        "Straight": is_straight(cards),
        "Flush": is_flush(cards),
        "Full House": is_full_house(cards),
        "Quad": is_quad(cards),
        "Straight Flush": is_straight_flush(cards),
    }
