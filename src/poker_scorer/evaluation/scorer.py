"""Integer strength score for a classified five-card hand.

The score is a base-14 number of six digits::

    category * 14**5 + d0 * 14**4 + d1 * 14**3 + d2 * 14**2 + d3 * 14 + d4

``d0..d4`` are the kicker ranks, most significant first, each stored as
``rank - 2`` so that every digit lies in [0, 12]. A digit can therefore never
carry into the category digit, which keeps every hand of a stronger category
above every hand of a weaker one. Categories with fewer than five distinct
kickers are padded with zeros on the right.
"""

import logging
from typing import List, Sequence, Tuple

from poker_scorer.evaluation.classifier import rank_counts
from poker_scorer.evaluation.sorter import check_hand_size
from poker_scorer.models.card import Card
from poker_scorer.models.hand import HAND_SIZE, HandCategory

logger = logging.getLogger(__name__)

BASE = 14
LOWEST_RANK = 2
CATEGORY_WEIGHT = BASE ** HAND_SIZE

# Categories whose kickers are simply the five ranks, highest first.
_UNGROUPED = (
    HandCategory.HIGH_CARD,
    HandCategory.STRAIGHT,
    HandCategory.FLUSH,
    HandCategory.STRAIGHT_FLUSH,
)


def kickers(cards: Sequence[Card], category: HandCategory) -> Tuple[int, ...]:
    """Rank values that decide ties inside ``category``, most significant first.

    For grouped categories the ranks are ordered by group size, then by rank,
    so a pair or two pair scores the same whatever positions it took up after
    sorting:

    - Quad: quad rank, kicker.
    - Full house: triple rank, pair rank.
    - Set: triple rank, then the two others high to low.
    - Two pair: higher pair, lower pair, singleton.
    - Pair: pair rank, then the three others high to low.
    """
    if category in _UNGROUPED:
        return tuple(c.value for c in reversed(cards))

    counts = rank_counts(cards)
    return tuple(sorted(counts, key=lambda r: (-counts[r], -r)))


def encode(category: HandCategory, kicker_ranks: Sequence[int]) -> int:
    """Pack a category and its kicker ranks into one integer."""
    digits: List[int] = [r - LOWEST_RANK for r in kicker_ranks]
    digits += [0] * (HAND_SIZE - len(digits))

    score = int(category)
    for d in digits:
        score = score * BASE + d
    return score


def score_hand(cards: Sequence[Card], category: HandCategory) -> int:
    """Score a sorted five-card hand whose category is already resolved."""
    check_hand_size(cards)
    kicker_ranks = kickers(cards, category)
    score = encode(category, kicker_ranks)
    logger.debug("Scored %s (%s, kickers=%s) as %d",
                 list(cards), category.name, kicker_ranks, score)
    return score


def decode_category(score: int) -> HandCategory:
    """Recover the category digit from a score."""
    return HandCategory(score // CATEGORY_WEIGHT)
