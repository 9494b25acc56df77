"""Five-card hand evaluation: sort, classify, score and compare."""

import logging
from typing import Dict, Hashable, List, Sequence

from poker_scorer.evaluation.classifier import classify
from poker_scorer.evaluation.comparator import Outcome, compare_scores
from poker_scorer.evaluation.scorer import kickers, score_hand
from poker_scorer.evaluation.sorter import sort_hand
from poker_scorer.models.card import Card
from poker_scorer.models.hand import HandCategory, HandResult

logger = logging.getLogger(__name__)


class HandEvaluator:
    """Evaluates and compares five-card poker hands."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> HandResult:
        """Evaluate a five-card hand.

        Args:
            cards: Exactly five cards, in any order.

        Returns:
            HandResult with the sorted cards, category, kickers and score.

        Raises:
            InvalidHandSizeError: If ``cards`` does not hold five cards.
        """
        ordered = sort_hand(cards)
        category = classify(ordered)
        return HandResult(
            score=score_hand(ordered, category),
            category=category,
            kickers=kickers(ordered, category),
            cards=ordered,
        )

    @staticmethod
    def score(cards: Sequence[Card]) -> int:
        """Return only the integer strength of a five-card hand."""
        return HandEvaluator.evaluate(cards).score

    @staticmethod
    def compare(cards1: Sequence[Card], cards2: Sequence[Card]) -> Outcome:
        """Compare two hands.

        Args:
            cards1: First hand.
            cards2: Second hand.

        Returns:
            Outcome.FIRST_WINS, Outcome.SECOND_WINS or Outcome.TIE.
        """
        result1 = HandEvaluator.evaluate(cards1)
        result2 = HandEvaluator.evaluate(cards2)
        outcome = compare_scores(result1.score, result2.score)
        logger.debug("%s (%d) vs %s (%d): %s",
                     result1.name, result1.score, result2.name, result2.score,
                     outcome.value)
        return outcome

    @staticmethod
    def get_winners(hands: Dict[Hashable, Sequence[Card]]) -> List[Hashable]:
        """Get the key(s) holding the strongest hand.

        Args:
            hands: Mapping from a player key (seat, name) to five cards.

        Returns:
            List of winning keys (several when tied), in input order.
        """
        if not hands:
            return []

        scores = {key: HandEvaluator.score(cards) for key, cards in hands.items()}
        best = max(scores.values())
        return [key for key, s in scores.items() if s == best]

    @staticmethod
    def get_category_name(category: HandCategory) -> str:
        """Get a human-readable name for a hand category."""
        return category.display_name
