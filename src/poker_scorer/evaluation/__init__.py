"""Five-card hand classification and scoring."""

from poker_scorer.evaluation.sorter import sort_hand
from poker_scorer.evaluation.classifier import classify, describe, rank_signature
from poker_scorer.evaluation.scorer import kickers, score_hand
from poker_scorer.evaluation.comparator import Outcome, compare_scores
from poker_scorer.evaluation.evaluator import HandEvaluator

__all__ = [
    "sort_hand",
    "classify", "describe", "rank_signature",
    "kickers", "score_hand",
    "Outcome", "compare_scores",
    "HandEvaluator",
]
