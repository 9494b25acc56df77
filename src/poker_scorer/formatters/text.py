"""Plain text formatting for terminal output."""

from typing import Dict, List, Sequence

from poker_scorer.evaluation.comparator import Outcome
from poker_scorer.models.card import Card
from poker_scorer.models.hand import HandResult


class TextFormatter:
    """Format cards, hands and results as plain text."""

    def format_card(self, card: Card) -> str:
        """Format a card like 'Ace of Hearts'."""
        return f"{card.rank.display_name} of {card.suit.display_name}"

    def format_hand(self, cards: Sequence[Card]) -> str:
        """One line per card, in the order given."""
        return "\n".join(
            f"Card: Rank {c.rank.display_name}, Suit {c.suit.display_name}"
            for c in cards
        )

    def format_predicates(self, predicates: Dict[str, bool]) -> str:
        return "\n".join(f"{name}: {'yes' if held else 'no'}"
                         for name, held in predicates.items())

    def format_result(self, result: HandResult) -> str:
        """Format an evaluation result."""
        lines: List[str] = []
        lines.append(f"Hand: {result.cards_str}")
        lines.append(f"Category: {result.name}")
        lines.append(f"Kickers: {', '.join(str(k) for k in result.kickers)}")
        lines.append(f"Score: {result.score}")
        return "\n".join(lines)

    def format_outcome(self, outcome: Outcome,
                       first: str = "Player 1", second: str = "Player 2") -> str:
        if outcome is Outcome.FIRST_WINS:
            return f"{first} wins"
        if outcome is Outcome.SECOND_WINS:
            return f"{second} wins"
        return "Tie"
