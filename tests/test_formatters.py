"""Tests for text and table formatting."""

from rich.console import Console

from poker_scorer.evaluation import HandEvaluator, Outcome, describe
from poker_scorer.formatters import TableFormatter, TextFormatter
from poker_scorer.models.card import Card


class TestTextFormatter:
    """Tests for TextFormatter."""

    def test_format_card(self):
        assert TextFormatter().format_card(Card.parse("Ah")) == "Ace of Hearts"

    def test_format_hand(self):
        text = TextFormatter().format_hand(Card.parse_many("Td 2c"))
        assert text.splitlines() == [
            "Card: Rank Ten, Suit Diamonds",
            "Card: Rank Two, Suit Clubs",
        ]

    def test_format_result(self):
        result = HandEvaluator.evaluate(Card.parse_many("Kh Kd Ks Tc Th"))
        text = TextFormatter().format_result(result)
        assert "Category: Full House" in text
        assert "Score: 4209296" in text

    def test_format_outcome(self):
        fmt = TextFormatter()
        assert fmt.format_outcome(Outcome.FIRST_WINS) == "Player 1 wins"
        assert fmt.format_outcome(Outcome.SECOND_WINS) == "Player 2 wins"
        assert fmt.format_outcome(Outcome.TIE) == "Tie"
        assert fmt.format_outcome(Outcome.FIRST_WINS, first="Alice") == "Alice wins"


class TestTableFormatter:
    """Tests for TableFormatter output."""

    def _console(self):
        return Console(record=True, width=120, force_terminal=False)

    def test_print_result(self):
        console = self._console()
        result = HandEvaluator.evaluate(Card.parse_many("Th Jc Qs Kd Ah"))
        TableFormatter(console).print_result(result)
        out = console.export_text()
        assert "Straight" in out
        assert "3182390" in out

    def test_print_predicates(self):
        console = self._console()
        cards = HandEvaluator.evaluate(Card.parse_many("Kh Kd Ks Tc Th")).cards
        TableFormatter(console).print_predicates(describe(cards))
        out = console.export_text()
        assert "Full House" in out
        assert "yes" in out

    def test_print_comparison(self):
        console = self._console()
        first = HandEvaluator.evaluate(Card.parse_many("Th Jc Qs Kd Ah"))
        second = HandEvaluator.evaluate(Card.parse_many("Kh Kd Ks Tc Th"))
        TableFormatter(console).print_comparison(first, second, Outcome.SECOND_WINS)
        out = console.export_text()
        assert "Player 2 wins" in out
        assert "Full House" in out
