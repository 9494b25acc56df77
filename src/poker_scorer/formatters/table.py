"""Rich table formatting for terminal output."""

from typing import Dict, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from poker_scorer.evaluation.comparator import Outcome
from poker_scorer.formatters.text import TextFormatter
from poker_scorer.models.card import Card, Suit
from poker_scorer.models.hand import HandResult

_SUIT_STYLES = {
    Suit.HEARTS: "red",
    Suit.DIAMONDS: "red",
    Suit.CLUBS: "white",
    Suit.SPADES: "white",
}


class TableFormatter:
    """Format hands and results as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self._text = TextFormatter()

    def _card_markup(self, card: Card) -> str:
        style = _SUIT_STYLES[card.suit]
        return f"[{style}]{card}[/{style}]"

    def print_hand(self, cards: Sequence[Card], title: str = "Hand") -> None:
        """Print each card with its rank and suit names."""
        table = Table(title=title)
        table.add_column("Card", justify="center")
        table.add_column("Rank", style="cyan")
        table.add_column("Suit")

        for c in cards:
            table.add_row(self._card_markup(c), c.rank.display_name,
                          c.suit.display_name)

        self.console.print(table)

    def print_predicates(self, predicates: Dict[str, bool],
                         title: str = "Hand evaluation") -> None:
        table = Table(title=title)
        table.add_column("Pattern", style="cyan")
        table.add_column("Holds", justify="center")

        for name, held in predicates.items():
            table.add_row(name, "[green]yes[/green]" if held else "[dim]no[/dim]")

        self.console.print(table)

    def print_result(self, result: HandResult, title: str = "Result") -> None:
        """Print category, kickers and score of one evaluated hand."""
        table = Table(title=title)
        table.add_column("Field", style="cyan")
        table.add_column("Value", justify="right", style="green")

        table.add_row("Hand", " ".join(self._card_markup(c) for c in result.cards))
        table.add_row("Category", result.name)
        table.add_row("Kickers", ", ".join(str(k) for k in result.kickers))
        table.add_row("Score", str(result.score))

        self.console.print(table)

    def print_comparison(self, first: HandResult, second: HandResult,
                         outcome: Outcome) -> None:
        """Print two results side by side followed by the winner."""
        table = Table(title="Showdown")
        table.add_column("", style="cyan")
        table.add_column("Player 1")
        table.add_column("Player 2")

        table.add_row("Hand",
                      " ".join(self._card_markup(c) for c in first.cards),
                      " ".join(self._card_markup(c) for c in second.cards))
        table.add_row("Category", first.name, second.name)
        table.add_row("Score", str(first.score), str(second.score))

        self.console.print(table)

        style = "yellow" if outcome is Outcome.TIE else "green"
        self.console.print(Panel(f"[bold {style}]{self._text.format_outcome(outcome)}"
                                 f"[/bold {style}]"))
