"""Poker Scorer CLI — Typer-based command line interface."""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from poker_scorer import config
from poker_scorer.exceptions import PokerScorerError

app = typer.Typer(
    name="poker-scorer",
    help="Five-card poker hand classifier and scorer",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v",
                                 help="Log evaluation steps"),
):
    """Five-card poker hand classifier and scorer."""
    try:
        level = logging.DEBUG if verbose else config.get_log_level()
    except PokerScorerError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(1)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _parse_hand(text: str):
    from poker_scorer.models.card import Card
    try:
        return Card.parse_many(text)
    except PokerScorerError as e:
        console.print(f"[red]Invalid card:[/red] {e}")
        raise typer.Exit(1)


def _evaluate(cards):
    from poker_scorer.evaluation import HandEvaluator
    try:
        return HandEvaluator.evaluate(cards)
    except PokerScorerError as e:
        console.print(f"[red]Cannot evaluate hand:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="Five cards, e.g. Ah Kd Qs Jc Th"),
):
    """Classify and score a five-card hand."""
    from poker_scorer.evaluation import describe
    from poker_scorer.formatters.table import TableFormatter

    result = _evaluate(_parse_hand(" ".join(cards)))

    fmt = TableFormatter(console)
    fmt.print_hand(result.cards, title="Sorted hand")
    fmt.print_predicates(describe(result.cards))
    fmt.print_result(result)


@app.command()
def compare(
    first: str = typer.Option(..., "--first", help="First hand, e.g. 'Ah Kd Qs Jc Th'"),
    second: str = typer.Option(..., "--second", help="Second hand"),
):
    """Compare two five-card hands and report the winner."""
    from poker_scorer.evaluation import compare_scores
    from poker_scorer.formatters.table import TableFormatter

    result1 = _evaluate(_parse_hand(first))
    result2 = _evaluate(_parse_hand(second))

    fmt = TableFormatter(console)
    fmt.print_comparison(result1, result2, compare_scores(result1.score, result2.score))


@app.command()
def deal(
    seed: Optional[int] = typer.Option(None, "--seed", "-s",
                                       help="Seed the deck for a repeatable deal"),
    against: Optional[str] = typer.Option(None, "--against", "-a",
                                          help="Hand to play the dealt hand against"),
):
    """Deal a hand and play it against a fixed opponent."""
    from poker_scorer.evaluation import compare_scores, describe
    from poker_scorer.formatters.table import TableFormatter
    from poker_scorer.simulation.deck import Deck

    if seed is None:
        try:
            seed = config.get_default_seed()
        except PokerScorerError as e:
            console.print(f"[red]Configuration error:[/red] {e}")
            raise typer.Exit(1)
    opponent = _parse_hand(against or config.DEFAULT_OPPONENT)
    result2 = _evaluate(opponent)

    deck = Deck.seeded(seed)
    deck.remove(opponent)
    dealt = deck.deal(5)

    fmt = TableFormatter(console)
    fmt.print_hand(dealt, title="Player 1 (dealt)")
    fmt.print_hand(opponent, title="Player 2")

    result1 = _evaluate(dealt)
    fmt.print_predicates(describe(result1.cards), title="Player 1 evaluation")
    fmt.print_predicates(describe(result2.cards), title="Player 2 evaluation")
    fmt.print_comparison(result1, result2, compare_scores(result1.score, result2.score))


if __name__ == "__main__":
    app()
