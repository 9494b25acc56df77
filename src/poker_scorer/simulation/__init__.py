"""Card dealing for demonstrations."""

from poker_scorer.simulation.deck import Deck

__all__ = ["Deck"]
