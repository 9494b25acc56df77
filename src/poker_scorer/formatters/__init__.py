"""Output formatting for terminal and tables."""

from poker_scorer.formatters.text import TextFormatter
from poker_scorer.formatters.table import TableFormatter

__all__ = ["TextFormatter", "TableFormatter"]
