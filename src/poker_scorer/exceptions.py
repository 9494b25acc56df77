"""Exceptions raised by the hand scorer and its collaborators."""


class PokerScorerError(Exception):
    """Base class for all poker scorer errors."""
    pass


class InvalidHandSizeError(PokerScorerError, ValueError):
    """A hand handed to the evaluator does not hold exactly five cards."""

    def __init__(self, size: int, expected: int = 5):
        self.size = size
        self.expected = expected
        super().__init__(f"Hand must contain exactly {expected} cards, got {size}")


class CardParseError(PokerScorerError, ValueError):
    """Card text could not be parsed."""
    pass


class DeckExhaustedError(PokerScorerError):
    """More cards were requested than the deck holds."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(f"Not enough cards in deck. Need {requested}, have {remaining}")


class ConfigError(PokerScorerError):
    """An environment setting holds a value that cannot be used."""

    def __init__(self, name: str, value: str, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")
