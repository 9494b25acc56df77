"""Card, Rank, and Suit models."""

from dataclasses import dataclass
from enum import Enum
from typing import List

from poker_scorer.exceptions import CardParseError


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "h": cls.HEARTS, "hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "clubs": cls.CLUBS, "♣": cls.CLUBS,
            "s": cls.SPADES, "spades": cls.SPADES, "♠": cls.SPADES,
        }
        key = s.strip().lower()
        if key in mapping:
            return mapping[key]
        raise CardParseError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}[self.value]

    @property
    def display_name(self) -> str:
        return {"h": "Hearts", "d": "Diamonds", "c": "Clubs", "s": "Spades"}[self.value]


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        values = {
            "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8,
            "9": 9, "T": 10, "J": 11, "Q": 12, "K": 13, "A": 14,
        }
        return values[self.value]

    @property
    def display_name(self) -> str:
        return _RANK_NAMES[self.numeric_value]

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        for r in cls:
            if r.value == c.upper():
                return r
        if c == "10":
            return cls.TEN
        raise CardParseError(f"Unknown rank: {c}")

    @classmethod
    def from_value(cls, value: int) -> "Rank":
        for r in cls:
            if r.numeric_value == value:
                return r
        raise CardParseError(f"Rank value out of range: {value}")


_RANK_NAMES = {
    2: "Two", 3: "Three", 4: "Four", 5: "Five", 6: "Six", 7: "Seven",
    8: "Eight", 9: "Nine", 10: "Ten", 11: "Jack", 12: "Queen", 13: "King",
    14: "Ace",
}


@dataclass(frozen=True)
class Card:
    """A single playing card.

    Equality needs both rank and suit to match, while ordering looks at rank
    only so that sorting a hand never depends on suit.
    """
    rank: Rank
    suit: Suit

    @property
    def value(self) -> int:
        """Numeric rank value in [2, 14]."""
        return self.rank.numeric_value

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '10h', '2c'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise CardParseError(f"Cannot parse card: {s}")

    @classmethod
    def parse_many(cls, text: str) -> List["Card"]:
        """Parse whitespace or comma separated cards, e.g. 'Ah Kd, Qs'."""
        return [cls.parse(token) for token in text.replace(",", " ").split()]

    def __repr__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.symbol}"

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.value < other.value

    def to_short(self) -> str:
        """Return short string like 'Ah'."""
        return f"{self.rank.value}{self.suit.value}"
