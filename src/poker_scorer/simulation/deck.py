"""Deck management for dealing five-card hands."""

import logging
import random
from typing import Iterable, List, Optional

from poker_scorer.exceptions import DeckExhaustedError
from poker_scorer.models.card import Card, Rank, Suit

logger = logging.getLogger(__name__)


class Deck:
    """A standard 52-card deck.

    The random source is injected so shuffles can be reproduced; nothing
    here touches the module-level ``random`` state.
    """

    def __init__(self, rng: Optional[random.Random] = None, shuffle: bool = True):
        """Initialize a new deck with all 52 cards.

        Args:
            rng: Random source used for shuffling. A fresh unseeded
                ``random.Random`` is created when omitted.
            shuffle: Shuffle right away, as a freshly opened deck would be.
        """
        self.rng = rng if rng is not None else random.Random()
        self.cards: List[Card] = []
        self._reset()
        if shuffle:
            self.shuffle()

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "Deck":
        """Build a shuffled deck whose order is fixed by ``seed``."""
        return cls(random.Random(seed))

    def _reset(self):
        """Reset the deck to all 52 cards, suit by suit."""
        self.cards = []
        for suit in Suit:
            for rank in Rank:
                self.cards.append(Card(rank, suit))

    def shuffle(self):
        """Shuffle the deck in place."""
        self.rng.shuffle(self.cards)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.

        Raises:
            DeckExhaustedError: If fewer than ``count`` cards remain.
        """
        if count > len(self.cards):
            raise DeckExhaustedError(count, len(self.cards))

        dealt = self.cards[:count]
        self.cards = self.cards[count:]
        logger.debug("Dealt %s, %d cards left", dealt, len(self.cards))
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card from the top of the deck."""
        return self.deal(1)[0]

    def remove(self, cards: Iterable[Card]):
        """Take specific cards out of the deck, e.g. ones already in play."""
        taken = set(cards)
        self.cards = [c for c in self.cards if c not in taken]

    def reset(self):
        """Reset and shuffle the deck."""
        self._reset()
        self.shuffle()

    @property
    def remaining(self) -> int:
        """Get the number of remaining cards."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"
