"""Tests for the Deck collaborator."""

import random

import pytest

from poker_scorer.evaluation.evaluator import HandEvaluator
from poker_scorer.exceptions import DeckExhaustedError
from poker_scorer.models.card import Card
from poker_scorer.simulation.deck import Deck


class TestDeck:
    """Tests for the Deck class."""

    def test_deck_initialization(self):
        """Test that a new deck has 52 distinct cards."""
        deck = Deck()
        assert len(deck) == 52
        assert len(set(deck.cards)) == 52

    def test_unshuffled_order(self):
        """Test an unshuffled deck is laid out suit by suit."""
        deck = Deck(shuffle=False)
        assert deck.cards[0] == Card.parse("2h")
        assert deck.cards[12] == Card.parse("Ah")
        assert deck.cards[13] == Card.parse("2d")

    def test_seeded_decks_match(self):
        """Test the same seed always gives the same order."""
        assert Deck.seeded(42).cards == Deck.seeded(42).cards
        assert Deck.seeded(42).cards != Deck.seeded(43).cards

    def test_injected_rng(self):
        """Test the injected random source drives the shuffle."""
        deck1 = Deck(random.Random(7))
        deck2 = Deck(random.Random(7))
        assert deck1.deal(5) == deck2.deal(5)

    def test_shuffle_leaves_global_random_alone(self):
        random.seed(1234)
        expected = random.random()
        random.seed(1234)
        Deck()
        assert random.random() == expected

    def test_deal_cards(self):
        """Test dealing cards from the deck."""
        deck = Deck()
        dealt = deck.deal(5)
        assert len(dealt) == 5
        assert len(deck) == 47
        assert deck.remaining == 47

    def test_deal_one(self):
        """Test dealing a single card."""
        deck = Deck()
        card = deck.deal_one()
        assert card is not None
        assert card not in deck.cards
        assert len(deck) == 51

    def test_deal_too_many(self):
        """Test dealing more cards than available."""
        deck = Deck()
        deck.deal(52)
        with pytest.raises(DeckExhaustedError) as exc_info:
            deck.deal(1)
        assert exc_info.value.requested == 1
        assert exc_info.value.remaining == 0

    def test_remove(self):
        """Test taking cards already in play out of the deck."""
        deck = Deck()
        in_play = Card.parse_many("Kh Kd Ks Tc Th")
        deck.remove(in_play)
        assert len(deck) == 47
        assert not set(in_play) & set(deck.cards)

    def test_reset(self):
        """Test resetting the deck."""
        deck = Deck()
        deck.deal(10)
        assert len(deck) == 42
        deck.reset()
        assert len(deck) == 52

    def test_dealt_hands_evaluate(self):
        """Test every hand dealt from a deck can be scored."""
        deck = Deck.seeded(0)
        for _ in range(10):
            result = HandEvaluator.evaluate(deck.deal(5))
            assert 1 <= int(result.category) <= 9
