import random

import pytest
from durak.common.card import Card, Rank, Suit
from durak.common.constants import DECK_SIZE
from durak.common.deck import Deck
from durak.common.errors import InvariantViolation


def test_new_sorted_deck():
    deck = Deck.new_sorted()
    assert deck.size == DECK_SIZE == 36
    assert len(set(deck.cards)) == 36
    assert all(card.rank >= Rank.SIX for card in deck.cards)
    assert deck.trump == Suit.CLUBS
    assert deck.trump_card() == Card(Suit.CLUBS, Rank.SIX)


def test_new_deck_is_shuffled_copy():
    deck = Deck.new(random.Random(7))
    assert sorted(deck.cards, key=repr) == sorted(Deck.new_sorted().cards, key=repr)
    assert deck.trump == deck.cards[0].suit
    # The class-level template is never shuffled in place
    assert Deck.new_sorted().cards[0] == Card(Suit.CLUBS, Rank.SIX)


def test_same_seed_same_deck():
    assert Deck.new(random.Random(3)).cards == Deck.new(random.Random(3)).cards


def test_draw_takes_from_the_end():
    deck = Deck.new_sorted()
    assert deck.draw() == Card(Suit.SPADES, Rank.ACE)
    assert deck.draw() == Card(Suit.SPADES, Rank.KING)
    assert deck.size == 34


def test_trump_card_is_drawn_last():
    deck = Deck.new_sorted()
    drawn = [deck.draw() for _ in range(36)]
    assert drawn[-1] == Card(Suit.CLUBS, Rank.SIX)
    assert deck.is_empty()
    assert deck.trump_card() is None
    # The trump suit outlives the indicator card
    assert deck.trump == Suit.CLUBS


def test_draw_from_empty_deck():
    deck = Deck([Card(Suit.HEARTS, Rank.SIX)])
    deck.draw()
    with pytest.raises(InvariantViolation, match="No cards to draw"):
        deck.draw()


def test_duplicate_cards_rejected():
    with pytest.raises(InvariantViolation):
        Deck([Card(Suit.HEARTS, Rank.SIX), Card(Suit.HEARTS, Rank.SIX)])


def test_empty_deck_needs_explicit_trump():
    with pytest.raises(InvariantViolation):
        Deck([])
    assert Deck([], trump=Suit.HEARTS).trump == Suit.HEARTS


def test_deck_str():
    deck = Deck.new_sorted()
    assert str(deck) == "Deck: Remaining = 36, Trump = 6 of ♣"
    assert str(Deck([], trump=Suit.HEARTS)) == "Deck: Remaining = 0, Trump = ♥"
