"""
This module contains the Deck class, which represents the 36-card Durak deck.

The first card of the shuffled sequence is the face-up trump indicator and is
drawn last; cards are drawn from the end of the sequence.

>>> deck = Deck.new_sorted()
>>> deck.size
36
>>> deck.draw()
Card(Suit.SPADES, Rank.ACE)
>>> deck.size
35
"""

import random
from typing import List, Optional

from durak.common.card import Card, Suit
from durak.common.constants import ALL_RANKS, ALL_SUITS
from durak.common.errors import InvariantViolation


class Deck:
    """
    A class representing a deck of cards together with its trump suit.
    """

    # Precompute the sorted deck
    _default_deck = [Card(suit, rank) for suit in ALL_SUITS for rank in ALL_RANKS]

    def __init__(self, cards: List[Card], trump: Optional[Suit] = None):
        """
        Initialize a Deck instance.

        :param cards: The ordered cards of the deck; the last card is drawn first.
        :param trump: The trump suit. Defaults to the suit of the first card.
        """
        if len(set(cards)) != len(cards):
            raise InvariantViolation("Deck contains duplicate cards")
        self.cards: List[Card] = list(cards)
        if trump is None:
            if not self.cards:
                raise InvariantViolation("Cannot derive a trump suit from an empty deck")
            trump = self.cards[0].suit
        self.trump: Suit = trump

    @classmethod
    def new_sorted(cls) -> "Deck":
        """
        Construct an unshuffled deck with every suit and rank combination.

        >>> Deck.new_sorted().trump_card()
        Card(Suit.CLUBS, Rank.SIX)
        """
        return cls(cls._default_deck)

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> "Deck":
        """
        Construct a shuffled deck.

        The trump suit is taken from the first card after shuffling, so it is
        a uniformly random suit.

        :param rng: Random source used for the shuffle. A fresh one is created if omitted.
        """
        rng = rng or random.Random()
        cards = cls._default_deck.copy()
        rng.shuffle(cards)
        return cls(cards)

    def draw(self) -> Card:
        """
        Remove and return the top card, i.e. the last one in the sequence.

        :raises InvariantViolation: If the deck is already empty.
        """
        if not self.cards:
            raise InvariantViolation("No cards to draw")
        return self.cards.pop()

    def trump_card(self) -> Optional[Card]:
        """The face-up trump indicator, or None once the deck is exhausted."""
        if self.cards:
            return self.cards[0]
        return None

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]}, trump=Suit.{self.trump.name})"

    def __str__(self) -> str:
        trump_card = self.trump_card()
        if trump_card is None:
            return f"Deck: Remaining = 0, Trump = {self.trump}"
        return f"Deck: Remaining = {self.size}, Trump = {trump_card}"
