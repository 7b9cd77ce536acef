"""Durak-specific constants."""

from durak.common.card import Rank, Suit

# Target number of cards in a hand, also the maximum number of slots on the table
HAND_SIZE = 6

ALL_SUITS = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)

ALL_RANKS = (
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
)

DECK_SIZE = len(ALL_SUITS) * len(ALL_RANKS)
