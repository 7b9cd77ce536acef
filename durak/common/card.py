"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent
the cards of a 36-card Durak deck.

- `Suit`: An enum representing the four suits: Clubs, Diamonds, Hearts and Spades.
Suits carry no ordering of their own; their declaration order is only used to break
ties deterministically when sorting.

- `Rank`: An enum representing the nine ranks of the short deck, Six through Ace.
Ranks are totally ordered by their value.

- `Card`: An immutable class representing a playing card. A card knows whether it
beats another card under a given trump suit and how it sorts relative to other cards.
"""

from enum import Enum, unique
from typing import Tuple


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    @property
    def index(self) -> int:
        """Declaration index of the suit, used as a sorting tie-breaker."""
        return _SUIT_INDEX[self]

    def __str__(self) -> str:
        return self.value


_SUIT_INDEX = {suit: i for i, suit in enumerate(Suit)}


@unique
class Rank(Enum):
    """
    Enum for ranks in a Durak deck, Six lowest and Ace highest.
    """

    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def rank_value(self) -> int:
        """The value of the rank, used for ordering."""
        return self.value

    @property
    def rank_str(self) -> str:
        """A string representation of the rank."""
        if self.value > 10:
            return self.name[0]
        return str(self.value)

    def __lt__(self, other):
        if isinstance(other, Rank):
            return self.value < other.value
        return NotImplemented

    def __le__(self, other):
        if isinstance(other, Rank):
            return self.value <= other.value
        return NotImplemented

    def __gt__(self, other):
        if isinstance(other, Rank):
            return self.value > other.value
        return NotImplemented

    def __ge__(self, other):
        if isinstance(other, Rank):
            return self.value >= other.value
        return NotImplemented

    def __str__(self) -> str:
        return self.rank_str


class Card:
    """
    Class representing a playing card. Cards are immutable values: two cards with
    the same suit and rank are interchangeable.

    >>> card = Card(Suit.HEARTS, Rank.SIX)
    >>> print(card)
    6 of ♥
    >>> Card(Suit.SPADES, Rank.SIX).beats(card, trump=Suit.SPADES)
    True
    """

    __slots__ = ("_suit", "_rank")

    def __init__(self, suit: Suit, rank: Rank):
        """
        Initialize a Card instance.

        :param suit: Suit of the card (one of the Suit enums)
        :param rank: Rank of the card (one of the Rank enums)
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit}")
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank}")
        object.__setattr__(self, "_suit", suit)
        object.__setattr__(self, "_rank", rank)

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    def __setattr__(self, name, value):
        raise AttributeError(f"Card is immutable, cannot set {name!r}")

    def __reduce__(self):
        return (Card, (self._suit, self._rank))

    def is_trump(self, trump: Suit) -> bool:
        return self._suit == trump

    def beats(self, other: "Card", trump: Suit) -> bool:
        """
        Check whether this card covers `other` under the given trump suit.

        A card beats another card of the same suit with a lower rank, and a
        trump card beats any non-trump card. Two non-trump cards of different
        suits never beat each other.

        :param other: The attacking card to cover.
        :param trump: The trump suit of the current game.
        :return: True if this card is a legal defense against `other`.
        """
        if self._suit == other.suit:
            return self._rank > other.rank
        return self.is_trump(trump) and not other.is_trump(trump)

    def sort_key(self, trump: Suit) -> Tuple[int, int, int]:
        """Non-trumps first by rank, trumps last; suit order breaks ties."""
        return (int(self.is_trump(trump)), self._rank.rank_value, self._suit.index)

    def compare(self, other: "Card", trump: Suit) -> int:
        """
        Total order used for sorting hands and ranking candidate moves.

        :return: -1, 0 or 1 as this card sorts before, equal to or after `other`.
        """
        mine = self.sort_key(trump)
        theirs = other.sort_key(trump)
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self._rank == other.rank and self._suit == other.suit
        return NotImplemented

    def __hash__(self):
        return hash((self._suit, self._rank))

    def __repr__(self) -> str:
        return f"Card(Suit.{self._suit.name}, Rank.{self._rank.name})"

    def __str__(self) -> str:
        return f"{self._rank.rank_str} of {self._suit}"
