"""
Card primitives shared by the Durak engine: cards, the deck, hands and the table.
"""

from durak.common.card import Card as Card, Rank as Rank, Suit as Suit
from durak.common.deck import Deck as Deck
from durak.common.errors import InvariantViolation as InvariantViolation
from durak.common.hand import Hand as Hand, acceptable_moves as acceptable_moves
from durak.common.table import Table as Table, TableSlot as TableSlot

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "InvariantViolation",
    "Hand",
    "acceptable_moves",
    "Table",
    "TableSlot",
]
