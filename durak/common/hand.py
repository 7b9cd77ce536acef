"""
This module contains the Hand class, which represents the cards held by one
Durak player, and the move legality rules that depend on the table.

Functions:

acceptable_moves: Legal cards to play from a collection given the table slots.

Classes:

Hand: A player's hand, mutated by playing, drawing and taking cards.
"""

from typing import Iterable, List, Optional, Sequence

from durak.common.card import Card, Suit
from durak.common.constants import HAND_SIZE
from durak.common.deck import Deck
from durak.common.errors import InvariantViolation
from durak.common.table import Table, TableSlot


def acceptable_moves(
    cards: Iterable[Card], slots: Sequence[TableSlot], trump: Suit
) -> List[Card]:
    """
    Compute the legal cards to play given the slots on the table.

    - An empty table accepts any card as an opening attack.
    - An open attack accepts exactly the cards that beat it.
    - A closed table accepts follow-up attacks whose rank is already in play.

    Args:
        cards: The cards the player holds
        slots: The table slots in play order
        trump: The trump suit

    Returns:
        The legal cards without duplicates, sorted weakest first
    """
    held = set(cards)
    if not slots:
        moves = held
    elif not slots[-1].is_defended():
        attack = slots[-1].attack
        moves = {card for card in held if card.beats(attack, trump)}
    else:
        ranks = {card.rank for slot in slots for card in slot.cards()}
        moves = {card for card in held if card.rank in ranks}
    return sorted(moves, key=lambda card: card.sort_key(trump))


class Hand:
    """
    The set of cards held by a single player.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None, capacity: int = HAND_SIZE):
        self._cards: List[Card] = []
        self.capacity = capacity
        for card in cards or ():
            self.add_card(card)

    @property
    def cards(self) -> List[Card]:
        """Returns a copy of the cards in the hand."""
        return list(self._cards)

    def add_card(self, card: Card) -> None:
        """
        Adds a card to the hand.

        Raises:
            InvariantViolation: If the card is already held
        """
        if card in self._cards:
            raise InvariantViolation(f"Card {card} is already in hand.")
        self._cards.append(card)

    def remove_card(self, card: Card) -> None:
        """
        Removes a card from the hand.

        Raises:
            InvariantViolation: If the card is not found in the hand.
        """
        try:
            self._cards.remove(card)
        except ValueError as exc:
            raise InvariantViolation(f"Card {card} not found in hand.") from exc

    def sort(self, trump: Suit) -> None:
        self._cards.sort(key=lambda card: card.sort_key(trump))

    def is_empty(self) -> bool:
        return not self._cards

    def acceptable_moves(self, table: Table, trump: Suit) -> List[Card]:
        """Legal cards from this hand against the given table."""
        return acceptable_moves(self._cards, table.slots, trump)

    def attack_with(self, card: Card, table: Table) -> None:
        """
        Play `card` as a new attack.

        Raises:
            InvariantViolation: If the table is full or the card is not held
        """
        if table.is_full():
            raise InvariantViolation(f"Cannot attack with {card}: table is full")
        self.remove_card(card)
        table.add_attack(card)

    def defend_with(self, card: Card, table: Table) -> None:
        """
        Cover the open attack with `card`.

        Raises:
            InvariantViolation: If there is no open attack or the card is not held
        """
        if table.is_closed():
            raise InvariantViolation(f"Cannot defend with {card}: no open attack")
        self.remove_card(card)
        table.cover(card)

    def draw_from(self, deck: Deck) -> int:
        """
        Refill the hand up to its capacity, stopping early if the deck runs out.

        Returns:
            The number of cards drawn
        """
        drawn = 0
        while len(self._cards) < self.capacity and not deck.is_empty():
            self.add_card(deck.draw())
            drawn += 1
        self.sort(deck.trump)
        return drawn

    def take_from(self, table: Table, trump: Optional[Suit] = None) -> List[Card]:
        """
        Pick up every card on the table, including an unanswered attack.

        Returns:
            The cards taken
        """
        taken = table.clear()
        for card in taken:
            self.add_card(card)
        if trump is not None:
            self.sort(trump)
        return taken

    def __contains__(self, card) -> bool:
        return card in self._cards

    def __iter__(self):
        return iter(list(self._cards))

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        """
        Returns a string representation of the hand for debugging.

        Returns:
            A string in the form "Hand([Card(...), ...])".
        """
        return f"Hand({self._cards!r})"

    def __str__(self) -> str:
        """
        Returns a string representation of the hand for display.

        Returns:
            A string in the form "Card(...), ...".
        """
        return ", ".join(str(card) for card in self._cards)
