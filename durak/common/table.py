"""
The shared trick area of a Durak game.

The table is an ordered sequence of slots, each holding an attacking card and
optionally the card that covered it. Only the last slot may be uncovered.
"""

from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from durak.common.card import Card, Rank
from durak.common.constants import HAND_SIZE
from durak.common.errors import InvariantViolation


@dataclass(frozen=True)
class TableSlot:
    """
    Immutable pair of an attacking card and its defense.

    Attributes:
        attack: The card played by the attacker
        defense: The card that covered the attack, or None while it is open
    """

    attack: Card
    defense: Optional[Card] = None

    def is_defended(self) -> bool:
        return self.defense is not None

    def cards(self) -> List[Card]:
        if self.defense is None:
            return [self.attack]
        return [self.attack, self.defense]


class Table:
    """
    Cards in play during the current attack series.
    """

    def __init__(self, capacity: int = HAND_SIZE):
        self.capacity = capacity
        self._slots: List[TableSlot] = []

    @property
    def slots(self) -> Tuple[TableSlot, ...]:
        """A snapshot of the slots in play order."""
        return tuple(self._slots)

    def is_empty(self) -> bool:
        return not self._slots

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def open_attack(self) -> Optional[Card]:
        """Return the attacking card awaiting defense, if any."""
        if self._slots and not self._slots[-1].is_defended():
            return self._slots[-1].attack
        return None

    def is_closed(self) -> bool:
        """True when every slot on the table has been covered."""
        return self.open_attack() is None

    def cards(self) -> List[Card]:
        """All cards on the table, attack before defense for each slot."""
        return [card for slot in self._slots for card in slot.cards()]

    def ranks(self) -> Set[Rank]:
        """Ranks already in play, on either side of the table."""
        return {card.rank for card in self.cards()}

    def add_attack(self, card: Card) -> None:
        """
        Open a new slot with an attacking card.

        Raises:
            InvariantViolation: If the table is full or the last attack is still open
        """
        if self.is_full():
            raise InvariantViolation(f"Cannot attack with {card}: table is full")
        if not self.is_closed():
            raise InvariantViolation(
                f"Cannot attack with {card}: {self.open_attack()} is not defended yet"
            )
        self._slots.append(TableSlot(attack=card))

    def cover(self, card: Card) -> None:
        """
        Close the open slot with a defending card.

        Raises:
            InvariantViolation: If there is no open attack to cover
        """
        if self.is_closed():
            raise InvariantViolation(f"Cannot defend with {card}: no open attack")
        last = self._slots[-1]
        self._slots[-1] = TableSlot(attack=last.attack, defense=card)

    def clear(self) -> List[Card]:
        """Remove every card from the table and return them."""
        cards = self.cards()
        self._slots.clear()
        return cards

    def __len__(self) -> int:
        return len(self._slots)

    def __repr__(self) -> str:
        return f"Table({self._slots!r})"

    def __str__(self) -> str:
        if not self._slots:
            return "(empty)"
        return " | ".join(
            f"{slot.attack} / {slot.defense if slot.defense else '_'}"
            for slot in self._slots
        )
