from abc import ABC, abstractmethod
from typing import List, Optional

from durak.common.card import Card
from durak.game.state import GameView


class OpponentPolicy(ABC):
    """
    Decision policy for the computer player.

    The engine calls exactly one of these methods per computer move and
    validates the answer. Returning None is an ordinary answer: no attack
    means the computer yields the turn, no defense means it takes the table.
    """

    @abstractmethod
    def plan_attack(self, view: GameView) -> Optional[Card]:
        """Pick an acceptable attack or follow-up card, or None to yield."""
        pass

    @abstractmethod
    def plan_defense(self, view: GameView, attack: Card) -> Optional[Card]:
        """Pick a card that beats `attack` under the trump, or None to take."""
        pass

    def defenses(self, view: GameView, attack: Card) -> List[Card]:
        """Cards from the computer's hand that cover `attack`, weakest first."""
        return sorted(
            (card for card in view.computer_hand if card.beats(attack, view.trump)),
            key=lambda card: card.sort_key(view.trump),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
