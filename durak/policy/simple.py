"""
Simple opponent policies.

None of these look ahead; they exist to exercise the engine and to give a
human something to play against.
"""

import random
from typing import Dict, Optional, Type

from durak.common.card import Card
from durak.game.state import GameView
from durak.policy.base import OpponentPolicy


class FirstMovePolicy(OpponentPolicy):
    """Always plays the weakest acceptable card."""

    def plan_attack(self, view: GameView) -> Optional[Card]:
        moves = view.computer_moves()
        return moves[0] if moves else None

    def plan_defense(self, view: GameView, attack: Card) -> Optional[Card]:
        candidates = self.defenses(view, attack)
        return candidates[0] if candidates else None


class TakeAllPolicy(FirstMovePolicy):
    """Attacks like `FirstMovePolicy` but never defends."""

    def plan_defense(self, view: GameView, attack: Card) -> Optional[Card]:
        return None


class RandomPolicy(OpponentPolicy):
    """
    Picks uniformly among acceptable moves.

    Args:
        rng: Random source, a fresh one if omitted
        take_probability: Chance of declining to defend even when a cover exists
        stop_probability: Chance of not extending an attack that could be extended
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        take_probability: float = 0.0,
        stop_probability: float = 0.0,
    ):
        self.rng = rng or random.Random()
        self.take_probability = take_probability
        self.stop_probability = stop_probability

    def plan_attack(self, view: GameView) -> Optional[Card]:
        moves = view.computer_moves()
        if not moves:
            return None
        # An opening attack is mandatory
        if view.table and self.rng.random() < self.stop_probability:
            return None
        return self.rng.choice(moves)

    def plan_defense(self, view: GameView, attack: Card) -> Optional[Card]:
        candidates = self.defenses(view, attack)
        if not candidates or self.rng.random() < self.take_probability:
            return None
        return self.rng.choice(candidates)

    def __repr__(self) -> str:
        return (
            f"RandomPolicy(take_probability={self.take_probability}, "
            f"stop_probability={self.stop_probability})"
        )


POLICIES: Dict[str, Type[OpponentPolicy]] = {
    "first": FirstMovePolicy,
    "take": TakeAllPolicy,
    "random": RandomPolicy,
}


def get_policy(name: str, **kwargs) -> OpponentPolicy:
    """
    Create a policy by its registered name.

    Raises:
        ValueError: If no policy is registered under `name`
    """
    try:
        policy_cls = POLICIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown policy {name!r}, expected one of {', '.join(sorted(POLICIES))}"
        ) from None
    return policy_cls(**kwargs)
