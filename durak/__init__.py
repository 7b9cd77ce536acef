"""
Durak: rules engine for the Russian trick-taking card game, played by one
human against a computer opponent.

>>> from durak import DurakEngine, FirstMovePolicy
>>> engine = DurakEngine(FirstMovePolicy(), config={"first_attacker": "player"})
>>> engine.start() is None
True
"""

from durak.common import Card, Deck, Hand, InvariantViolation, Rank, Suit, Table
from durak.engine import DurakEngine, autoplay
from durak.game import Action, DurakRules, GameStage, GameView, Response, Winner
from durak.policy import FirstMovePolicy, OpponentPolicy, RandomPolicy, TakeAllPolicy

__all__ = [
    "Card",
    "Deck",
    "Hand",
    "InvariantViolation",
    "Rank",
    "Suit",
    "Table",
    "DurakEngine",
    "autoplay",
    "Action",
    "DurakRules",
    "GameStage",
    "GameView",
    "Response",
    "Winner",
    "FirstMovePolicy",
    "OpponentPolicy",
    "RandomPolicy",
    "TakeAllPolicy",
]
