"""
Durak game values.

This module provides the actions, responses, rules and read-only state
snapshot shared by the engine, opponent policies and adapters.
"""

from durak.game.state import (
    Action as Action,
    ActionType as ActionType,
    DurakRules as DurakRules,
    GameStage as GameStage,
    GameView as GameView,
    Response as Response,
    ResponseType as ResponseType,
    Winner as Winner,
)

__all__ = [
    "Action",
    "ActionType",
    "DurakRules",
    "GameStage",
    "GameView",
    "Response",
    "ResponseType",
    "Winner",
]
