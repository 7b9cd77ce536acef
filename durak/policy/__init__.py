"""
Opponent policies for the computer player.
"""

from durak.policy.base import OpponentPolicy
from durak.policy.simple import (
    FirstMovePolicy,
    RandomPolicy,
    TakeAllPolicy,
    get_policy,
)

__all__ = [
    "OpponentPolicy",
    "FirstMovePolicy",
    "RandomPolicy",
    "TakeAllPolicy",
    "get_policy",
]
