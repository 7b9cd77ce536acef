"""
Game engine for the Durak package.

The engine implements the attack/defense/turn-switch state machine on top of
the card primitives in `durak.common`.
"""

from durak.engine.durak import DurakEngine
from durak.engine.autoplay import autoplay, choose_action

__all__ = ["DurakEngine", "autoplay", "choose_action"]
