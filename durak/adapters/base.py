"""
Base adapter interface for the Durak engine.

This module defines the interface that platform-specific adapters must implement
to present the game and collect the human player's actions.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional, Union

from durak.game.state import Action, GameView


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    Adapters only ever see read-only snapshots of the game: the adapter-format
    dictionary for rendering and a `GameView` when asked for the next action.
    All mutation flows through `DurakEngine.player_action`.
    """

    @abstractmethod
    def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the platform.

        Args:
            state: The state in adapter format (see `GameView.to_adapter_format`)
        """
        pass

    @abstractmethod
    def request_player_action(self, view: GameView) -> Optional[Action]:
        """
        Ask the human for the next action.

        Args:
            view: Snapshot of the current game

        Returns:
            The chosen action, or None if the player wants to quit
        """
        pass

    @abstractmethod
    def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a game event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    # The following methods have default implementations but can be overridden

    def initialize(self) -> None:
        """
        Initialize the adapter.

        This method is called when the adapter is first connected to the engine.
        """
        pass

    def shutdown(self) -> None:
        """
        Shutdown the adapter.

        This method is called when the game loop exits.
        """
        pass
