"""
Dummy adapter for the Durak engine, used for testing and simulation.

This module provides a non-interactive adapter that can be used for automated
testing and simulations where no user interaction is needed.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from durak.adapters.base import PlatformAdapter
from durak.game.state import Action, GameView


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing and simulation.

    This adapter doesn't interact with any real platform. It replays a scripted
    list of actions, then falls back to a strategy function, and records
    everything it is shown for later inspection.
    """

    def __init__(
        self,
        auto_actions: Optional[List[Action]] = None,
        strategy_function: Optional[Callable[[GameView], Optional[Action]]] = None,
        verbose: bool = False,
    ):
        """
        Initialize the dummy adapter.

        Args:
            auto_actions: Optional list of actions to take in sequence
            strategy_function: Optional function that takes a GameView and returns
                              an action to take
            verbose: Whether to print events to stdout (useful for debugging)
        """
        self.auto_actions = list(auto_actions or [])
        self.strategy_function = strategy_function
        self.verbose = verbose

        # Track events for later inspection
        self.events = []

        # Track rendered states for testing
        self.rendered_states = []

    def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Store the game state for later inspection.

        Args:
            state: The current game state
        """
        self.rendered_states.append(state)

        if self.verbose:
            print(f"Table: {state.get('table')} | Hand: {state.get('player', {}).get('cards')}")

    def request_player_action(self, view: GameView) -> Optional[Action]:
        """
        Return the next scripted action or ask the strategy function.

        Returns:
            The selected action, or None once both sources are exhausted
        """
        if self.auto_actions:
            return self.auto_actions.pop(0)
        if self.strategy_function:
            return self.strategy_function(view)
        return None

    def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Store the event for later inspection.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type

        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str}")
            for key, value in data.items():
                print(f"  {key}: {value}")

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.

        Args:
            event_type: The type of events to retrieve

        Returns:
            A list of event data dictionaries
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    def clear(self) -> None:
        """Clear all stored events and states."""
        self.events.clear()
        self.rendered_states.clear()
