"""
Event system for the Durak engine.

The engine announces every state change (cards dealt, attacks, defenses,
takes, turn boundaries, game over) on an event bus. Listeners are purely
informational: a failing listener is logged and never interrupts a
transition.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List, Union
import logging
import threading
from enum import Enum

logger = logging.getLogger("durak.events")

EventType = Union[str, Enum]


def _event_name(event_type: EventType) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


class EventEmitter:
    """
    Synchronous event emitter.

    Handlers run in the emitting thread, in subscription order, before
    `emit` returns. Global handlers run after the handlers of the event.
    """

    def __init__(self):
        self._listeners: Dict[str, List[List[Callable]]] = defaultdict(list)
        self._global_listeners: List[List[Callable]] = []
        self._lock = threading.RLock()

    def _subscribe(self, handlers: List[List[Callable]], callback: Callable) -> Callable:
        # Wrap so that the same callback subscribed twice is removed once
        entry = [callback]
        with self._lock:
            handlers.append(entry)

        def unsubscribe():
            with self._lock:
                handlers[:] = [h for h in handlers if h is not entry]

        return unsubscribe

    def on(self, event_type: EventType, callback: Callable) -> Callable:
        """
        Subscribe to an event type.

        Args:
            event_type: The event type to subscribe to (string or enum)
            callback: Function to call when event occurs, signature: fn(event_data)

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        return self._subscribe(self._listeners[_event_name(event_type)], callback)

    def on_any(self, callback: Callable) -> Callable:
        """
        Subscribe to all events.

        Args:
            callback: Function to call for any event, signature: fn((event_type, event_data))

        Returns:
            Unsubscribe function that can be called to remove this subscription
        """
        return self._subscribe(self._global_listeners, callback)

    def emit(self, event_type: EventType, data: Dict[str, Any]) -> None:
        """
        Emit an event to all registered listeners.

        Args:
            event_type: The type of event to emit
            data: The data to include with the event
        """
        name = _event_name(event_type)
        with self._lock:
            calls = [(entry[0], data) for entry in self._listeners.get(name, ())]
            calls += [(entry[0], (name, data)) for entry in self._global_listeners]

        for callback, args in calls:
            try:
                callback(args)
            except Exception:
                logger.exception("Listener for %s failed", name)


class EventBus:
    """
    Process-wide event emitter shared by every engine.
    """

    _instance = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> EventEmitter:
        with cls._lock:
            if cls._instance is None:
                cls._instance = EventEmitter()
            return cls._instance


class EngineEventType(Enum):
    """
    Event types emitted by the Durak engine.
    """

    # Game lifecycle
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"

    # Card flow
    CARD_DEALT = "card_dealt"
    ATTACK = "attack"
    DEFENSE = "defense"
    CARDS_TAKEN = "cards_taken"
    TABLE_DISCARDED = "table_discarded"

    # Turn boundaries
    TURN_ENDED = "turn_ended"

    ERROR = "error"
