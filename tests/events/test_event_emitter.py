"""
Tests for the event system.

This module contains tests for the EventEmitter and EventBus classes
to ensure they provide the expected behavior for event handling.
"""

import threading
from unittest.mock import MagicMock

from durak.events import EngineEventType, EventBus, EventEmitter


def test_on_with_string_event_type():
    """Test subscribing to an event with a string event type."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on("test_event", callback)

    test_data = {"value": "test"}
    emitter.emit("test_event", test_data)
    callback.assert_called_once_with(test_data)

    # Unsubscribe and emit again
    unsubscribe()
    emitter.emit("test_event", {"value": "test2"})
    callback.assert_called_once()


def test_on_with_enum_event_type():
    """Enum event types are keyed by name."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(EngineEventType.ATTACK, callback)
    emitter.emit("ATTACK", {"card": "6 of ♥"})

    callback.assert_called_once_with({"card": "6 of ♥"})


def test_subscription_order():
    """Handlers run in subscription order, global handlers last."""
    emitter = EventEmitter()
    calls = []

    emitter.on_any(lambda event: calls.append("any"))
    emitter.on("evt", lambda data: calls.append("first"))
    emitter.on("evt", lambda data: calls.append("second"))

    emitter.emit("evt", {})
    assert calls == ["first", "second", "any"]


def test_on_any():
    """Global listeners receive the event type with the data."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on_any(callback)
    emitter.emit(EngineEventType.CARD_DEALT, {"count": 3})
    callback.assert_called_once_with(("CARD_DEALT", {"count": 3}))

    unsubscribe()
    emitter.emit(EngineEventType.CARD_DEALT, {"count": 3})
    callback.assert_called_once()


def test_same_callback_twice_unsubscribes_once():
    emitter = EventEmitter()
    callback = MagicMock()

    first = emitter.on("evt", callback)
    emitter.on("evt", callback)
    first()

    emitter.emit("evt", {})
    callback.assert_called_once()


def test_handler_error_is_isolated():
    """A failing handler does not stop the others."""
    emitter = EventEmitter()
    failing = MagicMock(side_effect=ValueError("boom"))
    callback = MagicMock()

    emitter.on("evt", failing)
    emitter.on("evt", callback)
    emitter.emit("evt", {})

    failing.assert_called_once()
    callback.assert_called_once()


def test_event_bus_singleton():
    """Test that EventBus returns the same instance."""
    assert EventBus.get_instance() is EventBus.get_instance()


def test_event_bus_thread_safety():
    """Concurrent first access still yields a single instance."""
    instances = []

    def grab():
        instances.append(EventBus.get_instance())

    threads = [threading.Thread(target=grab) for _ in range(10)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len({id(instance) for instance in instances}) == 1
