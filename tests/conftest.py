"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the test packages.
"""

import pytest

from durak.common.card import Card, Rank, Suit
from durak.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def card():
    """Shorthand card factory: card("6H"), card("10S"), card("AD")."""
    ranks = {rank.rank_str: rank for rank in Rank}
    suits = {suit.name[0]: suit for suit in Suit}

    def make(code: str) -> Card:
        return Card(suits[code[-1]], ranks[code[:-1]])

    return make
