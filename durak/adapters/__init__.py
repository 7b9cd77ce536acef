"""
Platform adapters for the Durak engine.

This package provides adapters that present the game state and collect the
human player's actions (console, scripted tests).
"""

from durak.adapters.base import PlatformAdapter
from durak.adapters.cli import CLIAdapter
from durak.adapters.dummy import DummyAdapter

__all__ = ["PlatformAdapter", "CLIAdapter", "DummyAdapter"]
