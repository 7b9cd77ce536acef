"""
This module contains the IOInterface abstract base class and its implementations.

The terminal front end talks to the outside world only through an IOInterface,
so tests can feed it scripted input and inspect what it printed.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for line-based input/output in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and replays
    queued input lines.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next queued input line.

    def add_input(self, *lines):
        Queue input lines.
    """

    __test__ = False

    def __init__(self, input_responses: Optional[List[str]] = None):
        self.sent_messages: List[str] = []
        self.prompts: List[str] = []
        self.input_responses: List[str] = list(input_responses or [])

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        # Running out of script behaves like closing stdin
        raise EOFError("No more input left in TestIOInterface queue.")

    def add_input(self, *lines: str) -> None:
        """Queue input lines."""
        self.input_responses.extend(lines)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class LoggingIOInterface(IOInterface):
    """
    Wraps another interface and appends a transcript of everything shown and
    typed to a file.
    """

    def __init__(self, inner: IOInterface, log_file_path: str):
        self.inner = inner
        self.log_file_path = log_file_path

    def _write(self, line: str) -> None:
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(line + "\n")

    def output(self, message: str) -> None:
        """Output through the wrapped interface and log the message."""
        self._write(message)
        self.inner.output(message)

    def input(self, prompt: str) -> str:
        """Read through the wrapped interface and log prompt and answer."""
        response = self.inner.input(prompt)
        self._write(f"{prompt}{response}")
        return response
