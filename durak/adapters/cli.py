"""
Command-line interface adapter for the Durak engine.

This module renders the game as plain text and turns one line of input into
an engine action.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Union

from durak.adapters.base import PlatformAdapter
from durak.common.io_interface import ConsoleIOInterface, IOInterface
from durak.game.state import Action, GameView

logger = logging.getLogger("durak.adapters.cli")

HELP = "Enter a card number to play it, 'e' to end the turn or take, 'q' to quit."

EVENT_MESSAGES = {
    "ATTACK": "{who} attacked with {card}",
    "DEFENSE": "{who} covered with {card}",
    "CARDS_TAKEN": "{who} took {count} cards",
    "TABLE_DISCARDED": "{count} cards go to the discard pile",
}


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for the Durak engine.

    This adapter uses an IOInterface (the console by default) for input and
    output, providing a simple text-based interface to the game.
    """

    def __init__(self, io_interface: Optional[IOInterface] = None):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a default
                          console IOInterface will be created.
        """
        self.io_interface = io_interface or ConsoleIOInterface()

    def initialize(self) -> None:
        self.io_interface.output("Durak game. " + HELP)

    def shutdown(self) -> None:
        self.io_interface.output("Bye")

    def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the console.

        Args:
            state: The current game state in adapter format
        """
        output = self.io_interface.output

        output("")
        if state.get("trump_card"):
            output(
                f"Deck: Remaining = {state['deck_remaining']}, Trump = {state['trump_card']}"
            )
        else:
            output(f"Deck: empty, Trump = {state['trump_suit']}")
        output(f"Discarded: {state['discard_pile_size']}")
        output(f"Computer has {state['computer']['hand_size']} cards")

        table = state.get("table", [])
        if table:
            output(
                "Table: "
                + " | ".join(f"{attack} / {defense or '_'}" for attack, defense in table)
            )
        else:
            output("Table: (empty)")

        cards = state["player"]["cards"]
        output(
            "Your cards: "
            + "  ".join(f"[{i}] {card}" for i, card in enumerate(cards, start=1))
        )

        if state.get("winner"):
            output(f"Game over: {_describe_winner(state['winner'])}")
        elif state["attacker"] == "player":
            output("Your attack.")
        else:
            output("Defend or take.")

    def request_player_action(self, view: GameView) -> Optional[Action]:
        """
        Read one command from the user.

        Input that cannot be parsed is reported and read again. Whether the
        action is legal is decided by the caller.

        Returns:
            The parsed action, or None to quit
        """
        while True:
            try:
                choice = self.io_interface.input("> ").strip().lower()
            except (EOFError, KeyboardInterrupt):
                return None

            action = parse_command(choice, view)
            if action is not None or choice in ("q", "quit"):
                return action

            logger.debug("Unparseable input %r", choice)
            self.io_interface.output(HELP)

    def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Print a one-line description of card movements.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        template = EVENT_MESSAGES.get(event_type_str)
        if template is None:
            return
        who = "You" if data.get("player") == "player" else "Computer"
        self.io_interface.output(
            template.format(who=who, card=data.get("card"), count=data.get("count"))
        )


def parse_command(choice: str, view: GameView) -> Optional[Action]:
    """
    Translate a command line into an action.

    Returns:
        The action, or None if the line is a quit command or not understood
    """
    if choice in ("e", "end", "t", "take"):
        return Action.end_turn()
    if choice.isdigit():
        index = int(choice)
        if 1 <= index <= len(view.player_hand):
            return Action.play(view.player_hand[index - 1])
    return None


def _describe_winner(winner: str) -> str:
    if winner == "PLAYER":
        return "you win!"
    if winner == "COMPUTER":
        return "the computer wins."
    return "it's a tie."
