"""
Immutable value types for the Durak game.

This module provides the actions accepted by the engine, the responses it
produces, the rules it is configured with and the read-only `GameView`
snapshot handed to opponent policies and presentation adapters.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Dict, List, Optional, Tuple

from durak.common.card import Card, Suit
from durak.common.constants import HAND_SIZE
from durak.common.hand import acceptable_moves
from durak.common.table import TableSlot

FIRST_ATTACKER_CHOICES = ("random", "player", "computer", "lowest_trump")


class GameStage(Enum):
    """Phases of a Durak game as seen between two player actions."""

    ATTACK = auto()  # Human attacks or finishes the attack series
    DEFENSE = auto()  # Human covers the open attack or takes the table
    GAME_END = auto()


class Winner(Enum):
    """Outcome of a finished game."""

    PLAYER = auto()
    COMPUTER = auto()
    TIE = auto()


class ActionType(Enum):
    PLAY = auto()  # Attack/defend with the card
    END_TURN = auto()  # Take cards or finish attack


class ResponseType(Enum):
    PLAY = auto()  # Computer attacks or defends with a new card
    TAKE = auto()  # Computer takes cards
    END_TURN = auto()  # The turn is over
    GAME_OVER = auto()  # The game is over


@dataclass(frozen=True)
class Action:
    """
    An input to the engine's transition function.

    Attributes:
        type: Whether to play a card or end the turn
        card: The card to play, for PLAY actions
    """

    type: ActionType
    card: Optional[Card] = None

    @classmethod
    def play(cls, card: Card) -> "Action":
        return cls(ActionType.PLAY, card)

    @classmethod
    def end_turn(cls) -> "Action":
        return cls(ActionType.END_TURN)

    def __str__(self) -> str:
        if self.type is ActionType.PLAY:
            return f"Play({self.card})"
        return "EndTurn"


@dataclass(frozen=True)
class Response:
    """
    What the engine did in reaction to an action.

    Attributes:
        type: The kind of response
        card: The card the computer played, for PLAY responses
        winner: The outcome, for GAME_OVER responses
    """

    type: ResponseType
    card: Optional[Card] = None
    winner: Optional[Winner] = None

    @classmethod
    def play(cls, card: Card) -> "Response":
        return cls(ResponseType.PLAY, card=card)

    @classmethod
    def take(cls) -> "Response":
        return cls(ResponseType.TAKE)

    @classmethod
    def end_turn(cls) -> "Response":
        return cls(ResponseType.END_TURN)

    @classmethod
    def game_over(cls, winner: Winner) -> "Response":
        return cls(ResponseType.GAME_OVER, winner=winner)

    @property
    def is_game_over(self) -> bool:
        return self.type is ResponseType.GAME_OVER

    def __str__(self) -> str:
        if self.type is ResponseType.PLAY:
            return f"Play({self.card})"
        if self.type is ResponseType.GAME_OVER:
            return f"GameOver({self.winner.name})"
        return self.type.name.title().replace("_", "")


@dataclass(frozen=True)
class DurakRules:
    """
    Immutable representation of the rules for a Durak game.

    Attributes:
        hand_size: Number of cards players refill to, also the table capacity
        first_attacker: How the first attacker is chosen: "random" (coin flip),
            "player", "computer" or "lowest_trump"
    """

    hand_size: int = HAND_SIZE
    first_attacker: str = "random"

    def __post_init__(self):
        if self.first_attacker not in FIRST_ATTACKER_CHOICES:
            raise ValueError(
                f"Unknown first_attacker {self.first_attacker!r}, "
                f"expected one of {', '.join(FIRST_ATTACKER_CHOICES)}"
            )
        if self.hand_size < 1:
            raise ValueError(f"hand_size must be positive, got {self.hand_size}")


@dataclass(frozen=True)
class GameView:
    """
    Read-only snapshot of the engine state.

    Attributes:
        stage: Current phase of the game
        players_turn: Whether the human is the attacker
        trump: The trump suit
        trump_card: The face-up trump indicator, None once the deck is drawn
        deck_size: Number of cards left in the deck
        player_hand: Cards held by the human
        computer_hand: Cards held by the computer
        table: Table slots in play order
        discard_size: Number of cards in the discard pile
        winner: The outcome once the game is over
    """

    stage: GameStage
    players_turn: bool
    trump: Suit
    trump_card: Optional[Card]
    deck_size: int
    player_hand: Tuple[Card, ...] = field(default_factory=tuple)
    computer_hand: Tuple[Card, ...] = field(default_factory=tuple)
    table: Tuple[TableSlot, ...] = field(default_factory=tuple)
    discard_size: int = 0
    winner: Optional[Winner] = None
    hand_size: int = HAND_SIZE

    @property
    def open_attack(self) -> Optional[Card]:
        if self.table and not self.table[-1].is_defended():
            return self.table[-1].attack
        return None

    @property
    def table_full(self) -> bool:
        return len(self.table) >= self.hand_size

    def computer_moves(self) -> List[Card]:
        """Acceptable cards for the computer against the current table."""
        return acceptable_moves(self.computer_hand, self.table, self.trump)

    def player_moves(self) -> List[Card]:
        """Cards the human may submit right now, after the attack limits."""
        if self.stage is GameStage.GAME_END:
            return []
        if self.players_turn and (self.table_full or not self.computer_hand):
            return []
        return acceptable_moves(self.player_hand, self.table, self.trump)

    def mirrored(self) -> "GameView":
        """The same position seen from the other seat, hands and roles swapped."""
        stage = {
            GameStage.ATTACK: GameStage.DEFENSE,
            GameStage.DEFENSE: GameStage.ATTACK,
        }.get(self.stage, self.stage)
        return replace(
            self,
            stage=stage,
            players_turn=not self.players_turn,
            player_hand=self.computer_hand,
            computer_hand=self.player_hand,
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the view to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the game state
        """
        return {
            "stage": self.stage.name,
            "players_turn": self.players_turn,
            "trump_suit": self.trump.name,
            "trump_card": repr(self.trump_card) if self.trump_card else None,
            "deck_remaining": self.deck_size,
            "discard_pile_size": self.discard_size,
            "winner": self.winner.name if self.winner else None,
            "table": [
                {
                    "attack": repr(slot.attack),
                    "defense": repr(slot.defense) if slot.defense else None,
                }
                for slot in self.table
            ],
            "player_hand": [repr(card) for card in self.player_hand],
            "computer_hand": [repr(card) for card in self.computer_hand],
        }

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the view to a format suitable for platform adapters.

        The computer's hand is only exposed as a count.

        Returns:
            Dictionary in adapter-friendly format
        """
        return {
            "stage": self.stage.name,
            "attacker": "player" if self.players_turn else "computer",
            "trump_suit": str(self.trump),
            "trump_card": str(self.trump_card) if self.trump_card else None,
            "deck_remaining": self.deck_size,
            "discard_pile_size": self.discard_size,
            "winner": self.winner.name if self.winner else None,
            "table": [
                (str(slot.attack), str(slot.defense) if slot.defense else None)
                for slot in self.table
            ],
            "player": {
                "cards": [str(card) for card in self.player_hand],
                "valid_moves": [str(card) for card in self.player_moves()],
            },
            "computer": {"hand_size": len(self.computer_hand)},
        }
