"""
Durak card game engine implementation.

This module provides the DurakEngine class, which drives one game between a
human player and a computer opponent. The engine owns the deck, both hands,
the table and the discard pile; every change to them happens inside
`player_action`, which resolves one human action completely, including the
computer's reply, before returning a `Response`.
"""

import logging
import random
import uuid
from typing import Any, Dict, Iterable, Optional

from durak.adapters.base import PlatformAdapter
from durak.common.card import Card
from durak.common.constants import HAND_SIZE
from durak.common.deck import Deck
from durak.common.errors import InvariantViolation
from durak.common.hand import Hand
from durak.common.table import Table
from durak.events import EngineEventType, EventBus
from durak.game.state import (
    Action,
    ActionType,
    DurakRules,
    GameStage,
    GameView,
    Response,
    Winner,
)
from durak.policy.base import OpponentPolicy

logger = logging.getLogger("durak.engine")


class DurakEngine:
    """
    Engine for a two-player game of Durak, human against computer.

    Attributes:
        policy: Decides the computer's moves
        adapter: Optional adapter that is shown every new state
        config: The merged configuration dictionary
        rules: The rules derived from the configuration
        deck: Cards left to draw
        player: The human's hand
        computer: The computer's hand
        table: Cards in play during the current attack series
        discard: Cards retired from play
        players_turn: Whether the human is the attacker
        stage: The phase the game is in between two actions
    """

    def __init__(
        self,
        policy: OpponentPolicy,
        config: Optional[Dict[str, Any]] = None,
        adapter: Optional[PlatformAdapter] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the Durak engine and deal a new game.

        Args:
            policy: Opponent policy for the computer
            config: Configuration options for the game
            adapter: Platform adapter to render states and events to
            rng: Random source for the shuffle and the first-attacker coin flip
        """
        self._configure(policy, config, adapter, rng)
        self._setup(Deck.new(self.rng))

    @classmethod
    def from_deck(
        cls,
        policy: OpponentPolicy,
        deck: Deck,
        player_cards: Optional[Iterable[Card]] = None,
        computer_cards: Optional[Iterable[Card]] = None,
        players_turn: Optional[bool] = None,
        config: Optional[Dict[str, Any]] = None,
        adapter: Optional[PlatformAdapter] = None,
        rng: Optional[random.Random] = None,
    ) -> "DurakEngine":
        """
        Build an engine around a prepared deck, for tests and replays.

        Hands that are not given are dealt from the deck, human first. If
        `players_turn` is omitted the first attacker is chosen by the rules.
        """
        engine = cls.__new__(cls)
        engine._configure(policy, config, adapter, rng)
        engine._setup(deck, player_cards, computer_cards, players_turn)
        return engine

    def _configure(self, policy, config, adapter, rng) -> None:
        default_config = {
            "hand_size": HAND_SIZE,
            "first_attacker": "random",  # or "player", "computer", "lowest_trump"
        }

        # Merge with provided config
        if config:
            default_config.update(config)

        self.config = default_config
        self.rules = DurakRules(
            hand_size=self.config["hand_size"],
            first_attacker=self.config["first_attacker"],
        )

        self.id = str(uuid.uuid4())
        self.policy = policy
        self.adapter = adapter
        self.rng = rng or random.Random()
        self.event_bus = EventBus.get_instance()

    def _setup(
        self,
        deck: Deck,
        player_cards: Optional[Iterable[Card]] = None,
        computer_cards: Optional[Iterable[Card]] = None,
        players_turn: Optional[bool] = None,
    ) -> None:
        hand_size = self.rules.hand_size
        self.deck = deck
        self.discard = []
        self.table = Table(capacity=hand_size)

        self.player = Hand(player_cards, capacity=hand_size)
        if player_cards is None:
            self.player.draw_from(self.deck)
        self.computer = Hand(computer_cards, capacity=hand_size)
        if computer_cards is None:
            self.computer.draw_from(self.deck)
        self.player.sort(self.deck.trump)
        self.computer.sort(self.deck.trump)

        held = self.deck.cards + self.player.cards + self.computer.cards
        if len(set(held)) != len(held):
            raise InvariantViolation("A card is dealt to more than one place")

        if players_turn is None:
            players_turn = self._choose_first_attacker()
        self.players_turn = players_turn
        self.stage = GameStage.ATTACK if players_turn else GameStage.DEFENSE
        self.started = False
        self._result: Optional[Winner] = None

        logger.debug(
            "Dealt game %s: trump %s, %s attacks first",
            self.id,
            self.deck.trump,
            "player" if players_turn else "computer",
        )

    def _choose_first_attacker(self) -> bool:
        """Return True if the human attacks first."""
        method = self.rules.first_attacker
        if method == "player":
            return True
        if method == "computer":
            return False
        if method == "lowest_trump":
            mine = self._lowest_trump(self.player)
            theirs = self._lowest_trump(self.computer)
            if mine is not None and theirs is not None:
                return mine.rank < theirs.rank
            if mine is not None or theirs is not None:
                return mine is not None
        # Unbiased coin flip
        return self.rng.random() < 0.5

    def _lowest_trump(self, hand: Hand) -> Optional[Card]:
        trumps = [card for card in hand if card.is_trump(self.deck.trump)]
        return min(trumps, key=lambda card: card.rank.rank_value, default=None)

    # -- public surface ----------------------------------------------------

    def start(self) -> Optional[Response]:
        """
        Start the game. If the computer attacks first, its opening card is
        played immediately and returned as a response.
        """
        if self.started:
            raise self._violation("Game already started")
        self.started = True

        self._emit(
            EngineEventType.GAME_STARTED,
            trump=self.deck.trump,
            trump_card=self.deck.trump_card(),
            attacker="player" if self.players_turn else "computer",
        )

        response = None
        winner = self.winner()
        if winner is not None:
            response = self._game_over(winner)
        elif not self.players_turn:
            response = self._start_attack()
        self._render()
        return response

    def player_action(self, action: Action) -> Response:
        """
        Apply one human action and the computer's reaction to it.

        While the human attacks, PLAY is an attack and END_TURN finishes the
        attack series. While the human defends, PLAY covers the open attack
        and END_TURN takes the table.

        Args:
            action: The human's action, which must pass `is_valid_move` or `can_end_turn`

        Returns:
            What happened in response

        Raises:
            InvariantViolation: If the action is not legal in the current state
        """
        if not self.started:
            raise self._violation("Call start() before the first action")
        if self.stage is GameStage.GAME_END:
            raise self._violation("The game is over")

        logger.debug("Player action %s in stage %s", action, self.stage.name)

        if action.type is ActionType.PLAY:
            if not self.is_valid_move(action.card):
                raise self._violation(f"Illegal move: {action.card}")
            if self.players_turn:
                response = self._defend(action.card)
            else:
                response = self._plan_attack(action.card)
        else:
            if not self.can_end_turn():
                raise self._violation("Cannot end the turn before attacking")
            if self.players_turn:
                response = self._switch_turn()
            else:
                response = self._player_took_cards()

        if not response.is_game_over:
            self.stage = GameStage.ATTACK if self.players_turn else GameStage.DEFENSE

        logger.debug("Response %s, stage %s", response, self.stage.name)
        self._render()
        return response

    def is_valid_move(self, card: Card) -> bool:
        """
        Check whether the human may play `card` now.

        An attack is impossible once the table is full or the computer has no
        cards left to defend with; otherwise the card must be an acceptable move.
        """
        if self.stage is GameStage.GAME_END:
            return False
        if self.players_turn and (self.table.is_full() or self.computer.is_empty()):
            return False
        return card in self.player.acceptable_moves(self.table, self.deck.trump)

    def can_end_turn(self) -> bool:
        """Defenders may always take; attackers may stop once they attacked."""
        if self.stage is GameStage.GAME_END:
            return False
        if not self.players_turn:
            return True
        return not self.table.is_empty()

    def winner(self) -> Optional[Winner]:
        """
        Determine the winner. Nobody wins while the deck still has cards.

        The first player to empty their hand wins; emptying both is a tie.
        """
        if not self.deck.is_empty():
            return None
        if self.player.is_empty():
            if self.computer.is_empty():
                return Winner.TIE
            return Winner.PLAYER
        if self.computer.is_empty():
            return Winner.COMPUTER
        return None

    @property
    def result(self) -> Optional[Winner]:
        """The winner announced by the last response, once the game is over."""
        return self._result

    def view(self) -> GameView:
        """Read-only snapshot of the current state."""
        return GameView(
            stage=self.stage,
            players_turn=self.players_turn,
            trump=self.deck.trump,
            trump_card=self.deck.trump_card(),
            deck_size=self.deck.size,
            player_hand=tuple(self.player.cards),
            computer_hand=tuple(self.computer.cards),
            table=self.table.slots,
            discard_size=len(self.discard),
            winner=self._result,
            hand_size=self.rules.hand_size,
        )

    def card_count(self) -> int:
        """Total number of cards in the deck, both hands, the table and the discard pile."""
        return (
            self.deck.size
            + len(self.player)
            + len(self.computer)
            + len(self.table.cards())
            + len(self.discard)
        )

    # -- transitions -------------------------------------------------------

    def _start_attack(self) -> Response:
        """Computer opens a new attack series."""
        attack = self.policy.plan_attack(self.view())
        if attack is None:
            raise self._violation("Attack impossible on first move")
        return self._computer_attack(attack)

    def _defend(self, attack: Card) -> Response:
        """Human attacks with `attack`, computer covers or takes."""
        self.player.attack_with(attack, self.table)
        self._emit(EngineEventType.ATTACK, player="player", card=attack)

        defense = self.policy.plan_defense(self.view(), attack)
        if defense is not None:
            if defense not in self.computer or not defense.beats(attack, self.deck.trump):
                raise self._violation(
                    f"{self.policy!r} proposed {defense}, which cannot cover {attack}"
                )
            self.computer.defend_with(defense, self.table)
            self._emit(EngineEventType.DEFENSE, player="computer", card=defense)
            response = Response.play(defense)
        else:
            taken = self.computer.take_from(self.table, self.deck.trump)
            self._emit(EngineEventType.CARDS_TAKEN, player="computer", count=len(taken))
            self._refill(self.computer, self.player)
            response = Response.take()

        # The winner is only checked after the response so that a last card
        # played by either side counts
        winner = self.winner()
        if winner is not None:
            return self._game_over(winner)
        return response

    def _switch_turn(self) -> Response:
        """Human finishes the attack series, computer attacks next."""
        # Attacker draws first
        self._refill(self.player, self.computer)

        winner = self.winner()
        if winner is not None:
            return self._game_over(winner)

        self.players_turn = False
        self._discard_table()
        self._emit(EngineEventType.TURN_ENDED, attacker="computer")

        return self._start_attack()

    def _plan_attack(self, last_defense: Card) -> Response:
        """Human covered the open attack, computer extends the attack or yields."""
        self.player.defend_with(last_defense, self.table)
        self._emit(EngineEventType.DEFENSE, player="player", card=last_defense)

        if self.table.is_full():
            self._refill(self.computer, self.player)

            winner = self.winner()
            if winner is not None:
                return self._game_over(winner)

            self.players_turn = True
            self._discard_table()
            self._emit(EngineEventType.TURN_ENDED, attacker="player")
            return Response.end_turn()

        # The defense might have been the last card in the game
        winner = self.winner()
        if winner is not None:
            return self._game_over(winner)

        # An empty human hand can still be attacked while the deck lasts
        attack = self.policy.plan_attack(self.view())
        if attack is not None:
            return self._computer_attack(attack)

        # No more cards to attack with, yielding
        self.players_turn = True
        self._discard_table()
        self._refill(self.computer, self.player)
        self._emit(EngineEventType.TURN_ENDED, attacker="player")
        return Response.end_turn()

    def _player_took_cards(self) -> Response:
        """Human takes the table, computer attacks again."""
        taken = self.player.take_from(self.table, self.deck.trump)
        self._emit(EngineEventType.CARDS_TAKEN, player="player", count=len(taken))
        self._refill(self.computer)

        winner = self.winner()
        if winner is not None:
            return self._game_over(winner)
        return self._start_attack()

    # -- helpers -----------------------------------------------------------

    def _computer_attack(self, attack: Card) -> Response:
        if attack not in self.computer.acceptable_moves(self.table, self.deck.trump):
            raise self._violation(f"{self.policy!r} proposed illegal attack {attack}")
        self.computer.attack_with(attack, self.table)
        self._emit(EngineEventType.ATTACK, player="computer", card=attack)
        return Response.play(attack)

    def _refill(self, *hands: Hand) -> None:
        """Draw hands back up to size, in the given order."""
        for hand in hands:
            drawn = hand.draw_from(self.deck)
            if drawn:
                self._emit(
                    EngineEventType.CARD_DEALT,
                    player=self._owner(hand),
                    count=drawn,
                    deck_remaining=self.deck.size,
                )

    def _discard_table(self) -> None:
        cards = self.table.clear()
        self.discard.extend(cards)
        self._emit(EngineEventType.TABLE_DISCARDED, count=len(cards))

    def _game_over(self, winner: Winner) -> Response:
        self._result = winner
        self.stage = GameStage.GAME_END
        logger.info("Game %s over, winner: %s", self.id, winner.name)
        self._emit(EngineEventType.GAME_ENDED, winner=winner.name)
        return Response.game_over(winner)

    def _violation(self, message: str) -> InvariantViolation:
        logger.error("Game %s: %s", self.id, message)
        self._emit(EngineEventType.ERROR, message=message)
        return InvariantViolation(message)

    def _owner(self, hand: Hand) -> str:
        return "player" if hand is self.player else "computer"

    def _emit(self, event_type: EngineEventType, **data) -> None:
        payload = {"game_id": self.id, **data}
        self.event_bus.emit(event_type, payload)
        if self.adapter is not None:
            self.adapter.notify_game_event(event_type, payload)

    def _render(self) -> None:
        if self.adapter is not None:
            self.adapter.render_game_state(self.view().to_adapter_format())
