"""
Tests for the console adapter, driven through TestIOInterface.
"""

import pytest
from durak.adapters.cli import HELP, CLIAdapter, parse_command
from durak.common.card import Suit
from durak.common.io_interface import TestIOInterface
from durak.events import EngineEventType
from durak.game.state import Action, ActionType, GameStage, GameView


@pytest.fixture
def view(card):
    return GameView(
        stage=GameStage.ATTACK,
        players_turn=True,
        trump=Suit.SPADES,
        trump_card=card("6S"),
        deck_size=20,
        player_hand=(card("7H"), card("9D"), card("QS")),
        computer_hand=(card("8D"), card("8C")),
    )


class TestParseCommand:
    @pytest.mark.parametrize("choice", ["e", "end", "t", "take"])
    def test_end_turn(self, view, choice):
        assert parse_command(choice, view) == Action.end_turn()

    def test_card_index_is_one_based(self, view, card):
        assert parse_command("1", view) == Action.play(card("7H"))
        assert parse_command("3", view) == Action.play(card("QS"))

    @pytest.mark.parametrize("choice", ["0", "4", "x", "", "q"])
    def test_unparseable(self, view, choice):
        assert parse_command(choice, view) is None


class TestCLIAdapter:
    def test_render_game_state(self, view):
        io = TestIOInterface()
        CLIAdapter(io).render_game_state(view.to_adapter_format())

        assert "Deck: Remaining = 20, Trump = 6 of ♠" in io.sent_messages
        assert "Computer has 2 cards" in io.sent_messages
        assert "Table: (empty)" in io.sent_messages
        assert "Your cards: [1] 7 of ♥  [2] 9 of ♦  [3] Q of ♠" in io.sent_messages
        assert io.sent_messages[-1] == "Your attack."

    def test_render_empty_deck_and_winner(self, view):
        from dataclasses import replace

        io = TestIOInterface()
        final = replace(view, trump_card=None, deck_size=0, stage=GameStage.GAME_END)
        state = final.to_adapter_format()
        state["winner"] = "COMPUTER"
        CLIAdapter(io).render_game_state(state)

        assert "Deck: empty, Trump = ♠" in io.sent_messages
        assert io.sent_messages[-1] == "Game over: the computer wins."

    def test_request_player_action(self, view, card):
        io = TestIOInterface(["2"])
        assert CLIAdapter(io).request_player_action(view) == Action.play(card("9D"))
        assert io.prompts == ["> "]

    def test_unparseable_input_is_asked_again(self, view):
        io = TestIOInterface(["what", " E "])
        action = CLIAdapter(io).request_player_action(view)
        assert action.type is ActionType.END_TURN
        assert HELP in io.sent_messages
        assert len(io.prompts) == 2

    def test_quit(self, view):
        assert CLIAdapter(TestIOInterface(["q"])).request_player_action(view) is None

    def test_end_of_input_quits(self, view):
        assert CLIAdapter(TestIOInterface()).request_player_action(view) is None

    def test_notify_game_event(self, card):
        io = TestIOInterface()
        adapter = CLIAdapter(io)
        adapter.notify_game_event(EngineEventType.ATTACK, {"player": "computer", "card": card("6H")})
        adapter.notify_game_event("CARDS_TAKEN", {"player": "player", "count": 3})
        adapter.notify_game_event(EngineEventType.GAME_STARTED, {})

        assert io.sent_messages == ["Computer attacked with 6 of ♥", "You took 3 cards"]
