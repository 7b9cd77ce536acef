"""
Self-play tests: whole games driven through the public engine surface.
"""

import random

import pytest

from durak.common.card import Card, Rank, Suit
from durak.common.deck import Deck
from durak.engine import DurakEngine, autoplay, choose_action
from durak.game.state import ActionType, GameStage, Winner
from durak.policy import FirstMovePolicy, RandomPolicy, TakeAllPolicy

ALL_CARDS = {Card(suit, rank) for suit in Suit for rank in Rank}


def check_invariants(engine):
    zones = (
        engine.deck.cards
        + engine.player.cards
        + engine.computer.cards
        + engine.table.cards()
        + engine.discard
    )
    assert len(zones) == 36
    assert set(zones) == ALL_CARDS
    assert len(engine.table) <= engine.rules.hand_size
    for slot in engine.table.slots[:-1]:
        assert slot.is_defended()
    for slot in engine.table.slots:
        if slot.defense is not None:
            assert slot.defense.beats(slot.attack, engine.deck.trump)


@pytest.mark.parametrize("seed", range(25))
def test_first_move_self_play_finishes(seed):
    rng = random.Random(seed)
    engine = DurakEngine(FirstMovePolicy(), rng=rng)
    responses = []

    def on_response(view, response):
        check_invariants(engine)
        responses.append(response)

    winner = autoplay(engine, FirstMovePolicy(), on_response=on_response)

    assert isinstance(winner, Winner)
    assert engine.stage is GameStage.GAME_END
    assert engine.deck.is_empty()
    assert responses[-1].is_game_over
    assert responses[-1].winner is winner


@pytest.mark.parametrize("seed", range(10))
def test_random_self_play_finishes(seed):
    rng = random.Random(seed)
    engine = DurakEngine(RandomPolicy(rng=rng), rng=rng)
    winner = autoplay(
        engine,
        RandomPolicy(rng=rng, take_probability=0.2, stop_probability=0.3),
        on_response=lambda view, response: check_invariants(engine),
    )
    assert winner is engine.result


def test_take_all_player_finishes():
    engine = DurakEngine(FirstMovePolicy(), config={"first_attacker": "computer"}, rng=random.Random(3))
    winner = autoplay(engine, TakeAllPolicy())
    assert winner is engine.result
    assert engine.card_count() == 36


def test_max_actions_exceeded():
    engine = DurakEngine(FirstMovePolicy(), rng=random.Random(1))
    with pytest.raises(RuntimeError):
        autoplay(engine, FirstMovePolicy(), max_actions=1)


def test_autoplay_on_finished_game(card):
    engine = DurakEngine.from_deck(
        FirstMovePolicy(),
        Deck([], trump=Suit.SPADES),
        player_cards=[],
        computer_cards=[card("6H")],
        players_turn=True,
    )
    assert autoplay(engine, FirstMovePolicy()) is Winner.PLAYER


class TestChooseAction:
    def test_opening_attack_is_weakest_card(self, card):
        engine = DurakEngine.from_deck(
            FirstMovePolicy(),
            Deck.new_sorted(),
            players_turn=True,
        )
        engine.start()
        action = choose_action(engine, FirstMovePolicy())
        assert action.type is ActionType.PLAY
        assert action.card == engine.player.cards[0]

    def test_take_when_policy_does_not_defend(self, card):
        engine = DurakEngine.from_deck(
            FirstMovePolicy(),
            Deck([card("AS")]),
            player_cards=[card("7H")],
            computer_cards=[card("6H")],
            players_turn=False,
        )
        engine.start()
        assert choose_action(engine, TakeAllPolicy()).type is ActionType.END_TURN
        assert choose_action(engine, FirstMovePolicy()).card == card("7H")

    def test_finish_attack_when_nothing_to_add(self, card):
        engine = DurakEngine.from_deck(
            FirstMovePolicy(),
            Deck([card("AS")]),
            player_cards=[card("6H"), card("9C")],
            computer_cards=[card("8H")],
            players_turn=True,
        )
        engine.start()
        engine.player_action(choose_action(engine, FirstMovePolicy()))
        assert choose_action(engine, FirstMovePolicy()).type is ActionType.END_TURN
