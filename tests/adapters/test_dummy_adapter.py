from durak.adapters import DummyAdapter, PlatformAdapter
from durak.events import EngineEventType
from durak.game.state import Action


def test_scripted_actions_then_strategy(card):
    strategy_action = Action.end_turn()
    adapter = DummyAdapter(
        auto_actions=[Action.play(card("6H"))],
        strategy_function=lambda view: strategy_action,
    )

    assert adapter.request_player_action(None) == Action.play(card("6H"))
    assert adapter.request_player_action(None) is strategy_action


def test_exhausted_adapter_quits():
    assert DummyAdapter().request_player_action(None) is None


def test_records_states_and_events():
    adapter = DummyAdapter()
    assert isinstance(adapter, PlatformAdapter)

    adapter.render_game_state({"table": []})
    adapter.notify_game_event(EngineEventType.CARD_DEALT, {"count": 6})
    adapter.notify_game_event("CARD_DEALT", {"count": 2})

    assert adapter.rendered_states == [{"table": []}]
    assert adapter.get_events_by_type(EngineEventType.CARD_DEALT) == [{"count": 6}, {"count": 2}]

    adapter.clear()
    assert adapter.events == []
    assert adapter.rendered_states == []


def test_verbose_prints(capsys):
    adapter = DummyAdapter(verbose=True)
    adapter.notify_game_event(EngineEventType.ATTACK, {"card": "6 of ♥"})
    out = capsys.readouterr().out
    assert "Event: ATTACK" in out
    assert "card: 6 of ♥" in out
