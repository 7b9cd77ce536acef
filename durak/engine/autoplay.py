"""
Headless self-play.

Drives the human side of a `DurakEngine` with an opponent policy, using only
the public surface a user interface would use: `view`, `is_valid_move`,
`can_end_turn` and `player_action`.
"""

import logging
from typing import Callable, Optional

from durak.engine.durak import DurakEngine
from durak.game.state import Action, GameStage, GameView, Response, Winner
from durak.policy.base import OpponentPolicy

logger = logging.getLogger("durak.engine.autoplay")


def choose_action(engine: DurakEngine, policy: OpponentPolicy) -> Action:
    """
    Ask `policy` for the human's next action.

    The policy sees the game from the human's seat. Answers that are not
    legal fall back to ending the turn, or to the weakest legal card when an
    attack series has to be opened.
    """
    view = engine.view()
    seat = view.mirrored()

    if view.players_turn:
        card = policy.plan_attack(seat) if view.player_moves() else None
    else:
        card = policy.plan_defense(seat, view.open_attack)

    if card is not None and engine.is_valid_move(card):
        return Action.play(card)
    if engine.can_end_turn():
        return Action.end_turn()

    # An opening attack cannot be skipped
    moves = [card for card in view.player_hand if engine.is_valid_move(card)]
    return Action.play(moves[0])


def autoplay(
    engine: DurakEngine,
    player_policy: OpponentPolicy,
    max_actions: int = 1000,
    on_response: Optional[Callable[[GameView, Response], None]] = None,
) -> Winner:
    """
    Play the game to the end.

    Args:
        engine: The engine to drive; started here if it was not started yet
        player_policy: Policy that plays the human side
        max_actions: Upper bound on human actions before giving up
        on_response: Optional callback receiving the new view and each response

    Returns:
        The winner of the game

    Raises:
        RuntimeError: If the game did not finish within `max_actions`
    """
    if not engine.started:
        response = engine.start()
        if response is not None and on_response is not None:
            on_response(engine.view(), response)

    for _ in range(max_actions):
        if engine.stage is GameStage.GAME_END:
            return engine.result

        action = choose_action(engine, player_policy)
        response = engine.player_action(action)
        if on_response is not None:
            on_response(engine.view(), response)

    if engine.stage is GameStage.GAME_END:
        return engine.result

    logger.warning("Game %s did not finish after %d actions", engine.id, max_actions)
    raise RuntimeError(f"Game did not finish after {max_actions} actions")
