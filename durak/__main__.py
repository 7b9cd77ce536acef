"""
Play Durak against the computer in a terminal.

    python -m durak --seed 42 --first lowest_trump
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

from durak.adapters import CLIAdapter, PlatformAdapter
from durak.common.io_interface import ConsoleIOInterface, IOInterface, LoggingIOInterface
from durak.engine import DurakEngine, autoplay
from durak.game.state import FIRST_ATTACKER_CHOICES, ActionType, GameStage
from durak.policy import get_policy
from durak.policy.simple import POLICIES


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Play Durak against the computer.")
    parser.add_argument(
        "-s", "--seed", type=int, help="seed for the shuffle (default: random)"
    )
    parser.add_argument(
        "-f",
        "--first",
        choices=FIRST_ATTACKER_CHOICES,
        default="random",
        help="who attacks first (default: random)",
    )
    parser.add_argument(
        "-p",
        "--policy",
        choices=sorted(POLICIES),
        default="first",
        help="computer opponent (default: first)",
    )
    parser.add_argument(
        "-a",
        "--autoplay",
        metavar="POLICY",
        choices=sorted(POLICIES),
        help="let a policy play your side and print the game",
    )
    parser.add_argument(
        "-l", "--log-file", help="append a transcript of the game to this file"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log engine transitions"
    )
    return parser.parse_args(argv)


def play(engine: DurakEngine, adapter: PlatformAdapter) -> None:
    """Run the interactive loop until the game ends or the player quits."""
    engine.start()
    while engine.stage is not GameStage.GAME_END:
        action = adapter.request_player_action(engine.view())
        if action is None:
            return
        if action.type is ActionType.PLAY:
            # Illegal input is ignored, the player simply picks again
            if not engine.is_valid_move(action.card):
                continue
        elif not engine.can_end_turn():
            continue
        engine.player_action(action)


def main(argv: Optional[List[str]] = None, io_interface: Optional[IOInterface] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    io_interface = io_interface or ConsoleIOInterface()
    if args.log_file:
        io_interface = LoggingIOInterface(io_interface, args.log_file)
    adapter = CLIAdapter(io_interface)

    rng = random.Random(args.seed)
    policy_kwargs = {"rng": rng} if args.policy == "random" else {}
    engine = DurakEngine(
        get_policy(args.policy, **policy_kwargs),
        config={"first_attacker": args.first},
        adapter=adapter,
        rng=rng,
    )

    adapter.initialize()
    try:
        if args.autoplay:
            seat_kwargs = {"rng": rng} if args.autoplay == "random" else {}
            autoplay(engine, get_policy(args.autoplay, **seat_kwargs))
        else:
            play(engine, adapter)
    finally:
        adapter.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
