"""Play random games headlessly against :class:`blockfall.Board`.

Run with::

    PYTHONPATH=src python examples/simulate_games.py

Every step issues one random command (shift left, shift right or rotate)
followed by a gravity tick.  Pass ``--help`` to see the available options.
"""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass

from blockfall import Board, Direction, TetrisGame, occupied_cells


LOGGER = logging.getLogger(__name__)


@dataclass
class GameResult:
    ticks: int
    alive: bool
    occupied: int


def play_random_game(game: TetrisGame, rng: random.Random, max_steps: int) -> GameResult:
    commands = (
        lambda: game.shift(Direction.LEFT),
        lambda: game.shift(Direction.RIGHT),
        game.rotate,
    )
    ticks = 0
    while game.alive() and ticks < max_steps:
        rng.choice(commands)()
        game.tick()
        ticks += 1
    return GameResult(ticks=ticks, alive=game.alive(), occupied=len(occupied_cells(game)))


def log_result(result: GameResult, *, index: int) -> None:
    state = "still alive" if result.alive else "game over"
    LOGGER.info(
        "Game %d: %s after %d ticks, %d cells occupied",
        index,
        state,
        result.ticks,
        result.occupied,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--games", type=int, default=1, help="How many games to play.")
    parser.add_argument("--max-steps", type=int, default=2000, help="Tick limit per game.")
    parser.add_argument("--width", type=int, default=10, help="Board width in columns.")
    parser.add_argument("--height", type=int, default=20, help="Board height in rows.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible games.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    rng = random.Random(args.seed)
    for index in range(1, args.games + 1):
        board = Board(args.width, args.height, rng=rng)
        log_result(play_random_game(board, rng, args.max_steps), index=index)


if __name__ == "__main__":
    main()
