# -*- coding: utf-8 -*-
"""
Play games headless with random moves and report the highest tiles reached.
"""
import argparse
import asyncio
import logging
from collections import Counter
from typing import Dict

from numpy.random import default_rng
from tqdm import trange

from slide2048 import GameConfig, GameController
from slide2048.core import legal_directions

logger = logging.getLogger(__name__)


async def play_game(controller: GameController, seed: int | None = None) -> tuple[int, int]:
    """
    Play one game with uniformly random legal moves.

    Parameters
    ----------
    controller: GameController
        Headless game
    seed: int, optional
        Seed for the move choice

    Returns
    -------
    tuple[int, int]
        Highest tile and number of moves
    """
    rng = default_rng(seed)
    await controller.renew()
    moves = 0

    while not controller.game_over:
        directions = legal_directions(controller.matrix)
        await controller.move(directions[int(rng.integers(len(directions)))])
        moves += 1

    return int(controller.matrix.max()), moves


def evaluate(length: int = 10, config: GameConfig | None = None, seed: int | None = None) -> Dict[int, int]:
    """
    Play several games and count the highest tile of each.

    Parameters
    ----------
    length : int, optional
        The number of games to play (default is 10).
    config : GameConfig, optional
        Game configuration.
    seed : int, optional
        Seed for the move choice.

    Returns
    -------
    Dict[int, int]
        Number of games per highest tile.
    """
    controller = GameController(config=config or GameConfig(seed=seed))
    score = Counter()

    with trange(length) as period:
        for num in period:
            max_tile, moves = asyncio.run(play_game(controller, seed=None if seed is None else seed + num))
            score[max_tile] += 1

            # ##: Log.
            period.set_description(f"Game {num}")
            period.set_postfix(max_tile=max_tile, moves=moves)

    return dict(sorted(score.items()))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Random play statistics.")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--rows", type=int, default=4)
    parser.add_argument("--cols", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())
    result = evaluate(args.games, GameConfig(rows=args.rows, cols=args.cols, seed=args.seed), seed=args.seed)
    for tile, count in result.items():
        print(f"{tile}: {count}")
