# -*- coding: utf-8 -*-
"""
Play 2048 Game
"""
import argparse
import asyncio
import logging

from slide2048 import GameConfig, GameController
from slide2048.utils import WindowBoard

logger = logging.getLogger(__name__)


def key_handler(controller: GameController, window: WindowBoard, event):
    """
    Handle the keys that are not moves.

    Parameters
    ----------
    controller: GameController
        The game

    window: WindowBoard
        Class to draw the game board

    event: Any
        event to handle
    """
    if event.key == "escape":
        window.close()
        return None

    if event.key == "backspace":
        asyncio.get_running_loop().create_task(controller.renew())
        return None


def god_mode(controller: GameController, matrix, position):
    """
    Clicking on an existing tile removes it, clicking on an empty cell creates a 2.

    Parameters
    ----------
    controller: GameController
        The game

    matrix: np.ndarray
        Board at the time of the click

    position: tuple
        Clicked cell
    """
    loop = asyncio.get_running_loop()
    if matrix[position]:
        loop.create_task(controller.delete_one(position))
    else:
        loop.create_task(controller.add_one(position, 2))


async def play(config: GameConfig, god: bool = False):
    """
    Run the game until the window is closed.

    Parameters
    ----------
    config: GameConfig
        Game configuration

    god: bool
        Enable god mode
    """
    controller = GameController(config=config)
    window = WindowBoard(rows=config.rows, cols=config.cols, gap=controller.layout.gap)
    window.register_key_handler(lambda event: key_handler(controller, window, event))

    # ##: Report.
    score = {"value": 0}

    def on_merge(_, notice):
        if notice.source != notice.destination:
            score["value"] += notice.value
            logger.info("score=%d (+%d)", score["value"], notice.value)

    def on_change(matrix):
        if controller.game_over:
            logger.info("terminated! score=%d, highest tile=%d", score["value"], int(matrix.max()))

    controller.on_tiles_merged(on_merge)
    controller.on_grid_changed(on_change)
    if god:
        controller.on_tile_clicked(lambda matrix, position: god_mode(controller, matrix, position))

    window.show(block=False)
    await controller.init(window)

    # ##: Event loop.
    while not window.closed:
        if controller.failure is not None:
            raise controller.failure
        window.fig.canvas.flush_events()
        await asyncio.sleep(1 / 60)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Play 2048 with the arrow keys or by dragging the mouse.")
    parser.add_argument("--rows", type=int, default=4)
    parser.add_argument("--cols", type=int, default=4)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--god", action="store_true", help="click to add or remove tiles")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")
    asyncio.run(play(GameConfig(rows=args.rows, cols=args.cols, seed=args.seed), god=args.god))
