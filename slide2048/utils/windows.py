# -*- coding: utf-8 -*-
"""
Display the game in a window, with animated transitions.
"""
import asyncio
import logging
from typing import TYPE_CHECKING, Any, Callable

import numpy as np
from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.transforms import Bbox

from slide2048.animation.operations import AnimationOp, Pop, Slide, Zoom
from slide2048.config import WindowConfig

if TYPE_CHECKING:
    from slide2048.controller import GameController

_logger = logging.getLogger(__name__)


class WindowBoard:
    """
    Window to draw the 2048 board using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).

    Each cell is an axes holding one text; animations move the axes and scale the text frame by frame.
    """

    # ##: Colors
    COLORS = {
        0: "#CDC1B4",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
        8192: "#9ED682",
    }
    DEFAULT_COLOR = "#3C3A32"
    FONT_SIZE = 18

    def __init__(self, rows: int, cols: int, gap: int = 8, config: WindowConfig | None = None):
        self.rows = rows
        self.cols = cols
        self.gap = gap
        self.config = config or WindowConfig()

        # ## ----> Create support.
        size = self.config.tile_size
        dpi = 100
        width = (cols * (size + gap) + gap) / dpi
        height = (rows * (size + gap) + gap) / dpi
        self.fig = plt.figure(figsize=(width, height), dpi=dpi, facecolor="#BBADA0")
        self.fig.canvas.manager.set_window_title(self.config.title)

        # ## ----> Add cell for board.
        self.axes: list[Axes] = []
        self.textes = []
        self._homes: list[Bbox] = []
        for r in range(rows):
            for c in range(cols):
                left = (gap + c * (size + gap)) / dpi / width
                bottom = 1 - (gap + (r + 1) * (size + gap) - gap) / dpi / height
                _ax = self.fig.add_axes((left, bottom, size / dpi / width, size / dpi / height))
                _ax.set_xticks([])
                _ax.set_yticks([])
                text = _ax.text(
                    0.5,
                    0.5,
                    "",
                    horizontalalignment="center",
                    verticalalignment="center",
                    fontsize=self.FONT_SIZE,
                    fontweight="demibold",
                )
                self.axes.append(_ax)
                self.textes.append(text)
                self._homes.append(_ax.get_position())

        # ## ----> One cell plus one gap, in figure fraction.
        self._step_x = (size + gap) / dpi / width
        self._step_y = (size + gap) / dpi / height

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def _index(self, cell: tuple[int, int]) -> int:
        return cell[0] * self.cols + cell[1]

    def _paint(self, index: int, value: int) -> None:
        _ax, text = self.axes[index], self.textes[index]
        _ax.set_facecolor(self.COLORS.get(value, self.DEFAULT_COLOR))
        _ax.patch.set_alpha(1.0)
        text.set_text(str(value) if value else "")
        text.set_color("white" if value >= 512 else "black")
        text.set_fontsize(self.FONT_SIZE)
        text.set_alpha(1.0)

    def redraw(self):
        """Request the window to be redrawn, and let Matplotlib process UI events."""
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def cell_at(self, event: Any) -> tuple[int, int] | None:
        """Return the cell under a mouse event, if any."""
        if event.inaxes not in self.axes:
            return None
        index = self.axes.index(event.inaxes)
        return divmod(index, self.cols)

    async def _frames(self, apply: Callable[[float], None]) -> None:
        frames = self.config.frames
        delay = self.config.duration_ms / 1000 / frames
        for frame in range(1, frames + 1):
            apply(frame / frames)
            self.redraw()
            await asyncio.sleep(delay)

    async def play(self, operation: AnimationOp) -> None:
        """
        Play one animation on its target cell.

        Parameters
        ----------
        operation: AnimationOp
            Zoom, Slide or Pop
        """
        index = self._index(operation.target)
        _ax, text = self.axes[index], self.textes[index]

        if isinstance(operation, Zoom):
            if operation.value:
                self._paint(index, operation.value)
            start, end = (1.0, 0.2) if operation.reverse else (0.2, 1.0)

            def apply(t: float) -> None:
                scale = start + (end - start) * t
                text.set_fontsize(self.FONT_SIZE * scale)
                alpha = 1 - t if operation.reverse else t
                text.set_alpha(alpha)
                _ax.patch.set_alpha(alpha)

        elif isinstance(operation, Slide):
            home = self._homes[index]
            dx, dy = operation.delta
            spacing = self.config.tile_size + operation.extra_spacing
            shift_x = dx * self._step_x * spacing / (self.config.tile_size + self.gap)
            shift_y = -dy * self._step_y * spacing / (self.config.tile_size + self.gap)
            opacity = 1.0 if operation.opacity is None else operation.opacity

            def apply(t: float) -> None:
                _ax.set_position((home.x0 + shift_x * t, home.y0 + shift_y * t, home.width, home.height))
                _ax.set_zorder(2)
                alpha = 1 + (opacity - 1) * t
                text.set_alpha(alpha)
                _ax.patch.set_alpha(alpha)

        elif isinstance(operation, Pop):

            def apply(t: float) -> None:
                text.set_fontsize(self.FONT_SIZE * (1 + 0.2 * (1 - abs(2 * t - 1))))

        else:
            raise TypeError(f"Unknown animation: {operation!r}")

        await self._frames(apply)

    def mount(self, matrix: np.ndarray):
        """
        Rebuild every cell from the committed board.

        Parameters
        ----------
        matrix: np.ndarray
            Board to show
        """
        values = np.reshape(matrix, -1)
        for index, (_ax, value) in enumerate(zip(self.axes, values)):
            _ax.set_position(self._homes[index])
            _ax.set_zorder(1)
            self._paint(index, int(value))
        self.redraw()

    def bind(self, controller: "GameController"):
        """
        Attach keyboard, mouse drag (as a swipe) and clicks to the controller.

        Parameters
        ----------
        controller: GameController
            Receiver of the inputs
        """
        pressed = {"down": False}

        def on_key(event):
            controller.press_key(event.key)

        def on_press(event):
            pressed["down"] = True
            # ##: Screen convention, y grows downward.
            controller.touch_start(event.x, -event.y)
            cell = self.cell_at(event)
            if cell is not None:
                controller.click(cell)

        def on_motion(event):
            if pressed["down"]:
                controller.touch_move(event.x, -event.y)

        def on_release(event):
            pressed["down"] = False

        self.fig.canvas.mpl_connect("key_press_event", on_key)
        self.fig.canvas.mpl_connect("button_press_event", on_press)
        self.fig.canvas.mpl_connect("motion_notify_event", on_motion)
        self.fig.canvas.mpl_connect("button_release_event", on_release)
        _logger.debug("Window bound to controller")

    def register_key_handler(self, key_handler):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Any
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show(block=block)

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
