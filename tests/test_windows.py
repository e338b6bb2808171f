"""
Smoke tests for the Matplotlib window, on the non-interactive backend.
"""

from unittest import IsolatedAsyncioTestCase, main
from unittest.mock import Mock

import matplotlib

matplotlib.use("Agg")

import numpy as np
from matplotlib.backend_bases import KeyEvent

from slide2048.animation.operations import Pop, Slide, Zoom
from slide2048.config import WindowConfig
from slide2048.utils import WindowBoard


class TestWindowBoard(IsolatedAsyncioTestCase):
    """Playback and mounting."""

    def setUp(self):
        self.window = WindowBoard(rows=2, cols=3, gap=8, config=WindowConfig(duration_ms=0, frames=2))

    def tearDown(self):
        self.window.close()

    def test_mount(self):
        """Every cell shows its value; empty cells show nothing."""
        self.window.mount(np.array([[2, 0, 4], [0, 2048, 0]]))
        self.assertEqual([text.get_text() for text in self.window.textes], ["2", "", "4", "", "2048", ""])

    async def test_slide_then_mount_restores_positions(self):
        """A slide moves the cell; mounting puts every cell back home."""
        home = self.window.axes[2].get_position().x0
        await self.window.play(Slide(target=(0, 2), delta=(-2, 0), extra_spacing=8, opacity=0.2))
        self.assertLess(self.window.axes[2].get_position().x0, home)

        self.window.mount(np.zeros((2, 3), dtype=int))
        self.assertAlmostEqual(self.window.axes[2].get_position().x0, home)

    async def test_zoom_and_pop(self):
        """Zoom shows the new value; pop ends at the normal size."""
        await self.window.play(Zoom(target=(1, 1), value=4))
        self.assertEqual(self.window.textes[4].get_text(), "4")
        await self.window.play(Pop(target=(1, 1)))
        self.assertAlmostEqual(self.window.textes[4].get_fontsize(), WindowBoard.FONT_SIZE)

        await self.window.play(Zoom(target=(1, 1), reverse=True))
        self.assertAlmostEqual(self.window.textes[4].get_alpha(), 0.0)

    def test_bind_forwards_keys(self):
        """Key presses reach the controller."""
        controller = Mock()
        self.window.bind(controller)
        self.window.fig.canvas.callbacks.process("key_press_event", KeyEvent("key_press_event", self.window.fig.canvas, "left"))
        controller.press_key.assert_called_once_with("left")


if __name__ == "__main__":
    main()
