"""
Input helpers turning device signals into move directions: key names, a leading-edge throttle and swipe recognition.
"""

import time
from typing import Callable

from slide2048.core.gamemove import Direction

# ##>: Key names as reported by matplotlib, and by browsers.
KEY_DIRECTIONS: dict[str, Direction] = {
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'left': Direction.LEFT,
    'ArrowUp': Direction.UP,
    'ArrowRight': Direction.RIGHT,
    'ArrowDown': Direction.DOWN,
    'ArrowLeft': Direction.LEFT,
}


class Throttle:
    """
    Leading-edge throttle: the first call goes through, calls within the following window are dropped.
    """

    def __init__(self, func: Callable, interval_ms: float, clock: Callable[[], float] = time.monotonic):
        """
        Parameters
        ----------
        func : callable
            Function to throttle.
        interval_ms : float
            Length of the window opened by an accepted call, in milliseconds.
        clock : callable, optional
            Monotonic clock in seconds (default is ``time.monotonic``).
        """
        self._func = func
        self._interval = interval_ms / 1000
        self._clock = clock
        self._last: float | None = None

    def __call__(self, *args, **kwargs):
        """Call the function unless a window is open. Return its result, or None when the call was dropped."""
        now = self._clock()
        if self._last is not None and now - self._last < self._interval:
            return None
        self._last = now
        return self._func(*args, **kwargs)


class SwipeRecognizer:
    """
    Resolve one direction per continuous gesture.

    Coordinates follow the screen convention: y grows downward.
    """

    def __init__(self, threshold: float = 50):
        self.threshold = threshold
        self._start = (0.0, 0.0)
        self._swiped = False

    def start(self, x: float, y: float) -> None:
        """Begin a new gesture."""
        self._start = (x, y)
        self._swiped = False

    def move(self, x: float, y: float) -> Direction | None:
        """
        Follow the gesture to ``(x, y)``.

        Returns
        -------
        Direction | None
            The direction the first time the displacement reaches the threshold during this gesture,
            None otherwise.
        """
        if self._swiped:
            return None

        diff_x = self._start[0] - x
        diff_y = self._start[1] - y
        if max(abs(diff_x), abs(diff_y)) < self.threshold:
            return None

        self._swiped = True
        if abs(diff_x) > abs(diff_y):
            return Direction.LEFT if diff_x > 0 else Direction.RIGHT
        return Direction.UP if diff_y > 0 else Direction.DOWN
