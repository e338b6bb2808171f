"""
Sequencing of the visual transitions of one frame before the new grid is committed.
"""

import asyncio
import logging
from typing import TYPE_CHECKING, Callable, Protocol

from numpy import ndarray

from slide2048.animation.operations import AnimationOp
from slide2048.core.gridstate import GridState

if TYPE_CHECKING:
    from slide2048.controller import GameController

_logger = logging.getLogger(__name__)


class Visualizer(Protocol):
    """
    Capability consumed by the engine to show the board.

    The engine never knows how a tile is drawn: it asks the visualizer to play one operation on one cell and
    waits for the playback to finish, then hands over the committed matrix.
    """

    def bind(self, controller: 'GameController') -> None:
        """Attach the visualizer's input sources (keys, swipes, clicks) to the controller."""

    async def play(self, operation: AnimationOp) -> None:
        """Play one operation on its target cell; return once the transition is over."""

    def mount(self, matrix: ndarray) -> None:
        """Rebuild every cell from the committed matrix."""


class NullVisualizer:
    """Visualizer that shows nothing and completes every operation at once."""

    def bind(self, controller: 'GameController') -> None:
        pass

    async def play(self, operation: AnimationOp) -> None:
        pass

    def mount(self, matrix: ndarray) -> None:
        pass


class AnimationChoreographer:
    """
    Queue the operations of one resolution pass, play them together, then commit the frame.
    """

    def __init__(self, visualizer: Visualizer | None = None, on_commit: Callable[[ndarray], None] | None = None):
        """
        Initialize the choreographer.

        Parameters
        ----------
        visualizer : Visualizer, optional
            Where operations are played and frames mounted (default is a ``NullVisualizer``).
        on_commit : callable, optional
            Called with the committed snapshot at the end of every render pass.
        """
        self.visualizer = visualizer if visualizer is not None else NullVisualizer()
        self._on_commit = on_commit
        self._queue: list[AnimationOp] = []
        self._passes = 0
        self._generation = 0

    @property
    def is_rendering(self) -> bool:
        """True while at least one render pass has not committed yet."""
        return self._passes > 0

    @property
    def pending(self) -> tuple[AnimationOp, ...]:
        return tuple(self._queue)

    def push(self, operation: AnimationOp) -> None:
        self._queue.append(operation)

    def extend(self, operations) -> None:
        self._queue.extend(operations)

    def reset(self) -> None:
        """Drop pending operations and release the guard; passes still in flight will not commit."""
        self._queue.clear()
        self._passes = 0
        self._generation += 1

    async def render(self, grid: GridState) -> ndarray:
        """
        Play every queued operation, then mount the grid and notify.

        Parameters
        ----------
        grid : GridState
            The grid, already in its post-move state.

        Returns
        -------
        ndarray
            The committed snapshot.

        Notes
        -----
        - Operations of one pass are played concurrently; the commit waits for all of them.
        - The queue is empty at the end of the pass, whatever the outcome.
        - A failing playback propagates; the frame is then not committed.
        - A pass overtaken by ``reset`` neither commits nor touches the guard.
        """
        generation = self._generation
        self._passes += 1
        operations, self._queue = self._queue, []
        try:
            if operations:
                _logger.debug('Playing %d animation(s)', len(operations))
                await asyncio.gather(*(self.visualizer.play(operation) for operation in operations))

            snapshot = grid.snapshot()
            if generation != self._generation:
                _logger.debug('Stale frame dropped')
                return snapshot

            self.visualizer.mount(snapshot)
            if self._on_commit is not None:
                self._on_commit(snapshot)
            return snapshot
        finally:
            if generation == self._generation:
                self._passes -= 1
