"""
Game controller: the entry point coordinating moves, spawns, animations and notifications.
"""

import asyncio
import logging
from typing import Callable, NamedTuple

from numpy import ndarray

from slide2048.animation.choreographer import AnimationChoreographer, Visualizer
from slide2048.animation.operations import AnimationOp, MergeNotice
from slide2048.config import GameConfig
from slide2048.core.gamemove import Direction, MoveResult, is_terminal, resolve
from slide2048.core.gridstate import GridState
from slide2048.core.spawn import SpawnPolicy
from slide2048.events import EventHook
from slide2048.inputs import KEY_DIRECTIONS, SwipeRecognizer, Throttle

_logger = logging.getLogger(__name__)

Cell = tuple[int, int]

GridChangedHandler = Callable[[ndarray], None]
TilesMergedHandler = Callable[[ndarray, MergeNotice], None]
TileClickedHandler = Callable[[ndarray, Cell], None]


class LayoutHint(NamedTuple):
    """What a consumer needs to lay out the board container."""

    cols: int
    gap: int


class GameController:
    """
    Façade of the game.

    Receives directional and manual intents, mutates the grid, has the resulting animations played and
    republishes the outcome through three events: grid changed, tiles merged and tile clicked.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        spawn_policy: SpawnPolicy | None = None,
        visualizer: Visualizer | None = None,
    ):
        """
        Initialize the controller with an empty grid.

        Parameters
        ----------
        config : GameConfig, optional
            Game configuration (default is a 4x4 board).
        spawn_policy : SpawnPolicy, optional
            Spawn policy; by default one seeded with ``config.seed``.
        visualizer : Visualizer, optional
            Where animations are played; headless when omitted. Its inputs are bound by ``init``.
        """
        self.config = config or GameConfig()
        self._grid = GridState(self.config.rows, self.config.cols)
        self._spawner = spawn_policy or SpawnPolicy(seed=self.config.seed)

        # ##: Events.
        self._grid_changed: EventHook[GridChangedHandler] = EventHook()
        self._tiles_merged: EventHook[TilesMergedHandler] = EventHook()
        self._tile_clicked: EventHook[TileClickedHandler] = EventHook()
        self.on_grid_changed = self._grid_changed.on
        self.on_tiles_merged = self._tiles_merged.on
        self.on_tile_clicked = self._tile_clicked.on

        # ##: Animations and inputs.
        self._choreographer = AnimationChoreographer(visualizer=visualizer, on_commit=self._commit)
        self._keys = Throttle(self.dispatch, self.config.throttle_ms)
        self._swipe = SwipeRecognizer(self.config.swipe_threshold)
        self._tasks: set[asyncio.Task] = set()

        self.game_over = False
        self.failure: BaseException | None = None

    @property
    def matrix(self) -> ndarray:
        """Read-only snapshot of the grid."""
        return self._grid.snapshot()

    @property
    def layout(self) -> LayoutHint:
        return LayoutHint(cols=self.config.cols, gap=self.config.gap)

    @property
    def is_rendering(self) -> bool:
        return self._choreographer.is_rendering

    @property
    def pending(self) -> tuple[AnimationOp, ...]:
        """Operations queued for the next render pass."""
        return self._choreographer.pending

    @property
    def visualizer(self) -> Visualizer:
        return self._choreographer.visualizer

    async def init(self, visualizer: Visualizer | None = None) -> None:
        """
        Bind a visualizer and its input sources, then start a new game.

        Parameters
        ----------
        visualizer : Visualizer, optional
            Where the board is shown; defaults to the one given at construction.
        """
        if visualizer is not None:
            self._choreographer.visualizer = visualizer
        self.visualizer.bind(self)
        await self.renew()

    async def renew(self) -> None:
        """Start over: an empty grid receiving a single tile."""
        self._choreographer.reset()
        self._grid = GridState(self.config.rows, self.config.cols)
        self.game_over = False
        self._spawn()
        _logger.info('New %dx%d game', self.config.rows, self.config.cols)
        await self.render()

    async def add_one(self, position: Cell | None = None, value: int | None = None) -> bool:
        """
        Add a tile by hand, then render.

        Parameters
        ----------
        position : tuple[int, int], optional
            Target cell; an empty one at random when omitted. An occupied cell is incremented.
        value : int, optional
            Tile value; 2 or 4 at random when omitted.

        Returns
        -------
        bool
            Whether a tile was added.
        """
        if not self._spawn(position, value):
            return False
        await self.render()
        return True

    async def delete_one(self, position: Cell | None = None) -> bool:
        """
        Remove a tile by hand, then render.

        Nothing is queued, rendered or notified when the cell (or the whole grid) is empty.

        Parameters
        ----------
        position : tuple[int, int], optional
            Target cell; an occupied one at random when omitted.

        Returns
        -------
        bool
            Whether a tile was removed.
        """
        operation = self._spawner.remove(self._grid, position)
        if operation is None:
            return False
        self._choreographer.push(operation)
        await self.render()
        return True

    async def move(self, direction: Direction) -> bool:
        """
        Apply a directional move.

        Parameters
        ----------
        direction : Direction
            Direction the tiles travel toward.

        Returns
        -------
        bool
            True if the grid changed. False when nothing could move, or when the move was rejected because a
            frame is still rendering.

        Notes
        -----
        - A move that changes the grid is followed by exactly one spawn, then a render pass.
        - A move that changes nothing leaves the grid untouched and renders nothing.
        """
        direction = Direction(direction)
        if self.is_rendering:
            _logger.debug('Move %s rejected while rendering', direction.name)
            return False

        result = self.resolve(direction)
        if not result.moved:
            return False

        self._choreographer.extend(result.operations)
        self._spawn()
        await self.render()
        return True

    def resolve(self, direction: Direction) -> MoveResult:
        """Slide and merge the grid, firing tiles merged for each merge. No spawn and no render."""
        return resolve(self._grid, direction, gap=self.config.gap, on_merge=self._notify_merge)

    async def render(self) -> ndarray:
        """Play the queued animations and commit the grid."""
        return await self._choreographer.render(self._grid)

    def dispatch(self, direction: Direction) -> asyncio.Task | None:
        """
        Schedule a move on the running event loop, as input sources do.

        Returns
        -------
        asyncio.Task | None
            The scheduled move, or None when it was rejected because a frame is still rendering.
        """
        if self.is_rendering:
            _logger.debug('Input %s dropped while rendering', Direction(direction).name)
            return None

        task = asyncio.get_running_loop().create_task(self.move(direction))
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def press_key(self, key: str) -> bool:
        """
        Handle a key press; arrow keys are throttled to one accepted press per window.

        Returns
        -------
        bool
            Whether a move was dispatched.
        """
        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        return self._keys(direction) is not None

    def touch_start(self, x: float, y: float) -> None:
        self._swipe.start(x, y)

    def touch_move(self, x: float, y: float) -> Direction | None:
        """
        Follow a swipe, in screen coordinates (y grows downward).

        Returns
        -------
        Direction | None
            The direction dispatched by this call, if any.
        """
        if self.is_rendering:
            return None
        direction = self._swipe.move(x, y)
        if direction is not None:
            self.dispatch(direction)
        return direction

    def click(self, position: Cell) -> None:
        """Report a click on a cell to the tile clicked subscribers."""
        if not self._grid.in_range(*position):
            return
        self._tile_clicked.fire(self._grid.snapshot(), tuple(position))

    def _spawn(self, position: Cell | None = None, value: int | None = None) -> bool:
        spawned = self._spawner.spawn(self._grid, position, value)
        if spawned is None:
            return False

        self._choreographer.push(spawned.operation)
        if spawned.merge is not None:
            self._notify_merge(spawned.merge)
        return True

    def _notify_merge(self, notice: MergeNotice) -> None:
        self._tiles_merged.fire(self._grid.snapshot(), notice)

    def _commit(self, snapshot: ndarray) -> None:
        self.game_over = is_terminal(snapshot)
        if self.game_over:
            _logger.info('Game over, highest tile %d', self._grid.max_tile())
        self._grid_changed.fire(snapshot)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            _logger.error('Move failed: %s', error)
            self.failure = error
