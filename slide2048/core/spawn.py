"""
Tile spawning: where and what new tile value to introduce, and the matching removal used by manual edits.
"""

import logging
from typing import NamedTuple

from numpy.random import Generator, default_rng

from slide2048.animation.operations import MergeNotice, Pop, Zoom
from slide2048.core.gridstate import GridState

_logger = logging.getLogger(__name__)

Cell = tuple[int, int]

# ##>: New tiles are 2 or 4 with equal probability.
SPAWN_VALUES = (2, 4)


class SpawnResult(NamedTuple):
    """
    A spawned tile.

    Attributes
    ----------
    cell : tuple[int, int]
        Where the tile was introduced.
    value : int
        The value that was added to the cell.
    operation : Zoom | Pop
        ``Zoom`` for a fresh tile, ``Pop`` when an existing tile was incremented.
    merge : MergeNotice | None
        Set when an existing tile was incremented (source and destination are the same cell).
    """

    cell: Cell
    value: int
    operation: Zoom | Pop
    merge: MergeNotice | None = None


class SpawnPolicy:
    """
    Choose where and what to spawn, from an injectable random generator.
    """

    def __init__(self, generator: Generator | None = None, seed: int | None = None):
        """
        Initialize the policy.

        Parameters
        ----------
        generator : Generator, optional
            Random source; takes precedence over ``seed``.
        seed : int, optional
            Seed for a fresh generator when none is given.
        """
        self._generator = generator if generator is not None else default_rng(seed)

    def spawn(self, grid: GridState, position: Cell | None = None, value: int | None = None) -> SpawnResult | None:
        """
        Introduce a tile. **Mutates the grid in place.**

        Parameters
        ----------
        grid : GridState
            The grid to spawn into.
        position : tuple[int, int], optional
            Explicit cell; defaults to a uniformly chosen empty cell.
        value : int, optional
            Explicit value; defaults to 2 or 4 with equal probability.

        Returns
        -------
        SpawnResult | None
            The spawned tile, or None when there is no eligible cell.

        Notes
        -----
        - Without an explicit position, an occupied cell is never chosen.
        - An explicit occupied cell is incremented by ``value`` rather than overwritten.
        - An explicit position outside the grid is ignored.
        """
        if position is None:
            empty_cells = grid.empty_cells()
            if not empty_cells:
                _logger.debug('No empty cell left, nothing spawned')
                return None
            position = empty_cells[int(self._generator.integers(len(empty_cells)))]
        elif not grid.in_range(*position):
            _logger.debug('Spawn position %s is outside the grid, ignored', position)
            return None

        if value is None:
            value = SPAWN_VALUES[int(self._generator.integers(len(SPAWN_VALUES)))]

        i, j = position
        current = grid.get(i, j)
        if current == 0:
            grid.set(i, j, value)
            return SpawnResult(cell=(i, j), value=value, operation=Zoom(target=(i, j), value=value))

        # ##: Occupied cell: add in place, reported as a merge of the cell with itself.
        grid.set(i, j, current + value)
        notice = MergeNotice(source=(i, j), destination=(i, j), value=current + value)
        return SpawnResult(cell=(i, j), value=value, operation=Pop(target=(i, j)), merge=notice)

    def remove(self, grid: GridState, position: Cell | None = None) -> Zoom | None:
        """
        Clear a tile. **Mutates the grid in place.**

        Parameters
        ----------
        grid : GridState
            The grid to remove from.
        position : tuple[int, int], optional
            Explicit cell; defaults to a uniformly chosen occupied cell.

        Returns
        -------
        Zoom | None
            A reversed zoom on the cleared cell, or None if nothing was removed.
        """
        if position is None:
            filled_cells = grid.filled_cells()
            if not filled_cells:
                return None
            position = filled_cells[int(self._generator.integers(len(filled_cells)))]
        elif not grid.in_range(*position):
            _logger.debug('Remove position %s is outside the grid, ignored', position)
            return None

        i, j = position
        if grid.get(i, j) == 0:
            return None

        grid.set(i, j, 0)
        return Zoom(target=(i, j), reverse=True)
