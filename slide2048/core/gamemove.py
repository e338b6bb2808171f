"""
Directional moves for the 2048 game: the slide-and-merge resolution of a grid, and predicates on legal moves.
"""

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Iterator

from numpy import all as np_all
from numpy import any as np_any
from numpy import ndarray

from slide2048.animation.operations import MERGE_OPACITY, AnimationOp, MergeNotice, Pop, Slide
from slide2048.core.gridstate import GridState

_logger = logging.getLogger(__name__)

Cell = tuple[int, int]


class Direction(IntEnum):
    """Direction the tiles travel toward."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


# ##>: Offset to the trailing neighbour, one step further from the edge the tiles travel toward.
TRAILING_OFFSETS: dict[Direction, Cell] = {
    Direction.UP: (1, 0),
    Direction.RIGHT: (0, -1),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
}


@dataclass
class MoveResult:
    """
    Outcome of a directional move.

    Attributes
    ----------
    moved : bool
        Whether at least one tile slid or merged.
    operations : list
        Animation operations needed to visualise the move, in the order they were produced.
    merges : list
        Every merge that happened, in the order it happened.
    """

    moved: bool = False
    operations: list[AnimationOp] = field(default_factory=list)
    merges: list[MergeNotice] = field(default_factory=list)


def line_starts(rows: int, cols: int, direction: Direction) -> Iterator[Cell]:
    """
    Yield the first cell of every line, on the edge the tiles travel toward.

    Parameters
    ----------
    rows : int
        Number of rows of the grid.
    cols : int
        Number of columns of the grid.
    direction : Direction
        The move direction.
    """
    if direction == Direction.UP:
        yield from ((0, j) for j in range(cols))
    elif direction == Direction.DOWN:
        yield from ((rows - 1, j) for j in range(cols))
    elif direction == Direction.LEFT:
        yield from ((i, 0) for i in range(rows))
    else:
        yield from ((i, cols - 1) for i in range(rows))


def _find_next_non_zero(grid: GridState, i: int, j: int, offset: Cell) -> Cell | None:
    """Return the nearest non-empty cell along the trailing chain of (i, j), or None."""
    di, dj = offset
    ni, nj = i + di, j + dj
    while grid.in_range(ni, nj):
        if grid.get(ni, nj) != 0:
            return ni, nj
        ni, nj = ni + di, nj + dj
    return None


def resolve(
    grid: GridState,
    direction: Direction,
    gap: int = 0,
    on_merge: Callable[[MergeNotice], None] | None = None,
) -> MoveResult:
    """
    Slide and merge every line of the grid toward one edge. **Mutates the grid in place.**

    Parameters
    ----------
    grid : GridState
        The grid to move.
    direction : Direction
        Direction the tiles travel toward.
    gap : int, optional
        Spacing between cells, forwarded to the slide operations (default is 0).
    on_merge : callable, optional
        Called synchronously with each ``MergeNotice`` as soon as the merge happens.

    Returns
    -------
    MoveResult
        Whether the grid changed, the queued animations and the merges.

    Notes
    -----
    - Each line is walked from the edge the tiles travel toward with a pointer on the current cell.
    - An empty current cell pulls in the nearest tile and is scanned again, so a tile may cross several
      empty cells in one pass.
    - A cell holding a tile equal to the nearest one absorbs it, then the pointer advances: each destination
      merges at most once per move.
    - Unequal neighbours leave the current cell untouched and the pointer advances.
    """
    result = MoveResult()
    offset = TRAILING_OFFSETS[direction]

    for start in line_starts(grid.rows, grid.cols, direction):
        i, j = start
        while grid.in_range(i, j):
            found = _find_next_non_zero(grid, i, j, offset)
            if found is None:
                break

            ni, nj = found
            current, following = grid.get(i, j), grid.get(ni, nj)
            delta = (j - nj, i - ni)

            if current == 0:
                # ##: Pull the tile in and look again from the same cell.
                grid.set(i, j, following)
                grid.set(ni, nj, 0)
                result.operations.append(Slide(target=(ni, nj), delta=delta, extra_spacing=gap))
                result.moved = True
                continue

            if current == following:
                grid.set(i, j, current * 2)
                grid.set(ni, nj, 0)
                result.operations.append(
                    Slide(target=(ni, nj), delta=delta, extra_spacing=gap, opacity=MERGE_OPACITY)
                )
                result.operations.append(Pop(target=(i, j)))
                result.moved = True

                notice = MergeNotice(source=(ni, nj), destination=(i, j), value=current * 2)
                result.merges.append(notice)
                if on_merge is not None:
                    on_merge(notice)

            i, j = i + offset[0], j + offset[1]

    _logger.debug('Move %s: moved=%s, %d merge(s)', direction.name, result.moved, len(result.merges))
    return result


def is_terminal(matrix: ndarray) -> bool:
    """
    Check if no move is possible any more.

    Parameters
    ----------
    matrix : ndarray
        The game board.

    Returns
    -------
    bool
        True if there is no empty cell AND no two row- or column-adjacent cells share a value.
    """
    return bool(
        np_all(matrix != 0) and not np_any(matrix[:-1] == matrix[1:]) and not np_any(matrix[:, :-1] == matrix[:, 1:])
    )


def legal_directions(matrix: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    matrix : ndarray
        The game board.

    Returns
    -------
    list[Direction]
        Legal directions, in ``Direction`` order.

    Notes
    -----
    Horizontal and vertical adjacency are computed once and shared between opposite directions.
    """
    # ##>: Horizontal adjacency for left/right.
    left_cols, right_cols = matrix[:, :-1], matrix[:, 1:]
    h_can_merge = bool(((left_cols != 0) & (left_cols == right_cols)).any())

    # ##>: Vertical adjacency for up/down.
    top_rows, bottom_rows = matrix[:-1, :], matrix[1:, :]
    v_can_merge = bool(((top_rows != 0) & (top_rows == bottom_rows)).any())

    mask = {
        Direction.UP: v_can_merge or bool(((top_rows == 0) & (bottom_rows != 0)).any()),
        Direction.RIGHT: h_can_merge or bool(((right_cols == 0) & (left_cols != 0)).any()),
        Direction.DOWN: v_can_merge or bool(((bottom_rows == 0) & (top_rows != 0)).any()),
        Direction.LEFT: h_can_merge or bool(((left_cols == 0) & (right_cols != 0)).any()),
    }
    return [direction for direction in Direction if mask[direction]]
