"""
Storage for the game board: a fixed rows x cols matrix of tile values, with no knowledge of game rules.
"""

from numpy import argwhere, array, int64, ndarray, zeros


class GridState:
    """
    A fixed-size matrix of cell values.

    Zero denotes an empty cell; any other value is a tile. The dimensions never change after construction.
    """

    def __init__(self, rows: int, cols: int):
        """
        Create an empty grid.

        Parameters
        ----------
        rows : int
            Number of rows, must be positive.
        cols : int
            Number of columns, must be positive.

        Raises
        ------
        ValueError
            If either dimension is not a positive integer.
        """
        if rows <= 0 or cols <= 0:
            raise ValueError(f'Grid dimensions must be positive, got {rows}x{cols}')
        self.rows = int(rows)
        self.cols = int(cols)
        self._matrix = zeros((self.rows, self.cols), dtype=int64)

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def get(self, i: int, j: int) -> int:
        return int(self._matrix[i, j])

    def set(self, i: int, j: int, value: int) -> None:
        self._matrix[i, j] = value

    def in_range(self, i: int, j: int) -> bool:
        return 0 <= i < self.rows and 0 <= j < self.cols

    def reset(self) -> None:
        self._matrix.fill(0)

    def load(self, matrix) -> None:
        """
        Replace every cell with the values of ``matrix``.

        Parameters
        ----------
        matrix : array_like
            A matrix with exactly the grid's shape.

        Raises
        ------
        ValueError
            If the shape does not match.
        """
        values = array(matrix, dtype=int64)
        if values.shape != self.shape:
            raise ValueError(f'Expected a {self.rows}x{self.cols} matrix, got shape {values.shape}')
        self._matrix = values

    def snapshot(self) -> ndarray:
        """
        Return a read-only copy of the matrix.

        Returns
        -------
        ndarray
            A copy that does not alias the grid; writing to it raises ``ValueError``.
        """
        copy = self._matrix.copy()
        copy.flags.writeable = False
        return copy

    def empty_cells(self) -> list[tuple[int, int]]:
        return [(int(i), int(j)) for i, j in argwhere(self._matrix == 0)]

    def filled_cells(self) -> list[tuple[int, int]]:
        return [(int(i), int(j)) for i, j in argwhere(self._matrix != 0)]

    def total(self) -> int:
        return int(self._matrix.sum())

    def max_tile(self) -> int:
        return int(self._matrix.max())

    def __repr__(self) -> str:
        return f'GridState({self.rows}x{self.cols}, {self._matrix.tolist()})'
