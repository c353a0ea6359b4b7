"""
Fixed-size cell storage for the sliding tile puzzle.

The grid keeps its cells in a flat array, addressed row by row: the cell at horizontal
coordinate ``i`` and vertical coordinate ``j`` lives at position ``j * width + i``.
"""

from __future__ import annotations

from collections.abc import Sequence

from numpy import array_equal, count_nonzero, int64, ndarray, zeros


def _is_tile_value(value: int) -> bool:
    """
    Check that a value can be stored in a cell.

    Parameters
    ----------
    value : int
        Candidate cell value.

    Returns
    -------
    bool
        True for ``0`` (empty) or a power of two greater or equal to 2.
    """
    return value == 0 or (value >= 2 and value & (value - 1) == 0)


class Grid:
    """
    Two-dimensional field of tiles with bounds-checked accessors.

    Each cell holds either ``0`` (empty) or a power of two. Dimensions are fixed at construction.
    """

    def __init__(self, width: int, height: int):
        """
        Create an empty grid.

        Parameters
        ----------
        width : int
            Number of columns, must be positive.
        height : int
            Number of rows, must be positive.

        Raises
        ------
        ValueError
            If one of the dimensions is not a positive integer.
        """
        for name, value in (('width', width), ('height', height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f'{name} must be a positive integer, got {value!r}')

        self._width = width
        self._height = height
        self._cells = zeros(width * height, dtype=int64)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Grid:
        """
        Build a grid from a list of rows.

        Parameters
        ----------
        rows : Sequence[Sequence[int]]
            Cell values, ``rows[j][i]`` being the cell at column ``i`` of row ``j``.

        Returns
        -------
        Grid
            A new grid holding the given values.

        Raises
        ------
        ValueError
            If the rows are empty, ragged, or hold an illegal value.
        """
        if not rows or not rows[0]:
            raise ValueError('rows must contain at least one cell')
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError('all rows must have the same length')

        grid = cls(width, len(rows))
        for j, row in enumerate(rows):
            for i, value in enumerate(row):
                grid.set(i, j, int(value))
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._cells.shape[0]

    @property
    def empty_count(self) -> int:
        return int(self.size - count_nonzero(self._cells))

    @property
    def tile_count(self) -> int:
        return int(count_nonzero(self._cells))

    @property
    def is_full(self) -> bool:
        return self.empty_count == 0

    @property
    def total(self) -> int:
        """Sum of every tile value on the grid."""
        return int(self._cells.sum())

    @property
    def max_tile(self) -> int:
        return int(self._cells.max())

    def _check_bounds(self, i: int, j: int) -> None:
        if not 0 <= i < self._width or not 0 <= j < self._height:
            raise IndexError(f'cell ({i}, {j}) is outside of a {self._width}x{self._height} grid')

    def get(self, i: int, j: int) -> int:
        """
        Read one cell.

        Parameters
        ----------
        i : int
            Horizontal coordinate, in ``[0, width)``.
        j : int
            Vertical coordinate, in ``[0, height)``.

        Returns
        -------
        int
            The value stored at ``(i, j)``.

        Raises
        ------
        IndexError
            If the coordinate is outside of the grid.
        """
        self._check_bounds(i, j)
        return int(self._cells[j * self._width + i])

    def set(self, i: int, j: int, value: int) -> None:
        """
        Write one cell.

        Parameters
        ----------
        i : int
            Horizontal coordinate, in ``[0, width)``.
        j : int
            Vertical coordinate, in ``[0, height)``.
        value : int
            ``0`` or a power of two greater or equal to 2.

        Raises
        ------
        IndexError
            If the coordinate is outside of the grid.
        ValueError
            If the value is not a legal cell value.
        """
        self._check_bounds(i, j)
        if not _is_tile_value(value):
            raise ValueError(f'cell value must be 0 or a power of two >= 2, got {value}')
        self._cells[j * self._width + i] = value

    def fill(self, value: int) -> None:
        """
        Set every cell to the same value.

        Parameters
        ----------
        value : int
            ``0`` or a power of two greater or equal to 2.

        Raises
        ------
        ValueError
            If the value is not a legal cell value.
        """
        if not _is_tile_value(value):
            raise ValueError(f'cell value must be 0 or a power of two >= 2, got {value}')
        self._cells.fill(value)

    # ##: Flat access, reserved to the move engine and the spawner.
    def _position(self, i: int, j: int) -> int:
        return j * self._width + i

    def _read(self, position: int) -> int:
        return int(self._cells[position])

    def _write(self, position: int, value: int) -> None:
        self._cells[position] = value

    def copy(self) -> Grid:
        """Return an independent grid with the same content."""
        clone = Grid(self._width, self._height)
        clone._cells = self._cells.copy()
        return clone

    def to_array(self) -> ndarray:
        """
        Get the grid as a 2D array.

        Returns
        -------
        ndarray
            A ``(height, width)`` copy of the cells, row ``j`` holding the cells of vertical coordinate ``j``.
        """
        return self._cells.reshape(self._height, self._width).copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width and self._height == other._height and array_equal(self._cells, other._cells)
        )

    def __repr__(self) -> str:
        return f'Grid(width={self._width}, height={self._height}, cells={self._cells.tolist()})'

    def __str__(self) -> str:
        return '\n'.join(' \t'.join(map(str, row)) for row in self.to_array().tolist())


def new_grid(width: int, height: int) -> Grid:
    """
    Create an empty grid.

    Parameters
    ----------
    width : int
        Number of columns, must be positive.
    height : int
        Number of rows, must be positive.

    Returns
    -------
    Grid
        A grid with every cell set to ``0``.
    """
    return Grid(width, height)
