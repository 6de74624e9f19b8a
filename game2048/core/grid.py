"""
Tile storage for the 2048 board, addressed by absolute coordinates or through a side's perspective.
"""

from collections.abc import Iterator, Sequence

from numpy import asarray, int64, ndarray, zeros

from game2048.core.side import Side
from game2048.core.tile import Tile


class Grid:
    """
    Square board of optional tiles.

    Cells are addressed by absolute (column, row), with (0, 0) the bottom-left corner. Every stored
    tile carries the coordinates of the cell that holds it.
    """

    def __init__(self, size: int):
        """
        Initialize an empty board.

        Parameters
        ----------
        size : int
            Number of cells on each side of the board.
        """
        if size < 1:
            raise ValueError(f'Board size must be positive, got {size}')
        self._size = size
        self._cells: list[list[Tile | None]] = [[None] * size for _ in range(size)]

    @classmethod
    def from_values(cls, raw_values: Sequence[Sequence[int]] | ndarray) -> 'Grid':
        """
        Build a board from raw tile values.

        Parameters
        ----------
        raw_values : Sequence[Sequence[int]] | ndarray
            Square grid of values indexed by [row][col], with (0, 0) the bottom-left corner and 0 for
            an empty cell.

        Returns
        -------
        Grid
            A board holding one tile per non-zero value.
        """
        values = asarray(raw_values, dtype=int64)
        if values.ndim != 2 or values.shape[0] != values.shape[1]:
            raise ValueError(f'Raw values must form a square grid, got shape {values.shape}')

        grid = cls(values.shape[0])
        for row, col in zip(*values.nonzero()):
            grid.add_tile(Tile(int(values[row, col]), int(col), int(row)))
        return grid

    @property
    def size(self) -> int:
        """Number of cells on each side of the board."""
        return self._size

    def _check_bounds(self, column: int, row: int) -> None:
        if not (0 <= column < self._size and 0 <= row < self._size):
            raise IndexError(f'Cell ({column}, {row}) is outside a {self._size}x{self._size} board')

    def tile(self, column: int, row: int) -> Tile | None:
        """Return the tile at absolute (column, row), or None if the cell is empty."""
        self._check_bounds(column, row)
        return self._cells[row][column]

    def add_tile(self, tile: Tile) -> None:
        """
        Place a tile at its own coordinates.

        Raises
        ------
        ValueError
            If the target cell is already occupied. The board is left untouched.
        """
        self._check_bounds(tile.column, tile.row)
        if self._cells[tile.row][tile.column] is not None:
            raise ValueError(f'Cell ({tile.column}, {tile.row}) is already occupied')
        self._cells[tile.row][tile.column] = tile

    def move(self, column: int, row: int, tile: Tile) -> bool:
        """
        Move a stored tile to absolute (column, row), merging it with the occupant if there is one.

        Parameters
        ----------
        column : int
            Destination column.
        row : int
            Destination row.
        tile : Tile
            A tile currently stored on this board.

        Returns
        -------
        bool
            True if the move was a merge, False for a plain slide or a move onto the tile's own cell.

        Notes
        -----
        A merge discards both tiles and stores a new one of doubled value at the destination.
        """
        self._check_bounds(column, row)
        self._check_bounds(tile.column, tile.row)
        if self._cells[tile.row][tile.column] != tile:
            raise ValueError(f'{tile} is not stored on this board')
        if (column, row) == (tile.column, tile.row):
            return False

        occupant = self._cells[row][column]
        if occupant is not None and occupant.value != tile.value:
            raise ValueError(f'Cannot merge {tile} into {occupant}')

        self._cells[tile.row][tile.column] = None
        if occupant is None:
            self._cells[row][column] = tile.moved_to(column, row)
            return False

        self._cells[row][column] = occupant.doubled()
        return True

    def clear(self) -> None:
        """Remove every tile."""
        for cells in self._cells:
            cells[:] = [None] * self._size

    def tiles(self) -> Iterator[Tile]:
        """Iterate over stored tiles, bottom row first."""
        for cells in self._cells:
            yield from (tile for tile in cells if tile is not None)

    def to_array(self) -> ndarray:
        """
        Snapshot the tile values.

        Returns
        -------
        ndarray
            Array of shape (size, size) indexed by [row][col], 0 for empty cells.
        """
        values = zeros((self._size, self._size), dtype=int64)
        for tile in self.tiles():
            values[tile.row, tile.column] = tile.value
        return values

    def copy(self) -> 'Grid':
        """Return an independent board holding the same tiles."""
        grid = Grid(self._size)
        grid._cells = [list(cells) for cells in self._cells]
        return grid

    def view(self, side: Side) -> 'GridView':
        """Return this board as seen when tilting toward ``side``."""
        return GridView(self, side)

    def __str__(self) -> str:
        lines = []
        for row in range(self._size - 1, -1, -1):
            cells = (f'|{tile.value:4d}' if tile is not None else '|    ' for tile in self._cells[row])
            lines.append(''.join(cells) + '|')
        return '\n'.join(lines)


class GridView:
    """
    A board addressed through the perspective of one side.

    Logical row numbers increase toward the side, so "up" is always the direction of motion. Writes go
    through the same bijection as reads; the tiles themselves always hold absolute coordinates.
    """

    __slots__ = ('_grid', '_side')

    def __init__(self, grid: Grid, side: Side):
        self._grid = grid
        self._side = side

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def side(self) -> Side:
        return self._side

    def tile(self, column: int, row: int) -> Tile | None:
        """Return the tile at logical (column, row)."""
        return self._grid.tile(*self._side.to_absolute(column, row, self._grid.size))

    def move(self, column: int, row: int, tile: Tile) -> bool:
        """Move ``tile`` to logical (column, row). Returns True if the move was a merge."""
        return self._grid.move(*self._side.to_absolute(column, row, self._grid.size), tile)
