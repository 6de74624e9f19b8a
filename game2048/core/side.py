"""
Tilt directions and the perspective transform each of them implies.

The tilt engine always merges "upward", toward increasing row. Each side maps those logical
coordinates onto absolute board coordinates so that the same algorithm serves all four directions.
"""

from enum import Enum


class Side(Enum):
    """The four cardinal directions a board can be tilted toward."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def opposite(self) -> 'Side':
        """Return the side facing this one."""
        return Side((self.value + 2) % 4)

    def to_absolute(self, column: int, row: int, size: int) -> tuple[int, int]:
        """
        Convert logical coordinates, as seen when tilting toward this side, to absolute ones.

        Parameters
        ----------
        column : int
            Logical column.
        row : int
            Logical row, increasing toward this side.
        size : int
            Side length of the board.

        Returns
        -------
        tuple[int, int]
            Absolute (column, row).
        """
        if self is Side.NORTH:
            return column, row
        if self is Side.SOUTH:
            return column, size - 1 - row
        if self is Side.EAST:
            return row, column
        return size - 1 - row, column

    def to_logical(self, column: int, row: int, size: int) -> tuple[int, int]:
        """
        Convert absolute coordinates to logical ones. Inverse of ``to_absolute``.

        Parameters
        ----------
        column : int
            Absolute column.
        row : int
            Absolute row.
        size : int
            Side length of the board.

        Returns
        -------
        tuple[int, int]
            Logical (column, row).
        """
        if self is Side.WEST:
            return row, size - 1 - column
        # ##>: North, south and east are their own inverses.
        return self.to_absolute(column, row, size)
