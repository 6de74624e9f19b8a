"""Immutable tile value object."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Tile:
    """
    A numbered tile at an absolute board position.

    Attributes
    ----------
    value : int
        Power of two, at least 2.
    column : int
        Absolute column.
    row : int
        Absolute row, 0 being the bottom of the board.
    """

    value: int
    column: int
    row: int

    def __post_init__(self):
        if self.value < 2 or self.value & (self.value - 1):
            raise ValueError(f'Tile value must be a power of two >= 2, got {self.value}')

    def moved_to(self, column: int, row: int) -> 'Tile':
        """Return the same tile at another position."""
        return replace(self, column=column, row=row)

    def doubled(self) -> 'Tile':
        """Return the tile produced by merging this tile with an equal one."""
        return replace(self, value=self.value * 2)
