"""
Tilt resolution for the 2048 board.

A tilt slides every tile toward one side and merges equal neighbours. The algorithm is written for a
single direction, merging toward increasing logical row, and the side's perspective maps it onto the
board.
"""

import logging
from typing import NamedTuple

from game2048.core.grid import Grid, GridView
from game2048.core.side import Side
from game2048.core.tile import Tile

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TiltResult(NamedTuple):
    """
    Outcome of a tilt.

    Attributes
    ----------
    changed : bool
        Whether any column changed.
    score : int
        Sum of the values of all tiles created by merges.
    merges : tuple[Tile, ...]
        Tiles created by merges, in the order they were made.
    """

    changed: bool
    score: int
    merges: tuple[Tile, ...] = ()


def tilt_column(view: GridView, column: int, count_stationary_slides: bool = False) -> tuple[bool, list[Tile]]:
    """
    Slide and merge one logical column toward its top.

    Parameters
    ----------
    view : GridView
        The board as seen from the tilt side.
    column : int
        Logical column to resolve.
    count_stationary_slides : bool, optional
        Whether a tile that stays in place counts as a change (default is False).

    Returns
    -------
    changed : bool
        Whether the column changed.
    merges : list[Tile]
        Tiles created by merges in this column.

    Notes
    -----
    - Rows are processed from the second-highest down to 0; the top row can never move.
    - A row that received a merge is locked for the rest of the pass, so each tile merges at most
      once and, of three equal tiles in a row, only the two leading ones merge.
    """
    size = view.size
    locked = [False] * size
    changed = False
    merges = []

    for row in range(size - 2, -1, -1):
        tile = view.tile(column, row)
        if tile is None:
            continue

        # ##: Find the first occupied row above, or the top boundary.
        target = row + 1
        while target < size and view.tile(column, target) is None:
            target += 1

        # ##: Merge into the blocking tile if it is equal and unlocked.
        if target < size and not locked[target] and view.tile(column, target).value == tile.value:
            view.move(column, target, tile)
            locked[target] = True
            merges.append(view.tile(column, target))
            changed = True
            continue

        # ##: Otherwise slide just below the blocking tile.
        destination = target - 1
        if destination != row:
            view.move(column, destination, tile)
            changed = True
        elif count_stationary_slides:
            changed = True

    return changed, merges


def tilt_grid(grid: Grid, side: Side, count_stationary_slides: bool = False) -> TiltResult:
    """
    Tilt the whole board toward a side.

    Parameters
    ----------
    grid : Grid
        The board to tilt. **Modified in-place.**
    side : Side
        Direction of motion.
    count_stationary_slides : bool, optional
        Whether a tile that stays in place counts as a change (default is False).

    Returns
    -------
    TiltResult
        Whether the board changed, the score gained and the merged tiles.
    """
    view = grid.view(side)
    changed = False
    merges: list[Tile] = []

    for column in range(grid.size):
        column_changed, column_merges = tilt_column(view, column, count_stationary_slides)
        changed = changed or column_changed
        merges.extend(column_merges)

    score = sum(tile.value for tile in merges)
    _logger.debug('Tilt %s: changed=%s, score=%d, merges=%d', view.side.name, changed, score, len(merges))
    return TiltResult(changed, score, tuple(merges))
