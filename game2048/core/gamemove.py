"""
Game-over detection for the 2048 board: winning tile, empty cells and possible merges.
"""

from numpy import asarray, ndarray

from game2048.config import MAX_PIECE
from game2048.core.grid import Grid


def _values(board: Grid | ndarray) -> ndarray:
    """Return the value array of a board, indexed by [row][col] with 0 for empty cells."""
    if isinstance(board, Grid):
        return board.to_array()
    return asarray(board)


def max_tile_exists(board: Grid | ndarray, max_piece: int = MAX_PIECE) -> bool:
    """
    Check whether a tile holds the winning value.

    Parameters
    ----------
    board : Grid | ndarray
        The board or its value array.
    max_piece : int, optional
        The winning tile value (default is 2048).

    Returns
    -------
    bool
        True if any cell holds ``max_piece``.
    """
    return bool((_values(board) == max_piece).any())


def empty_space_exists(board: Grid | ndarray) -> bool:
    """Check whether at least one cell is empty."""
    return bool((_values(board) == 0).any())


def at_least_one_move_exists(board: Grid | ndarray) -> bool:
    """
    Check whether any tilt could change the board.

    Parameters
    ----------
    board : Grid | ndarray
        The board or its value array.

    Returns
    -------
    bool
        True if a cell is empty or two 4-adjacent tiles share a value.

    Notes
    -----
    Each cell is compared with (col + 1, row) and (col, row + 1); comparing with (col - 1, row) and
    (col, row - 1) would visit the same pairs.
    """
    state = _values(board)
    if (state == 0).any():
        return True

    # ##>: Vertical neighbours: rows r and r + 1 of the same column.
    bottom_rows, top_rows = state[:-1, :], state[1:, :]
    if ((bottom_rows != 0) & (bottom_rows == top_rows)).any():
        return True

    # ##>: Horizontal neighbours: columns c and c + 1 of the same row.
    left_cols, right_cols = state[:, :-1], state[:, 1:]
    return bool(((left_cols != 0) & (left_cols == right_cols)).any())


def is_game_over(board: Grid | ndarray, max_piece: int = MAX_PIECE) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : Grid | ndarray
        The board or its value array.
    max_piece : int, optional
        The winning tile value (default is 2048).

    Returns
    -------
    bool
        True if the winning tile exists or no tilt can change the board.
    """
    state = _values(board)
    return max_tile_exists(state, max_piece) or not at_least_one_move_exists(state)
