"""State of a game of 2048: board, score, best score and game-over status."""

import logging
from collections.abc import Sequence
from typing import Callable

from numpy import ndarray

from game2048.config import ModelConfig, default_config
from game2048.core.gamemove import is_game_over
from game2048.core.grid import Grid
from game2048.core.side import Side
from game2048.core.tile import Tile
from game2048.core.tilt import tilt_grid

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Model:
    """
    A game of 2048.

    This class owns the board and applies tile placements and tilts to it, keeping the score and the
    game-over status up to date. Observers either poll ``consume_change`` or pass an ``on_change``
    callback, which is called synchronously whenever a change is raised.
    """

    def __init__(
        self,
        size: int = 4,
        config: ModelConfig | None = None,
        on_change: Callable[['Model'], None] | None = None,
    ):
        """
        Initialize an empty game with a score of 0.

        Parameters
        ----------
        size : int, optional
            The size of the square grid (default is 4).
        config : ModelConfig, optional
            Rules configuration (default is ``default_config()``).
        on_change : Callable[[Model], None], optional
            Called with the model each time a change is raised.
        """
        self._config = config if config is not None else default_config()
        self._on_change = on_change
        self._grid = Grid(size)
        self._score = 0
        self._max_score = 0
        self._game_over = False
        self._changed = False

    @classmethod
    def from_values(
        cls,
        raw_values: Sequence[Sequence[int]] | ndarray,
        score: int = 0,
        max_score: int = 0,
        game_over: bool = False,
        config: ModelConfig | None = None,
        on_change: Callable[['Model'], None] | None = None,
    ) -> 'Model':
        """
        Build a game from raw tile values, mostly for deterministic tests.

        Parameters
        ----------
        raw_values : Sequence[Sequence[int]] | ndarray
            Square grid indexed by [row][col], (0, 0) being the bottom-left corner and 0 an empty cell.
        score : int, optional
            Current score.
        max_score : int, optional
            Best score so far.
        game_over : bool, optional
            Game-over status, kept as given until the next mutation.
        config : ModelConfig, optional
            Rules configuration.
        on_change : Callable[[Model], None], optional
            Change callback.

        Returns
        -------
        Model
            The game in the described state.
        """
        grid = Grid.from_values(raw_values)
        model = cls(grid.size, config=config, on_change=on_change)
        model._grid = grid
        model._score = score
        model._max_score = max_score
        model._game_over = game_over
        return model

    @property
    def size(self) -> int:
        """Number of cells on each side of the board."""
        return self._grid.size

    @property
    def score(self) -> int:
        return self._score

    @property
    def max_score(self) -> int:
        """Best score so far. Updated when the end of a game is observed."""
        return self._max_score

    @property
    def config(self) -> ModelConfig:
        return self._config

    @property
    def values(self) -> ndarray:
        """Snapshot of tile values indexed by [row][col], 0 for empty cells."""
        return self._grid.to_array()

    def tile(self, column: int, row: int) -> Tile | None:
        """Return the tile at (column, row), or None if the cell is empty."""
        return self._grid.tile(column, row)

    def game_over(self) -> bool:
        """
        Check if the game is over and record the best score if it is.

        Returns
        -------
        bool
            True if a tile holds the winning value or no tilt can change the board.
        """
        self._check_game_over()
        if self._game_over:
            self._max_score = max(self._score, self._max_score)
        return self._game_over

    def clear(self) -> None:
        """Empty the board and reset the score. The best score is kept."""
        self._grid.clear()
        self._score = 0
        self._game_over = False
        _logger.debug('Board cleared (max score %d)', self._max_score)
        self._raise_change()

    def add_tile(self, tile: Tile) -> None:
        """
        Place a tile on the board.

        Parameters
        ----------
        tile : Tile
            Tile to place at its own coordinates.

        Raises
        ------
        ValueError
            If the cell is already occupied. The game is left untouched.
        """
        self._grid.add_tile(tile)
        self._check_game_over()
        self._raise_change()

    def tilt(self, side: Side) -> bool:
        """
        Tilt the board toward a side.

        Parameters
        ----------
        side : Side
            Direction of motion.

        Returns
        -------
        bool
            True if the tilt changed the board.

        Notes
        -----
        - Merged tile values are added to the score.
        - Each tile takes part in at most one merge per tilt.
        - A change is raised only if the board changed.
        """
        result = tilt_grid(self._grid, side, count_stationary_slides=self._config.count_stationary_slides)
        self._score += result.score
        self._check_game_over()
        if result.changed:
            self._raise_change()
        return result.changed

    def consume_change(self) -> bool:
        """Return whether a change was raised since the last call, and reset the flag."""
        changed, self._changed = self._changed, False
        return changed

    def _check_game_over(self) -> None:
        was_over = self._game_over
        self._game_over = is_game_over(self._grid, max_piece=self._config.max_piece)
        if self._game_over and not was_over:
            _logger.info('Game over: score %d, max tile %d', self._score, int(self.values.max(initial=0)))

    def _raise_change(self) -> None:
        self._changed = True
        if self._on_change is not None:
            self._on_change(self)

    def __str__(self) -> str:
        over = 'over' if self._game_over else 'not over'
        return f'\n[\n{self._grid}\n] {self._score} (max: {self._max_score}) (game is {over}) \n'

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
