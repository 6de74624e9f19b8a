# -*- coding: utf-8 -*-
"""
Core rules of the 2048 game: tiles, board storage, tilt resolution and game-over detection.
"""

from .gamemove import at_least_one_move_exists, empty_space_exists, is_game_over, max_tile_exists
from .grid import Grid, GridView
from .side import Side
from .tile import Tile
from .tilt import TiltResult, tilt_column, tilt_grid

__all__ = [
    "Side",
    "Tile",
    "Grid",
    "GridView",
    "TiltResult",
    "tilt_column",
    "tilt_grid",
    "max_tile_exists",
    "empty_space_exists",
    "at_least_one_move_exists",
    "is_game_over",
]
