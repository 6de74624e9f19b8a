"""2048 tilt/merge engine."""

from .config import MAX_PIECE, ModelConfig, default_config, reference_config
from .core import Grid, Side, Tile, TiltResult, is_game_over, tilt_grid
from .envs import Model

__all__ = [
    "MAX_PIECE",
    "ModelConfig",
    "default_config",
    "reference_config",
    "Grid",
    "Side",
    "Tile",
    "TiltResult",
    "is_game_over",
    "tilt_grid",
    "Model",
]
