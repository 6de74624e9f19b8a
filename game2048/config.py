"""
Configuration for the 2048 game model.
"""

from dataclasses import dataclass

# ##>: Tile value that ends the game when it appears on the board.
MAX_PIECE = 2048


@dataclass
class ModelConfig:
    """
    Rules configuration for a game model.

    Attributes
    ----------
    max_piece : int
        Winning tile value. The game is over as soon as a tile of this value exists.
    count_stationary_slides : bool
        Whether a tile whose slide destination is its own cell counts as a change. The reference
        rules report such slides as changes; by default only real moves and merges do.
    """

    max_piece: int = MAX_PIECE
    count_stationary_slides: bool = False

    def __post_init__(self):
        """Validate the winning tile value."""
        if self.max_piece < 4 or self.max_piece & (self.max_piece - 1):
            raise ValueError(f'max_piece must be a power of two >= 4, got {self.max_piece}')


def default_config() -> ModelConfig:
    """
    Create the default configuration for 2048.

    Returns
    -------
    ModelConfig
        Standard rules: 2048 wins, stationary slides are not changes.
    """
    return ModelConfig()


def reference_config() -> ModelConfig:
    """
    Create a configuration that reports zero-distance slides as changes.

    Returns
    -------
    ModelConfig
        Configuration reproducing the reference change reporting.
    """
    return ModelConfig(count_stationary_slides=True)
