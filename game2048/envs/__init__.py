# -*- coding: utf-8 -*-
"""
Stateful 2048 game.

This module provides the `Model` class, which holds the board, score and game-over status and applies
tile placements and tilts.
"""

from .model import Model

__all__ = ["Model"]
