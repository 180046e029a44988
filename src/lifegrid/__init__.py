"""Finite Conway's Game of Life on a bounded, non-wrapping grid."""

__version__ = "0.1.0"

from .core.grid import Cell, Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary, default_pattern, random_fill

__all__ = ["Cell", "Grid", "GameOfLife", "Pattern", "PatternLibrary", "default_pattern", "random_fill"]
