"""Core cellular automaton logic."""

from .grid import Cell, Grid
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary, default_pattern, random_fill

__all__ = ["Cell", "Grid", "GameOfLife", "Pattern", "PatternLibrary", "default_pattern", "random_fill"]
