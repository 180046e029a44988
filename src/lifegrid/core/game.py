"""Conway's Game of Life simulation session."""

from typing import Any, Deque, Dict
from collections import deque
import logging

import numpy as np

from .grid import Grid

logger = logging.getLogger(__name__)


class GameOfLife:
    """Drives a Grid generation by generation and tracks its history.

    Implements the classic rules on a bounded grid:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0
        self._initial_cells = grid.snapshot()
        self._population_history: Deque[int] = deque(maxlen=100)

        # Track initial population
        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.step()
        self._generation += 1
        self._update_population_history()

    def run(self, generations: int) -> int:
        """Advance the simulation by a number of generations.

        Args:
            generations: Number of steps to take

        Returns:
            The generation reached

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()

        logger.debug("Ran %d generations, now at generation %d", generations, self._generation)
        return self._generation

    def reset(self) -> None:
        """Restore the initial cells and return to generation 0."""
        self.grid.restore(self._initial_cells)
        self._generation = 0
        self._population_history.clear()
        self._update_population_history()

    def _update_population_history(self) -> None:
        """Update the population history."""
        self._population_history.append(self.population)

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation

        Raises:
            ValueError: If window_size is less than 1
        """
        if window_size < 1:
            raise ValueError(f"Window size must be at least 1, got {window_size}")

        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict[str, Any]:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        bbox = self.grid.get_bounding_box()

        stats: Dict[str, Any] = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "grid_size": (self.grid.width, self.grid.height),
            "population_density": self.population / (self.grid.width * self.grid.height),
        }

        if bbox:
            stats["bounding_box"] = bbox
            box_height = bbox[2] - bbox[0] + 1
            box_width = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_width, box_height)
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)

        return stats
