"""Grid data structure for the finite Game of Life."""

from enum import IntEnum
from typing import Callable, Iterable, Iterator, Optional, Tuple
import logging

import numpy as np
import torch
import torch.nn.functional as F

logger = logging.getLogger(__name__)

# Row/column offsets of the eight Moore neighbors.
NEIGHBOR_OFFSETS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


class Cell(IntEnum):
    """State of a single grid position."""

    DEAD = 0
    ALIVE = 1

    @property
    def is_alive(self) -> bool:
        return self is Cell.ALIVE


class Grid:
    """Represents a bounded 2D grid for Conway's Game of Life.

    Cells are stored row-major in a numpy array of shape (height, width).
    The grid does not wrap: positions outside [0, height) x [0, width) do
    not exist and never count as neighbors.

    Two buffers are kept. ``step`` computes the next generation from the
    current buffer into the idle one and then swaps them, so the current
    matrix is always replaced as a whole.
    """

    def __init__(self, width: int, height: int, cells: Optional[Iterable] = None) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            cells: Optional initial matrix of shape (height, width); nonzero
                entries are alive. Defaults to an all-dead grid.

        Raises:
            ValueError: If dimensions are not positive or the matrix shape
                doesn't match (height, width)
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells = np.zeros((height, width), dtype=np.int8)
        self._previous_cells = np.zeros((height, width), dtype=np.int8)

        if cells is not None:
            arr = np.asarray(cells)
            if arr.shape != (height, width):
                raise ValueError(f"Initial cells shape {arr.shape} doesn't match grid {(height, width)}")
            self._cells[:] = arr != 0

        # 3x3 neighbor kernel, center excluded
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

        logger.debug("Created %dx%d grid with %d live cells", width, height, self.population)

    @classmethod
    def from_coordinates(cls, width: int, height: int, alive: Iterable[Tuple[int, int]]) -> "Grid":
        """Create a grid with the given (row, col) positions alive.

        Raises:
            IndexError: If any coordinate falls outside the grid
        """
        cells = np.zeros((height, width), dtype=np.int8)
        for row, col in alive:
            if not (0 <= row < height and 0 <= col < width):
                raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {width}x{height} grid")
            cells[row, col] = 1
        return cls(width, height, cells)

    @classmethod
    def from_provider(cls, columns: int, rows: int, provider: Callable[[int, int], Iterable]) -> "Grid":
        """Create a grid from an initial pattern provider.

        Args:
            columns: Number of columns
            rows: Number of rows
            provider: Callable taking (columns, rows) and returning a
                (rows, columns) matrix of initial cell states
        """
        return cls(columns, rows, provider(columns, rows))

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the current cell matrix."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def previous_cells(self) -> np.ndarray:
        """Read-only view of the previous generation."""
        view = self._previous_cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (height, width)."""
        return (self.height, self.width)

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        return Cell(int(self._cells[row, col]))

    def snapshot(self) -> np.ndarray:
        """Return an independent copy of the current cell matrix."""
        return self._cells.copy()

    def restore(self, cells: Iterable) -> None:
        """Replace the whole cell matrix, e.g. with an earlier snapshot.

        The previous generation is cleared.

        Raises:
            ValueError: If the matrix shape doesn't match (height, width)
        """
        arr = np.asarray(cells)
        if arr.shape != self.shape:
            raise ValueError(f"Cells shape {arr.shape} doesn't match grid {self.shape}")

        self._cells[:] = arr != 0
        self._previous_cells.fill(0)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a cell.

        Neighbors outside the grid are skipped.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.height and 0 <= nc < self.width:
                count += int(self._cells[nr, nc])
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a zero-padded convolution.

        Returns:
            Array of shape (height, width) with neighbor counts
        """
        torch_input = torch.from_numpy(self._cells.astype(np.float32)).reshape(1, 1, self.height, self.width)
        neighbors = F.conv2d(torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].round().numpy().astype(np.int8)

    def step(self) -> None:
        """Advance the grid by one generation."""
        neighbor_counts = self.count_all_neighbors()
        current = self._cells

        # Survival: live cell with 2 or 3 neighbors
        survive_mask = (current > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = (current == 0) & (neighbor_counts == 3)

        # Write into the idle buffer, then swap
        self._previous_cells[:] = survive_mask | birth_mask
        self._cells, self._previous_cells = self._previous_cells, self._cells

        logger.debug("Stepped grid, population %d", self.population)

    def get_changed_cells(self) -> Iterator[Tuple[int, int]]:
        """Get coordinates of cells that changed during the last step.

        Yields:
            Tuples of (row, col) coordinates for changed cells
        """
        changed = self._cells != self._previous_cells
        rows, cols = np.nonzero(changed)
        for row, col in zip(rows, cols):
            yield (int(row), int(col))

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        rows, cols = np.nonzero(self._cells)
        if len(rows) == 0:
            return None

        return (int(rows.min()), int(cols.min()), int(rows.max()), int(cols.max()))

    def __eq__(self, other: object) -> bool:
        """Check if two grids are equal."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)
