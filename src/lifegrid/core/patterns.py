"""Common Game of Life patterns and initial pattern providers.

A provider is any callable taking ``(columns, rows)`` and returning a
``(rows, columns)`` matrix of initial cell states. Patterns, the startup
demo scatter and seeded random fills are all exposed as providers so a
frontend can hand them straight to ``Grid.from_provider``.
"""

from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

Provider = Callable[[int, int], np.ndarray]

# (row, col) positions of the scatter shown when the GUI starts.
DEMO_CELLS: List[Tuple[int, int]] = [
    (0, 0), (1, 1), (1, 2), (2, 1), (5, 1), (5, 2), (5, 4), (6, 4), (5, 5), (6, 5),
    (5, 6), (1, 5), (2, 5), (3, 5), (9, 3), (10, 1), (10, 2), (14, 0), (14, 1), (14, 2),
    (2, 12), (3, 11), (3, 13), (3, 15), (4, 12), (4, 14), (4, 15), (8, 11), (9, 10),
    (9, 12), (9, 16), (8, 19), (8, 20), (9, 20), (2, 24), (3, 23), (3, 25), (4, 23),
    (4, 25), (5, 24), (7, 24), (7, 27), (7, 28), (7, 29), (8, 25), (8, 27), (9, 26),
    (14, 15), (14, 16), (14, 17), (13, 12), (14, 11), (15, 10), (16, 9), (17, 7), (17, 8),
    (12, 21), (12, 23), (13, 20), (13, 22), (13, 24), (14, 21), (14, 23), (15, 22),
    (22, 9), (23, 8), (23, 9), (24, 9), (25, 8), (25, 9), (20, 16), (21, 17), (22, 16),
    (21, 22), (22, 22), (22, 23), (27, 26), (27, 27), (27, 28), (27, 29), (27, 30), (27, 31),
]


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(self, name: str, cells: List[Tuple[int, int]], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) coordinates for living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (rows, columns)
        """
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description)

        min_row, min_col, _, _ = self.get_bounding_box()
        normalized_cells = [(row - min_row, col - min_col) for row, col in self.cells]

        return Pattern(self.name, normalized_cells, self.description)

    def place(self, columns: int, rows: int, row_offset: int = 0, col_offset: int = 0) -> np.ndarray:
        """Build an initial matrix with this pattern at the given offset.

        Args:
            columns: Grid width
            rows: Grid height
            row_offset: Vertical offset
            col_offset: Horizontal offset

        Returns:
            Matrix of shape (rows, columns)

        Raises:
            IndexError: If any cell of the pattern lands outside the grid
        """
        cells = np.zeros((rows, columns), dtype=np.int8)
        for row, col in self.cells:
            r, c = row + row_offset, col + col_offset
            if not (0 <= r < rows and 0 <= c < columns):
                raise IndexError(
                    f"Pattern '{self.name}' cell ({r}, {c}) out of bounds for {columns}x{rows} grid"
                )
            cells[r, c] = 1
        return cells

    def center_offsets(self, columns: int, rows: int) -> Tuple[int, int]:
        """Offsets that center the normalized pattern on a grid.

        Returns:
            Tuple of (row_offset, col_offset)
        """
        height, width = self.get_size()
        return ((rows - height) // 2, (columns - width) // 2)


def default_pattern(columns: int, rows: int) -> np.ndarray:
    """Provider for the fixed demo scatter shown at startup.

    Raises:
        IndexError: If the grid is smaller than 32 columns x 28 rows
    """
    return Pattern("Demo", DEMO_CELLS).place(columns, rows)


def random_fill(probability: float, seed: Optional[int] = None) -> Provider:
    """Create a provider that randomly populates the grid.

    Args:
        probability: Chance each cell will be alive (0.0 to 1.0)
        seed: Optional seed for reproducible fills

    Raises:
        ValueError: If probability is outside [0, 1]
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

    def provider(columns: int, rows: int) -> np.ndarray:
        rng = np.random.default_rng(seed)
        return (rng.random((rows, columns)) < probability).astype(np.int8)

    return provider


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
            )
        )

        self.add_pattern(
            Pattern(
                "Loaf",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)],
                "Loaf still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
            )
        )

        pulsar_arms = [2, 3, 4, 8, 9, 10]
        pulsar_bars = [0, 5, 7, 12]
        self.add_pattern(
            Pattern(
                "Pulsar",
                [(row, col) for row in pulsar_bars for col in pulsar_arms]
                + [(row, col) for row in pulsar_arms for col in pulsar_bars],
                "Period-3 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, period-4",
            )
        )

        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Diehard",
                [(0, 6), (1, 0), (1, 1), (2, 1), (2, 5), (2, 6), (2, 7)],
                "Dies after exactly 130 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "Acorn",
                [(0, 1), (1, 3), (2, 0), (2, 1), (2, 4), (2, 5), (2, 6)],
                "Takes 5206 generations to stabilize",
            )
        )

        # Startup scatter, placed at absolute positions
        self.add_pattern(Pattern("Demo", DEMO_CELLS, "Mixed scatter shown at startup (needs 32x28)"))

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
            "Spaceships": ["Glider", "Lightweight Spaceship"],
            "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
            "Demo": ["Demo"],
            "Custom": [],
        }

        # Add any custom patterns to the Custom category
        all_builtin = set()
        for cat_patterns in categories.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}

    def get_provider(
        self, name: str, row_offset: Optional[int] = None, col_offset: Optional[int] = None
    ) -> Provider:
        """Get an initial pattern provider for a named pattern.

        The Demo pattern keeps its absolute positions, shifted by any offset
        given. Other patterns are normalized and centered along any axis
        whose offset is omitted.

        Raises:
            KeyError: If the pattern doesn't exist
        """
        pattern = self.get_pattern(name)
        if pattern is None:
            raise KeyError(f"Pattern '{name}' not found")

        if name == "Demo":
            if row_offset is None and col_offset is None:
                return default_pattern

            def shifted_demo(columns: int, rows: int) -> np.ndarray:
                return pattern.place(columns, rows, row_offset or 0, col_offset or 0)

            return shifted_demo

        normalized = pattern.normalize()

        def provider(columns: int, rows: int) -> np.ndarray:
            center_row, center_col = normalized.center_offsets(columns, rows)
            r = center_row if row_offset is None else row_offset
            c = center_col if col_offset is None else col_offset
            return normalized.place(columns, rows, r, c)

        return provider
