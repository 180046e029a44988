"""Tkinter GUI frontend for the finite Game of Life."""

import tkinter as tk
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple
import logging
import sys

import numpy as np

from ..core.grid import Grid
from ..core.game import GameOfLife
from ..core.patterns import Provider, default_pattern

logger = logging.getLogger(__name__)


@dataclass
class DisplayConfig:
    """Window and pacing settings for the GUI."""

    viewport_width: int = 800
    viewport_height: int = 600
    cell_size: int = 20
    interval_ms: int = 1000
    alive_color: str = "black"
    dead_color: str = "white"
    line_color: str = "lightgray"

    def __post_init__(self) -> None:
        for name in ("viewport_width", "viewport_height", "cell_size", "interval_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @property
    def columns(self) -> int:
        return self.viewport_width // self.cell_size

    @property
    def rows(self) -> int:
        return self.viewport_height // self.cell_size


def cell_rectangles(
    cells: np.ndarray, cell_size: int, alive_color: str, dead_color: str
) -> Iterator[Tuple[int, int, int, int, int, int, str]]:
    """Map every cell to a filled square.

    Yields:
        Tuples of (row, col, x1, y1, x2, y2, color)
    """
    rows, columns = cells.shape
    for row in range(rows):
        for col in range(columns):
            x1 = col * cell_size
            y1 = row * cell_size
            color = alive_color if cells[row, col] else dead_color
            yield (row, col, x1, y1, x1 + cell_size, y1 + cell_size, color)


def grid_line_positions(viewport_width: int, viewport_height: int, cell_size: int) -> Tuple[List[int], List[int]]:
    """Positions of the grid overlay lines.

    Returns:
        Tuple of (vertical line x positions, horizontal line y positions)
    """
    xs = list(range(0, viewport_width - cell_size + 1, cell_size))
    ys = list(range(0, viewport_height - cell_size + 1, cell_size))
    return xs, ys


class TkinterRenderer:
    """Draws a grid's cells and the grid-line overlay onto a canvas."""

    def __init__(self, canvas: tk.Canvas, config: DisplayConfig) -> None:
        self.canvas = canvas
        self.config = config
        self.cell_objects: Dict[Tuple[int, int], int] = {}

    def draw(self, grid: Grid) -> None:
        """Redraw all cells, then the grid lines on top."""
        self.canvas.delete("all")
        self.cell_objects.clear()

        cfg = self.config
        for row, col, x1, y1, x2, y2, color in cell_rectangles(
            grid.cells, cfg.cell_size, cfg.alive_color, cfg.dead_color
        ):
            self.cell_objects[(row, col)] = self.canvas.create_rectangle(x1, y1, x2, y2, fill=color, outline="")

        self.draw_grid_lines()

    def draw_grid_lines(self) -> None:
        cfg = self.config
        xs, ys = grid_line_positions(cfg.viewport_width, cfg.viewport_height, cfg.cell_size)
        for x in xs:
            self.canvas.create_line(x, 0, x, cfg.viewport_height, fill=cfg.line_color, tags="grid_line")
        for y in ys:
            self.canvas.create_line(0, y, cfg.viewport_width, y, fill=cfg.line_color, tags="grid_line")

    def draw_changes(self, grid: Grid) -> None:
        """Recolor only the cells that changed during the last step."""
        if not self.cell_objects:
            self.draw(grid)
            return

        for row, col in grid.get_changed_cells():
            color = self.config.alive_color if grid.cells[row, col] else self.config.dead_color
            self.canvas.itemconfig(self.cell_objects[(row, col)], fill=color)


class TkinterGameOfLifeGUI:
    """Tkinter window that steps the simulation on a fixed cadence."""

    def __init__(
        self,
        master: tk.Tk,
        config: Optional[DisplayConfig] = None,
        provider: Provider = default_pattern,
    ) -> None:
        """Initialize the GUI.

        Args:
            master: Root Tkinter window
            config: Display settings (defaults to an 800x600 window, 20px cells)
            provider: Initial pattern provider used to build generation 0
        """
        self.master = master
        self.config = config or DisplayConfig()
        self.master.title("Game of Life")

        self.cols = self.config.columns
        self.rows = self.config.rows

        self.game = GameOfLife(Grid.from_provider(self.cols, self.rows, provider))

        self.canvas = tk.Canvas(
            self.master,
            width=self.config.viewport_width,
            height=self.config.viewport_height,
            bg=self.config.dead_color,
            highlightthickness=0,
        )
        self.canvas.pack()
        self.renderer = TkinterRenderer(self.canvas, self.config)

        self.running = False
        self._after_id: Optional[str] = None

    @property
    def grid(self) -> Grid:
        return self.game.grid

    def start(self) -> None:
        """Show generation 0, then begin stepping after one interval."""
        self.renderer.draw(self.grid)
        self.running = True
        self._schedule()
        logger.debug("Started %dx%d simulation", self.cols, self.rows)

    def stop(self) -> None:
        """Stop the loop between iterations."""
        self.running = False
        if self._after_id is not None:
            self.master.after_cancel(self._after_id)
            self._after_id = None

    def tick(self) -> None:
        """One loop iteration: a simulation step followed by a render pass."""
        self._after_id = None
        if not self.running:
            return

        self.game.step()
        self.renderer.draw_changes(self.grid)
        self.master.title(f"Game of Life - generation {self.game.generation}")
        self._schedule()

    def _schedule(self) -> None:
        self._after_id = self.master.after(self.config.interval_ms, self.tick)


def main() -> None:
    """Main entry point for the Tkinter GUI."""
    root = tk.Tk()
    root.resizable(False, False)

    test_mode = "--test" in sys.argv

    app = TkinterGameOfLifeGUI(root)
    app.start()

    if test_mode:
        print("Running in test mode...")

        def auto_exit() -> None:
            print(f"Test completed. Ran {app.game.generation} generations.")
            app.stop()
            root.quit()
            root.destroy()

        root.after(3500, auto_exit)

    root.mainloop()


if __name__ == "__main__":
    main()
