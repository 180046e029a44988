"""Command-line interface for the finite Game of Life."""

import argparse
import logging
import sys
import time
from typing import Any, Dict, Optional, Tuple

from ..core.grid import Grid
from ..core.game import GameOfLife
from ..core.patterns import PatternLibrary, random_fill


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        width: int,
        height: int,
        generations: int,
        pattern: Optional[str] = None,
        pattern_row: Optional[int] = None,
        pattern_col: Optional[int] = None,
        population_rate: float = 0.0,
        seed: Optional[int] = None,
        delay: float = 0.0,
        verbose: bool = False,
        show_grid: bool = False,
    ) -> Tuple[int, Dict[str, Any]]:
        """Run a Game of Life simulation for a fixed number of generations.

        Args:
            width: Grid width
            height: Grid height
            generations: Number of generations to run
            pattern: Optional pattern name to load
            pattern_row: Row offset for pattern placement (centered if None)
            pattern_col: Column offset for pattern placement (centered if None)
            population_rate: Random population rate used when no pattern is given
            seed: Random seed for reproducible fills
            delay: Seconds to wait between generations
            verbose: Print progress updates
            show_grid: Print every generation

        Returns:
            Tuple of (final_generation, statistics)

        Raises:
            KeyError: If the pattern doesn't exist
            IndexError: If the pattern doesn't fit on the grid
        """
        if pattern:
            if verbose:
                print(f"Loading pattern '{pattern}'")
            provider = self.pattern_library.get_provider(pattern, pattern_row, pattern_col)
        else:
            if verbose:
                print(f"Generating random population (rate: {population_rate:.2%})")
            provider = random_fill(population_rate, seed)

        grid = Grid.from_provider(width, height, provider)
        game = GameOfLife(grid)
        initial_population = game.population

        if verbose:
            print(f"Initialized {width}x{height} grid with {initial_population} live cells")

        if show_grid:
            print("\nGeneration 0:")
            print(self._format_grid(game.grid))

        start_time = time.time()

        for _ in range(generations):
            if delay > 0:
                time.sleep(delay)
            game.step()
            if show_grid:
                print(f"\nGeneration {game.generation}:")
                print(self._format_grid(game.grid))

        duration = time.time() - start_time

        stats = game.get_statistics()
        stats["duration_seconds"] = duration
        stats["generations_per_second"] = game.generation / duration if duration > 0 else 0
        stats["initial_population"] = initial_population

        return game.generation, stats

    def _format_grid(self, grid: Grid, max_size: int = 80) -> str:
        """Format grid for display, truncating if too large.

        Args:
            grid: Grid to format
            max_size: Maximum dimension to display

        Returns:
            Formatted grid string
        """
        if grid.width > max_size or grid.height > max_size:
            return f"Grid too large to display ({grid.width}x{grid.height})"

        return str(grid)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    rows, columns = pattern.get_size()
                    print(f"  {pattern_name}: {columns}x{rows}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run finite Game of Life simulations from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the startup demo for 20 generations, printing every frame
  lifegrid-cli --pattern Demo -n 20 --show-grid

  # Watch a blinker at one frame per second
  lifegrid-cli -W 10 -H 10 --pattern Blinker -n 6 -g --delay 1

  # Random 40x30 grid with 25% population, reproducible
  lifegrid-cli --population 0.25 --seed 7 -n 100

  # List available patterns
  lifegrid-cli --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=40, help="Grid width (default: 40)")

    parser.add_argument("-H", "--height", type=int, default=30, help="Grid height (default: 30)")

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.2,
        help="Initial random population rate 0.0-1.0 when no pattern is given (default: 0.2)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible populations",
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern instead of random population",
    )

    parser.add_argument(
        "--pattern-row",
        type=int,
        help="Row offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--pattern-col",
        type=int,
        help="Column offset for pattern placement (default: centered)",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to simulate (default: 10)",
    )

    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to wait between generations (default: 0)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display every generation (small grids only)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def print_results(final_generation: int, stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {final_generation} generations")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Population change rate: {stats['population_change_rate']:.2f}")
        if "duration_seconds" in stats:
            print(f"  Duration: {stats['duration_seconds']:.3f} seconds")

        if stats["bounding_box"]:
            bbox = stats["bounding_box"]
            bbox_size = stats["bounding_box_size"]
            print(
                f"  Bounding box: rows {bbox[0]}-{bbox[2]}, cols {bbox[1]}-{bbox[3]} "
                f"[{bbox_size[0]}x{bbox_size[1]}]"
            )
    else:
        print(
            "Population: {} -> {}, Duration: {:.3f}s".format(
                stats["initial_population"], stats["population"], stats.get("duration_seconds", 0)
            )
        )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.pattern_row is not None and args.pattern_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if args.pattern_col is not None and args.pattern_col < 0:
        errors.append("Pattern column offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1

    try:
        final_generation, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            generations=args.generations,
            pattern=args.pattern,
            pattern_row=args.pattern_row,
            pattern_col=args.pattern_col,
            population_rate=args.population,
            seed=args.seed,
            delay=args.delay,
            verbose=args.verbose,
            show_grid=args.show_grid,
        )

        print_results(final_generation, stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
