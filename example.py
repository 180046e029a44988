#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import Grid, GameOfLife, PatternLibrary


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    library = PatternLibrary()

    # Create a 20x20 grid with a glider near the top-left corner
    grid = Grid.from_provider(20, 20, library.get_provider("Glider", row_offset=1, col_offset=1))
    game = GameOfLife(grid)

    print("Initial state:")
    print(grid)
    print(f"Population: {game.population}")
    print()

    # Run simulation for 10 generations
    for _ in range(10):
        game.step()
        print(f"Generation {game.generation}:")
        print(grid)
        print(f"Population: {game.population}")
        print()

    # Show statistics
    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
