"""
Maze generation using the recursive backtracker.

The backtracker is a randomized depth-first traversal that keeps its own
stack instead of recursing, so a 40x40 grid never approaches the
interpreter's recursion limit. Every cell is visited exactly once and every
carved wall becomes a tree edge, so the result is a perfect maze: exactly
rows * cols - 1 passages and one simple path between any two cells.
"""

import logging
import random
from typing import Optional, Protocol, Sequence, TypeVar

from .grid import Cell, Grid

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can pick an element uniformly (random.Random does)."""

    def choice(self, seq: Sequence[T]) -> T: ...


def _unvisited_neighbors(grid: Grid, cell: Cell) -> list[Cell]:
    return [other for _, other in grid.neighbors(cell) if not other.visited]


def generate_maze(
    rows: int,
    cols: int,
    rng: Optional[RandomSource] = None,
) -> Grid:
    """
    Carve a perfect maze over a rows x cols grid.

    Args:
        rows: Number of rows. Must be positive.
        cols: Number of columns. Must be positive.
        rng: Random source used to pick among unvisited neighbours.
            Defaults to a fresh, unseeded random.Random().

    Returns:
        The carved Grid. Nothing else is mutated.

    Raises:
        InvalidDimensionsError: If rows or cols is not a positive integer.
    """
    if rng is None:
        rng = random.Random()

    grid = Grid(rows, cols)
    stack: list[Cell] = []

    current = grid.cell(0, 0)
    current.visited = True

    while True:
        neighbors = _unvisited_neighbors(grid, current)

        if neighbors:
            chosen = rng.choice(neighbors)
            stack.append(current)
            grid.remove_walls(current, chosen)
            current = chosen
            current.visited = True
        elif stack:
            # Backtrack, walls untouched
            current = stack.pop()
        else:
            break

    logger.debug(
        "Generated %dx%d maze with %d passages", rows, cols, grid.passage_count()
    )
    return grid


def generate_seeded(rows: int, cols: int, seed: int) -> Grid:
    """Generate the maze identified by a seed. Same seed, same maze."""
    return generate_maze(rows, cols, rng=random.Random(seed))
