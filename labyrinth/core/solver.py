"""
Shortest-path solver for generated mazes.

Breadth-first search over the open-passage graph. Neighbours are always
enumerated in the same compass order (up, right, down, left), so the same
maze and endpoints always produce the same path even when several
shortest routes exist (only possible on hand-built grids with cycles).
"""

from collections import deque
from typing import Optional

from .grid import Direction, Grid, Position


def _as_position(maze: Grid, value) -> Optional[Position]:
    """Coerce an (x, y) pair to an in-bounds Position, or None."""
    try:
        x, y = value
    except (TypeError, ValueError):
        return None
    if not (isinstance(x, int) and isinstance(y, int)):
        return None
    if not maze.in_bounds(x, y):
        return None
    return Position(x, y)


def solve_maze(
    maze: Grid,
    start: tuple[int, int],
    end: tuple[int, int],
) -> list[Position]:
    """
    Find the shortest path between two cells, respecting walls.

    Args:
        maze: Maze to search. Not modified.
        start: (x, y) of the first cell.
        end: (x, y) of the target cell.

    Returns:
        Positions from start to end inclusive, or an empty list when either
        endpoint is outside the maze or the end cannot be reached.
    """
    start = _as_position(maze, start)
    end = _as_position(maze, end)
    if start is None or end is None:
        return []

    queue = deque([(maze.cell(*start), [start])])
    visited = {start}

    while queue:
        cell, path = queue.popleft()

        if cell.position == end:
            return path

        for neighbor in maze.open_neighbors(cell):
            pos = neighbor.position
            if pos in visited:
                continue
            visited.add(pos)
            queue.append((neighbor, path + [pos]))

    return []  # No path found


def path_length(path: list[Position]) -> int:
    """Number of moves along a path (0 for an empty or single-cell path)."""
    return max(len(path) - 1, 0)


def is_valid_path(maze: Grid, path: list[tuple[int, int]]) -> bool:
    """
    Check that every step of a path is adjacent and not blocked by a wall.

    An empty path is not valid; a single in-bounds cell is.
    """
    if not path:
        return False

    for x, y in path:
        if not maze.in_bounds(x, y):
            return False

    for a, b in zip(path, path[1:]):
        direction = Direction.between(a, b)
        if direction is None:
            return False
        if not maze.cell(*a).is_open(direction):
            return False

    return True
