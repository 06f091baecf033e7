"""
Maze codec for Labyrinth.

Serializes mazes to JSON-ready dicts and ASCII art, and parses dicts back
into validated Grid objects.

Dict format:
    {
        "rows": 2,
        "cols": 2,
        "cells": [
            [{"x": 0, "y": 0, "walls": {"top": true, "right": false, ...}}, ...],
            ...
        ]
    }

ASCII format (2x2 example):
    +--+--+
    |@    |
    +--+  +
    |   E |
    +--+--+
"""

from typing import Any, Iterable, Optional

from .grid import (
    Direction,
    Grid,
    InvalidDimensionsError,
    Position,
    Walls,
    check_dimensions,
)


class MazeParseError(Exception):
    """Exception raised when maze data cannot be parsed."""

    pass


class MazeValidationError(Exception):
    """Exception raised when parsed maze data breaks wall consistency."""

    pass


WALL_NAMES = ("top", "right", "bottom", "left")


def maze_to_dict(maze: Grid) -> dict:
    """Convert a maze to a JSON-ready dictionary."""
    return {
        "rows": maze.rows,
        "cols": maze.cols,
        "cells": [[cell.to_dict() for cell in row] for row in maze.cells],
    }


def _parse_walls(raw: Any, x: int, y: int) -> Walls:
    if not isinstance(raw, dict):
        raise MazeParseError(f"Cell ({x}, {y}) has no walls mapping")

    flags = {}
    for name in WALL_NAMES:
        if name not in raw:
            raise MazeParseError(f"Cell ({x}, {y}) is missing the '{name}' wall")
        if not isinstance(raw[name], bool):
            raise MazeParseError(
                f"Cell ({x}, {y}) wall '{name}' must be a boolean, "
                f"got {type(raw[name]).__name__}"
            )
        flags[name] = raw[name]
    return Walls(**flags)


def parse_maze_dict(data: Any) -> Grid:
    """
    Parse a maze dictionary and validate it.

    Args:
        data: Dictionary in the format produced by maze_to_dict().

    Returns:
        Grid with the parsed wall layout.

    Raises:
        MazeParseError: If the structure is malformed.
        MazeValidationError: If walls are asymmetric or the border is open.
    """
    if not isinstance(data, dict):
        raise MazeParseError("Maze data must be an object")

    for key in ("rows", "cols", "cells"):
        if key not in data:
            raise MazeParseError(f"Maze data is missing '{key}'")

    try:
        check_dimensions(data["rows"], data["cols"])
    except InvalidDimensionsError as e:
        raise MazeParseError(str(e)) from e

    # Shape is checked against the payload before any cells are allocated
    rows = data["cells"]
    if not isinstance(rows, list) or len(rows) != data["rows"]:
        raise MazeParseError(f"Expected {data['rows']} rows of cells")

    for y, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != data["cols"]:
            raise MazeParseError(f"Row {y} must contain {data['cols']} cells")

    grid = Grid(data["rows"], data["cols"])
    for y, row in enumerate(rows):
        for x, raw_cell in enumerate(row):
            if not isinstance(raw_cell, dict):
                raise MazeParseError(f"Cell ({x}, {y}) must be an object")
            if raw_cell.get("x", x) != x or raw_cell.get("y", y) != y:
                raise MazeParseError(
                    f"Cell at row {y}, column {x} claims coordinates "
                    f"({raw_cell.get('x')}, {raw_cell.get('y')})"
                )
            grid.cells[y][x].walls = _parse_walls(raw_cell.get("walls"), x, y)

    validate_walls(grid)
    return grid


def validate_walls(grid: Grid) -> None:
    """
    Check wall consistency of a grid.

    Raises:
        MazeValidationError: If a passage is open on one side only, or a
            wall on the outer border is open.
    """
    for cell in grid:
        for direction in Direction:
            other = grid.neighbor(cell, direction)
            if other is None:
                if cell.is_open(direction):
                    raise MazeValidationError(
                        f"Cell ({cell.x}, {cell.y}) is open to the "
                        f"{direction.value} on the maze border"
                    )
                continue
            if cell.is_open(direction) != other.is_open(direction.opposite):
                raise MazeValidationError(
                    f"Asymmetric wall between ({cell.x}, {cell.y}) and "
                    f"({other.x}, {other.y})"
                )


def validate_maze_dict(data: Any) -> tuple[bool, Optional[str]]:
    """
    Validate maze data without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_dict(data)
        return True, None
    except (MazeParseError, MazeValidationError) as e:
        return False, str(e)


def render_ascii(
    maze: Grid,
    path: Optional[Iterable[tuple[int, int]]] = None,
    player: Optional[tuple[int, int]] = None,
    goal: Optional[tuple[int, int]] = None,
) -> str:
    """
    Draw a maze as ASCII art.

    Args:
        maze: Maze to draw.
        path: Cells to mark with '.'.
        player: Cell to mark with '@'.
        goal: Cell to mark with 'E'.

    Returns:
        Multi-line string, two text lines per maze row plus the bottom edge.
    """
    on_path = {Position(*p) for p in path} if path else set()
    player = Position(*player) if player is not None else None
    goal = Position(*goal) if goal is not None else None

    def marker(pos: Position) -> str:
        if pos == player:
            return "@"
        if pos == goal:
            return "E"
        if pos in on_path:
            return "."
        return " "

    lines = []
    for row in maze.cells:
        top = "+"
        middle = ""
        for cell in row:
            top += ("--" if cell.walls.top else "  ") + "+"
            middle += "|" if cell.walls.left else " "
            middle += marker(cell.position) + " "
        last = row[-1]
        middle += "|" if last.walls.right else " "
        lines.append(top)
        lines.append(middle)

    bottom = "+"
    for cell in maze.cells[-1]:
        bottom += ("--" if cell.walls.bottom else "  ") + "+"
    lines.append(bottom)

    return "\n".join(lines)
