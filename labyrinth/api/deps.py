"""API dependencies for dependency injection."""

from typing import Annotated, Any

from fastapi import Depends, HTTPException, status

from labyrinth.config import Settings, get_settings
from labyrinth.core import Grid, generate_seeded


def check_grid_size(rows: int, cols: int, settings: Settings) -> None:
    """Reject grids larger than the configured cap."""
    if rows > settings.max_grid_size or cols > settings.max_grid_size:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=(
                f"Maze size {rows}x{cols} exceeds the maximum of "
                f"{settings.max_grid_size}x{settings.max_grid_size}"
            ),
        )


def check_maze_dict_size(data: dict[str, Any], settings: Settings) -> None:
    """Apply the size cap to a client-supplied maze dict before it is parsed.

    Non-integer dimensions are left for the codec to reject.
    """
    rows, cols = data.get("rows"), data.get("cols")
    if isinstance(rows, int) and isinstance(cols, int):
        check_grid_size(rows, cols, settings)


def load_seeded_maze(rows: int, cols: int, seed: int, settings: Settings) -> Grid:
    """Regenerate the maze a client refers to by (rows, cols, seed)."""
    check_grid_size(rows, cols, settings)
    return generate_seeded(rows, cols, seed)


def position_in_bounds(maze: Grid, x: int, y: int, what: str = "Position") -> None:
    """Reject coordinates outside the maze."""
    if not maze.in_bounds(x, y):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{what} ({x}, {y}) is outside the {maze.cols}x{maze.rows} maze",
        )


# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
