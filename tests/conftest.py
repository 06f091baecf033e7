"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from labyrinth.main import app
from labyrinth.api.routes import game, maze
from labyrinth.core import Direction, Grid


@pytest_asyncio.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    # Fresh rate-limit counters for every test
    maze.limiter.reset()
    game.limiter.reset()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


def open_all_walls(grid: Grid) -> Grid:
    """Open every interior wall of a grid (a mesh, not a perfect maze)."""
    for cell in grid:
        for direction in (Direction.RIGHT, Direction.DOWN):
            other = grid.neighbor(cell, direction)
            if other is not None:
                grid.remove_walls(cell, other)
    return grid


@pytest.fixture
def open_grid() -> Grid:
    """A 3x3 grid with every interior wall removed."""
    return open_all_walls(Grid(3, 3))


@pytest.fixture
def corridor() -> Grid:
    """A 1x4 grid carved into a straight corridor."""
    grid = Grid(1, 4)
    for x in range(3):
        grid.remove_walls(grid.cell(x, 0), grid.cell(x + 1, 0))
    return grid
