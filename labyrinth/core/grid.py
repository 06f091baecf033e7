"""
Labyrinth Grid Model

Rectangular grid of cells used by the generator and the solver.

Each cell carries four wall flags (top, right, bottom, left) and a
visited flag used while carving. Walls between two neighbouring cells
are only ever removed together, through Grid.remove_walls().

Coordinates:
    x = column, 0 at the left
    y = row, 0 at the top
    grid.cells[y][x] is the cell at (x, y)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, NamedTuple, Optional


class InvalidDimensionsError(ValueError):
    """Exception raised when a grid is requested with bad dimensions."""

    pass


class Position(NamedTuple):
    """2D position in the maze."""

    x: int
    y: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


class Direction(Enum):
    """Compass directions, in the fixed order used for neighbour enumeration."""

    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.RIGHT: (1, 0),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
        }
        return deltas[self]

    @property
    def wall(self) -> str:
        """Name of the wall flag facing this direction."""
        walls = {
            Direction.UP: "top",
            Direction.RIGHT: "right",
            Direction.DOWN: "bottom",
            Direction.LEFT: "left",
        }
        return walls[self]

    @property
    def opposite(self) -> "Direction":
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.RIGHT: Direction.LEFT,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
        }
        return opposites[self]

    @classmethod
    def between(cls, a: Position, b: Position) -> Optional["Direction"]:
        """Direction leading from a to b, or None if they are not adjacent."""
        step = (b[0] - a[0], b[1] - a[1])
        for direction in cls:
            if direction.delta == step:
                return direction
        return None


@dataclass
class Walls:
    """Wall flags of a single cell. True means the wall is present."""

    top: bool = True
    right: bool = True
    bottom: bool = True
    left: bool = True

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "top": self.top,
            "right": self.right,
            "bottom": self.bottom,
            "left": self.left,
        }


@dataclass
class Cell:
    """A single maze cell."""

    x: int
    y: int
    visited: bool = False
    walls: Walls = field(default_factory=Walls)

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def is_open(self, direction: Direction) -> bool:
        """Return True if there is no wall on the given side."""
        return not getattr(self.walls, direction.wall)

    def to_dict(self) -> dict:
        """Convert to dictionary (the visited flag is generation-only)."""
        return {"x": self.x, "y": self.y, "walls": self.walls.to_dict()}


def check_dimensions(rows: Any, cols: Any) -> None:
    """Raise InvalidDimensionsError unless rows and cols are positive ints."""
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidDimensionsError(
                f"{name} must be an integer, got {type(value).__name__}"
            )
        if value <= 0:
            raise InvalidDimensionsError(f"{name} must be positive, got {value}")


class Grid:
    """
    Fixed-size rectangular grid of cells.

    Example usage:
        grid = Grid(rows=3, cols=4)
        cell = grid.cell(0, 0)
        right = grid.neighbor(cell, Direction.RIGHT)
        grid.remove_walls(cell, right)
        assert cell.is_open(Direction.RIGHT)
    """

    def __init__(self, rows: int, cols: int):
        """
        Build a grid with every wall present and nothing visited.

        Args:
            rows: Number of rows (grid height). Must be positive.
            cols: Number of columns (grid width). Must be positive.

        Raises:
            InvalidDimensionsError: If rows or cols is not a positive integer.
        """
        check_dimensions(rows, cols)

        self.rows = rows
        self.cols = cols
        self.cells: list[list[Cell]] = [
            [Cell(x, y) for x in range(cols)] for y in range(rows)
        ]

    @property
    def width(self) -> int:
        return self.cols

    @property
    def height(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def cell(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y). Raises IndexError when out of bounds."""
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinate ({x}, {y}) out of bounds")
        return self.cells[y][x]

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        """
        Get the adjacent cell in a direction, ignoring walls.

        Returns:
            The neighbouring cell, or None if it would fall outside the grid.
        """
        dx, dy = direction.delta
        nx, ny = cell.x + dx, cell.y + dy
        if not self.in_bounds(nx, ny):
            return None
        return self.cells[ny][nx]

    def neighbors(self, cell: Cell) -> Iterator[tuple[Direction, Cell]]:
        """Yield (direction, cell) for every in-bounds neighbour, in compass order."""
        for direction in Direction:
            other = self.neighbor(cell, direction)
            if other is not None:
                yield direction, other

    def open_neighbors(self, cell: Cell) -> Iterator[Cell]:
        """Yield neighbours reachable through an open wall, in compass order."""
        for direction, other in self.neighbors(cell):
            if cell.is_open(direction):
                yield other

    def remove_walls(self, current: Cell, other: Cell) -> None:
        """
        Open the passage between two adjacent cells.

        Both sides are cleared together so the wall flags stay symmetric.

        Raises:
            ValueError: If the cells are not grid-adjacent.
        """
        direction = Direction.between(current.position, other.position)
        if direction is None:
            raise ValueError(
                f"Cells ({current.x}, {current.y}) and ({other.x}, {other.y}) "
                "are not adjacent"
            )
        setattr(current.walls, direction.wall, False)
        setattr(other.walls, direction.opposite.wall, False)

    def passage_count(self) -> int:
        """Number of open passages between cells (each counted once)."""
        count = 0
        for cell in self:
            # Right and bottom only, so each passage is seen from one side
            if cell.x < self.cols - 1 and cell.is_open(Direction.RIGHT):
                count += 1
            if cell.y < self.rows - 1 and cell.is_open(Direction.DOWN):
                count += 1
        return count


def create_grid(rows: int, cols: int) -> Grid:
    """Create a grid with all walls set. See Grid.__init__."""
    return Grid(rows, cols)
