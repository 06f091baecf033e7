"""Tests for the grid model."""

import pytest

from labyrinth.core import (
    Direction,
    Grid,
    InvalidDimensionsError,
    Position,
    check_dimensions,
    create_grid,
)


class TestCreateGrid:
    """Tests for grid construction."""

    def test_dimensions(self):
        """Rows are the height, cols the width."""
        grid = create_grid(3, 5)
        assert grid.rows == 3
        assert grid.cols == 5
        assert len(grid.cells) == 3
        assert all(len(row) == 5 for row in grid.cells)
        assert grid.width == 5
        assert grid.height == 3

    def test_cells_match_their_index(self):
        """Every cell's (x, y) matches cells[y][x]."""
        grid = Grid(4, 3)
        for y, row in enumerate(grid.cells):
            for x, cell in enumerate(row):
                assert (cell.x, cell.y) == (x, y)

    def test_all_walls_set_and_unvisited(self):
        """A fresh grid has every wall and nothing visited."""
        grid = Grid(2, 2)
        for cell in grid:
            assert not cell.visited
            for direction in Direction:
                assert not cell.is_open(direction)
        assert grid.passage_count() == 0

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3), (3, -2)])
    def test_non_positive_dimensions_raise(self, rows, cols):
        """Non-positive sizes fail fast."""
        with pytest.raises(InvalidDimensionsError):
            Grid(rows, cols)

    @pytest.mark.parametrize("rows,cols", [(2.5, 3), ("3", 3), (True, 3)])
    def test_non_integer_dimensions_raise(self, rows, cols):
        """Only real integers are accepted."""
        with pytest.raises(InvalidDimensionsError):
            Grid(rows, cols)

    def test_invalid_dimensions_is_value_error(self):
        with pytest.raises(ValueError):
            Grid(0, 0)

    def test_check_dimensions_allocates_nothing(self):
        """Huge but valid sizes pass the check without building cells."""
        check_dimensions(10**9, 10**9)
        with pytest.raises(InvalidDimensionsError, match="rows must be positive"):
            check_dimensions(0, 10**9)


class TestNeighbor:
    """Tests for geometric neighbour lookup."""

    def test_neighbor_inside(self):
        grid = Grid(3, 3)
        center = grid.cell(1, 1)
        assert grid.neighbor(center, Direction.UP).position == (1, 0)
        assert grid.neighbor(center, Direction.RIGHT).position == (2, 1)
        assert grid.neighbor(center, Direction.DOWN).position == (1, 2)
        assert grid.neighbor(center, Direction.LEFT).position == (0, 1)

    def test_neighbor_outside_is_none(self):
        grid = Grid(3, 3)
        corner = grid.cell(0, 0)
        assert grid.neighbor(corner, Direction.UP) is None
        assert grid.neighbor(corner, Direction.LEFT) is None
        far = grid.cell(2, 2)
        assert grid.neighbor(far, Direction.DOWN) is None
        assert grid.neighbor(far, Direction.RIGHT) is None

    def test_neighbor_ignores_walls(self):
        """Walls are all present, yet the neighbour is still returned."""
        grid = Grid(2, 2)
        assert grid.neighbor(grid.cell(0, 0), Direction.RIGHT) is grid.cell(1, 0)

    def test_neighbors_in_compass_order(self):
        grid = Grid(3, 3)
        directions = [d for d, _ in grid.neighbors(grid.cell(1, 1))]
        assert directions == [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]

    def test_cell_out_of_bounds_raises(self):
        grid = Grid(2, 2)
        with pytest.raises(IndexError):
            grid.cell(2, 0)
        assert grid.in_bounds(1, 1)
        assert not grid.in_bounds(-1, 0)


class TestRemoveWalls:
    """Tests for opening passages."""

    def test_remove_walls_opens_both_sides(self):
        grid = Grid(2, 2)
        a, b = grid.cell(0, 0), grid.cell(0, 1)
        grid.remove_walls(a, b)

        assert a.is_open(Direction.DOWN)
        assert b.is_open(Direction.UP)
        assert not a.is_open(Direction.RIGHT)
        assert grid.passage_count() == 1

    def test_remove_walls_either_order(self):
        grid = Grid(1, 2)
        left, right = grid.cell(0, 0), grid.cell(1, 0)
        grid.remove_walls(right, left)
        assert left.walls.right is False
        assert right.walls.left is False

    def test_remove_walls_rejects_non_adjacent(self):
        grid = Grid(3, 3)
        with pytest.raises(ValueError, match="not adjacent"):
            grid.remove_walls(grid.cell(0, 0), grid.cell(1, 1))
        assert grid.passage_count() == 0

    def test_open_neighbors(self, open_grid):
        center = open_grid.cell(1, 1)
        assert [c.position for c in open_grid.open_neighbors(center)] == [
            (1, 0), (2, 1), (1, 2), (0, 1)
        ]


class TestDirection:
    """Tests for direction helpers."""

    def test_opposites(self):
        for direction in Direction:
            assert direction.opposite.opposite is direction
            dx, dy = direction.delta
            assert direction.opposite.delta == (-dx, -dy)

    def test_between(self):
        assert Direction.between(Position(1, 1), Position(1, 0)) is Direction.UP
        assert Direction.between((0, 0), (1, 0)) is Direction.RIGHT
        assert Direction.between((0, 0), (1, 1)) is None
        assert Direction.between((0, 0), (0, 0)) is None

    def test_position_equals_tuple(self):
        assert Position(2, 3) == (2, 3)
        assert Position(2, 3).to_dict() == {"x": 2, "y": 3}
