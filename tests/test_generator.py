"""Tests for the recursive backtracker."""

import random

import pytest

from labyrinth.core import (
    Direction,
    Grid,
    InvalidDimensionsError,
    generate_maze,
    generate_seeded,
)


def open_edges(maze: Grid) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """Every open passage, each listed once."""
    edges = []
    for cell in maze:
        for direction in (Direction.RIGHT, Direction.DOWN):
            other = maze.neighbor(cell, direction)
            if other is not None and cell.is_open(direction):
                edges.append((cell.position, other.position))
    return edges


def reachable_from(maze: Grid, start: tuple[int, int]) -> set:
    """Flood fill over open passages (independent of the solver)."""
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for other in maze.open_neighbors(maze.cell(x, y)):
            if other.position not in seen:
                seen.add(other.position)
                stack.append(other.position)
    return seen


def has_cycle(maze: Grid) -> bool:
    """Union-find over open passages."""
    parent = {cell.position: cell.position for cell in maze}

    def find(p):
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    for a, b in open_edges(maze):
        ra, rb = find(a), find(b)
        if ra == rb:
            return True
        parent[ra] = rb
    return False


SIZES = [(1, 1), (1, 7), (6, 1), (2, 2), (3, 5), (10, 10), (17, 9)]


class TestSpanningTree:
    """The carved maze is a spanning tree over all cells."""

    @pytest.mark.parametrize("rows,cols", SIZES)
    @pytest.mark.parametrize("seed", [0, 1, 42])
    def test_passage_count(self, rows, cols, seed):
        maze = generate_seeded(rows, cols, seed)
        assert maze.passage_count() == rows * cols - 1
        assert len(open_edges(maze)) == rows * cols - 1

    @pytest.mark.parametrize("rows,cols", SIZES)
    @pytest.mark.parametrize("seed", [0, 7])
    def test_connected(self, rows, cols, seed):
        maze = generate_seeded(rows, cols, seed)
        assert len(reachable_from(maze, (0, 0))) == rows * cols

    @pytest.mark.parametrize("seed", range(5))
    def test_acyclic(self, seed):
        maze = generate_seeded(12, 8, seed)
        assert not has_cycle(maze)

    @pytest.mark.parametrize("seed", range(5))
    def test_wall_symmetry(self, seed):
        maze = generate_seeded(9, 11, seed)
        for cell in maze:
            for direction, other in maze.neighbors(cell):
                assert cell.is_open(direction) == other.is_open(direction.opposite)

    @pytest.mark.parametrize("seed", range(3))
    def test_border_stays_closed(self, seed):
        maze = generate_seeded(6, 6, seed)
        for cell in maze:
            for direction in Direction:
                if maze.neighbor(cell, direction) is None:
                    assert not cell.is_open(direction)

    def test_every_cell_visited(self):
        maze = generate_seeded(8, 8, 3)
        assert all(cell.visited for cell in maze)


class TestScenarios:
    """Concrete small grids."""

    @pytest.mark.parametrize("seed", range(20))
    def test_two_by_two_has_three_passages(self, seed):
        """Whatever the random choices, a 2x2 maze opens 3 of its 4 edges."""
        maze = generate_seeded(2, 2, seed)
        assert maze.passage_count() == 3
        assert len(reachable_from(maze, (0, 0))) == 4

    def test_one_by_one_keeps_all_walls(self):
        maze = generate_maze(1, 1)
        cell = maze.cell(0, 0)
        assert cell.walls.to_dict() == {
            "top": True, "right": True, "bottom": True, "left": True
        }
        assert maze.passage_count() == 0

    def test_extreme_size(self):
        """A 40x40 maze is carved with an explicit stack, no recursion."""
        maze = generate_seeded(40, 40, 11)
        assert maze.passage_count() == 1599
        assert len(reachable_from(maze, (0, 0))) == 1600


class TestRandomSource:
    """Generation is deterministic for a given random sequence."""

    def test_same_seed_same_maze(self):
        a = generate_seeded(10, 10, 1234)
        b = generate_seeded(10, 10, 1234)
        assert open_edges(a) == open_edges(b)

    def test_injected_rng(self):
        a = generate_maze(10, 10, rng=random.Random(5))
        b = generate_maze(10, 10, rng=random.Random(5))
        assert open_edges(a) == open_edges(b)

    def test_different_seeds_usually_differ(self):
        mazes = {tuple(open_edges(generate_seeded(10, 10, s))) for s in range(5)}
        assert len(mazes) > 1

    def test_first_choice_rng(self):
        """An rng that always picks the first candidate carves a fixed maze.

        From (0, 0) the first unvisited neighbour in compass order is to the
        right, so a 2x2 grid is carved right, down, left.
        """

        class FirstChoice:
            def choice(self, seq):
                return seq[0]

        maze = generate_maze(2, 2, rng=FirstChoice())
        assert set(open_edges(maze)) == {
            ((0, 0), (1, 0)),
            ((1, 0), (1, 1)),
            ((0, 1), (1, 1)),
        }
        assert not maze.cell(0, 0).is_open(Direction.DOWN)

    def test_does_not_mutate_previous_maze(self):
        first = generate_seeded(5, 5, 1)
        before = open_edges(first)
        generate_seeded(5, 5, 2)
        assert open_edges(first) == before

    def test_invalid_dimensions(self):
        with pytest.raises(InvalidDimensionsError):
            generate_maze(0, 3)
