"""
Labyrinth Game Rules

Single-player game state layered on top of the generator and solver:

- Difficulty tiers (grid sizes)
- Player moves validated against walls
- Step counting and elapsed time
- Win detection (player reaches the bottom-right goal)
- Hints (shortest path from the player to the goal)
- Drawn-path tracing with one-step undo

The start is always the top-left cell and the goal the bottom-right cell.
"""

import logging
import math
import secrets
import time
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from .generator import generate_seeded
from .grid import Direction, Grid, Position
from .solver import solve_maze

logger = logging.getLogger(__name__)

DIFFICULTY_SIZES: dict[str, tuple[int, int]] = {
    "easy": (10, 10),
    "medium": (20, 20),
    "hard": (30, 30),
    "extreme": (40, 40),
}

MAX_SEED = 2**31


def new_seed() -> int:
    """Draw a fresh maze seed."""
    return secrets.randbelow(MAX_SEED)


def size_for(difficulty: str) -> tuple[int, int]:
    """
    Get (rows, cols) for a difficulty tier.

    Raises:
        ValueError: If the difficulty is not a known tier.
    """
    try:
        return DIFFICULTY_SIZES[difficulty.lower()]
    except KeyError:
        raise ValueError(
            f"Invalid difficulty '{difficulty}'. "
            f"Must be one of: {', '.join(DIFFICULTY_SIZES)}"
        ) from None


def goal_for(maze: Grid) -> Position:
    """The goal cell of a maze: bottom-right corner."""
    return Position(maze.cols - 1, maze.rows - 1)


def try_move(maze: Grid, position: tuple[int, int], direction: Direction) -> Optional[Position]:
    """
    Attempt a single step.

    Returns:
        The new position, or None if a wall (or the border) blocks the move.
    """
    cell = maze.cell(*position)
    if not cell.is_open(direction):
        return None
    neighbor = maze.neighbor(cell, direction)
    if neighbor is None:
        return None
    return neighbor.position


@dataclass
class MoveResult:
    """Result of a move action."""

    status: Literal["moved", "blocked", "completed", "finished"]
    position: Position
    steps: int
    message: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        result = {
            "status": self.status,
            "position": self.position.to_dict(),
            "steps": self.steps,
        }
        if self.message:
            result["message"] = self.message
        return result


class GameSession:
    """
    One playthrough of a generated maze.

    Example usage:
        game = GameSession.for_difficulty("easy", seed=42)
        result = game.move(Direction.RIGHT)
        hint = game.hint()  # shortest path from the player to the goal
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Start a new game.

        Args:
            rows: Maze height.
            cols: Maze width.
            seed: Maze seed. A fresh one is drawn when omitted.
            clock: Time source in seconds, injectable for tests.
        """
        self.rows = rows
        self.cols = cols
        self._clock = clock
        self._start_new_maze(seed)

    @classmethod
    def for_difficulty(
        cls,
        difficulty: str,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> "GameSession":
        """Start a game sized for a difficulty tier."""
        rows, cols = size_for(difficulty)
        return cls(rows, cols, seed=seed, clock=clock)

    def _start_new_maze(self, seed: Optional[int]) -> None:
        self.seed = new_seed() if seed is None else seed
        self.maze = generate_seeded(self.rows, self.cols, self.seed)
        self.player = Position(0, 0)
        self.goal = goal_for(self.maze)
        self.steps = 0
        self.status: Literal["playing", "won"] = "playing"
        self.started_at = self._clock()
        self.finished_at: Optional[float] = None

        logger.info(f"New {self.rows}x{self.cols} game (seed {self.seed})")

    def restart(self, seed: Optional[int] = None) -> None:
        """Replace the maze with a new one of the same size and reset counters."""
        self._start_new_maze(seed)

    def move(self, direction: Direction) -> MoveResult:
        """
        Move the player one cell. Blocked moves do not count as steps.

        Args:
            direction: Direction to move.

        Returns:
            MoveResult with the new state.
        """
        if self.status == "won":
            return MoveResult(
                status="finished",
                position=self.player,
                steps=self.steps,
                message="Game already won",
            )

        new_pos = try_move(self.maze, self.player, direction)
        if new_pos is None:
            return MoveResult(
                status="blocked",
                position=self.player,
                steps=self.steps,
                message=f"Cannot move {direction.value} - wall blocking",
            )

        self.player = new_pos
        self.steps += 1

        if new_pos == self.goal:
            self.status = "won"
            self.finished_at = self._clock()
            logger.info(
                f"Game won in {self.steps} steps, {self.elapsed_seconds()}s "
                f"(seed {self.seed})"
            )
            return MoveResult(
                status="completed",
                position=self.player,
                steps=self.steps,
                message="Congratulations! You escaped the maze!",
            )

        return MoveResult(status="moved", position=self.player, steps=self.steps)

    def hint(self) -> list[Position]:
        """Shortest path from the player's current cell to the goal."""
        return solve_maze(self.maze, self.player, self.goal)

    def elapsed_seconds(self) -> int:
        """Whole seconds since the game started; frozen once won."""
        end = self.finished_at if self.finished_at is not None else self._clock()
        return math.floor(end - self.started_at)


class PathTrace:
    """
    A path drawn by the player one cell at a time (click and drag).

    A new cell is accepted only if it is adjacent to the current head,
    reachable through an open wall and not already on the trace. Stepping
    back onto the cell just before the head undoes the last step.
    Unlike the solver, a trace never jumps and never revisits.
    """

    def __init__(self, maze: Grid, start: tuple[int, int]):
        start = Position(*start)
        if not maze.in_bounds(*start):
            raise ValueError(f"Trace start {tuple(start)} is outside the maze")
        self.maze = maze
        self.positions: list[Position] = [start]

    @property
    def head(self) -> Position:
        return self.positions[-1]

    def extend(self, position: tuple[int, int]) -> bool:
        """
        Try to add a cell to the trace.

        Returns:
            True if the cell was accepted (or undid the last step).
        """
        pos = Position(*position)

        if len(self.positions) >= 2 and pos == self.positions[-2]:
            self.positions.pop()
            return True

        if pos in self.positions or not self.maze.in_bounds(*pos):
            return False

        direction = Direction.between(self.head, pos)
        if direction is None:
            return False
        if not self.maze.cell(*self.head).is_open(direction):
            return False

        self.positions.append(pos)
        return True

    def reaches(self, goal: tuple[int, int]) -> bool:
        return self.head == Position(*goal)

    def __len__(self) -> int:
        return len(self.positions)


if __name__ == "__main__":
    # Quick demo: python -m labyrinth.core.game
    from .maze_parser import render_ascii

    game = GameSession.for_difficulty("easy", seed=7)
    print(f"Seed {game.seed}, goal {tuple(game.goal)}")

    hint = game.hint()
    print(f"Shortest path: {len(hint) - 1} moves")
    print(render_ascii(game.maze, path=hint, player=game.player, goal=game.goal))

    # Walk the hinted path
    for a, b in zip(hint, hint[1:]):
        result = game.move(Direction.between(a, b))
    print(f"Final: {result.to_dict()}")
