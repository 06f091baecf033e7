"""Maze routes for generating mazes and computing hints."""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from labyrinth.api.deps import AppSettings, check_maze_dict_size, load_seeded_maze
from labyrinth.config import get_settings
from labyrinth.core import (
    DIFFICULTY_SIZES,
    MazeParseError,
    MazeValidationError,
    Position,
    maze_to_dict,
    parse_maze_dict,
    path_length,
    render_ascii,
    solve_maze,
)
from labyrinth.core.game import goal_for, new_seed, size_for
from labyrinth.schemas.maze import (
    DifficultyListResponse,
    DifficultyTier,
    HintRequest,
    HintResponse,
    MazeCreateRequest,
    MazePosition,
    MazeResponse,
    SolveRequest,
)

logger = logging.getLogger(__name__)

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/maze", tags=["Mazes"])


def _hint_response(path: list[Position]) -> HintResponse:
    return HintResponse(
        path=[MazePosition(x=p.x, y=p.y) for p in path],
        length=path_length(path),
        found=bool(path),
    )


@router.get(
    "/difficulties",
    response_model=DifficultyListResponse,
)
async def list_difficulties(app_settings: AppSettings) -> DifficultyListResponse:
    """List the difficulty tiers and their grid sizes."""
    return DifficultyListResponse(
        difficulties=[
            DifficultyTier(name=name, rows=rows, cols=cols)
            for name, (rows, cols) in DIFFICULTY_SIZES.items()
        ],
        default=app_settings.default_difficulty,
    )


@router.post(
    "",
    response_model=MazeResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def create_maze(
    request: Request,
    maze_request: MazeCreateRequest,
    app_settings: AppSettings,
) -> MazeResponse:
    """Generate a new perfect maze.

    The returned seed identifies the maze: send it back with rows and cols
    to /v1/maze/hint or /v1/game/* and the same maze is rebuilt.
    """
    if maze_request.rows is not None:
        rows, cols = maze_request.rows, maze_request.cols
    else:
        rows, cols = size_for(maze_request.difficulty or app_settings.default_difficulty)

    seed = maze_request.seed if maze_request.seed is not None else new_seed()
    maze = load_seeded_maze(rows, cols, seed, app_settings)
    goal = goal_for(maze)

    logger.info(f"Generated {rows}x{cols} maze (seed {seed})")

    return MazeResponse(
        seed=seed,
        rows=rows,
        cols=cols,
        start=MazePosition(x=0, y=0),
        goal=MazePosition(x=goal.x, y=goal.y),
        passages=maze.passage_count(),
        cells=maze_to_dict(maze)["cells"],
        ascii=render_ascii(maze, player=(0, 0), goal=goal) if maze_request.include_ascii else None,
    )


@router.post(
    "/hint",
    response_model=HintResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def get_hint(
    request: Request,
    hint_request: HintRequest,
    app_settings: AppSettings,
) -> HintResponse:
    """Shortest path from a position to the goal of a seeded maze.

    Positions outside the maze yield an empty path rather than an error.
    """
    maze = load_seeded_maze(
        hint_request.rows, hint_request.cols, hint_request.seed, app_settings
    )
    start = (hint_request.position.x, hint_request.position.y)
    if hint_request.goal is not None:
        end = (hint_request.goal.x, hint_request.goal.y)
    else:
        end = goal_for(maze)

    path = solve_maze(maze, start, end)
    if not path:
        logger.warning(f"No path from {start} to {tuple(end)} (seed {hint_request.seed})")

    return _hint_response(path)


@router.post(
    "/solve",
    response_model=HintResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def solve(
    request: Request,
    solve_request: SolveRequest,
    app_settings: AppSettings,
) -> HintResponse:
    """Shortest path between two cells of a client-supplied maze."""
    check_maze_dict_size(solve_request.maze, app_settings)

    try:
        maze = parse_maze_dict(solve_request.maze)
    except (MazeParseError, MazeValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid maze: {e}",
        )

    path = solve_maze(
        maze,
        (solve_request.start.x, solve_request.start.y),
        (solve_request.end.x, solve_request.end.y),
    )
    return _hint_response(path)
