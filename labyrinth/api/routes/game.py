"""Game routes for validating player moves and drawn paths.

The server keeps no game state: each request names its maze by
(rows, cols, seed) and carries the player's position.
"""

from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from labyrinth.api.deps import AppSettings, load_seeded_maze, position_in_bounds
from labyrinth.config import get_settings
from labyrinth.core import Direction, PathTrace
from labyrinth.core.game import goal_for, try_move
from labyrinth.schemas.game import MoveRequest, MoveResponse, TraceRequest, TraceResponse
from labyrinth.schemas.maze import MazePosition

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/game", tags=["Game"])


@router.post(
    "/move",
    response_model=MoveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def move(
    request: Request,
    move_request: MoveRequest,
    app_settings: AppSettings,
) -> MoveResponse:
    """Apply one move from the given position.

    Blocked moves leave the position unchanged. Reaching the bottom-right
    cell reports "completed".
    """
    maze = load_seeded_maze(
        move_request.rows, move_request.cols, move_request.seed, app_settings
    )
    x, y = move_request.position.x, move_request.position.y
    position_in_bounds(maze, x, y)

    direction = Direction(move_request.direction)
    new_pos = try_move(maze, (x, y), direction)

    if new_pos is None:
        return MoveResponse(
            status="blocked",
            position=MazePosition(x=x, y=y),
            message=f"Cannot move {direction.value} - wall blocking",
        )

    if new_pos == goal_for(maze):
        return MoveResponse(
            status="completed",
            position=MazePosition(x=new_pos.x, y=new_pos.y),
            message="Congratulations! You escaped the maze!",
        )

    return MoveResponse(
        status="moved",
        position=MazePosition(x=new_pos.x, y=new_pos.y),
    )


@router.post(
    "/trace",
    response_model=TraceResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def trace(
    request: Request,
    trace_request: TraceRequest,
    app_settings: AppSettings,
) -> TraceResponse:
    """Replay a drawn path from the top-left cell.

    Steps are applied in order; stepping back onto the previous cell undoes
    the last step. Replay stops at the first refused step.
    """
    maze = load_seeded_maze(
        trace_request.rows, trace_request.cols, trace_request.seed, app_settings
    )
    path_trace = PathTrace(maze, (0, 0))

    accepted = 0
    rejected = None
    for step in trace_request.positions:
        if not path_trace.extend((step.x, step.y)):
            rejected = step
            break
        accepted += 1

    return TraceResponse(
        path=[MazePosition(x=p.x, y=p.y) for p in path_trace.positions],
        accepted=accepted,
        rejected=rejected,
        complete=path_trace.reaches(goal_for(maze)),
    )
