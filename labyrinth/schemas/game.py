"""Game schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field

from labyrinth.schemas.maze import MazePosition, SeededMazeRequest


class MoveRequest(SeededMazeRequest):
    """Schema for move request."""

    position: MazePosition
    direction: str = Field(..., pattern="^(up|right|down|left)$")


class MoveResponse(BaseModel):
    """Schema for move response."""

    status: str  # moved, blocked, completed
    position: MazePosition
    message: Optional[str] = None


class TraceRequest(SeededMazeRequest):
    """Schema for validating a drawn path, starting at the top-left cell."""

    positions: list[MazePosition] = Field(..., max_length=10000)


class TraceResponse(BaseModel):
    """Schema for trace validation response."""

    path: list[MazePosition]  # trace after applying every accepted step
    accepted: int
    rejected: Optional[MazePosition] = None  # first step that was refused
    complete: bool  # trace ends on the goal
