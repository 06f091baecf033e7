"""Maze schemas for request/response validation."""

from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from labyrinth.core.game import MAX_SEED


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    x: int
    y: int


class WallsSchema(BaseModel):
    """Schema for the wall flags of a cell (True = wall present)."""

    top: bool
    right: bool
    bottom: bool
    left: bool


class CellSchema(BaseModel):
    """Schema for a single cell."""

    x: int
    y: int
    walls: WallsSchema


class DifficultyTier(BaseModel):
    """Schema for a difficulty tier."""

    name: str
    rows: int
    cols: int


class DifficultyListResponse(BaseModel):
    """Schema for the difficulty tier table."""

    difficulties: list[DifficultyTier]
    default: str


class MazeCreateRequest(BaseModel):
    """Schema for generating a maze.

    Either a difficulty tier or explicit rows/cols may be given; with
    neither, the configured default difficulty is used.
    """

    difficulty: Optional[str] = Field(
        None, pattern="^(easy|medium|hard|extreme)$"
    )
    rows: Optional[int] = Field(None, gt=0)
    cols: Optional[int] = Field(None, gt=0)
    seed: Optional[int] = Field(None, ge=0, lt=MAX_SEED)
    include_ascii: bool = False

    @model_validator(mode="after")
    def check_size(self) -> "MazeCreateRequest":
        if (self.rows is None) != (self.cols is None):
            raise ValueError("rows and cols must be given together")
        if self.difficulty is not None and self.rows is not None:
            raise ValueError("Give either a difficulty or rows/cols, not both")
        return self


class MazeResponse(BaseModel):
    """Schema for a generated maze."""

    seed: int
    rows: int
    cols: int
    start: MazePosition
    goal: MazePosition
    passages: int
    cells: list[list[CellSchema]]
    ascii: Optional[str] = None


class SeededMazeRequest(BaseModel):
    """Base schema for requests that regenerate a maze from its seed."""

    rows: int = Field(..., gt=0)
    cols: int = Field(..., gt=0)
    seed: int = Field(..., ge=0, lt=MAX_SEED)


class HintRequest(SeededMazeRequest):
    """Schema for a hint request. The goal defaults to the bottom-right cell."""

    position: MazePosition
    goal: Optional[MazePosition] = None


class SolveRequest(BaseModel):
    """Schema for solving a client-supplied maze."""

    maze: dict[str, Any]
    start: MazePosition
    end: MazePosition


class HintResponse(BaseModel):
    """Schema for a hint / solve response."""

    path: list[MazePosition]
    length: int  # number of moves, 0 when no path was found
    found: bool
