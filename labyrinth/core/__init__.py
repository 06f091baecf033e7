# Core module
from .grid import (
    Cell,
    Direction,
    Grid,
    InvalidDimensionsError,
    Position,
    Walls,
    check_dimensions,
    create_grid,
)
from .generator import generate_maze, generate_seeded
from .solver import is_valid_path, path_length, solve_maze
from .maze_parser import (
    MazeParseError,
    MazeValidationError,
    maze_to_dict,
    parse_maze_dict,
    render_ascii,
    validate_maze_dict,
    validate_walls,
)
from .game import DIFFICULTY_SIZES, GameSession, MoveResult, PathTrace

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "InvalidDimensionsError",
    "Position",
    "Walls",
    "check_dimensions",
    "create_grid",
    "generate_maze",
    "generate_seeded",
    "solve_maze",
    "path_length",
    "is_valid_path",
    "MazeParseError",
    "MazeValidationError",
    "maze_to_dict",
    "parse_maze_dict",
    "render_ascii",
    "validate_maze_dict",
    "validate_walls",
    "DIFFICULTY_SIZES",
    "GameSession",
    "MoveResult",
    "PathTrace",
]
