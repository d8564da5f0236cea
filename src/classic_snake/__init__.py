"""Classic Snake: wrap-around board simulation and pygame front end."""

from classic_snake.board import Board, CellType, Position, random_position
from classic_snake.clock import FixedRateGate
from classic_snake.config import GameConfig, Palette
from classic_snake.engine import EntropyUnavailableError, GameEngine
from classic_snake.snake import Direction, Snake, Touched

__all__ = [
    "Board",
    "CellType",
    "Direction",
    "EntropyUnavailableError",
    "FixedRateGate",
    "GameConfig",
    "GameEngine",
    "Palette",
    "Position",
    "Snake",
    "Touched",
    "random_position",
]
