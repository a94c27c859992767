"""snek — deterministic snake game simulation core."""

from snek.board import Board
from snek.config import BoardConfig
from snek.food import BoardFullError, FoodSpawner
from snek.grid import CellType, GridCoord
from snek.session import GameSession, Phase, Screen, Signal
from snek.snake import Direction, Snake

__all__ = [
    "Board",
    "BoardConfig",
    "BoardFullError",
    "CellType",
    "Direction",
    "FoodSpawner",
    "GameSession",
    "GridCoord",
    "Phase",
    "Screen",
    "Signal",
    "Snake",
]
