"""Timed Snake core game engine."""

from timed_snake.config import GameConfig
from timed_snake.engine import GameEngine
from timed_snake.food import FoodItem, FoodManager
from timed_snake.grid import Grid
from timed_snake.movement import CollisionOutcome, MoveResult
from timed_snake.scheduler import TickScheduler
from timed_snake.session import Phase, SessionState
from timed_snake.snake import Direction, Snake

__all__ = [
    "CollisionOutcome",
    "Direction",
    "FoodItem",
    "FoodManager",
    "GameConfig",
    "GameEngine",
    "Grid",
    "MoveResult",
    "Phase",
    "SessionState",
    "Snake",
    "TickScheduler",
]
