"""
Terminal Flappy: a fixed-tick side scroller on a discrete grid.
"""

from .constants import DEFAULT_CONFIG, GameConfig
from .data_models import Block, CellState, Command, Edge, Obstacle, Player, Position
from .game import Game
from .grid import Grid
from .simulation import EndReason, Session, StepResult
from .spawner import ObstacleSpawner

__all__ = [
    "Block", "CellState", "Command", "DEFAULT_CONFIG", "Edge", "EndReason", "Game",
    "GameConfig", "Grid", "Obstacle", "ObstacleSpawner", "Player", "Position",
    "Session", "StepResult",
]
