"""
data_models.py: Data structures for the game state.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple

from .constants import GRID_HEIGHT, PLAYER_COLUMN


class Position(NamedTuple):
    """A grid cell. Derived from continuous state every tick, never stored as truth."""
    column: int
    row: int

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.column < width and 0 <= self.row < height


class CellState(Enum):
    EMPTY = "empty"
    PLAYER = "player"
    OBSTACLE = "obstacle"


class Edge(Enum):
    """Which horizontal boundary an obstacle hangs from."""
    CEILING = "ceiling"
    FLOOR = "floor"


class Command(Enum):
    QUIT = "quit"
    FLAP = "flap"


def to_cell(value: float) -> int:
    """Continuous coordinate -> cell index. Floors, so -0.5 is already column -1."""
    return math.floor(value)


@dataclass
class Player:
    """The authoritative player state."""
    height: float = GRID_HEIGHT / 2
    velocity: float = 0.0
    score: float = 0.0
    column: int = PLAYER_COLUMN

    @property
    def position(self) -> Position:
        return Position(self.column, to_cell(self.height))


@dataclass
class Block:
    """One wall cell. x_float accumulates sub-cell movement."""
    x_float: float
    row: int

    @property
    def position(self) -> Position:
        return Position(to_cell(self.x_float), self.row)


@dataclass
class Obstacle:
    """A wall of blocks anchored to one edge, scrolling left."""
    edge: Edge
    gap_height: float
    velocity: float
    width: int = 2
    blocks: List[Block] = field(default_factory=list)
    offscreen: bool = False

    def advance(self):
        """Moves every block one tick to the left and updates the offscreen flag."""
        for block in self.blocks:
            block.x_float -= self.velocity
        self.offscreen = all(block.position.column < 0 for block in self.blocks)
