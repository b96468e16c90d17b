"""
spawner.py: Obstacle creation and spawn cadence.
"""

import logging
import random
from typing import Optional

from .constants import DEFAULT_CONFIG, GameConfig
from .data_models import Block, Edge, Obstacle

logger = logging.getLogger(__name__)


class ObstacleSpawner:
    """
    Builds walls flush against the right edge of the grid.

    The wall height starts at two thirds of the grid and loses a random
    amount in [0, grid_height / 4), so a taller wall leaves a smaller gap.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG,
                 rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()

    def draw_threshold(self) -> int:
        """Ticks until the next spawn, uniform in [min, max)."""
        return self.rng.randrange(self.config.spawn_interval_min,
                                  self.config.spawn_interval_max)

    def draw_gap_height(self) -> float:
        grid_height = self.config.grid_height
        return 2 / 3 * grid_height - self.rng.random() * (grid_height / 4)

    def create(self, velocity: Optional[float] = None) -> Obstacle:
        if velocity is None:
            velocity = self.config.obstacle_velocity

        edge = self.rng.choice((Edge.CEILING, Edge.FLOOR))
        gap_height = self.draw_gap_height()
        obstacle = Obstacle(edge=edge, gap_height=gap_height, velocity=velocity,
                            width=self.config.obstacle_width)
        for i in range(obstacle.width):
            column = self.config.grid_width - i
            for offset in range(1, int(gap_height)):
                if edge is Edge.CEILING:
                    row = offset - 1
                else:
                    row = self.config.grid_height - offset
                obstacle.blocks.append(Block(x_float=float(column), row=row))

        logger.debug("Spawned %s wall: gap_height=%.2f blocks=%d",
                     edge.value, gap_height, len(obstacle.blocks))
        return obstacle
