"""
simulation.py: One life of the game and its fixed-order tick.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .constants import DEFAULT_CONFIG, GameConfig
from .data_models import CellState, Command, Obstacle, Player
from .grid import Grid
from .physics_core import PhysicsCore
from .spawner import ObstacleSpawner

logger = logging.getLogger(__name__)


class EndReason(Enum):
    BOUNDS = "bounds"
    COLLISION = "collision"


@dataclass(frozen=True)
class StepResult:
    terminated: bool = False
    reason: Optional[EndReason] = None


RUNNING = StepResult()


class Session(PhysicsCore):
    """
    The authoritative state of a single life: player, active walls, grid,
    spawn counters and the random source. Inherits kinematics and collision
    from PhysicsCore. A new Session is built for every life; nothing carries over.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG,
                 rng: Optional[random.Random] = None):
        super().__init__(config)
        self.rng = rng if rng is not None else random.Random()
        self.spawner = ObstacleSpawner(config, self.rng)
        self.player = Player(height=config.grid_height / 2,
                             column=config.player_column)
        self.obstacles: List[Obstacle] = []
        self.grid = Grid(config.grid_width, config.grid_height)
        self.tick_count = 0
        self.spawn_counter = 0
        self.spawn_threshold = self.spawner.draw_threshold()
        self.result = RUNNING
        self.grid.set(self.project_position(self.player), CellState.PLAYER)

    @property
    def terminated(self) -> bool:
        return self.result.terminated

    def _retire_offscreen(self):
        before = len(self.obstacles)
        self.obstacles = [o for o in self.obstacles if not o.offscreen]
        if len(self.obstacles) != before:
            logger.debug("Retired %d wall(s) at tick %d",
                         before - len(self.obstacles), self.tick_count)

    def _maybe_spawn(self):
        self.spawn_counter += 1
        if self.spawn_counter >= self.spawn_threshold:
            self.obstacles.append(self.spawner.create(self.config.obstacle_velocity))
            self.spawn_counter = 0
            self.spawn_threshold = self.spawner.draw_threshold()

    def step(self, command: Optional[Command] = None) -> StepResult:
        """
        The main simulation step. Mutates player, walls and grid.
        Once terminated, further calls change nothing.
        """
        if self.terminated:
            return self.result
        self.tick_count += 1

        # 1. Input and player physics
        if command is Command.FLAP:
            self.flap(self.player)
        self.integrate(self.player)

        # 2. Retire and spawn walls
        self._retire_offscreen()
        self._maybe_spawn()

        # 3. Repaint grid
        self.grid.clear()
        self.grid.set(self.project_position(self.player), CellState.PLAYER)

        for obstacle in self.obstacles:
            obstacle.advance()
            for block in obstacle.blocks:
                self.grid.set(block.position, CellState.OBSTACLE)
        # Walls that just left the screen go in the tick they leave.
        self._retire_offscreen()

        # 4. Score and termination
        self.player.score += self.config.obstacle_velocity

        if self.out_of_bounds(self.player):
            self.result = StepResult(terminated=True, reason=EndReason.BOUNDS)
        elif self.collides(self.player, self.obstacles):
            self.result = StepResult(terminated=True, reason=EndReason.COLLISION)
        return self.result
