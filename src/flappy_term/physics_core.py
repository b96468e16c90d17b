"""
physics_core.py: The deterministic kinematic functions and collision logic.
"""

from typing import Iterable

from .constants import DEFAULT_CONFIG, GameConfig
from .data_models import Obstacle, Player, Position


class PhysicsCore:
    """
    Player kinematics and termination checks. No randomness lives here, so
    a fixed command sequence always produces the same trajectory.
    """

    def __init__(self, config: GameConfig = DEFAULT_CONFIG):
        self.config = config

    def flap(self, player: Player):
        """Overwrites velocity with the flap impulse. Repeated flaps do not stack."""
        player.velocity = self.config.flap_impulse

    def integrate(self, player: Player):
        """One semi-implicit Euler step: velocity first, then height."""
        player.velocity += self.config.gravity_per_tick
        player.height += player.velocity

    def project_position(self, player: Player) -> Position:
        """
        Discrete cell of the player. The row is not clamped: a row outside
        the grid is how falling off (or flying out of) the playfield shows up.
        """
        return player.position

    def out_of_bounds(self, player: Player) -> bool:
        row = self.project_position(player).row
        return not 0 <= row < self.config.grid_height

    def collides(self, player: Player, obstacles: Iterable[Obstacle]) -> bool:
        """Exact cell match only; a block next to the player is not a hit."""
        position = self.project_position(player)
        for obstacle in obstacles:
            for block in obstacle.blocks:
                if block.position == position:
                    return True
        return False
