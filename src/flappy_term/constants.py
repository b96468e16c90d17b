"""
constants.py: Centralized configuration for the simulation and the front ends.
"""

from dataclasses import dataclass

# -------- Grid Config --------
GRID_WIDTH = 50
GRID_HEIGHT = 30
PLAYER_COLUMN = 1               # Fixed player column

# Time synchronization
TICK_RATE = 60                  # Simulation ticks per second
TICK_TIME = 1.0 / TICK_RATE     # Fixed time step (seconds)
POST_DEATH_PAUSE = 3.0          # seconds before a new life starts

# -------- Physics Config (cells / tick) --------
GRAVITY_PER_TICK = 1.0 / TICK_RATE
FLAP_IMPULSE = -0.5             # Instantaneous velocity overwrite

# -------- Obstacle Config --------
OBSTACLE_WIDTH = 2
OBSTACLE_VELOCITY = 0.275       # Horizontal speed (cells/tick)
SPAWN_INTERVAL_MIN = 50         # ticks, inclusive
SPAWN_INTERVAL_MAX = 75         # ticks, exclusive

# -------- Front End Config --------
LOG_FILE = "flappy_term.log"
LOG_LEVEL = "INFO"
WINDOW_CELL_SIZE = 16           # pixels per cell in the pygame window


@dataclass(frozen=True)
class GameConfig:
    """Bundle of the constants above, passed to everything that needs them."""
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    player_column: int = PLAYER_COLUMN
    tick_rate: int = TICK_RATE
    gravity_per_tick: float = GRAVITY_PER_TICK
    flap_impulse: float = FLAP_IMPULSE
    obstacle_width: int = OBSTACLE_WIDTH
    obstacle_velocity: float = OBSTACLE_VELOCITY
    spawn_interval_min: int = SPAWN_INTERVAL_MIN
    spawn_interval_max: int = SPAWN_INTERVAL_MAX
    post_death_pause: float = POST_DEATH_PAUSE

    def __post_init__(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"grid must be non-empty, got {self.grid_width}x{self.grid_height}")
        if self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {self.tick_rate}")
        if not 0 < self.spawn_interval_min < self.spawn_interval_max:
            raise ValueError(
                "spawn interval band must satisfy 0 < min < max, got "
                f"[{self.spawn_interval_min}, {self.spawn_interval_max})")
        if self.post_death_pause < 0:
            raise ValueError(
                f"post_death_pause must not be negative, got {self.post_death_pause}")

    @property
    def tick_time(self) -> float:
        return 1.0 / self.tick_rate


DEFAULT_CONFIG = GameConfig()
