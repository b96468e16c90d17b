"""
game.py: The fixed-rate tick loop with restart-on-death.
"""

import logging
import random
from typing import Optional

from .constants import DEFAULT_CONFIG, GameConfig
from .data_models import Command
from .interfaces import Clock, InputSource, Renderer, SystemClock
from .simulation import Session

logger = logging.getLogger(__name__)


class Game:
    """
    Drives Sessions at the configured tick rate.

    Each tick polls the input source (the poll itself waits up to one tick),
    steps the session, hands the grid to the renderer and sleeps whatever is
    left of the tick. A dead session is shown, held for the post-death pause
    and replaced by a fresh one.
    """

    def __init__(self, input_source: InputSource, renderer: Renderer,
                 clock: Optional[Clock] = None,
                 config: GameConfig = DEFAULT_CONFIG,
                 rng: Optional[random.Random] = None):
        self.input = input_source
        self.renderer = renderer
        self.clock = clock if clock is not None else SystemClock()
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.lives = 0
        self.fps = 0.0
        self.session = self.new_session()

    def new_session(self) -> Session:
        self.lives += 1
        session = Session(self.config, self.rng)
        logger.info("Life %d started (first wall in %d ticks)",
                    self.lives, session.spawn_threshold)
        return session

    def tick(self) -> bool:
        """Runs one tick. Returns False when the player asked to quit."""
        tick_time = self.config.tick_time
        start_time = self.clock.now()

        command = self.input.poll_command(tick_time)
        if command is Command.QUIT:
            logger.info("Quit requested at tick %d", self.session.tick_count)
            return False

        result = self.session.step(command)
        self.renderer.present(self.session.grid)
        self.renderer.status(self.session.player.score, self.fps)

        if result.terminated:
            logger.info("Life %d ended by %s at tick %d, score %.2f",
                        self.lives, result.reason.value, self.session.tick_count,
                        self.session.player.score)
            self.clock.sleep(self.config.post_death_pause)
            self.session = self.new_session()
            return True

        elapsed_time = self.clock.now() - start_time
        sleep_time = tick_time - elapsed_time
        if sleep_time > 0:
            self.clock.sleep(sleep_time)

        frame_time = self.clock.now() - start_time
        if frame_time > 0:
            self.fps = 1.0 / frame_time
        return True

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Loops until quit (or max_ticks). Returns the number of ticks run."""
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            if not self.tick():
                break
            ticks += 1
        return ticks
