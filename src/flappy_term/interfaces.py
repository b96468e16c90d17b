"""
interfaces.py: The collaborators the game loop talks to.
"""

import time
from typing import Optional, Protocol

from .data_models import Command
from .grid import Grid


class InputSource(Protocol):
    def poll_command(self, timeout: float) -> Optional[Command]:
        """Waits at most `timeout` seconds. Unrecognized input yields None."""
        ...


class Renderer(Protocol):
    def present(self, grid: Grid) -> None:
        ...

    def status(self, score: float, fps: float) -> None:
        ...


class Clock(Protocol):
    def now(self) -> float:
        ...

    def sleep(self, seconds: float) -> None:
        ...


class SystemClock:
    """Wall clock for real play."""

    def now(self) -> float:
        return time.monotonic()

    def sleep(self, seconds: float):
        if seconds > 0:
            time.sleep(seconds)
