#!/usr/bin/env python3
"""
terminal.py: curses front end.

Controls: Space / w / Up = flap, q = quit.
"""

import curses
import logging
from typing import Optional

from .constants import DEFAULT_CONFIG, GameConfig
from .data_models import Command
from .game import Game
from .grid import Grid
from .log import setup_logging

logger = logging.getLogger(__name__)

FLAP_KEYS = (ord(" "), ord("w"), curses.KEY_UP)
QUIT_KEYS = (ord("q"),)


def command_for_key(key: int) -> Optional[Command]:
    if key in QUIT_KEYS:
        return Command.QUIT
    if key in FLAP_KEYS:
        return Command.FLAP
    return None


class TerminalInput:
    """Reads one key per tick, waiting at most the given timeout."""

    def __init__(self, stdscr):
        self.stdscr = stdscr

    def poll_command(self, timeout: float) -> Optional[Command]:
        self.stdscr.timeout(max(0, int(timeout * 1000)))
        return command_for_key(self.stdscr.getch())


class TerminalRenderer:
    """Draws the board with Grid.render() glyphs and a status line under it."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.status_row = 0

    def _put(self, row: int, text: str):
        # Clip to the window; curses raises when writing past the last cell.
        max_y, max_x = self.stdscr.getmaxyx()
        if row >= max_y or max_x <= 1:
            return
        self.stdscr.addstr(row, 0, text[:max_x - 1])

    def present(self, grid: Grid):
        for row, line in enumerate(grid.render()):
            self._put(row, line)
        self.status_row = grid.height
        self.stdscr.refresh()

    def status(self, score: float, fps: float):
        self._put(self.status_row, f"Score: {score:.0f}  FPS: {fps:.0f}".ljust(24))
        self.stdscr.refresh()


def run(stdscr, config: GameConfig = DEFAULT_CONFIG):
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.erase()

    game = Game(TerminalInput(stdscr), TerminalRenderer(stdscr), config=config)
    game.run()


def main():
    setup_logging()
    logger.info("Starting terminal front end")
    try:
        curses.wrapper(run)
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    main()
