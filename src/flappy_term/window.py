#!/usr/bin/env python3
"""
window.py

pygame front end: the same grid, drawn as filled cells in a window.
Space / Up / w / Click = Flap | q / Esc / close = Quit
"""

import logging
from typing import Optional

import pygame

from .constants import DEFAULT_CONFIG, WINDOW_CELL_SIZE, GameConfig
from .data_models import CellState, Command
from .game import Game
from .grid import Grid
from .log import setup_logging

logger = logging.getLogger(__name__)

COLORS = {
    CellState.EMPTY: (0, 191, 255),
    CellState.PLAYER: (255, 255, 0),
    CellState.OBSTACLE: (0, 150, 0),
}
STATUS_HEIGHT = 2               # rows of cells reserved for the HUD

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


def command_for_event(event) -> Optional[Command]:
    if event.type == pygame.QUIT:
        return Command.QUIT
    if event.type == pygame.KEYDOWN:
        if event.key in QUIT_KEYS:
            return Command.QUIT
        if event.key in FLAP_KEYS:
            return Command.FLAP
    if event.type == pygame.MOUSEBUTTONDOWN:
        return Command.FLAP
    return None


class WindowInput:
    """
    Waits up to the timeout for the first event, then drains the queue so
    mouse motion and window events never push a flap into a later tick.
    QUIT wins over FLAP when both are queued.
    """

    def poll_command(self, timeout: float) -> Optional[Command]:
        event = pygame.event.wait(max(1, int(timeout * 1000)))
        if event.type == pygame.NOEVENT:
            return None
        commands = {command_for_event(e) for e in [event] + pygame.event.get()}
        if Command.QUIT in commands:
            return Command.QUIT
        if Command.FLAP in commands:
            return Command.FLAP
        return None


class WindowRenderer:
    def __init__(self, config: GameConfig = DEFAULT_CONFIG,
                 cell_size: int = WINDOW_CELL_SIZE):
        self.cell_size = cell_size
        self.screen = pygame.display.set_mode(
            (config.grid_width * cell_size,
             (config.grid_height + STATUS_HEIGHT) * cell_size))
        pygame.display.set_caption("Flappy")
        self.font = pygame.font.Font(None, 24)
        self.board_height = config.grid_height * cell_size

    def present(self, grid: Grid):
        self.screen.fill(COLORS[CellState.EMPTY])
        size = self.cell_size
        for y, row in enumerate(grid.cells):
            for x, state in enumerate(row):
                if state is not CellState.EMPTY:
                    pygame.draw.rect(self.screen, COLORS[state],
                                     (x * size, y * size, size, size))

    def status(self, score: float, fps: float):
        hud_rect = (0, self.board_height, self.screen.get_width(),
                    self.screen.get_height() - self.board_height)
        pygame.draw.rect(self.screen, (0, 0, 0), hud_rect)
        text = self.font.render(
            f"Score: {score:.0f}  FPS: {fps:.0f}", True, (255, 255, 255))
        self.screen.blit(text, (10, self.board_height + 5))
        pygame.display.flip()


def main(config: GameConfig = DEFAULT_CONFIG):
    setup_logging()
    pygame.init()
    logger.info("Starting window front end")
    try:
        game = Game(WindowInput(), WindowRenderer(config), config=config)
        game.run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
