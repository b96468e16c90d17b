"""
grid.py: The playfield cell buffer, repainted from entity state every tick.
"""

from typing import List

from .constants import GRID_HEIGHT, GRID_WIDTH
from .data_models import CellState, Position

GLYPHS = {
    CellState.EMPTY: "~ ",
    CellState.PLAYER: "B ",
    CellState.OBSTACLE: "# ",
}


class Grid:
    """
    Fixed-size buffer of CellState values, indexed [row][column].
    All writes are bounds-checked; out-of-range writes are dropped.
    """

    def __init__(self, width: int = GRID_WIDTH, height: int = GRID_HEIGHT):
        self.width = width
        self.height = height
        self.cells: List[List[CellState]] = [
            [CellState.EMPTY] * width for _ in range(height)
        ]

    def clear(self):
        for row in self.cells:
            for column in range(self.width):
                row[column] = CellState.EMPTY

    def contains(self, position: Position) -> bool:
        return position.in_bounds(self.width, self.height)

    def set(self, position: Position, state: CellState):
        if self.contains(position):
            self.cells[position.row][position.column] = state

    def get(self, position: Position) -> CellState:
        if self.contains(position):
            return self.cells[position.row][position.column]
        return CellState.EMPTY

    def render(self) -> List[str]:
        """One string per row, one glyph per cell."""
        return ["".join(GLYPHS[state] for state in row) for row in self.cells]
