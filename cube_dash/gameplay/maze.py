"""
Maze grid and procedural generation.
NO UI DEPENDENCIES.
"""
import random
from enum import IntEnum
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from .constants import CORRIDOR_CHANCE, MIN_MAZE_SIZE, SPAWN_POCKET


class Cell(IntEnum):
    """Contents of a single maze cell."""
    PATH = 0
    WALL = 1


class Grid:
    """
    The maze: a fixed-size grid of WALL / PATH cells.

    Coordinate system:
    - (0, 0) is top-left
    - x is the column and increases to the right
    - y is the row and increases downward

    Every query is bounds-checked. Anything outside the grid reads as WALL,
    so callers never need to clamp indices themselves.
    """

    def __init__(self, width: int, height: int, fill: Cell = Cell.WALL):
        self.width = width
        self.height = height
        self._cells = np.full((height, width), int(fill), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Grid':
        """
        Build a grid from text rows, '#' for WALL and anything else for PATH.
        Handy for hand-built test mazes.
        """
        height = len(rows)
        width = max((len(row) for row in rows), default=0)
        grid = cls(width, height)
        for y, row in enumerate(rows):
            for x, char in enumerate(row):
                if char != '#':
                    grid.set(x, y, Cell.PATH)
        return grid

    @property
    def cells(self) -> np.ndarray:
        """Read-only (height, width) view of the cell values."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinates are within grid bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[Cell]:
        """Get the cell at coordinates, or None if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return Cell(int(self._cells[y, x]))

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at coordinates. Out of bounds writes are ignored."""
        if self.in_bounds(x, y):
            self._cells[y, x] = int(cell)

    def is_path(self, x: int, y: int) -> bool:
        """True if the cell is walkable. Out of bounds counts as WALL."""
        return self.in_bounds(x, y) and self._cells[y, x] == Cell.PATH

    def iter_cells(self, cell: Cell) -> Iterator[Tuple[int, int]]:
        """Iterate (x, y) of every cell holding the given value."""
        ys, xs = np.nonzero(self._cells == int(cell))
        for y, x in zip(ys.tolist(), xs.tolist()):
            yield x, y

    def count(self, cell: Cell) -> int:
        return int(np.count_nonzero(self._cells == int(cell)))

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height}, paths={self.count(Cell.PATH)})"


def generate_maze(rows: int, cols: int, rng: random.Random) -> Grid:
    """
    Generate a sparse lattice maze.

    Every odd (x, y) cell becomes a room; each room independently opens a
    corridor to the right and one downward with CORRIDOR_CHANCE each. The
    outer border stays solid. Connectivity is NOT guaranteed.

    The spawn pocket around (1, 1) is always cleared afterwards.
    """
    if rows < MIN_MAZE_SIZE or cols < MIN_MAZE_SIZE:
        raise ValueError(f"Maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, got {cols}x{rows}")

    grid = Grid(cols, rows)

    for y in range(1, rows - 1, 2):
        for x in range(1, cols - 1, 2):
            grid.set(x, y, Cell.PATH)

            # Both rolls happen even when the opening is out of range
            if rng.random() < CORRIDOR_CHANCE and x < cols - 2:
                grid.set(x + 1, y, Cell.PATH)
            if rng.random() < CORRIDOR_CHANCE and y < rows - 2:
                grid.set(x, y + 1, Cell.PATH)

    for x, y in SPAWN_POCKET:
        grid.set(x, y, Cell.PATH)

    return grid
