# ================================
# file: mapping/grid_store.py
# ================================
"""
Growable doubled-coordinate grid.

Storage is a rectangular numpy object array of ``Cell | None``. Logical
positions map to storage through an origin offset:

    storage_index = origin + (logical_position - 1)

Growing towards the top or the left prepends storage rows/columns and shifts
the origin by the same amount, so every logical position keeps pointing at
the cell it was written with.
"""
from __future__ import annotations
from typing import Tuple, Optional, Iterator
import numpy as np

from core.config import GRID_INITIAL_SIZE, GRID_ORIGIN, GRID_GROWTH, LOG_MODULE_GRID
from core.types import Cell, cell_code, cell_symbol


class GridStore:
    """Logical-coordinate view over a numpy object matrix that only ever grows."""

    def __init__(self, size: int = GRID_INITIAL_SIZE, origin: Tuple[int, int] = GRID_ORIGIN,
                 logger_func=None, log_file=None) -> None:
        self._cells = np.full((int(size), int(size)), None, dtype=object)
        self._origin = [int(origin[0]), int(origin[1])]
        self.logger_func = logger_func
        self.log_file = log_file

    def _log(self, message: str, module: str = LOG_MODULE_GRID) -> None:
        if self.logger_func and self.log_file:
            self.logger_func(self.log_file, message, module)

    # ---- extent ----------------------------------------------------------
    @property
    def width(self) -> int:
        """Storage columns."""
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        """Storage rows."""
        return self._cells.shape[0]

    @property
    def logic_width(self) -> int:
        """Floor tiles per row."""
        return (self.width - 1) // 2

    @property
    def logic_height(self) -> int:
        """Floor tiles per column."""
        return (self.height - 1) // 2

    @property
    def origin(self) -> Tuple[int, int]:
        return (self._origin[0], self._origin[1])

    # ---- addressing ------------------------------------------------------
    def to_storage(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        """Logical (x, y) -> storage (column, row)."""
        return (self._origin[0] + (pos[0] - 1), self._origin[1] + (pos[1] - 1))

    def to_logical(self, col: int, row: int) -> Tuple[int, int]:
        return (col - self._origin[0] + 1, row - self._origin[1] + 1)

    def contains(self, pos: Tuple[int, int]) -> bool:
        col, row = self.to_storage(pos)
        return 0 <= col < self.width and 0 <= row < self.height

    def get(self, pos: Tuple[int, int]) -> Optional[Cell]:
        if not self.contains(pos):
            return None
        col, row = self.to_storage(pos)
        return self._cells[row, col]

    def set(self, pos: Tuple[int, int], cell: Optional[Cell]) -> None:
        if not self.contains(pos):
            raise IndexError(f"Position {pos} is outside the grid "
                             f"({self.width}x{self.height}, origin {self.origin})")
        col, row = self.to_storage(pos)
        self._cells[row, col] = cell

    # ---- growth ----------------------------------------------------------
    def _add_rows_on_top(self) -> None:
        self._cells = np.vstack([np.full((GRID_GROWTH, self.width), None, dtype=object), self._cells])
        self._origin[1] += GRID_GROWTH

    def _add_columns_to_right(self) -> None:
        self._cells = np.hstack([self._cells, np.full((self.height, GRID_GROWTH), None, dtype=object)])

    def _add_rows_to_bottom(self) -> None:
        self._cells = np.vstack([self._cells, np.full((GRID_GROWTH, self.width), None, dtype=object)])

    def _add_columns_to_left(self) -> None:
        self._cells = np.hstack([np.full((self.height, GRID_GROWTH), None, dtype=object), self._cells])
        self._origin[0] += GRID_GROWTH

    def ensure_capacity(self, pos: Tuple[int, int]) -> int:
        """Grow until the floor slot at ``pos`` and its four wall slots fit.

        Sides are tested top, right, bottom, left; each step adds one wall
        row/column plus one floor row/column on a single side. Returns the
        number of growth steps taken.
        """
        steps = 0
        while True:
            col, row = self.to_storage(pos)
            if row - 1 < 0:
                self._add_rows_on_top()
                side = "top"
            elif col + 1 >= self.width:
                self._add_columns_to_right()
                side = "right"
            elif row + 1 >= self.height:
                self._add_rows_to_bottom()
                side = "bottom"
            elif col - 1 < 0:
                self._add_columns_to_left()
                side = "left"
            else:
                break
            steps += 1
            self._log(f"Grown {side}: {self.width}x{self.height}, origin {self.origin}")
        return steps

    # ---- read interface ----------------------------------------------------
    def cells(self) -> Iterator[Tuple[Tuple[int, int], Cell]]:
        """Yield (logical position, cell) for every occupied slot, row-major."""
        for row in range(self.height):
            for col in range(self.width):
                cell = self._cells[row, col]
                if cell is not None:
                    yield self.to_logical(col, row), cell

    def snapshot(self) -> np.ndarray:
        """uint8 matrix of CELL_EMPTY / CELL_FLOOR / CELL_WALL codes."""
        codes = np.zeros(self._cells.shape, dtype=np.uint8)
        for row in range(self.height):
            for col in range(self.width):
                codes[row, col] = cell_code(self._cells[row, col])
        return codes

    def to_string(self) -> str:
        rows = []
        for row in range(self.height):
            rows.append(" ".join(cell_symbol(self._cells[row, col]) for col in range(self.width)))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.to_string()
