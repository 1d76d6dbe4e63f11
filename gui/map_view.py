# ================================
# file: gui/map_view.py
# ================================
"""
Diagnostic top-down view of the maze map.
Reads cells through the mapper's read interface and never mutates them.
"""

from __future__ import annotations
from typing import Tuple, Optional

import matplotlib.pyplot as plt
import matplotlib.patches as patches

from core.config import VIEW_FIGSIZE, VIEW_WALL_COLOR, VIEW_WALL_WIDTH, \
    VIEW_FLOOR_COLORS, VIEW_VICTIM_COLORS, GRID_STEP
from core.coords import NEIGHBOUR_OFFSETS
from core.types import Floor, Wall


class MapView:
    """Matplotlib view in logical coordinates: one floor tile spans GRID_STEP units."""

    def __init__(self, figsize: Tuple[float, float] = VIEW_FIGSIZE, title: str = "Maze Map"):
        self.fig, self.ax = plt.subplots(figsize=figsize)
        self.title = title

    def update(self, mapper) -> None:
        """Redraw everything from the mapper's current cells."""
        ax = self.ax
        ax.clear()
        half = GRID_STEP / 2.0
        xs, ys = [], []
        for (x, y), cell in mapper.cells():
            xs.append(x)
            ys.append(y)
            if isinstance(cell, Floor):
                ax.add_patch(patches.Rectangle(
                    (x - half, y - half), GRID_STEP, GRID_STEP,
                    facecolor=VIEW_FLOOR_COLORS[int(cell.floor_type)],
                    edgecolor='#bbbbbb', lw=0.5))
            elif isinstance(cell, Wall):
                self._draw_wall(x, y, cell, half)

        # Robot marker
        rx, ry = mapper.position
        dx, dy = NEIGHBOUR_OFFSETS[mapper.heading]
        ax.annotate("", xy=(rx + dx * half * 0.8, ry + dy * half * 0.8), xytext=(rx, ry),
                    arrowprops=dict(arrowstyle="->", color="r", lw=2))
        xs.append(rx)
        ys.append(ry)

        ax.set_xlim(min(xs) - GRID_STEP, max(xs) + GRID_STEP)
        ax.set_ylim(max(ys) + GRID_STEP, min(ys) - GRID_STEP)  # y grows downwards
        ax.set_aspect('equal')
        ax.set_title(f"{self.title} ({mapper.logic_width}x{mapper.logic_height})")

    def _draw_wall(self, x: int, y: int, wall: Wall, half: float) -> None:
        # Wall between two rows of tiles is horizontal, between two columns vertical
        horizontal = (y % GRID_STEP) == 0
        if horizontal:
            seg_x, seg_y = (x - half, x + half), (y, y)
            faces = ((x, y - 0.3), (x, y + 0.3))
        else:
            seg_x, seg_y = (x, x), (y - half, y + half)
            faces = ((x - 0.3, y), (x + 0.3, y))
        self.ax.plot(seg_x, seg_y, color=VIEW_WALL_COLOR, lw=VIEW_WALL_WIDTH, solid_capstyle='butt')
        for victim, (vx, vy) in zip((wall.left_victim, wall.right_victim), faces):
            if victim is None:
                continue
            self.ax.text(vx, vy, victim.name[0], ha='center', va='center', fontsize=8,
                         color=VIEW_VICTIM_COLORS[int(victim)], fontweight='bold')

    def save(self, path: str, dpi: Optional[int] = 100) -> None:
        self.fig.savefig(path, dpi=dpi)

    def close(self) -> None:
        plt.close(self.fig)
