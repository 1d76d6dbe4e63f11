# ================================
# file: mapping/maze_mapper.py
# ================================
"""
Maze Mapper - incremental map building from robot update packages

Each package is checked against the lost-package guard, fully decoded, and
only then applied in this order:
1. heading
2. position (growing the grid when needed)
3. floor under the robot (the first report for a tile is kept)
4. surrounding walls
5. victim on the wall at the robot's left or right

Ramp packages are rejected before anything is applied.
"""
from __future__ import annotations
from typing import Tuple, Optional, Iterator

from core.config import GRID_INITIAL_SIZE, GRID_ORIGIN, GRID_START_POSITION, LOG_MODULE_MAPPER
from core.coords import validate_heading, wall_neighbours, move, \
    decode_victim, victim_wall_position, victim_wall_face
from core.errors import PackageFormatError
from core.types import Direction, Floor, Wall, Cell, UpdatePackage
from appio.package_parser import package_from_dict
from mapping.grid_store import GridStore
from mapping.sequence_guard import SequenceGuard


class MazeMapper:
    """
    Owns the grid, the robot position and the heading for one mapping session.

    Usage:
        mapper = MazeMapper()
        for package in packages:
            mapper.apply_update(package)
        print(mapper)
    """

    def __init__(self, logger_func=None, log_file=None) -> None:
        self.logger_func = logger_func
        self.log_file = log_file
        self._init_state()

    def _init_state(self) -> None:
        self.grid = GridStore(GRID_INITIAL_SIZE, GRID_ORIGIN,
                              logger_func=self.logger_func, log_file=self.log_file)
        self.guard = SequenceGuard(logger_func=self.logger_func, log_file=self.log_file)
        self._position = tuple(GRID_START_POSITION)
        self._heading = Direction.NORTH
        self._updates_applied = 0

    def _log(self, message: str, module: str = LOG_MODULE_MAPPER) -> None:
        if self.logger_func and self.log_file:
            self.logger_func(self.log_file, message, module)

    def reset(self) -> None:
        """Discard the current map and start a new session from package id 0."""
        self._init_state()
        self._log("Session reset")

    # ---- state -----------------------------------------------------------
    @property
    def position(self) -> Tuple[int, int]:
        return self._position

    @property
    def heading(self) -> Direction:
        return self._heading

    @property
    def updates_applied(self) -> int:
        return self._updates_applied

    @property
    def logic_width(self) -> int:
        return self.grid.logic_width

    @property
    def logic_height(self) -> int:
        return self.grid.logic_height

    # ---- update ----------------------------------------------------------
    def apply_update(self, package) -> None:
        """Apply one update package (UpdatePackage or wire-format mapping)."""
        if not isinstance(package, UpdatePackage):
            package = package_from_dict(package)

        self.guard.check(package.id)

        if package.has_ramp:
            self._log(f"Package {package.id}: ramp {package.ramp} rejected")
            raise NotImplementedError("Ramps (multi-level mazes) are not supported yet")

        # Decode everything first so a bad field leaves the map untouched
        steps = package.position_update
        if steps is not None and (isinstance(steps, bool) or not isinstance(steps, int)):
            raise PackageFormatError(f"positionUpdate must be an integer, got {steps!r}")
        heading = self._heading if package.direction is None else validate_heading(package.direction)
        position = move(self._position, heading, steps) if steps else self._position
        floor = None if package.floor is None else Floor(package.floor)
        walls = [] if package.walls is None else wall_neighbours(position, package.walls, heading)
        victim = None if package.victim is None else decode_victim(package.victim)

        # 更新朝向和位置
        self._heading = heading
        if position != self._position:
            self._position = position
            self.grid.ensure_capacity(position)

        if floor is not None:
            self._set_floor(position, floor)

        for wall_pos in walls:
            self._ensure_wall(wall_pos)

        if victim is not None:
            victim_type, side = victim
            wall = self._ensure_wall(victim_wall_position(position, heading, side))
            wall.set_victim(victim_type, victim_wall_face(heading, side))

        self._updates_applied += 1
        self._log(f"Package {package.id}: pos={self._position} heading={self._heading.name} "
                  f"grid={self.grid.width}x{self.grid.height}")

    def _set_floor(self, pos: Tuple[int, int], floor: Floor) -> None:
        """Store a floor tile; a tile already known at pos is kept as first seen."""
        current = self.grid.get(pos)
        if current is None:
            self.grid.set(pos, floor)
        elif not isinstance(current, Floor):
            raise TypeError(f"Slot {pos} holds {current!r}, expected a floor")
        elif current != floor:
            self._log(f"Floor at {pos} kept as {current.floor_type.name}, "
                      f"revisit reported {floor.floor_type.name}")

    def _ensure_wall(self, pos: Tuple[int, int]) -> Wall:
        """Return the wall at pos, creating it if the slot is empty."""
        cell = self.grid.get(pos)
        if cell is None:
            cell = Wall()
            self.grid.set(pos, cell)
        elif not isinstance(cell, Wall):
            raise TypeError(f"Slot {pos} holds {cell!r}, expected a wall")
        return cell

    # ---- read interface ----------------------------------------------------
    def cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        return self.grid.get(pos)

    def floor_at(self, pos: Tuple[int, int]) -> Optional[Floor]:
        cell = self.grid.get(pos)
        return cell if isinstance(cell, Floor) else None

    def cells(self) -> Iterator[Tuple[Tuple[int, int], Cell]]:
        return self.grid.cells()

    def to_string(self) -> str:
        return self.grid.to_string()

    def __str__(self) -> str:
        return self.to_string()
