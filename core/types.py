# ================================
# file: core/types.py
# ================================
"""Shared data structures: codes, update packages and grid cells.
Use minimal typing: Tuple/Optional/Union only.
"""
from __future__ import annotations
from enum import IntEnum
from typing import Optional, Union

from core import config
from core.errors import InvalidFloorTypeError, InvalidVictimTypeError


class Direction(IntEnum):
    """Absolute heading in the map frame (also robot-relative side order)."""
    NORTH = config.DIRECTION_NORTH
    EAST = config.DIRECTION_EAST
    SOUTH = config.DIRECTION_SOUTH
    WEST = config.DIRECTION_WEST


class FloorType(IntEnum):
    REGULAR = config.REGULAR_FLOOR_CODE
    BLACK = config.BLACK_FLOOR_CODE
    BLUE = config.BLUE_FLOOR_CODE
    CHECKPOINT = config.CHECKPOINT_CODE


class VictimType(IntEnum):
    U = config.U_VICTIM_CODE
    H = config.H_VICTIM_CODE
    S = config.S_VICTIM_CODE
    GREEN = config.GREEN_VICTIM_CODE
    YELLOW = config.YELLOW_VICTIM_CODE
    RED = config.RED_VICTIM_CODE


class WallSide(IntEnum):
    LEFT = config.WALL_LEFT_SIDE
    RIGHT = config.WALL_RIGHT_SIDE


def to_floor_type(code) -> FloorType:
    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidFloorTypeError(code)
    try:
        return FloorType(code)
    except ValueError:
        raise InvalidFloorTypeError(code) from None


def to_victim_type(code) -> VictimType:
    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidVictimTypeError(code)
    try:
        return VictimType(code)
    except ValueError:
        raise InvalidVictimTypeError(code) from None


class UpdatePackage:
    """One robot observation.

    Attributes
    -----------
    id : int
        Progressive package number, strictly sequential from 0.
    direction : Optional[int]
        Heading 0..3; ``None`` keeps the previous heading.
    position_update : Optional[int]
        Signed number of cell moves along the heading.
    floor : Optional[int]
        Floor code of the cell under the robot.
    walls : Optional[int]
        4-bit mask, bit order top, right, bottom, left in the robot frame.
    victim : Optional[int]
        Victim code; ``>= 100`` means the robot's right side.
    ramp : Optional[float]
        Ramp angle. Not supported yet.
    """
    __slots__ = ("id", "direction", "position_update", "floor", "walls", "victim", "ramp")

    def __init__(self, id: int, direction: Optional[int] = None,
        position_update: Optional[int] = None, floor: Optional[int] = None,
        walls: Optional[int] = None, victim: Optional[int] = None,
        ramp: Optional[float] = None) -> None:
        self.id = id
        self.direction = direction
        self.position_update = position_update
        self.floor = floor
        self.walls = walls
        self.victim = victim
        self.ramp = ramp

    @property
    def has_ramp(self) -> bool:
        return self.ramp is not None

    def to_dict(self) -> dict:
        """Wire representation, absent fields omitted."""
        wire = {
            "id": self.id,
            "direction": self.direction,
            "positionUpdate": self.position_update,
            "floor": self.floor,
            "walls": self.walls,
            "victim": self.victim,
            "ramp": self.ramp,
        }
        return {k: v for k, v in wire.items() if v is not None}

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"UpdatePackage({fields})"


class Floor:
    """Floor tile the robot can stand on. Immutable once created."""
    __slots__ = ("_floor_type",)

    def __init__(self, floor_type=FloorType.REGULAR) -> None:
        self._floor_type = to_floor_type(floor_type)

    @property
    def floor_type(self) -> FloorType:
        return self._floor_type

    def __eq__(self, other) -> bool:
        return isinstance(other, Floor) and other.floor_type == self.floor_type

    def __hash__(self) -> int:
        return hash(("Floor", int(self._floor_type)))

    def __repr__(self) -> str:
        return f"Floor({self._floor_type.name})"


class Wall:
    """Wall between two floor tiles, with one optional victim per face.

    Faces are fixed by the wall's own orientation, not the robot's:
    ``left_victim`` is the face looking towards lower x (vertical wall) or
    lower y (horizontal wall), ``right_victim`` the opposite face.
    A victim slot is only ever written, never cleared.
    """
    __slots__ = ("left_victim", "right_victim")

    def __init__(self, left_victim: Optional[int] = None,
        right_victim: Optional[int] = None) -> None:
        self.left_victim = None if left_victim is None else to_victim_type(left_victim)
        self.right_victim = None if right_victim is None else to_victim_type(right_victim)

    def set_victim(self, victim_type, face) -> None:
        """Write a victim on one face; ``face`` is a wall-fixed WallSide."""
        victim = to_victim_type(victim_type)
        if WallSide(face) == WallSide.LEFT:
            self.left_victim = victim
        else:
            self.right_victim = victim

    def __repr__(self) -> str:
        left = self.left_victim.name if self.left_victim is not None else None
        right = self.right_victim.name if self.right_victim is not None else None
        return f"Wall(left={left}, right={right})"


Cell = Union[Floor, Wall]


def cell_symbol(cell: Optional[Cell]) -> str:
    """Single-character tag used by the text dump."""
    if cell is None:
        return "."
    if isinstance(cell, Floor):
        return "F"
    if isinstance(cell, Wall):
        return "W"
    raise TypeError(f"Unknown cell type: {type(cell).__name__}")


def cell_code(cell: Optional[Cell]) -> int:
    """Numeric tag used by grid snapshots."""
    if cell is None:
        return config.CELL_EMPTY
    if isinstance(cell, Floor):
        return config.CELL_FLOOR
    if isinstance(cell, Wall):
        return config.CELL_WALL
    raise TypeError(f"Unknown cell type: {type(cell).__name__}")
