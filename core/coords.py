# ================================
# file: core/coords.py
# ================================
"""Robot-relative to absolute translation in the doubled grid.

Logical positions are (x, y) pairs with x growing to the right and y growing
downwards. Floor tiles sit GRID_STEP apart; the wall shared by two floor
tiles sits halfway between them.
"""
from __future__ import annotations
from typing import Tuple, Dict, List

from core.config import DIRECTION_COUNT, GRID_STEP, WALL_MASK_BITS, \
    VICTIM_SIDE_THRESHOLD, VICTIM_TYPE_MODULUS
from core.errors import InvalidHeadingError, InvalidVictimTypeError
from core.types import Direction, VictimType, WallSide, to_victim_type

Position = Tuple[int, int]

# Unit offset towards each absolute neighbour (top, right, bottom, left)
NEIGHBOUR_OFFSETS: Dict[Direction, Position] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

# heading -> {robot side -> (absolute neighbour holding the wall, wall face)}
# 墙面朝向: an east or south wall shows the robot its LEFT (lower x / lower y)
# face, a west or north wall its RIGHT face.
VICTIM_ROUTING: Dict[Direction, Dict[WallSide, Tuple[Direction, WallSide]]] = {
    Direction.NORTH: {WallSide.LEFT: (Direction.WEST, WallSide.RIGHT),
                      WallSide.RIGHT: (Direction.EAST, WallSide.LEFT)},
    Direction.EAST: {WallSide.LEFT: (Direction.NORTH, WallSide.RIGHT),
                     WallSide.RIGHT: (Direction.SOUTH, WallSide.LEFT)},
    Direction.SOUTH: {WallSide.LEFT: (Direction.EAST, WallSide.LEFT),
                      WallSide.RIGHT: (Direction.WEST, WallSide.RIGHT)},
    Direction.WEST: {WallSide.LEFT: (Direction.SOUTH, WallSide.LEFT),
                     WallSide.RIGHT: (Direction.NORTH, WallSide.RIGHT)},
}


def validate_heading(heading) -> Direction:
    """Check a raw heading code and return it as a Direction."""
    if isinstance(heading, bool) or not isinstance(heading, int):
        raise InvalidHeadingError(heading)
    if not 0 <= heading < DIRECTION_COUNT:
        raise InvalidHeadingError(heading)
    return Direction(heading)


def mask_to_bits(mask: int) -> List[bool]:
    """Split a wall mask into (top, right, bottom, left), most significant bit first."""
    if isinstance(mask, bool) or not isinstance(mask, int) or not 0 <= mask < (1 << WALL_MASK_BITS):
        raise ValueError(f"Wall mask must be a {WALL_MASK_BITS}-bit integer, got {mask!r}")
    return [bool(mask >> shift & 1) for shift in range(WALL_MASK_BITS - 1, -1, -1)]


def bits_to_mask(bits) -> int:
    """Inverse of mask_to_bits."""
    mask = 0
    for bit in bits:
        mask = (mask << 1) | int(bool(bit))
    return mask


def rotate(items, positions: int) -> list:
    """Rotate a sequence to the right; elements falling off the end reappear at the start.
    Negative positions rotate to the left.
    """
    items = list(items)
    if not items:
        return items
    shift = positions % len(items)
    return items[len(items) - shift:] + items[:len(items) - shift]


def unpack_walls(mask: int, heading) -> Tuple[bool, bool, bool, bool]:
    """Robot-frame wall mask -> absolute (top, right, bottom, left) flags.

    Each quarter turn of the heading rotates the robot frame one slot, so
    facing east the robot's left bit lands on the absolute top.
    """
    heading = validate_heading(heading)
    return tuple(rotate(mask_to_bits(mask), int(heading)))


def pack_walls(bits, heading) -> int:
    """Absolute (top, right, bottom, left) flags -> robot-frame wall mask."""
    heading = validate_heading(heading)
    return bits_to_mask(rotate(bits, -int(heading)))


def neighbour(pos: Position, direction) -> Position:
    """Wall slot adjacent to a floor position in an absolute direction."""
    dx, dy = NEIGHBOUR_OFFSETS[Direction(direction)]
    return (pos[0] + dx, pos[1] + dy)


def wall_neighbours(pos: Position, mask: int, heading) -> List[Position]:
    """Logical positions of the walls a robot-frame mask reports around pos."""
    flags = unpack_walls(mask, heading)
    return [neighbour(pos, d) for d, present in zip(Direction, flags) if present]


def move(pos: Position, heading, steps: int) -> Position:
    """Advance ``steps`` floor tiles along the heading (negative moves backwards)."""
    dx, dy = NEIGHBOUR_OFFSETS[validate_heading(heading)]
    return (pos[0] + dx * GRID_STEP * steps, pos[1] + dy * GRID_STEP * steps)


def decode_victim(code: int) -> Tuple[VictimType, WallSide]:
    """Victim code -> (type, robot side)."""
    if isinstance(code, bool) or not isinstance(code, int) or code < 0:
        raise InvalidVictimTypeError(code)
    side = WallSide.RIGHT if code >= VICTIM_SIDE_THRESHOLD else WallSide.LEFT
    return to_victim_type(code % VICTIM_TYPE_MODULUS), side


def victim_wall_direction(heading, side) -> Direction:
    """Absolute direction of the wall on the robot's left or right."""
    return VICTIM_ROUTING[validate_heading(heading)][WallSide(side)][0]


def victim_wall_face(heading, side) -> WallSide:
    """Wall-fixed face the robot sees on its left or right."""
    return VICTIM_ROUTING[validate_heading(heading)][WallSide(side)][1]


def victim_wall_position(pos: Position, heading, side) -> Position:
    """Wall slot on the robot's left or right given its current heading."""
    return neighbour(pos, victim_wall_direction(heading, side))
