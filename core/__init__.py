# ================================
# file: core/__init__.py
# ================================
"""
Core Package

Exports codes, cell types, errors and direction utilities.
"""
from core.types import (
    Direction, FloorType, VictimType, WallSide,
    UpdatePackage, Floor, Wall, Cell, cell_symbol, cell_code,
)
from core.errors import (
    MazeMapError, SequenceGapError, InvalidHeadingError,
    InvalidFloorTypeError, InvalidVictimTypeError, PackageFormatError,
)
from core.coords import (
    VICTIM_ROUTING, NEIGHBOUR_OFFSETS,
    unpack_walls, pack_walls, wall_neighbours, decode_victim,
    victim_wall_position, victim_wall_face, neighbour, move, validate_heading,
)
from core.config import (
    # Grid configuration
    GRID_INITIAL_SIZE, GRID_START_POSITION, GRID_ORIGIN, GRID_STEP, GRID_GROWTH,
    CELL_EMPTY, CELL_FLOOR, CELL_WALL,
)

__all__ = [
    # Types
    'Direction', 'FloorType', 'VictimType', 'WallSide',
    'UpdatePackage', 'Floor', 'Wall', 'Cell', 'cell_symbol', 'cell_code',

    # Errors
    'MazeMapError', 'SequenceGapError', 'InvalidHeadingError',
    'InvalidFloorTypeError', 'InvalidVictimTypeError', 'PackageFormatError',

    # Coordinates
    'VICTIM_ROUTING', 'NEIGHBOUR_OFFSETS',
    'unpack_walls', 'pack_walls', 'wall_neighbours', 'decode_victim',
    'victim_wall_position', 'victim_wall_face', 'neighbour', 'move', 'validate_heading',

    # Configuration
    'GRID_INITIAL_SIZE', 'GRID_START_POSITION', 'GRID_ORIGIN', 'GRID_STEP', 'GRID_GROWTH',
    'CELL_EMPTY', 'CELL_FLOOR', 'CELL_WALL',
]
