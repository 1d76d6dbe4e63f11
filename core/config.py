# ================================
# file: core/config.py
# ================================
"""
Global configuration for the incremental maze map builder.
All positions are logical doubled coordinates unless stated otherwise.

Organization:
1. Grid & Coordinate System
2. Robot Heading
3. Floor Codes
4. Wall Codes
5. Victim Codes
6. Logging & Diagnostics
"""
from __future__ import annotations

# ================================
# 1. GRID & COORDINATE SYSTEM
# ================================
GRID_INITIAL_SIZE: int = 3            # 3x3: origin floor cell plus its four walls
GRID_START_POSITION: tuple = (1, 1)   # Logical (x, y) of the first floor cell
GRID_ORIGIN: tuple = (1, 1)           # Storage index of GRID_START_POSITION
GRID_STEP: int = 2                    # Logical units per robot move (floor -> floor)
GRID_GROWTH: int = 2                  # Storage rows/cols added per growth step (wall + floor)

# Snapshot codes (numpy uint8 matrix returned by GridStore.snapshot)
CELL_EMPTY: int = 0
CELL_FLOOR: int = 1
CELL_WALL: int = 2

# ================================
# 2. ROBOT HEADING
# ================================
# Map frame: x grows to the right, y grows downwards, north is y - GRID_STEP
DIRECTION_NORTH: int = 0   # forward
DIRECTION_EAST: int = 1    # right
DIRECTION_SOUTH: int = 2   # back
DIRECTION_WEST: int = 3    # left
DIRECTION_COUNT: int = 4

# ================================
# 3. FLOOR CODES
# ================================
REGULAR_FLOOR_CODE: int = 0
BLACK_FLOOR_CODE: int = 1
BLUE_FLOOR_CODE: int = 2
CHECKPOINT_CODE: int = 3   # mirror tile

# ================================
# 4. WALL CODES
# ================================
WALL_MASK_BITS: int = 4    # bit 3=top, 2=right, 1=bottom, 0=left (robot frame)
WALL_LEFT_SIDE: int = 0
WALL_RIGHT_SIDE: int = 1

# ================================
# 5. VICTIM CODES
# ================================
U_VICTIM_CODE: int = 0
H_VICTIM_CODE: int = 1
S_VICTIM_CODE: int = 2
GREEN_VICTIM_CODE: int = 10
YELLOW_VICTIM_CODE: int = 11
RED_VICTIM_CODE: int = 12

VICTIM_SIDE_THRESHOLD: int = 100   # code >= 100 -> right face
VICTIM_TYPE_MODULUS: int = 100     # type = code % 100

# ================================
# 6. LOGGING & DIAGNOSTICS
# ================================
LOG_MODULE_MAPPER: str = "MAPPER"
LOG_MODULE_GRID: str = "GRID"
LOG_MODULE_SEQUENCE: str = "SEQ"
LOG_TIMESTAMP_FORMAT: str = "%H:%M:%S.%f"
LOG_ECHO: bool = True               # Mirror log lines to stdout

# Diagnostic view (matplotlib)
VIEW_FIGSIZE: tuple = (6, 6)
VIEW_WALL_COLOR: str = "#303030"
VIEW_WALL_WIDTH: float = 4.0
VIEW_FLOOR_COLORS: dict = {
    REGULAR_FLOOR_CODE: "#ffffff",
    BLACK_FLOOR_CODE: "#000000",
    BLUE_FLOOR_CODE: "#0000ff",
    CHECKPOINT_CODE: "#cccccc",
}
VIEW_VICTIM_COLORS: dict = {
    U_VICTIM_CODE: "#000000",
    H_VICTIM_CODE: "#000000",
    S_VICTIM_CODE: "#000000",
    GREEN_VICTIM_CODE: "#00ff00",
    YELLOW_VICTIM_CODE: "#ffff00",
    RED_VICTIM_CODE: "#ff0000",
}
