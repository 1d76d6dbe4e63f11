# ================================
# file: mapping/__init__.py
# ================================
"""
Mapping Package

Exports:
- MazeMapper: applies update packages to the map
- GridStore: growable doubled-coordinate grid
- SequenceGuard: lost-package detection
"""
from mapping.grid_store import GridStore
from mapping.sequence_guard import SequenceGuard
from mapping.maze_mapper import MazeMapper

__all__ = [
    'MazeMapper',
    'GridStore',
    'SequenceGuard',
]
