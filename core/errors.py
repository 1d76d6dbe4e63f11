# ================================
# file: core/errors.py
# ================================
"""Error taxonomy for the map builder.

Every error is raised where it is detected and propagated to the caller.
Ramps use the builtin NotImplementedError.
"""
from __future__ import annotations


class MazeMapError(Exception):
    """Base class for map-building failures."""


class SequenceGapError(MazeMapError):
    """A package id arrived out of order, twice, or after a gap."""

    def __init__(self, expected: int, received) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"Lost package: expected id {expected}, received {received}")


class InvalidHeadingError(MazeMapError, ValueError):
    def __init__(self, heading) -> None:
        self.heading = heading
        super().__init__(f"Invalid heading: {heading!r} (expected 0, 1, 2 or 3)")


class InvalidFloorTypeError(MazeMapError, ValueError):
    def __init__(self, floor_code) -> None:
        self.floor_code = floor_code
        super().__init__(f"Invalid floor code: {floor_code!r}")


class InvalidVictimTypeError(MazeMapError, ValueError):
    def __init__(self, victim_code) -> None:
        self.victim_code = victim_code
        super().__init__(f"Invalid victim code: {victim_code!r}")


class PackageFormatError(MazeMapError, ValueError):
    """Raw package could not be decoded into an UpdatePackage."""
