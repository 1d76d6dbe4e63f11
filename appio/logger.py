# ================================
# file: appio/logger.py
# ================================
from __future__ import annotations
from datetime import datetime
import time
import numpy as np

from core.config import LOG_TIMESTAMP_FORMAT, LOG_ECHO, LOG_MODULE_MAPPER
from core.types import UpdatePackage


def format_log_lines(message, module: str, when: datetime = None) -> list:
    """One tagged line per message line, so grid dumps stay aligned in the log."""
    stamp = (when or datetime.now()).strftime(LOG_TIMESTAMP_FORMAT)[:-3]
    prefix = f"[{stamp}] [{module}]"
    return [f"{prefix} {line}".rstrip() for line in str(message).splitlines() or [""]]


def log_to_file(log_file, message, module=LOG_MODULE_MAPPER, echo: bool = LOG_ECHO):
    """logger_func callback used by the mapping components."""
    lines = format_log_lines(message, module)
    log_file.write("".join(line + "\n" for line in lines))
    log_file.flush()
    if echo:
        print("\n".join(lines))  # 同步输出到终端


class MapLogger:
    """Simple NPZ logger for update packages, robot states and grid snapshots."""
    def __init__(self) -> None:
        self.t0 = time.time()
        self.packages = []
        self.states = []
        self.maps = []

    def log_package(self, package: UpdatePackage) -> None:
        wire = package.to_dict()
        self.packages.append((time.time()-self.t0, int(package.id),
                              wire.get("direction", -1), wire.get("positionUpdate", 0),
                              wire.get("floor", -1), wire.get("walls", -1), wire.get("victim", -1)))

    def log_state(self, mapper) -> None:
        x, y = mapper.position
        self.states.append((time.time()-self.t0, int(x), int(y), int(mapper.heading)))

    def log_map(self, grid) -> None:
        self.maps.append(np.asarray(grid.snapshot(), dtype=np.uint8).copy())

    def record(self, package: UpdatePackage, mapper) -> None:
        """Log a package together with the mapper state it produced."""
        self.log_package(package)
        self.log_state(mapper)
        self.log_map(mapper.grid)

    def save(self, path: str) -> None:
        # Snapshots grow with the maze, so keep them as an object array
        maps_array = np.empty(len(self.maps), dtype=object)
        for i, snapshot in enumerate(self.maps):
            maps_array[i] = snapshot
        np.savez_compressed(path, packages=np.array(self.packages, dtype=np.float64).reshape(-1, 7),
                            states=np.array(self.states, dtype=np.float64).reshape(-1, 4),
                            maps=maps_array)
