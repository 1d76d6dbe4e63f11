# ================================
# file: mapping/sequence_guard.py
# ================================
"""Lost-package detection for the telemetry stream."""
from __future__ import annotations

from core.config import LOG_MODULE_SEQUENCE
from core.errors import SequenceGapError


class SequenceGuard:
    """Accepts package ids 0, 1, 2, ... and nothing else."""

    def __init__(self, logger_func=None, log_file=None) -> None:
        self._next_id = 0
        self.logger_func = logger_func
        self.log_file = log_file

    def _log(self, message: str, module: str = LOG_MODULE_SEQUENCE) -> None:
        if self.logger_func and self.log_file:
            self.logger_func(self.log_file, message, module)

    @property
    def expected_id(self) -> int:
        return self._next_id

    def check(self, package_id) -> None:
        """Consume ``package_id`` or raise SequenceGapError without advancing."""
        if isinstance(package_id, bool) or package_id != self._next_id:
            self._log(f"Package gap: expected {self._next_id}, got {package_id}")
            raise SequenceGapError(self._next_id, package_id)
        self._next_id += 1

    def reset(self) -> None:
        self._next_id = 0
