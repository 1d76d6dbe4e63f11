"""
Lost-package detection tests.
"""

import io

import pytest

from core import SequenceGapError
from mapping import SequenceGuard
from appio import log_to_file


def test_accepts_consecutive_ids():
    guard = SequenceGuard()
    for package_id in range(10):
        guard.check(package_id)
    assert guard.expected_id == 10


def test_first_id_must_be_zero():
    guard = SequenceGuard()
    with pytest.raises(SequenceGapError):
        guard.check(1)
    assert guard.expected_id == 0


def test_rejects_repeat_without_advancing():
    guard = SequenceGuard()
    guard.check(0)
    guard.check(1)
    with pytest.raises(SequenceGapError) as info:
        guard.check(1)
    assert info.value.expected == 2
    assert info.value.received == 1
    assert guard.expected_id == 2


def test_rejects_skipped_id_then_accepts_expected():
    guard = SequenceGuard()
    guard.check(0)
    with pytest.raises(SequenceGapError):
        guard.check(2)
    guard.check(1)
    assert guard.expected_id == 2


def test_reset_restarts_from_zero():
    guard = SequenceGuard()
    guard.check(0)
    guard.reset()
    guard.check(0)
    assert guard.expected_id == 1


def test_gap_is_logged():
    out = io.StringIO()
    guard = SequenceGuard(logger_func=log_to_file, log_file=out)
    with pytest.raises(SequenceGapError):
        guard.check(5)
    assert "[SEQ] Package gap: expected 0, got 5" in out.getvalue()
