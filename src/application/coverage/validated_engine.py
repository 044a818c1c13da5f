"""Invariant-checking wrapper for CoverageTracker implementations.

Delegates every operation to a wrapped tracker and then re-checks the
coverage map invariants on a fresh snapshot:

1) Remember the window start before the call
2) Delegate the operation
3) Capture a snapshot
4) Run domain.coverage.services.check_invariants
5) Verify the window start did not move backwards
6) Log and re-raise InvariantViolationError on failure

A violation always points at a defect in the wrapped engine. The wrapper is
a testing aid; the core engine stays error-free in normal operation.
"""

from __future__ import annotations

import logging
from collections.abc import Sized

from domain.coverage.entities import CoverageWindowEngine
from domain.coverage.errors import InvariantViolationError
from domain.coverage.ports import CoverageTracker
from domain.coverage.services import check_invariants, check_window_advance
from domain.coverage.value_objects import CoverageSnapshot

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)


class ValidatedCoverageEngine:
    """CoverageTracker that validates the wrapped tracker after every call.

    Parameters
    ----------
    tracker: CoverageTracker
        The tracker to delegate to. Not copied; callers should not keep
        mutating it through another reference.

    Raises:
        InvariantViolationError: After any operation that leaves the wrapped
            tracker in an inconsistent state.
    """

    def __init__(self, tracker: CoverageTracker) -> None:
        self.tracker = tracker
        self._window_start = tracker.active_window()[0]

    @classmethod
    def create(cls, cap: int, window_size: int) -> "ValidatedCoverageEngine":
        """Wrap a fresh CoverageWindowEngine."""
        return cls(CoverageWindowEngine(cap=cap, window_size=window_size))

    def apply_coverage(self, start: int, count: int) -> None:
        self.tracker.apply_coverage(start, count)
        self._validate(f"apply_coverage({start}, {count})")

    def apply_blocks(self, start: int, blocks: Sized) -> None:
        self.tracker.apply_blocks(start, blocks)
        self._validate(f"apply_blocks({start}, <{len(blocks)} blocks>)")

    def active_window(self) -> tuple[int, int]:
        window = self.tracker.active_window()
        self._validate("active_window()")
        return window

    def snapshot(self) -> CoverageSnapshot:
        return self.tracker.snapshot()

    def _validate(self, operation: str) -> None:
        snapshot = self.tracker.snapshot()
        try:
            check_invariants(snapshot)
            check_window_advance(self._window_start, snapshot)
        except InvariantViolationError as e:
            # Dump the full state: the map is small by construction
            logger.error(
                "Invariant '%s' violated after %s: %s (runs=%s)",
                e.invariant.value,
                operation,
                e.detail,
                snapshot.as_dict(),
            )
            raise
        self._window_start = snapshot.runs[0].start
