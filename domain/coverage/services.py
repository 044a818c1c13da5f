"""Coverage Bounded Context - Domain Services.

Pure checks over coverage snapshots. No state is kept here; the engine lives
in `domain/coverage/entities.py` and the wrapper that calls these checks
after every operation lives in the application layer.
"""

from __future__ import annotations

from domain.coverage.errors import Invariant, InvariantViolationError
from domain.coverage.value_objects import CoverageSnapshot


# ---------------------------------------------------------------------------
# Snapshot Invariants
# ---------------------------------------------------------------------------
def check_invariants(snapshot: CoverageSnapshot) -> None:
    """Validate the coverage map invariants of a snapshot.

    Checks, in order: non-empty map, first count below cap, every count in
    [0, cap], no two consecutive runs with the same count, last count zero.

    Args:
        snapshot: State captured from a CoverageTracker

    Raises:
        InvariantViolationError: On the first invariant that does not hold
    """
    runs = snapshot.runs
    cap = snapshot.cap

    if not runs:
        raise InvariantViolationError(Invariant.NON_EMPTY, "Empty counts")

    if runs[0].count >= cap:
        raise InvariantViolationError(
            Invariant.FIRST_BELOW_CAP,
            f"First count {runs[0].count} at {runs[0].start} >= cap {cap}",
        )

    for run in runs:
        if not (0 <= run.count <= cap):
            raise InvariantViolationError(
                Invariant.COUNT_IN_RANGE,
                f"Count {run.count} at {run.start} outside [0, {cap}]",
            )

    for prev, cur in zip(runs, runs[1:]):
        if prev.count == cur.count:
            raise InvariantViolationError(
                Invariant.DISTINCT_NEIGHBOURS,
                f"Runs at {prev.start} and {cur.start} share count {cur.count}",
            )

    if runs[-1].count != 0:
        raise InvariantViolationError(
            Invariant.LAST_IS_ZERO,
            f"Last count {runs[-1].count} at {runs[-1].start} is not zero",
        )


def check_window_advance(previous_start: int, snapshot: CoverageSnapshot) -> None:
    """Validate that the window start never moves backwards.

    Raises:
        InvariantViolationError: If the snapshot's window start < previous_start
    """
    current = snapshot.runs[0].start
    if current < previous_start:
        raise InvariantViolationError(
            Invariant.WINDOW_MONOTONIC,
            f"Window start moved back from {previous_start} to {current}",
        )
