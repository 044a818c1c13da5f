"""Coverage Bounded Context - Entities.

CoverageWindowEngine keeps a capped coverage count for an unbounded range of
integer positions while only tracking an active window of `window_size`
positions starting at the lowest position not yet saturated.

State is a right-open step function stored in a SortedDict: for consecutive
keys k1 < k2 every position in [k1, k2) has coverage counts[k1]. For example,
if [0, 9] was covered twice and [10, 19] once, the map is
{0: 2, 10: 1, 20: 0}.

Invariants between calls:
    - the map is never empty and its first key is the window start
    - the first count is strictly below cap
    - no two consecutive runs share a count
    - every count lies in [0, cap]
    - the last count is 0

NOT thread-safe: callers sharing an engine must serialize access.
"""

from __future__ import annotations

import logging
from collections.abc import Sized

from sortedcontainers import SortedDict

from domain.coverage.value_objects import (
    ActiveWindow,
    CoverageSnapshot,
    Run,
    WindowParameters,
)

# Module-level logger (reused across all engines)
logger = logging.getLogger(__name__)


class CoverageWindowEngine:
    """Sliding-window, capped-coverage counter (Entity).

    Parameters
    ----------
    cap: int
        Coverage count at which a position is saturated.
    window_size: int
        Number of positions in the active window.

    Raises:
        pydantic.ValidationError: If cap or window_size is not a positive int

    Example:
        >>> engine = CoverageWindowEngine(cap=3, window_size=10)
        >>> engine.apply_coverage(0, 1)
        >>> engine.active_window()
        (0, 9)
    """

    def __init__(self, cap: int, window_size: int) -> None:
        self.params = WindowParameters(cap=cap, window_size=window_size)
        self._counts: SortedDict = SortedDict({0: 0})

    @classmethod
    def from_parameters(cls, params: WindowParameters) -> "CoverageWindowEngine":
        return cls(cap=params.cap, window_size=params.window_size)

    def __repr__(self) -> str:
        return (
            f"CoverageWindowEngine(cap={self.cap}, window_size={self.window_size}, "
            f"runs={dict(self._counts)})"
        )

    def __len__(self) -> int:
        return len(self._counts)

    @property
    def cap(self) -> int:
        return self.params.cap

    @property
    def window_size(self) -> int:
        return self.params.window_size

    @property
    def window_start(self) -> int:
        """Smallest position not yet saturated."""
        return self._counts.peekitem(0)[0]

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------
    def active_window(self) -> tuple[int, int]:
        """Return the inclusive active window (h, h + window_size - 1)."""
        h = self.window_start
        return (h, h + self.window_size - 1)

    def window(self) -> ActiveWindow:
        """Return the active window as a Value Object."""
        lo, hi = self.active_window()
        return ActiveWindow(lo=lo, hi=hi)

    def coverage_at(self, position: int) -> int:
        """Return the coverage count of a single position.

        Positions before the window start are saturated and report cap.
        """
        if position < self.window_start:
            return self.cap
        return self._value_at(position)

    def snapshot(self) -> CoverageSnapshot:
        """Return an immutable copy of the current step function."""
        return CoverageSnapshot(
            cap=self.cap,
            window_size=self.window_size,
            runs=tuple(Run(start=k, count=v) for k, v in self._counts.items()),
        )

    # -----------------------------------------------------------------------
    # Updates
    # -----------------------------------------------------------------------
    def apply_coverage(self, start: int, count: int) -> None:
        """Cover positions [start, start + count) once.

        Only positions inside the active window are incremented, each capped
        at `cap`. The window is read once at the beginning of the call and is
        not updated while the request is applied. Afterwards the window slides
        past a newly saturated leading run.

        Requests entirely outside the window, or with count <= 0, are ignored.
        """
        counts = self._counts
        h = self.window_start
        window_end = h + self.window_size

        # Step 1: reject or clip to the active window. A request ending before
        # h only touches positions that are already saturated.
        range_start = max(start, h)
        range_end = min(start + count, window_end)
        if start >= window_end or count <= 0 or range_end <= range_start:
            logger.debug(
                "Ignoring request start=%d count=%d outside window [%d, %d)",
                start,
                count,
                h,
                window_end,
            )
            return

        # Step 2: close the range with a sentinel carrying the coverage past it,
        # then split the run containing range_start. The sentinel goes first so
        # it records the pre-increment value.
        if range_end not in counts:
            counts[range_end] = self._value_at(range_end)
        if range_start not in counts:
            counts[range_start] = self._value_at(range_start)

        # Step 3: increment every run inside the request
        cap = self.cap
        inside = counts.irange(range_start, range_end, inclusive=(True, False))
        for key in list(inside):
            counts[key] = min(counts[key] + 1, cap)

        # Step 4: merge runs that now equal their predecessor, reading the
        # live (already incremented) predecessor value
        index = counts.index(range_start)
        prev = counts.peekitem(index - 1)[1] if index > 0 else None
        for key in list(counts.irange(range_start, range_end)):
            value = counts[key]
            if value == prev:
                del counts[key]
            else:
                prev = value

        # Step 5: slide the window past a saturated leading run. Neighbouring
        # runs differ after the merge, so at most one run can be dropped.
        first_key, first_value = counts.peekitem(0)
        if first_value == cap:
            del counts[first_key]
            logger.debug(
                "Window advanced from %d to %d", first_key, counts.peekitem(0)[0]
            )

    def apply_blocks(self, start: int, blocks: Sized) -> None:
        """Cover one position per block, starting at `start`.

        Block contents are never inspected; only len(blocks) is used.
        """
        self.apply_coverage(start, len(blocks))

    # -----------------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------------
    def _value_at(self, position: int) -> int:
        """Count of the run containing position (position >= first key)."""
        index = self._counts.bisect_right(position) - 1
        return self._counts.peekitem(index)[1]
