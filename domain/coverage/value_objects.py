"""Coverage Bounded Context - Value Objects.

Immutable data structures describing the coverage window.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# WindowParameters
# ---------------------------------------------------------------------------
class WindowParameters(BaseModel):
    """Engine configuration (Value Object).

    Both values are fixed for the lifetime of an engine.
    Non-positive values are rejected at construction time.
    """

    cap: int = Field(gt=0, strict=True)  # Maximum coverage count per position
    window_size: int = Field(gt=0, strict=True)  # Width of the active window

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# ActiveWindow
# ---------------------------------------------------------------------------
class ActiveWindow(BaseModel):
    """Inclusive span of positions eligible to receive increments."""

    lo: int  # Smallest non-saturated position
    hi: int  # lo + window_size - 1

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_span(self) -> "ActiveWindow":
        if self.hi < self.lo:
            raise ValueError(f"Invalid window: hi={self.hi} < lo={self.lo}")
        return self

    def as_tuple(self) -> tuple[int, int]:
        return (self.lo, self.hi)

    def __contains__(self, position: object) -> bool:
        return isinstance(position, int) and self.lo <= position <= self.hi

    def __len__(self) -> int:
        return self.hi - self.lo + 1


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
class Run(BaseModel):
    """One breakpoint of the step function.

    Every position from `start` up to (excluding) the next run's start has
    coverage `count`. The last run extends to infinity.
    """

    start: int
    count: int

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# CoverageSnapshot
# ---------------------------------------------------------------------------
class CoverageSnapshot(BaseModel):
    """Read-only copy of an engine's state (Value Object).

    Only structural well-formedness is enforced here (runs strictly ordered).
    The coverage invariants themselves are checked by
    `domain.coverage.services.check_invariants`, so that a defective engine
    state can still be captured and reported.
    """

    cap: int = Field(gt=0)
    window_size: int = Field(gt=0)
    runs: tuple[Run, ...]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_order(self) -> "CoverageSnapshot":
        for prev, cur in zip(self.runs, self.runs[1:]):
            if cur.start <= prev.start:
                raise ValueError("Runs must be strictly ordered by start")
        return self

    @property
    def active_window(self) -> ActiveWindow:
        lo = self.runs[0].start
        return ActiveWindow(lo=lo, hi=lo + self.window_size - 1)

    def as_dict(self) -> dict[int, int]:
        """Return the step function as a plain {start: count} mapping."""
        return {run.start: run.count for run in self.runs}

    def counts(self, lo: int, hi: int) -> NDArray[np.int64]:
        """Expand coverage of positions [lo, hi) into a dense array.

        Positions before the first run are saturated and report `cap`.
        Positions at or past the last run report its count.

        Raises:
            ValueError: If hi < lo
        """
        if hi < lo:
            raise ValueError(f"Invalid range: hi={hi} < lo={lo}")
        if not self.runs:
            return np.zeros(hi - lo, dtype=np.int64)

        starts = np.fromiter((r.start for r in self.runs), dtype=np.int64)
        values = np.fromiter((r.count for r in self.runs), dtype=np.int64)
        positions = np.arange(lo, hi, dtype=np.int64)

        # Index of the run covering each position (-1 = before the first run)
        idx = np.searchsorted(starts, positions, side="right") - 1
        out = np.where(idx >= 0, values[np.clip(idx, 0, None)], self.cap)
        return out.astype(np.int64, copy=False)


# ---------------------------------------------------------------------------
# Block
# ---------------------------------------------------------------------------
class Block(BaseModel):
    """Unit of work carried by a request.

    Only the number of blocks in a request matters to the engine;
    the content is never inspected.
    """

    content: Any = None

    model_config = ConfigDict(frozen=True)
