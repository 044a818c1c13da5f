"""Domain Port(s) for coverage tracking.

Defines the interface shared by the core engine and the wrappers built
around it. No concrete state here.
"""

from __future__ import annotations

from collections.abc import Sized
from typing import Protocol

from .value_objects import CoverageSnapshot


class CoverageTracker(Protocol):
    """Port for anything that tracks capped coverage over a sliding window.

    Implemented by domain.coverage.entities.CoverageWindowEngine and by the
    validating wrapper in the application layer.
    """

    def apply_coverage(self, start: int, count: int) -> None:
        """Cover positions [start, start + count) inside the active window."""
        ...

    def apply_blocks(self, start: int, blocks: Sized) -> None:
        """Cover one position per block, starting at start."""
        ...

    def active_window(self) -> tuple[int, int]:
        """Return the inclusive active window (lo, hi)."""
        ...

    def snapshot(self) -> CoverageSnapshot:
        """Return an immutable copy of the tracked state."""
        ...
