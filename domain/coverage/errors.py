"""Coverage Bounded Context - Error Hierarchy.

The engine itself has no error paths in normal use: out-of-window and empty
requests are ignored. The only failure kind is an invariant violation,
surfaced by the validating wrapper after a call leaves the engine in an
inconsistent state. It always signals an engine defect, never a caller error.
"""

from __future__ import annotations

from enum import Enum


class Invariant(str, Enum):
    """Properties of the coverage map that must hold between calls."""

    NON_EMPTY = "non_empty"
    FIRST_BELOW_CAP = "first_below_cap"
    DISTINCT_NEIGHBOURS = "distinct_neighbours"
    COUNT_IN_RANGE = "count_in_range"
    LAST_IS_ZERO = "last_is_zero"
    WINDOW_MONOTONIC = "window_monotonic"


class CoverageError(Exception):
    """Base error for coverage operations."""


class InvariantViolationError(CoverageError):
    """Coverage map no longer satisfies one of its invariants.

    Attributes:
        invariant: The violated Invariant
        detail: Human readable description of the offending state
    """

    def __init__(self, invariant: Invariant, detail: str) -> None:
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"Invariant '{invariant.value}' violated: {detail}")
