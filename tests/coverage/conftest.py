"""Pytest configuration for coverage domain tests.

Fixtures here build engines in known, non-trivial states so individual
tests do not have to replay long request sequences.
"""

from __future__ import annotations

import pytest

from domain.coverage.entities import CoverageWindowEngine


@pytest.fixture
def nested_engine(engine: CoverageWindowEngine) -> CoverageWindowEngine:
    """Engine after three nested requests.

    State: {0: 0, 1: 3, 6: 2, 7: 1, 8: 0}, window (0, 9).
    """
    engine.apply_coverage(1, 5)
    engine.apply_coverage(1, 6)
    engine.apply_coverage(1, 7)
    return engine


@pytest.fixture
def stepped_engine(engine: CoverageWindowEngine) -> CoverageWindowEngine:
    """Engine with a descending staircase.

    State: {0: 2, 3: 1, 6: 0}, window (0, 9).
    """
    engine.apply_coverage(0, 6)
    engine.apply_coverage(0, 3)
    return engine
