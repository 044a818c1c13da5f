"""Root pytest configuration for all tests.

Provides engine fixtures shared by every bounded context test module.
Imports resolve through `pythonpath` in pyproject.toml ("." and "src").
"""

from __future__ import annotations

import pytest

from application.coverage import ValidatedCoverageEngine
from domain.coverage.entities import CoverageWindowEngine

# Parameters used throughout the reference scenarios
DEFAULT_CAP = 3
DEFAULT_WINDOW_SIZE = 10


@pytest.fixture
def engine() -> CoverageWindowEngine:
    """Fresh core engine with cap=3, window_size=10."""
    return CoverageWindowEngine(cap=DEFAULT_CAP, window_size=DEFAULT_WINDOW_SIZE)


@pytest.fixture
def validated(engine: CoverageWindowEngine) -> ValidatedCoverageEngine:
    """Validating wrapper around the `engine` fixture."""
    return ValidatedCoverageEngine(engine)
