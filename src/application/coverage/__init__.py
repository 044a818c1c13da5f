"""Application services for the coverage bounded context.

This module provides wrappers around the domain engine, including the
invariant-checking engine used by tests and the replay script.
"""

from .validated_engine import ValidatedCoverageEngine

__all__ = ["ValidatedCoverageEngine"]
