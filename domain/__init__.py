"""Coverage Window Domain Layer.

This package contains the core business logic organized by bounded contexts:
- coverage: capped coverage counting over a sliding window of positions
"""

from domain import coverage

__all__ = ["coverage"]
