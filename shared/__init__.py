"""Shared constants used by both scripts and tests.

This package provides a dependency-free location for data that needs to be
shared across packages without creating circular imports.
"""

from __future__ import annotations
