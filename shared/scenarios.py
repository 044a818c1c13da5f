"""Single source of truth for the reference coverage scenarios.

This module defines request sequences and their expected active windows,
used by both:
- scripts/replay_scenarios.py (manual replay)
- tests/coverage/test_scenarios.py (regression tests)

Location: shared/ (not tests/) to avoid scripts->tests dependency.
Kept dependency-free: plain tuples only.
"""

from __future__ import annotations

from typing import NamedTuple


class Scenario(NamedTuple):
    """Requests replayed on a fresh engine, then the expected window."""

    name: str
    cap: int
    window_size: int
    requests: tuple[tuple[int, int], ...]  # (start, count) pairs, in order
    expected_window: tuple[int, int]
    expected_runs: dict[int, int] | None = None  # Final map, when pinned


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(
        name="nested_requests",
        cap=3,
        window_size=10,
        requests=((1, 5), (1, 6), (1, 7)),
        expected_window=(0, 9),
        expected_runs={0: 0, 1: 3, 6: 2, 7: 1, 8: 0},
    ),
    Scenario(
        name="nested_then_saturate_head",
        cap=3,
        window_size=10,
        requests=((1, 5), (1, 6), (1, 7), (0, 1), (0, 1), (0, 1)),
        expected_window=(6, 15),
        expected_runs={6: 2, 7: 1, 8: 0},
    ),
    Scenario(
        name="saturate_first_position",
        cap=3,
        window_size=10,
        requests=((0, 1), (0, 1), (0, 1)),
        expected_window=(1, 10),
        expected_runs={1: 0},
    ),
    Scenario(
        name="request_beyond_window",
        cap=3,
        window_size=10,
        requests=((20, 5),),
        expected_window=(0, 9),
        expected_runs={0: 0},
    ),
    Scenario(
        name="empty_request",
        cap=3,
        window_size=10,
        requests=((0, 0),),
        expected_window=(0, 9),
        expected_runs={0: 0},
    ),
    # Window is read once per call: only [0, 9] is covered each time
    Scenario(
        name="request_wider_than_window",
        cap=2,
        window_size=10,
        requests=((0, 100), (0, 100)),
        expected_window=(10, 19),
        expected_runs={10: 0},
    ),
)

SCENARIO_NAMES: list[str] = [s.name for s in SCENARIOS]
