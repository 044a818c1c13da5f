#!/usr/bin/env python3
"""Replay the reference coverage scenarios through the validating engine.

Every scenario from shared/scenarios.py is applied to a fresh
ValidatedCoverageEngine, so any invariant violation aborts the replay.

Usage:
    python scripts/replay_scenarios.py [-v]

Requirements:
    pip install -e .

Output:
    One line per scenario with the resulting active window, exit code
    0 when every scenario matches its expected window, 1 otherwise.
"""

from __future__ import annotations

import logging
import sys

from application.coverage import ValidatedCoverageEngine
from domain.coverage.errors import InvariantViolationError
from shared.scenarios import SCENARIOS, Scenario


def replay(scenario: Scenario) -> tuple[int, int]:
    """Apply all requests of a scenario and return the final window."""
    engine = ValidatedCoverageEngine.create(scenario.cap, scenario.window_size)
    for start, count in scenario.requests:
        engine.apply_coverage(start, count)
    return engine.active_window()


# =============================================================================
# Main
# =============================================================================
def main(argv: list[str] | None = None) -> int:
    """Replay all scenarios.

    Returns:
        0 on success, 1 on failure
    """
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(
        level=logging.DEBUG if "-v" in args else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("=" * 60)
    print("Replaying coverage window scenarios")
    print("=" * 60)

    failures = 0
    for scenario in SCENARIOS:
        try:
            window = replay(scenario)
        except InvariantViolationError as e:
            print(f"  {scenario.name:32} ERROR: {e}")
            failures += 1
            continue

        status = "ok" if window == scenario.expected_window else "MISMATCH"
        if window != scenario.expected_window:
            failures += 1
        print(
            f"  {scenario.name:32} window={window} "
            f"expected={scenario.expected_window} {status}"
        )

    print()
    if failures:
        print(f"ERROR: {failures} of {len(SCENARIOS)} scenarios failed")
        return 1
    print(f"All {len(SCENARIOS)} scenarios replayed successfully.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
