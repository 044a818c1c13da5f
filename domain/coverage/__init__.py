"""Coverage Bounded Context.

Responsible for capped coverage counting over a sliding window of positions:
- Value Objects: WindowParameters, ActiveWindow, Run, CoverageSnapshot, Block
- Entities: CoverageWindowEngine
- Services: check_invariants, check_window_advance
"""
