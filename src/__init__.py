"""Application Layer.

Application services that orchestrate domain logic, such as wrappers that
re-check domain invariants after every engine operation.
"""
