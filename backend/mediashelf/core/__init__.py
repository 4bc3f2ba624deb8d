"""Core Layer - pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Validators and transforms are pure; time enters only through an injected clock

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
