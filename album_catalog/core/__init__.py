"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic (utc_now is the single clock)

Design Decisions:
    - Functional core separated from the imperative shell: routes and the
      storage adapter orchestrate IO around these functions
"""
