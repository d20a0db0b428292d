"""Core Layer: pure lane and reorder logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the shell reads lanes,
      core plans the moves, the shell writes the batch
"""
