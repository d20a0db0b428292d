"""Services Layer: client persistence and the reorder orchestration.

Invariants:
    - Services own IO; they call core/ for every decision about priorities
"""
