"""Domain Types: rich types that replace bare primitives in lane logic.

Invariants:
    - ClientId wraps int, Priority wraps int (1 = highest precedence)
    - ClientStatus is the closed set of lanes; raw status strings are parsed once
    - ClientRecord is an immutable snapshot of one stored row

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON and compares equal to the stored token
    - Frozen dataclass snapshots: core functions never mutate ORM rows
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity / Value Types ─────────────────────────────────────

ClientId = NewType("ClientId", int)
Priority = NewType("Priority", int)


# ─── Enums ───────────────────────────────────────────────────────

class ClientStatus(str, Enum):
    """The three lanes a client can sit in."""
    BACKLOG = "backlog"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"


class ShiftDirection(str, Enum):
    """Which way a contiguous run of lane members moves.

    TOWARD_FRONT lowers each priority by one (closer to slot 1),
    TOWARD_BACK raises each priority by one.
    """
    TOWARD_FRONT = "toward_front"
    TOWARD_BACK = "toward_back"


class MoveKind(str, Enum):
    """Classification of a reorder request after normalization."""
    NOOP = "noop"
    SAME_LANE = "same_lane"
    CROSS_LANE = "cross_lane"


# ─── Snapshots ───────────────────────────────────────────────────

@dataclass(frozen=True)
class ClientRecord:
    """Read-only view of a stored client."""
    id: ClientId
    name: str
    description: str
    status: ClientStatus
    priority: Priority


@dataclass(frozen=True)
class PriorityUpdate:
    """One row write in a reorder batch."""
    client_id: ClientId
    status: ClientStatus
    priority: Priority
