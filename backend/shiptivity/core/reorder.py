"""Reorder Engine: plans priority rewrites for a same-lane or cross-lane move.

Invariants:
    - After applying a plan every lane holds priorities exactly 1..N
    - The moving client is always the last update in the batch
    - A run whose priorities go up is written from its largest priority down;
      a run whose priorities go down is written from its smallest up, so no
      write lands on a slot still held by an unwritten row of the same run
    - Target priorities are clamped into the post-move lane size; the planner
      has no failure modes for an existing client id

Design Decisions:
    - Planning is pure: plan_reorder returns a ReorderPlan and the service
      persists plan.updates in order inside one transaction
    - Slots are positions in build_lane() output (slot i holds priority i + 1),
      so shift_range works on positions instead of stored priority values
"""

from dataclasses import dataclass, field
from typing import Sequence

from shiptivity.core.domain_types import (
    ClientId, ClientRecord, ClientStatus, MoveKind, Priority,
    PriorityUpdate, ShiftDirection,
)
from shiptivity.core.lane_view import build_lane


@dataclass(frozen=True)
class ReorderPlan:
    """Ordered batch of row writes for one reorder request."""
    client_id: ClientId
    kind: MoveKind
    source_status: ClientStatus
    target_status: ClientStatus
    target_priority: Priority | None = None
    updates: list[PriorityUpdate] = field(default_factory=list)

    @property
    def is_noop(self) -> bool:
        return not self.updates


def clamp_priority(priority: int, lane_size: int) -> Priority:
    """Clamp a requested priority into [1, lane_size]."""
    return Priority(max(1, min(priority, lane_size)))


def shift_range(
    lane_ids: Sequence[ClientId],
    start: int,
    stop: int,
    direction: ShiftDirection,
    status: ClientStatus,
) -> list[PriorityUpdate]:
    """Move the members in slots [start, stop) one slot in `direction`.

    Slot i holds priority i + 1. TOWARD_BACK writes i + 2 from the last slot
    backwards; TOWARD_FRONT writes i from the first slot forwards.
    """
    slots = range(max(start, 0), min(stop, len(lane_ids)))
    if direction is ShiftDirection.TOWARD_BACK:
        return [
            PriorityUpdate(lane_ids[i], status, Priority(i + 2))
            for i in reversed(slots)
        ]
    return [
        PriorityUpdate(lane_ids[i], status, Priority(i))
        for i in slots
    ]


def classify_move(
    client: ClientRecord,
    target_status: ClientStatus | None,
    target_priority: int | None,
) -> MoveKind:
    """Decide which case a request falls into before any lane is built."""
    status = target_status or client.status
    if status != client.status:
        return MoveKind.CROSS_LANE
    if target_priority is None:
        return MoveKind.NOOP
    return MoveKind.SAME_LANE


def plan_reorder(
    clients: Sequence[ClientRecord],
    client_id: ClientId,
    target_status: ClientStatus | None = None,
    target_priority: int | None = None,
) -> ReorderPlan:
    """Compute the batch of writes that moves `client_id`.

    The caller guarantees `client_id` is present in `clients`.
    """
    client = next(c for c in clients if c.id == client_id)
    kind = classify_move(client, target_status, target_priority)

    if kind is MoveKind.SAME_LANE:
        return _plan_same_lane(clients, client, target_priority)
    if kind is MoveKind.CROSS_LANE:
        return _plan_cross_lane(clients, client, target_status, target_priority)
    return ReorderPlan(
        client_id=client.id, kind=MoveKind.NOOP,
        source_status=client.status, target_status=client.status,
    )


def _plan_same_lane(
    clients: Sequence[ClientRecord],
    client: ClientRecord,
    target_priority: int,
) -> ReorderPlan:
    lane = build_lane(clients, client.status)
    old_p = lane.index(client.id) + 1
    new_p = clamp_priority(target_priority, len(lane))

    updates: list[PriorityUpdate] = []
    if new_p < old_p:
        # slots [new_p, old_p - 1] move toward the back
        updates = shift_range(
            lane, new_p - 1, old_p - 1,
            ShiftDirection.TOWARD_BACK, client.status,
        )
    elif new_p > old_p:
        # slots [old_p + 1, new_p] move toward the front
        updates = shift_range(
            lane, old_p, new_p,
            ShiftDirection.TOWARD_FRONT, client.status,
        )
    if new_p != old_p:
        updates.append(PriorityUpdate(client.id, client.status, new_p))

    return ReorderPlan(
        client_id=client.id, kind=MoveKind.SAME_LANE,
        source_status=client.status, target_status=client.status,
        target_priority=new_p, updates=updates,
    )


def _plan_cross_lane(
    clients: Sequence[ClientRecord],
    client: ClientRecord,
    target_status: ClientStatus,
    target_priority: int | None,
) -> ReorderPlan:
    source = build_lane(clients, client.status)
    destination = build_lane(clients, target_status)

    # close the gap left in the source lane
    old_slot = source.index(client.id)
    updates = shift_range(
        source, old_slot + 1, len(source),
        ShiftDirection.TOWARD_FRONT, client.status,
    )

    # open a slot in the destination lane; default is append
    size = len(destination)
    if target_priority is None or target_priority > size:
        new_p = Priority(size + 1)
    else:
        new_p = clamp_priority(target_priority, size)
    updates += shift_range(
        destination, new_p - 1, size,
        ShiftDirection.TOWARD_BACK, target_status,
    )
    updates.append(PriorityUpdate(client.id, target_status, new_p))

    return ReorderPlan(
        client_id=client.id, kind=MoveKind.CROSS_LANE,
        source_status=client.status, target_status=target_status,
        target_priority=new_p, updates=updates,
    )


def apply_plan(
    clients: Sequence[ClientRecord], plan: ReorderPlan,
) -> list[ClientRecord]:
    """Return new snapshots with the plan's writes applied in order."""
    by_id = {c.id: c for c in clients}
    for update in plan.updates:
        current = by_id[update.client_id]
        by_id[update.client_id] = ClientRecord(
            id=current.id, name=current.name,
            description=current.description,
            status=update.status, priority=update.priority,
        )
    return [by_id[c.id] for c in clients]
