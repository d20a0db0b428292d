"""Lane View Builder: ordered id sequences for one status lane.

Invariants:
    - build_lane returns ids sorted by priority ascending (slot 0 = priority 1)
    - Ties keep the input order (sorted() is stable)
    - Never raises; an empty lane yields []

Design Decisions:
    - Works on ClientRecord snapshots, not ORM rows, so the planner stays pure
"""

from typing import Iterable

from shiptivity.core.domain_types import ClientId, ClientRecord, ClientStatus


def build_lane(
    clients: Iterable[ClientRecord], status: ClientStatus,
) -> list[ClientId]:
    """Ids of the clients in `status`, highest precedence first."""
    members = [c for c in clients if c.status == status]
    members = sorted(members, key=lambda c: c.priority)
    return [c.id for c in members]


def lane_priorities(
    clients: Iterable[ClientRecord], status: ClientStatus,
) -> list[int]:
    """Priorities held by the lane, ascending."""
    return sorted(c.priority for c in clients if c.status == status)


def inconsistent_lanes(clients: Iterable[ClientRecord]) -> list[ClientStatus]:
    """Lanes whose priorities are not exactly 1..N."""
    clients = list(clients)
    broken = []
    for status in ClientStatus:
        priorities = lane_priorities(clients, status)
        if priorities != list(range(1, len(priorities) + 1)):
            broken.append(status)
    return broken
