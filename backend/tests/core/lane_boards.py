"""Board builders for core tests: ClientRecord lists from compact lane specs."""

from shiptivity.core.domain_types import (
    ClientId, ClientRecord, ClientStatus, Priority,
)


def make_board(**lanes: str) -> list[ClientRecord]:
    """make_board(backlog="ABCD", complete="XY") -> records with ids 1..N.

    Letters become names; each lane gets priorities 1..len in order.
    Keyword in_progress maps to the in-progress lane.
    """
    records = []
    next_id = 1
    for key, names in lanes.items():
        status = ClientStatus(key.replace("_", "-"))
        for priority, name in enumerate(names, start=1):
            records.append(ClientRecord(
                id=ClientId(next_id), name=name, description="",
                status=status, priority=Priority(priority),
            ))
            next_id += 1
    return records


def id_of(board: list[ClientRecord], name: str) -> ClientId:
    return next(c.id for c in board if c.name == name)


def lane_names(board: list[ClientRecord], status: ClientStatus) -> list[tuple[str, int]]:
    """[(name, priority), ...] for a lane, ordered by priority."""
    members = sorted(
        (c for c in board if c.status == status), key=lambda c: c.priority,
    )
    return [(c.name, c.priority) for c in members]
