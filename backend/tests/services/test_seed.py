"""Seed data: dense per-lane priorities and empty-table-only insertion."""

from shiptivity.core.domain_types import ClientStatus
from shiptivity.core.lane_view import inconsistent_lanes
from shiptivity.db.seed import SEED_CLIENTS, seed_clients, seed_rows
from shiptivity.services.client_store import ClientStore


def test_seed_rows_assign_dense_priorities_per_lane():
    rows = seed_rows([
        ("a", "", ClientStatus.BACKLOG),
        ("b", "", ClientStatus.COMPLETE),
        ("c", "", ClientStatus.BACKLOG),
    ])
    assert [(r["id"], r["status"], r["priority"]) for r in rows] == [
        (1, "backlog", 1), (2, "complete", 1), (3, "backlog", 2),
    ]


def test_default_seed_covers_every_lane():
    statuses = {status for _, _, status in SEED_CLIENTS}
    assert statuses == set(ClientStatus)


async def test_seeded_board_is_consistent(test_db, seeded):
    clients = await ClientStore(test_db).list_clients()
    assert inconsistent_lanes(clients) == []


async def test_seed_skips_non_empty_table(test_db, seeded):
    assert await seed_clients(test_db) == 0
    assert len(await ClientStore(test_db).list_clients()) == len(SEED_CLIENTS)
