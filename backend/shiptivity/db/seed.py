"""Seed Data: the demo board inserted into an empty clients table.

Invariants:
    - Seeding only happens when the table is empty (never on top of live data)
    - Priorities are assigned densely per lane in list order, so the seeded
      board already satisfies the 1..N lane invariant
    - Ids are 1-based and follow list order
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shiptivity.core.domain_types import ClientStatus
from shiptivity.models.client import Client

logger = logging.getLogger(__name__)

SEED_CLIENTS: list[tuple[str, str, ClientStatus]] = [
    ("Stark, White and Abbott", "Cloned optimal hardware for warehouse routing", ClientStatus.BACKLOG),
    ("Wiza LLC", "Exclusive bandwidth-monitored carrier onboarding", ClientStatus.IN_PROGRESS),
    ("Nolan LLC", "Vision-oriented 4th generation freight portal", ClientStatus.BACKLOG),
    ("Thompson PLC", "Streamlined regional shipment tracking", ClientStatus.COMPLETE),
    ("Walker-Williamson", "Team-oriented 6th generation dispatch matrix", ClientStatus.BACKLOG),
    ("Boehm and Sons", "Automated local pickup scheduling", ClientStatus.IN_PROGRESS),
    ("Runolfsson, Hegmann and Block", "Integrated transitional customs filing", ClientStatus.COMPLETE),
    ("Schumm-Labadie", "Operative heuristic load balancing", ClientStatus.BACKLOG),
    ("Kohler Group", "Optional interactive rate quoting", ClientStatus.IN_PROGRESS),
    ("Romaguera Inc", "Centralized 24 hour cold chain alerts", ClientStatus.BACKLOG),
    ("Reilly-Osinski", "Persevering hybrid pallet inventory", ClientStatus.COMPLETE),
    ("Jakubowski Inc", "Synchronised client-server invoicing", ClientStatus.IN_PROGRESS),
    ("Hansen Group", "Profound encompassing last-mile routing", ClientStatus.BACKLOG),
    ("Bernhard-Kessler", "Reverse-engineered fleet utilization reports", ClientStatus.COMPLETE),
    ("Kuhic-Bernier", "Fully-configurable customs broker handoff", ClientStatus.BACKLOG),
    ("Lakin-Jacobs", "Enterprise-wide proof of delivery capture", ClientStatus.IN_PROGRESS),
    ("Dach-Larkin", "Managed multi-state permit tracking", ClientStatus.BACKLOG),
    ("Grant-Funk", "Phased mission-critical returns handling", ClientStatus.COMPLETE),
    ("Crist-Howe", "Balanced zero tolerance damage claims", ClientStatus.BACKLOG),
    ("Beer-Keeling", "Robust bifurcated container booking", ClientStatus.IN_PROGRESS),
]


def seed_rows(
    seeds: list[tuple[str, str, ClientStatus]] = SEED_CLIENTS,
) -> list[dict]:
    """Row dicts with ids and dense per-lane priorities."""
    next_priority = {status: 1 for status in ClientStatus}
    rows = []
    for index, (name, description, status) in enumerate(seeds, start=1):
        rows.append({
            "id": index,
            "name": name,
            "description": description,
            "status": status.value,
            "priority": next_priority[status],
        })
        next_priority[status] += 1
    return rows


async def seed_clients(db: AsyncSession) -> int:
    """Insert the demo board if the table is empty. Returns rows inserted."""
    existing = await db.scalar(select(func.count()).select_from(Client))
    if existing:
        logger.info(f"Seed skipped: {existing} clients already stored")
        return 0
    rows = seed_rows()
    db.add_all(Client(**row) for row in rows)
    await db.commit()
    logger.info(f"Seeded {len(rows)} clients")
    return len(rows)
