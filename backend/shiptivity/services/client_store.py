"""Client Store: SQLAlchemy implementation of ClientRepository.

Invariants:
    - Reads return ClientRecord snapshots (column selects, no identity map),
      so a read after a batch always reflects the written values
    - apply_updates issues one UPDATE per PriorityUpdate in the given order
    - The store never commits on its own inside apply_updates; the caller
      owns the transaction boundary
"""

import logging
from typing import Iterable

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shiptivity.core.domain_types import (
    ClientId, ClientRecord, ClientStatus, Priority, PriorityUpdate,
)
from shiptivity.models.client import Client

logger = logging.getLogger(__name__)

_COLUMNS = (
    Client.id, Client.name, Client.description, Client.status, Client.priority,
)


def _to_record(row) -> ClientRecord:
    return ClientRecord(
        id=ClientId(row.id),
        name=row.name,
        description=row.description,
        status=ClientStatus(row.status),
        priority=Priority(row.priority),
    )


class ClientStore:
    """Reads and batch-writes clients through one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_clients(
        self, status: ClientStatus | None = None,
    ) -> list[ClientRecord]:
        """All clients, or one lane, ordered by id."""
        query = select(*_COLUMNS).order_by(Client.id)
        if status is not None:
            query = query.where(Client.status == status.value)
        result = await self.db.execute(query)
        return [_to_record(row) for row in result.all()]

    async def get_client(self, client_id: ClientId) -> ClientRecord | None:
        result = await self.db.execute(
            select(*_COLUMNS).where(Client.id == client_id).limit(1),
        )
        row = result.one_or_none()
        return _to_record(row) if row else None

    async def apply_updates(self, updates: Iterable[PriorityUpdate]) -> int:
        """Write each update in order. Returns the number of rows touched."""
        count = 0
        for u in updates:
            await self.db.execute(
                update(Client)
                .where(Client.id == u.client_id)
                .values(status=u.status.value, priority=u.priority)
                .execution_options(synchronize_session=False),
            )
            count += 1
        return count

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
