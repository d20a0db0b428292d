"""Reorder Service: runs one reorder as a locked, single-transaction batch.

Invariants:
    - read lanes -> plan -> write batch -> commit happens under the writer lock
    - A failed write rolls back the whole batch; prior committed state stays intact
    - The returned list is re-read after commit (ordered by id) even for no-ops

Design Decisions:
    - The lock is passed in (owned by DatabaseSessionManager), so tests and
      scripts can drive the service without the FastAPI app
"""

import asyncio
import logging

from shiptivity.core.domain_types import ClientId, ClientRecord, ClientStatus
from shiptivity.core.reorder import plan_reorder
from shiptivity.core.repository_protocols import ClientRepository

logger = logging.getLogger(__name__)


async def reorder_client(
    repo: ClientRepository,
    lock: asyncio.Lock,
    client_id: ClientId,
    target_status: ClientStatus | None = None,
    target_priority: int | None = None,
) -> list[ClientRecord]:
    """Move a client and return the refreshed client collection.

    The caller has already confirmed that `client_id` exists.
    """
    async with lock:
        clients = await repo.list_clients()
        plan = plan_reorder(clients, client_id, target_status, target_priority)

        if plan.is_noop:
            logger.debug(
                f"Reorder of client {client_id} is a no-op",
                extra={"client_id": client_id},
            )
            return clients

        try:
            touched = await repo.apply_updates(plan.updates)
            await repo.commit()
        except Exception:
            await repo.rollback()
            logger.error(
                f"Reorder batch for client {client_id} rolled back",
                extra={"client_id": client_id},
            )
            raise

        logger.info(
            f"Client {client_id} moved {plan.source_status.value} -> "
            f"{plan.target_status.value} at priority {plan.target_priority}",
            extra={
                "client_id": client_id,
                "status": plan.target_status.value,
                "priority": plan.target_priority,
                "updates": touched,
            },
        )
        return await repo.list_clients()
