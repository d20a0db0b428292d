"""Clients Routes: listing, lookup and the reorder endpoint.

Invariants:
    - Validation order for PUT: id format, existence, status, priority
    - The first failing check ends the request; no reorder runs after a failure
    - PUT always answers with the full client collection (ordered by id)
    - GET ?status= lists one lane in id order; lane order is a reorder concern
    - A missing client is NOT_FOUND (404) on GET and INVALID_ID (400) on PUT
    - Ids outside the id column's range are treated as missing without a query

Design Decisions:
    - Parsing lives in core/validation.py; this module only sequences calls
    - find_client shared by GET and PUT; each picks its own missing-client error
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shiptivity.core.domain_types import ClientId, ClientRecord
from shiptivity.core.errors import ClientNotFoundError, UnknownClientError
from shiptivity.core.validation import (
    client_id_in_range, parse_client_id, parse_priority, parse_status,
)
from shiptivity.infrastructure.database import get_db, get_write_lock
from shiptivity.schemas.client import ClientResponse, ClientUpdate
from shiptivity.services.client_store import ClientStore
from shiptivity.services.reorder_service import reorder_client

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/clients", tags=["clients"])


async def find_client(
    raw_id: str, store: ClientStore,
) -> tuple[ClientId, ClientRecord | None]:
    """Parse the path id (InvalidId on bad format) and look the client up."""
    client_id = parse_client_id(raw_id)
    if not client_id_in_range(client_id):
        return client_id, None
    return client_id, await store.get_client(client_id)


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    status: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List all clients, or one lane with ?status=backlog|in-progress|complete."""
    lane = parse_status(status or None)
    clients = await ClientStore(db).list_clients(lane)
    return [ClientResponse.from_record(c) for c in clients]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(client_id: str, db: AsyncSession = Depends(get_db)):
    """Get one client by id."""
    client_id, client = await find_client(client_id, ClientStore(db))
    if client is None:
        raise ClientNotFoundError(client_id)
    return ClientResponse.from_record(client)


@router.put("/{client_id}", response_model=list[ClientResponse])
async def update_client(
    client_id: str,
    body: ClientUpdate | None = None,
    db: AsyncSession = Depends(get_db),
    lock: asyncio.Lock = Depends(get_write_lock),
):
    """Change a client's status and/or priority; returns every client."""
    body = body or ClientUpdate()
    store = ClientStore(db)
    client_id, client = await find_client(client_id, store)
    if client is None:
        raise UnknownClientError(client_id)
    target_status = parse_status(body.status)
    target_priority = parse_priority(body.priority)

    clients = await reorder_client(
        store, lock, client.id, target_status, target_priority,
    )
    return [ClientResponse.from_record(c) for c in clients]
