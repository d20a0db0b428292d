"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Client persistence is accessed through ClientRepository
    - Implementations provided by services/ via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
    - Async methods: implementations do IO, while the planner that consumes
      their snapshots is synchronous
"""

from typing import Iterable, Protocol

from shiptivity.core.domain_types import (
    ClientId, ClientRecord, ClientStatus, PriorityUpdate,
)


class ClientRepository(Protocol):
    """Contract for client persistence, implemented by services.ClientStore."""
    async def list_clients(
        self, status: ClientStatus | None = None,
    ) -> list[ClientRecord]: ...
    async def get_client(self, client_id: ClientId) -> ClientRecord | None: ...
    async def apply_updates(self, updates: Iterable[PriorityUpdate]) -> int: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
