"""Client Schemas: Pydantic models for the clients API.

Invariants:
    - ClientResponse mirrors the stored row exactly
    - ClientUpdate accepts loose values; status/priority are checked by
      core/validation.py so errors carry the InvalidStatus/InvalidPriority kinds

Design Decisions:
    - Fields typed as Any: raw JSON values (booleans included) reach the
      parsers unchanged instead of being coerced by Pydantic
"""

from typing import Any

from pydantic import BaseModel

from shiptivity.core.domain_types import ClientRecord


class ClientResponse(BaseModel):
    """A client as returned by every endpoint."""
    id: int
    name: str
    description: str
    status: str
    priority: int

    @classmethod
    def from_record(cls, record: ClientRecord) -> "ClientResponse":
        return cls(
            id=record.id,
            name=record.name,
            description=record.description,
            status=record.status.value,
            priority=record.priority,
        )


class ClientUpdate(BaseModel):
    """PUT /clients/{id} body. Both fields optional."""
    status: Any = None
    priority: Any = None
