"""Client ORM: one kanban card in one status lane.

Invariants:
    - id is an integer primary key, never rewritten
    - status holds a ClientStatus value; priority is the lane-local rank (1 = first)
    - (status, priority) is deliberately NOT unique: a reorder batch passes
      through transient duplicates before it commits

Design Decisions:
    - Index on status: every listing and every reorder reads whole lanes
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shiptivity.db.base import Base


class Client(Base):
    """Client entity: name, description, lane and rank."""
    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="",
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="backlog", index=True,
    )
    priority: Mapped[int] = mapped_column(Integer, nullable=False)
