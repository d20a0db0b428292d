"""SQLAlchemy Declarative Base: shared base class for the ORM models.

Invariants:
    - Base.metadata is the single source of truth for the clients table
      (create_all on startup, Alembic for migrations)
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for Shiptivity ORM models."""
    pass
