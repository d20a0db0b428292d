"""ORM Models: SQLAlchemy declarative models.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all
      or Alembic autogenerate runs
"""

from shiptivity.models.client import Client  # noqa: F401
