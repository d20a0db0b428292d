"""Clients table: id, name, description, status, priority.

Revision ID: 001_clients
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_clients"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=False, server_default=""),
        sa.Column("status", sa.String(20), nullable=False, server_default="backlog"),
        sa.Column("priority", sa.Integer, nullable=False),
    )
    op.create_index("ix_clients_status", "clients", ["status"])


def downgrade() -> None:
    op.drop_index("ix_clients_status", table_name="clients")
    op.drop_table("clients")
