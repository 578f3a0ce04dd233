"""Add role and plan columns to users.

Deployments created before RBAC get both columns; existing rows read as
role 'user' and plan 'free' through the server defaults.

Revision ID: 20260115000000
Revises: 20260101000000
Create Date: 2026-01-15

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20260115000000"
down_revision: Union[str, None] = "20260101000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "users",
        sa.Column("role", sa.String(length=32), nullable=True, server_default="user"),
    )
    op.add_column(
        "users",
        sa.Column("plan", sa.Text(), nullable=True, server_default="free"),
    )


def downgrade() -> None:
    op.drop_column("users", "plan")
    op.drop_column("users", "role")
