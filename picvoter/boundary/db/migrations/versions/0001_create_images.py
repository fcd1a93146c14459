"""Create images table with vote counters.

Revision ID: 0001
Revises:
Create Date: 2022-08-26
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: str | None = None


def upgrade() -> None:
    op.create_table(
        "images",
        sa.Column("id", sa.String(26), primary_key=True, nullable=False),
        sa.Column("hash", sa.String(20), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
    )


def downgrade() -> None:
    op.drop_table("images")
