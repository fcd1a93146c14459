"""Add filename to images.

Rows created before this revision get an empty filename.

Revision ID: 0002
Revises: 0001
Create Date: 2022-08-26
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "0002"
down_revision: str | None = "0001"
branch_labels: tuple[str, ...] | None = None
depends_on: str | None = None


def upgrade() -> None:
    op.add_column(
        "images",
        sa.Column("filename", sa.String(200), nullable=False, server_default=""),
    )


def downgrade() -> None:
    with op.batch_alter_table("images") as batch_op:
        batch_op.drop_column("filename")
