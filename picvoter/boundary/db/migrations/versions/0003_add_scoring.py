"""Add confidence and sorting columns plus the sorting index.

Scores for rows that already carry votes are backfilled so every row
satisfies the configured scoring policy (PICVOTER_SCORING_Z) once this
revision is applied.

Revision ID: 0003
Revises: 0002
Create Date: 2022-08-26
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import context, op

from picvoter.configs import get_settings
from picvoter.core.scoring import ScoringPolicy

revision: str = "0003"
down_revision: str | None = "0002"
branch_labels: tuple[str, ...] | None = None
depends_on: str | None = None


def upgrade() -> None:
    op.add_column(
        "images",
        sa.Column("confidence", sa.Float(), nullable=False, server_default="0"),
    )
    op.add_column(
        "images",
        sa.Column("sorting", sa.Float(), nullable=False, server_default="0"),
    )
    op.create_index("ix_images_sorting", "images", ["sorting"], unique=False)

    if context.is_offline_mode():
        return

    images = sa.table(
        "images",
        sa.column("id", sa.String),
        sa.column("upvotes", sa.Integer),
        sa.column("downvotes", sa.Integer),
        sa.column("confidence", sa.Float),
        sa.column("sorting", sa.Float),
    )
    bind = op.get_bind()
    voted = bind.execute(
        sa.select(images.c.id, images.c.upvotes, images.c.downvotes).where(
            (images.c.upvotes > 0) | (images.c.downvotes > 0)
        )
    ).all()
    policy = ScoringPolicy(z=get_settings().scoring.z)
    for row in voted:
        score = policy.score(row.upvotes, row.downvotes)
        bind.execute(
            images.update()
            .where(images.c.id == row.id)
            .values(confidence=score.confidence, sorting=score.sorting)
        )


def downgrade() -> None:
    op.drop_index("ix_images_sorting", table_name="images")
    with op.batch_alter_table("images") as batch_op:
        batch_op.drop_column("sorting")
        batch_op.drop_column("confidence")
