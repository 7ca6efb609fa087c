"""add candidate tag position

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-20 14:30:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0002"
down_revision: Union[str, Sequence[str], None] = "0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column(
        "candidate_tags",
        sa.Column("position", sa.Integer(), nullable=False, server_default=sa.text("0")),
    )

    # Existing assignments keep their join order
    op.execute(
        """
        UPDATE candidate_tags AS ct
        SET position = ranked.rn - 1
        FROM (
            SELECT id, ROW_NUMBER() OVER (PARTITION BY candidate_id ORDER BY created_at, id) AS rn
            FROM candidate_tags
        ) AS ranked
        WHERE ct.id = ranked.id
        """
    )

    op.create_index(
        "idx_candidate_tags_candidate_position",
        "candidate_tags",
        ["candidate_id", "position"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_candidate_tags_candidate_position", table_name="candidate_tags")
    op.drop_column("candidate_tags", "position")
