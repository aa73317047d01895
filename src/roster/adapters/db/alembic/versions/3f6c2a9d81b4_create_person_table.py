"""Create Person table

Revision ID: 3f6c2a9d81b4
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f6c2a9d81b4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "Person",
        sa.Column(
            "Id",
            sa.Integer(),
            nullable=False,
            autoincrement=True,
            comment="Store-assigned identifier; 0 in memory means not yet persisted.",
        ),
        sa.Column("FirstName", sa.Text(), nullable=False),
        sa.Column("LastName", sa.Text(), nullable=False),
        sa.Column(
            "HeightInInches",
            sa.Float(),
            nullable=False,
            comment="Height with feet folded in (feet * 12 + inches).",
        ),
        sa.PrimaryKeyConstraint("Id", name=op.f("pk_Person")),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("Person")
