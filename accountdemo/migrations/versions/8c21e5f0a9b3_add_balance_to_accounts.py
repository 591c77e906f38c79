"""add balance to accounts

Revision ID: 8c21e5f0a9b3
Revises: 3f9a1c2b7d40
Create Date: 2026-10-12 09:20:03.877121

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8c21e5f0a9b3'
down_revision: Union[str, Sequence[str], None] = '3f9a1c2b7d40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    # Added after the table on purpose: shows a schema change on a live table.
    # SQLite: adding a NOT NULL column requires a server_default
    op.add_column(
        "Accounts",
        sa.Column("balance", sa.Integer(), nullable=False, server_default="0"),
        schema="demo",
    )


def downgrade():
    with op.batch_alter_table("Accounts", schema="demo") as batch:
        batch.drop_column("balance")
