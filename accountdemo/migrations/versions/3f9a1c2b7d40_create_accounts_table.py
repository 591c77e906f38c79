"""create accounts table

Revision ID: 3f9a1c2b7d40
Revises:
Create Date: 2026-10-12 09:14:27.311508

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2b7d40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = "demo"


def upgrade():
    # SQLite: the schema is an attached database, see accountdemo.db.make_engine
    if op.get_bind().dialect.name != "sqlite":
        op.execute(sa.schema.CreateSchema(SCHEMA, if_not_exists=True))

    op.create_table(
        "Accounts",
        sa.Column("id", sa.Integer(), sa.Identity(always=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        schema=SCHEMA,
    )


def downgrade():
    op.drop_table("Accounts", schema=SCHEMA)
