"""Create quotes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `quotes` table (see quotes_api/models/quote.py).
Rollback: downgrade() drops the table and every stored quote with it.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "quotes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="The quotation body",
        ),
        sa.Column(
            "author",
            sa.String(255),
            nullable=True,
            comment="Attribution; not unique",
        ),
        sa.Column(
            "category",
            sa.String(100),
            nullable=True,
            comment="Free-form grouping tag",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(trim(content)) > 0", name="ck_quotes_content_present"),
    )


def downgrade() -> None:
    op.drop_table("quotes")
