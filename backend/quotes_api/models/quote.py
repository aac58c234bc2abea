"""
Quotes API — Quote SQLAlchemy Model
====================================

What:  ORM model representing the `quotes` table.
Who:   Used by QuoteRepository for reads and inserts and by Alembic for schema management.

Table Design:
    - Integer autoincrement primary key, assigned by the database
    - content: TEXT, required; blank content is rejected at insert time
    - author / category: free-form short strings, nullable
    - created_at / updated_at: UTC timestamps managed by the ORM
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column, validates

from quotes_api.database import Base


# Range of the 32-bit INTEGER primary key
QUOTE_ID_MIN = -(2 ** 31)
QUOTE_ID_MAX = 2 ** 31 - 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Quote(Base):
    """
    A single quotation.

    Lifecycle:
        Created once (by the API or the seed loader) and then only read.
        No exposed operation updates or deletes a quote.
    """

    __tablename__ = "quotes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="The quotation body",
    )

    author: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Attribution; not unique",
    )

    # Open set of tags: motivational, philosophical, design, literary, ...
    category: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Free-form grouping tag",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        CheckConstraint("length(trim(content)) > 0", name="ck_quotes_content_present"),
    )

    @validates("content")
    def _validate_content(self, key: str, value: str | None) -> str:
        """Content must be present, mirroring the table's check constraint."""
        if value is None or not value.strip():
            raise ValueError("content can't be blank")
        return value

    def __repr__(self) -> str:
        return f"<Quote(id={self.id}, author='{self.author}', category='{self.category}')>"
