"""
Quote persistence (SQLAlchemy ORM).

The repository reports a missing row as None and lets storage exceptions
propagate; deciding what either means for a client is the service's job.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quotes_api.models.quote import QUOTE_ID_MAX, QUOTE_ID_MIN, Quote


class QuoteRepository:
    """Find-all, find-by-id and create over the `quotes` table."""

    async def find_all(self, db: AsyncSession) -> List[Quote]:
        # Ascending id is insertion order
        result = await db.execute(select(Quote).order_by(Quote.id))
        return list(result.scalars().all())

    async def find(self, db: AsyncSession, quote_id: int) -> Optional[Quote]:
        # No row can hold an id the INTEGER column can't store
        if not QUOTE_ID_MIN <= quote_id <= QUOTE_ID_MAX:
            return None
        result = await db.execute(select(Quote).where(Quote.id == quote_id))
        return result.scalar_one_or_none()

    async def create(
        self,
        db: AsyncSession,
        content: Optional[str],
        author: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Quote:
        """
        Insert one quote and flush so the database assigns its id.

        Raises:
            ValueError: content is missing or blank
            sqlalchemy.exc.SQLAlchemyError: the insert failed
        """
        quote = Quote(content=content, author=author, category=category)
        db.add(quote)
        await db.flush()
        return quote


quote_repository = QuoteRepository()
