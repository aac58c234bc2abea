"""
Quotes API — Quote Service (Business Logic)
============================================

What:  Implements list, get and create on top of QuoteRepository.
How:   Converts repository results into response models and translates every
       failure into one of the application exceptions.
Who:   Called by the quotes route handlers.

Error Translation:
    get_quote:
        repository returned None      → QuoteNotFoundError (404)
          (includes integers outside the id column's range)
        id token is not an integer    → QuoteLookupError   (500)
        storage fault                 → QuoteLookupError   (500)
    create_quote:
        body not JSON / no `quote`    → QuoteCreateError   (500)
        blank content / storage fault → QuoteCreateError   (500)
    list_quotes:
        storage faults propagate to the catch-all handler

Design Decision:
    QuoteService is stateless. It receives the session per call, so every
    request runs in its own transaction and tests can pass a mocked session.
"""

import json
import logging
from typing import List

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from quotes_api.exceptions import QuoteCreateError, QuoteLookupError, QuoteNotFoundError
from quotes_api.repositories.quote_repository import QuoteRepository, quote_repository
from quotes_api.schemas.quote import QuoteCreateRequest, QuoteParams, QuoteResponse

logger = logging.getLogger(__name__)


def quote_params(body: bytes) -> QuoteParams:
    """
    Decode a create request body and keep only the permitted fields.

    Raises:
        ValueError: body is not JSON
        pydantic.ValidationError: no `quote` object in the body
    """
    payload = json.loads(body)
    return QuoteCreateRequest.model_validate(payload).quote


class QuoteService:
    """
    Business logic layer for quote operations.

    Responsibilities:
        - list_quotes(): every stored quote
        - get_quote(): one quote, with not-found vs. other-failure distinction
        - create_quote(): allow-listed insert, answered with the full list
    """

    def __init__(self, repository: QuoteRepository = quote_repository):
        self.repository = repository

    async def list_quotes(self, db: AsyncSession) -> List[QuoteResponse]:
        """Return every persisted quote. An empty table is an empty list."""
        quotes = await self.repository.find_all(db)
        return [QuoteResponse.model_validate(quote) for quote in quotes]

    async def get_quote(self, db: AsyncSession, quote_id: str) -> QuoteResponse:
        """
        Retrieve a single quote by its raw path token.

        Args:
            db: Async database session
            quote_id: Identifier exactly as it appeared in the URL

        Raises:
            QuoteNotFoundError: No quote with that ID (→ 404)
            QuoteLookupError: Malformed ID or query failure (→ 500)
        """
        try:
            key = int(quote_id)
        except ValueError:
            logger.warning("Malformed quote id: %r", quote_id)
            raise QuoteLookupError(context={"quote_id": quote_id})

        try:
            quote = await self.repository.find(db, key)
        except Exception as e:
            logger.error("Database error fetching quote %s: %s", key, str(e))
            raise QuoteLookupError(
                context={"quote_id": key, "error_type": type(e).__name__},
            ) from e

        if quote is None:
            raise QuoteNotFoundError(quote_id=key)

        return QuoteResponse.model_validate(quote)

    async def create_quote(self, db: AsyncSession, body: bytes) -> List[QuoteResponse]:
        """
        Create a quote from a raw request body and return the updated list.

        Only content, author and category are read from the `quote` object.
        The response is the full list of quotes rather than the new record;
        callers find their quote at the end of it.

        Raises:
            QuoteCreateError: Any decoding, validation or storage failure (→ 500)
        """
        try:
            params = quote_params(body)
            quote = await self.repository.create(
                db,
                content=params.content,
                author=params.author,
                category=params.category,
            )
            logger.info("Quote %s created (category=%s)", quote.id, quote.category)
            return await self.list_quotes(db)

        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError and the model's blank-content check are ValueErrors
            logger.warning("Rejected quote create: %s", str(e))
            raise QuoteCreateError(context={"error_type": type(e).__name__}) from e
        except Exception as e:
            logger.error("Database error creating quote: %s", str(e), exc_info=True)
            raise QuoteCreateError(context={"error_type": type(e).__name__}) from e


# ── Singleton Instance ────────────────────────────────────────────────────
quote_service = QuoteService()
