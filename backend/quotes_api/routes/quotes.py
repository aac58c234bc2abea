"""
Quotes API — Quote Route Handlers
==================================

What:  GET /quotes (list), GET /quotes/{id} (detail), POST /quotes (create).
How:   Extracts the path token or raw body, delegates to QuoteService and
       returns response models. Failures surface as application exceptions
       and are rendered by the global handlers in main.py.
"""

from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from quotes_api.database import get_db_session
from quotes_api.schemas.quote import MessageResponse, QuoteResponse
from quotes_api.services.quote_service import quote_service


router = APIRouter(prefix="/quotes", tags=["Quotes"])


@router.get(
    "",
    response_model=List[QuoteResponse],
    summary="List all quotes",
)
async def list_quotes(
    db: AsyncSession = Depends(get_db_session),
) -> List[QuoteResponse]:
    return await quote_service.list_quotes(db)


@router.get(
    "/{quote_id}",
    response_model=QuoteResponse,
    responses={
        404: {"description": "No quote matches that ID", "model": MessageResponse},
        500: {"description": "Malformed ID or server error", "model": MessageResponse},
    },
    summary="Get a single quote by ID",
)
async def get_quote(
    quote_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> QuoteResponse:
    """
    The ID is taken as a raw string: a non-integer token is a server error
    ("there was some other error"), not a 422 validation response.
    """
    return await quote_service.get_quote(db, quote_id)


@router.post(
    "",
    response_model=List[QuoteResponse],
    responses={
        500: {"description": "The quote could not be created", "model": MessageResponse},
    },
    summary="Create a quote",
    description=(
        "Body: {\"quote\": {\"content\", \"author\", \"category\"}}. Other fields are ignored. "
        "Responds with the full list of quotes, including the new one."
    ),
)
async def create_quote(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> List[QuoteResponse]:
    # Raw body: decoding failures must map to the create error, not a 422
    body = await request.body()
    return await quote_service.create_quote(db, body)
