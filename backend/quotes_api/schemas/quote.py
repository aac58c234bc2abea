"""
Quotes API — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract.
How:   Response models serialize ORM rows (`from_attributes`); the create
       schema is the allow-list of writable fields.

Design Decision:
    QuoteParams ignores unknown keys instead of rejecting them. Only
    content, author and category ever reach the model constructor, so
    anything else a client submits is dropped without being persisted or
    echoed back. Presence of content is enforced by the model, not here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class QuoteResponse(BaseModel):
    """
    What:  Full representation of a stored quote.
    Who:   Returned by GET /quotes/{id}, and as array items by GET and POST /quotes.
    """
    id: int = Field(description="System-assigned quote identifier")
    content: str = Field(description="The quotation body")
    author: Optional[str] = Field(default=None, description="Attribution")
    category: Optional[str] = Field(default=None, description="Free-form grouping tag")
    created_at: datetime = Field(description="When the quote was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the quote was last modified (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    Example:
        {"message": "no quote matches that ID"}
    """
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class QuoteParams(BaseModel):
    """
    Permitted fields of the `quote` object in a create request.

    JSON numbers are stored as their string form (`"category": 2024` → "2024");
    objects and lists are still rejected.
    """
    content: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}


class QuoteCreateRequest(BaseModel):
    """
    Envelope of POST /quotes.

    Example:
        {"quote": {"content": "Test", "author": "Tester", "category": "test"}}
    """
    quote: QuoteParams

    model_config = {"extra": "ignore"}
