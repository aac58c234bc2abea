"""
Quotes API — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the two observable failure kinds.
How:   Each exception carries a client-safe message, an HTTP status code and an
       optional context dict. Global handlers registered in main.py turn them
       into `{"message": ...}` JSON responses.
Who:   Raised by services; caught by the global handlers.

Exception Hierarchy:
    QuotesApiError (base)             → 500
    ├── QuoteNotFoundError            → 404 "no quote matches that ID"
    ├── QuoteLookupError              → 500 "there was some other error"
    └── QuoteCreateError              → 500 "An error occurred"

Callers can only tell "not found" apart from "everything else". The context
dict is logged server side and never returned to the client.
"""

from typing import Any, Dict, Optional


class QuotesApiError(Exception):
    """
    Base exception for all Quotes API errors.

    Attributes:
        message:      User-facing error description (safe to return)
        status_code:  HTTP status the global handler responds with
        context:      Debug info (logged but NOT returned to client)
    """

    status_code: int = 500
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class QuoteNotFoundError(QuotesApiError):
    """
    Raised when no quote has the requested identifier.

    The repository returns None for a missing row; the service converts that
    into this exception so the handler can answer 404.
    """

    status_code = 404
    default_message = "no quote matches that ID"

    def __init__(
        self,
        quote_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if quote_id is not None:
            ctx["quote_id"] = quote_id
        super().__init__(context=ctx)
        self.quote_id = quote_id


class QuoteLookupError(QuotesApiError):
    """Any non-not-found failure while fetching a single quote."""

    default_message = "there was some other error"


class QuoteCreateError(QuotesApiError):
    """
    Any failure while creating a quote.

    Covers undecodable bodies, a missing `quote` object, blank content and
    storage faults alike.
    """

    default_message = "An error occurred"
