"""
Quotes API — Application Package Initializer
=============================================

What: Marks the `quotes_api` directory as a Python package.
Who:  Used by uvicorn (`quotes_api.main:app`), Alembic, pytest and the seed command.

Architecture Note:
    The service is a thin layered stack:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← param extraction, error mapping
    ├─────────────────────────────────────┤
    │      Repositories (Data Access)     │  ← find / find_all / create
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
