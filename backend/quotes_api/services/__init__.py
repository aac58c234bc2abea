# Services package init
"""
Quotes API — Services Layer
============================

What:  Business logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - QuoteService: list / get / create, plus translation of failures into
      the application exception hierarchy
"""
