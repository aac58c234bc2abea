# Routes package init
"""
Quotes API — API Routes Package
================================

Route Inventory:
    - quotes.py:  GET  /quotes        (list all quotes)
                  GET  /quotes/{id}   (single quote)
                  POST /quotes        (create, responds with the full list)
    - health.py:  GET  /health        (service health check)

Routes stay thin: extract inputs, call the service, return the model.
"""
