# Routes package init
"""
Posts API — API Routes Package
================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - posts.py:   POST/GET        /api/posts
                  GET/PUT/PATCH/DELETE /api/posts/{id}
    - health.py:  GET  /health    (service health check)

Routes are thin: extract request data, call the service, set status and
headers. Business logic belongs in services.
"""
