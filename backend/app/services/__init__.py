# Services package init
"""
Posts API — Services Layer
============================

What:  Business logic layer sitting between routes (HTTP) and repositories (persistence).
How:   Services accept request schemas, apply business rules, and return
       response schemas. They're injected into routes via FastAPI's dependency
       injection.

Service Inventory:
    - PostService: create, list, get, full update, partial update, delete
"""
