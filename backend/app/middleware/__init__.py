# Middleware package init
"""
Posts API — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Rate Limit] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: correlation ID for logging and every error body, 429 included
    2. Rate Limit: reject abusive requests before logging and routing
    3. Logging: access log line with status and duration
"""
