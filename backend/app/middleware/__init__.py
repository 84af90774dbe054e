"""
Portfolio Backend — Middleware Package
========================================

Middleware chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Router

    - request_id.py: correlation ID in a ContextVar + X-Request-ID header
    - logging.py:    one access-log line per request, level by status
"""
