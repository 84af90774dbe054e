"""
Portfolio Backend — Request Logging Middleware
================================================

What:  One access-log line per request on the "portfolio.access" logger.
How:   Measures wall time around the downstream app and logs method,
       path, action, status, duration, request ID and client IP.

    GET /api/skills?action=by_type 200 4.2ms [1a2b3c4d] from 127.0.0.1

Level follows the status: 5xx → ERROR, 4xx → WARNING, otherwise INFO.
Request bodies are never logged; contact messages carry personal data.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("portfolio.access")

# Probes hit these every few seconds
QUIET_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000

        action = request.query_params.get("action")
        target = f"{path}?action={action}" if action else path
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")
        status = response.status_code

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            target,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "action": action,
                "status": status,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return response
