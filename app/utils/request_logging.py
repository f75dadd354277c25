"""
Request logging middleware.

Usage:
    from app.utils.request_logging import RequestLoggingMiddleware
    app.add_middleware(RequestLoggingMiddleware)
"""
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("app.requests")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    # Health checks are polled constantly
    SKIP_PATHS = {
        '/health',
        '/favicon.ico',
    }

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        start_time = time.time()
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            latency_ms = (time.time() - start_time) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {status_code} ({latency_ms:.1f}ms)"
            )
