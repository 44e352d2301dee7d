# 📄 File: authuser/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the user service: what was asked for, how it
# ended and how long it took.
# 🧪 Purpose (Technical Summary):
# Request logging middleware writing one structured line per request (method, path,
# status, duration) and warning on slow requests. Bodies are never logged, so passwords
# cannot leak into the logs.
# 🔗 Dependencies:
# FastAPI, starlette, logging
# 🔄 Connected Modules / Calls From:
# authuser.main (middleware registration)

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)

EXCLUDED_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Runs inside ErrorHandlingMiddleware, so the request ID is
    already bound to the logging context.
    """

    def __init__(self, app: ASGIApp, slow_request_threshold: float = 2.0):
        super().__init__(app)
        self.slow_request_threshold = slow_request_threshold

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start_time

        extra = {
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration * 1000, 2),
        }
        message = f"{request.method} {request.url.path} -> {response.status_code} ({duration:.3f}s)"

        if duration > self.slow_request_threshold:
            logger.warning(f"🐢 Slow request: {message}", extra=extra)
        elif response.status_code >= 500:
            logger.error(message, extra=extra)
        else:
            logger.info(message, extra=extra)

        return response
