# 📄 File: authuser/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Catches any error nobody else handled and turns it into a consistent, polite error reply,
# and stamps every reply with a tracking number so a request can be followed through the logs.
# 🧪 Purpose (Technical Summary):
# Global error handling middleware: assigns the request ID (honouring an incoming
# X-Request-ID), binds it to the logging context, converts unhandled exceptions into a
# 500 error body and adds X-Request-ID / X-Response-Time headers. Also hosts the
# exception handlers registered for AuthUserException and HTTPException.
# 🔗 Dependencies:
# FastAPI, starlette, authuser.shared.core.exceptions, authuser.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# authuser.main (middleware and exception handler registration)

import logging
import time
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from authuser.shared.core.exceptions import AuthUserException
from authuser.shared.utils.logging import log_context, request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def build_error_body(
    code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Uniform error body shared by the middleware and the exception handlers."""
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": request_id,
        }
    }


def _request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None) or request_id_var.get() or None


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the user service.

    Application errors are rendered by the exception handlers below;
    this middleware only sees what escaped them.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        start_time = time.perf_counter()

        with log_context(request.headers.get(REQUEST_ID_HEADER) or None) as request_id:
            request.state.request_id = request_id
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.error(
                    f"❌ Unhandled error on {request.method} {request.url.path}: {exc}",
                    exc_info=True,
                )
                response = JSONResponse(
                    status_code=500,
                    content=build_error_body("INTERNAL_SERVER_ERROR", "Internal server error", request_id=request_id),
                )

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Response-Time"] = f"{time.perf_counter() - start_time:.3f}s"
        return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

async def auth_user_exception_handler(request: Request, exc: AuthUserException) -> JSONResponse:
    """Render application exceptions with their own status code and error code."""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code}: {exc.message}")
    else:
        logger.info(f"{exc.error_code}: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_body(exc.error_code, exc.message, exc.details, _request_id(request)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (404 route, 405 method) in the same envelope."""
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_body(f"HTTP_{exc.status_code}", str(exc.detail), request_id=_request_id(request)),
        headers=getattr(exc, "headers", None),
    )
