# 📄 File: authuser/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Lets load balancers and operators ask "is the user service alive, and can it reach its database?"
# 🧪 Purpose (Technical Summary):
# Liveness (/health) and readiness (/health/ready) endpoints. Readiness runs the database
# health check and answers 503 when the store is unreachable.
# 🔗 Dependencies:
# FastAPI, authuser.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# authuser.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from authuser.shared.config.settings import get_settings
from authuser.shared.infrastructure.database.connection import database_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get(
    "/health",
    summary="Basic Health Check",
    description="Basic health check endpoint for load balancers and monitoring",
)
async def health_check() -> JSONResponse:
    settings = get_settings()
    return JSONResponse(
        status_code=200,
        content={
            "status": "ok",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }
    )


@health_router.get(
    "/health/ready",
    summary="Readiness Check",
    description="Checks database connectivity",
)
async def readiness_check() -> JSONResponse:
    database = await database_health_check()
    ready = database["status"] == "healthy"
    if not ready:
        logger.warning(f"Readiness check failed: {database.get('error')}")

    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {"database": database},
        }
    )
