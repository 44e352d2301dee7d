# 📄 File: authuser/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the user account service, connects it to its database,
# the message broker and the course service, and gets it ready to answer requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point: lifespan-managed database engine and
# session factory, course-service HTTP session and kombu broker connection, middleware
# stack, router registration and exception handlers.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - authuser.shared.config.settings
# - authuser.shared.infrastructure.database
# - authuser.api (routers, middleware)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup (authuser.main:app)
# - Docker container entry point / `authuser` console script
# - tests (create_application)

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from authuser.api.middleware.error_handling import (
    ErrorHandlingMiddleware,
    auth_user_exception_handler,
    http_exception_handler,
)
from authuser.api.middleware.logging import RequestLoggingMiddleware
from authuser.api.v1.router import api_v1_router
from authuser.modules.user_management.infrastructure.external.course_client import CourseClient
from authuser.modules.user_management.infrastructure.messaging.user_event_publisher import (
    UserEventPublisherImpl,
)
from authuser.shared.config.settings import Settings, get_settings
from authuser.shared.core.exceptions import AuthUserException
from authuser.shared.events.publisher import FanoutEventPublisher
from authuser.shared.infrastructure.database.connection import close_database, init_database
from authuser.shared.infrastructure.database.session import initialize_sessions
from authuser.shared.utils.logging import get_logger, setup_logging

# Get application settings
settings = get_settings()

# Setup logging
setup_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup: database engine and session factory, course service client,
    broker connection for user events. Shutdown releases them in reverse order.
    """
    app_settings: Settings = app.state.settings
    logger.info(f"🚀 {app_settings.APP_NAME} starting up...")

    course_client: Optional[CourseClient] = None
    event_publisher: Optional[FanoutEventPublisher] = None

    try:
        # Models must be imported before create_all sees their tables
        import authuser.modules.user_management.infrastructure.database.models  # noqa: F401

        await init_database(create_tables=app_settings.is_sqlite)
        logger.info("✅ Database connection initialized")

        await initialize_sessions()
        logger.info("✅ Session manager initialized")

        course_client = CourseClient.from_settings(app_settings)
        await course_client.initialize()
        app.state.course_client = course_client
        logger.info("✅ Course service client initialized")

        event_publisher = FanoutEventPublisher.from_url(
            app_settings.BROKER_URL,
            app_settings.USER_EVENT_EXCHANGE,
            retry_policy=app_settings.broker_retry_policy,
        )
        app.state.user_event_publisher = UserEventPublisherImpl(event_publisher)
        logger.info(f"✅ User event publisher ready on exchange '{app_settings.USER_EVENT_EXCHANGE}'")

        logger.info(f"✅ {app_settings.APP_NAME} startup complete")

        yield  # Application is running

    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise

    finally:
        logger.info(f"🔄 {app_settings.APP_NAME} shutting down...")

        try:
            if event_publisher is not None:
                event_publisher.close()

            if course_client is not None:
                await course_client.close()

            await close_database()
            logger.info(f"✅ {app_settings.APP_NAME} shutdown complete")

        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}")


def create_application(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        app_settings: Settings override, defaults to the cached environment settings

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.APP_NAME,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
        openapi_url="/openapi.json" if app_settings.DEBUG else None,
        lifespan=lifespan,
        debug=app_settings.DEBUG,
    )
    app.state.settings = app_settings

    # =========================================================================
    # MIDDLEWARE CONFIGURATION (last added runs first)
    # =========================================================================

    if not app_settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    app.add_middleware(ErrorHandlingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "X-Response-Time"],
        max_age=3600,
    )

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    app.add_exception_handler(AuthUserException, auth_user_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Run the application with uvicorn.

    Used by ``python -m authuser.main`` and the ``authuser`` console script.
    """
    uvicorn.run(
        "authuser.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD and settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
        workers=1 if settings.RELOAD else settings.WORKERS,
    )


if __name__ == "__main__":
    main()
