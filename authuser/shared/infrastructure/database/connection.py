# 📄 File: authuser/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to the user database, making sure we can talk to our data storage
# and share a limited number of connections between all incoming requests.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy engine management with connection pooling, health checks with
# retry, and the declarative Base every ORM model of the service derives from.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine, declarative base)
# - authuser/shared/config/settings.py (database configuration)
# - asyncpg (PostgreSQL async driver) / aiosqlite (local and test runs)
#
# 🔄 Connected Modules / Calls From:
# - authuser/shared/infrastructure/database/session.py (session management)
# - authuser/modules/user_management/infrastructure/database/models.py (Base)
# - authuser/api/health.py (database health monitoring)
# - migrations/env.py (metadata)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from authuser.shared.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and automatic retry logic.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._retry_attempts = 3
        self._retry_delay = 1.0

    def _build_connection_params(self) -> Dict[str, Any]:
        """Build SQLAlchemy connection parameters from settings."""
        params: Dict[str, Any] = {
            "url": self._settings.database_url,
            "echo": self._settings.DB_ECHO,
        }
        if self._settings.is_sqlite:
            # SQLite uses a single-connection pool; sizing options do not apply
            return params

        params.update({
            "pool_pre_ping": True,
            "pool_recycle": self._settings.DB_POOL_RECYCLE,
            "pool_size": self._settings.DB_POOL_SIZE,
            "max_overflow": self._settings.DB_MAX_OVERFLOW,
            "pool_timeout": self._settings.DB_POOL_TIMEOUT,
            "connect_args": {
                "server_settings": {
                    "application_name": self._settings.APP_NAME,
                },
                "command_timeout": 60,
            },
        })
        return params

    async def initialize(self) -> None:
        """Initialize database engine with connection pooling."""
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        try:
            logger.info("Initializing database connection pool...")
            self._engine = create_async_engine(**self._build_connection_params())

            health = await self.health_check()
            if health["status"] != "healthy":
                raise RuntimeError(health.get("error", "Database health check failed"))

            logger.info("✅ Database connection pool initialized successfully")

        except Exception as e:
            logger.error(f"❌ Failed to initialize database connection: {e}")
            if self._engine is not None:
                await self._engine.dispose()
                self._engine = None
            raise

    async def health_check(self) -> dict:
        """
        Perform database health check and return structured status.
        """
        if self._engine is None:
            logger.error("Database engine not initialized")
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }

        for attempt in range(self._retry_attempts):
            try:
                async with self._engine.connect() as conn:
                    result = await conn.execute(self._health_check_query)
                    result.scalar()

                logger.debug("Database health check passed")
                return {
                    "status": "healthy",
                    "timestamp": datetime.now(timezone.utc).isoformat()
                }

            except Exception as e:
                logger.warning(
                    f"Database health check failed (attempt {attempt + 1}/{self._retry_attempts}): {e}"
                )
                if attempt < self._retry_attempts - 1:
                    await asyncio.sleep(self._retry_delay * (2 ** attempt))

        logger.error("Database health check failed after all retry attempts")
        return {
            "status": "unhealthy",
            "error": "Database health check failed after all retry attempts",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        try:
            logger.info("Closing database connection pool...")
            await self._engine.dispose()
            self._engine = None
            logger.info("✅ Database connection pool closed successfully")

        except Exception as e:
            logger.error(f"❌ Error closing database connection pool: {e}")
            raise

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def init_database(create_tables: bool = False) -> None:
    """
    Initialize the global database connection manager.

    Args:
        create_tables: Create missing tables from the ORM metadata.
            Production schemas are managed by Alembic; this is meant
            for SQLite and development runs.
    """
    logger.info("Starting database initialization...")
    await db_manager.initialize()

    if create_tables:
        async with db_manager.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("✅ Database tables created")


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


async def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    return db_manager.engine


async def database_health_check() -> dict:
    """Perform database health check on the global engine."""
    return await db_manager.health_check()
