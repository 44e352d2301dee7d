# 📄 File: authuser/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Hands every request its own short conversation with the database and makes sure the
# conversation is cleaned up (and half-done work undone) when the request ends.
#
# 🧪 Purpose (Technical Summary):
# Async SQLAlchemy session factory and the FastAPI dependency yielding one AsyncSession
# per request. Commits are explicit and owned by the user service unit of work; anything
# left uncommitted when the request ends is rolled back.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - authuser/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - authuser/modules/user_management/presentation/dependencies.py (repository wiring)
# - authuser/main.py (startup)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import exc
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from authuser.shared.core.exceptions import DatabaseError
from authuser.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with rollback of unfinished work and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker] = None
        self._initialized = False

    async def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize the session factory with the database engine."""
        try:
            engine = engine or await get_database_engine()

            self._session_factory = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,  # Keep objects accessible after commit
                autoflush=True,
            )

            self._initialized = True
            logger.info("✅ Database session factory initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database session factory: {e}")
            raise DatabaseError(f"Session initialization failed: {e}", operation="initialize")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session.

        Work that was not committed by the caller is rolled back on exit.

        Raises:
            DatabaseError: If the manager is not initialized or SQLAlchemy fails
        """
        if not self._initialized or self._session_factory is None:
            raise DatabaseError("Session manager not initialized")

        session: AsyncSession = self._session_factory()

        try:
            logger.debug("Database session created")
            yield session

        except exc.SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"Database error occurred, transaction rolled back: {e}")
            raise DatabaseError(f"Database operation failed: {e}")

        except Exception:
            await session.rollback()
            raise

        finally:
            await session.close()
            logger.debug("Database session closed")

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._initialized


# Global session manager instance
session_manager = DatabaseSessionManager()


async def initialize_sessions(engine: Optional[AsyncEngine] = None) -> None:
    """Initialize the global database session manager."""
    await session_manager.initialize(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        @router.get("/users")
        async def list_users(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with session_manager.get_session() as session:
        yield session
