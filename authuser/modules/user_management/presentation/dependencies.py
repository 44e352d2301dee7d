# 📄 File: authuser/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands every user endpoint the tools it needs (the user service, the course client,
# the user named in the URL) so each endpoint only has to describe what it does.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies: repository and service wiring over the request's
# AsyncSession, lifespan-managed publisher and course client taken from app.state, path
# user lookup with 404, listing filter and page request parsing from query parameters.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy AsyncSession, user_management domain/infrastructure layers
# 🔄 Connected Modules / Calls From:
# authuser.modules.user_management.presentation.api.v1.*, tests (dependency overrides)

"""
User Management Module Dependencies

- get_user_repository / get_user_service: per-request service wiring
- get_user_event_publisher / get_course_client: shared clients created at startup
- get_existing_user: resolves {userId} or answers 404 "User not found"
- get_user_filter / get_page_request: listing query parameters
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from authuser.shared.core.exceptions import UserNotFoundError
from authuser.shared.core.pagination import MAX_PAGE_SIZE, PageRequest
from authuser.shared.infrastructure.database.session import get_db_session

from ..domain.events.publisher import UserEventPublisher
from ..domain.models.user import User, UserStatus, UserType
from ..domain.repositories.user_repository import UserFilter, UserRepository
from ..domain.services.user_service import UserService
from ..infrastructure.database.user_repository_impl import UserRepositoryImpl
from ..infrastructure.external.course_client import CourseClient

logger = logging.getLogger(__name__)

SORT_PATTERN = r"^\w+(,\s*(asc|desc|ASC|DESC))?$"


# =========================================================================
# SERVICE WIRING
# =========================================================================

def get_user_repository(session: AsyncSession = Depends(get_db_session)) -> UserRepository:
    return UserRepositoryImpl(session)


def get_user_event_publisher(request: Request) -> UserEventPublisher:
    return request.app.state.user_event_publisher


def get_course_client(request: Request) -> CourseClient:
    return request.app.state.course_client


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    event_publisher: UserEventPublisher = Depends(get_user_event_publisher),
) -> UserService:
    return UserService(user_repository, event_publisher)


# =========================================================================
# RESOURCE LOOKUP
# =========================================================================

async def get_existing_user(
    user_id: UUID = Path(..., alias="userId"),
    user_service: UserService = Depends(get_user_service),
) -> User:
    """
    Resolve the user named in the path.

    Raises:
        UserNotFoundError: If no user has this ID (404)
    """
    user = await user_service.find_by_id(user_id)
    if user is None:
        logger.warning(f"User not found: {user_id}")
        raise UserNotFoundError(user_id)
    return user


# =========================================================================
# QUERY PARAMETERS
# =========================================================================

def get_user_filter(
    user_type: Optional[UserType] = Query(None, alias="userType"),
    user_status: Optional[UserStatus] = Query(None, alias="userStatus"),
    email: Optional[str] = Query(None),
    username: Optional[str] = Query(None),
    full_name: Optional[str] = Query(None, alias="fullName"),
    created_after: Optional[datetime] = Query(None, alias="createdAfter"),
    created_before: Optional[datetime] = Query(None, alias="createdBefore"),
) -> UserFilter:
    return UserFilter(
        user_type=user_type,
        user_status=user_status,
        email=email,
        username=username,
        full_name=full_name,
        created_after=created_after,
        created_before=created_before,
    )


def _page_request_dependency(default_sort: str):
    def get_page_request(
        page: int = Query(0, ge=0),
        size: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
        sort: str = Query(default_sort, pattern=SORT_PATTERN),
    ) -> PageRequest:
        return PageRequest(page=page, size=size, sort=sort)

    return get_page_request


get_page_request = _page_request_dependency("userId,asc")
get_course_page_request = _page_request_dependency("courseId,asc")
