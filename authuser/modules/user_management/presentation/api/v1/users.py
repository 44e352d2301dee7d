# 📄 File: authuser/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# This file contains the web endpoints for managing user accounts: listing and finding
# users, changing profiles, passwords and pictures, deleting accounts, and showing
# which courses a user follows.
#
# 🧪 Purpose (Technical Summary):
# FastAPI user endpoints. Every {userId} route resolves the user first (404 "User not
# found"); mutations go through UserService, which commits before publishing user events.
#
# 🔗 Dependencies:
# - FastAPI router, Request, status codes
# - authuser.modules.user_management.presentation (schemas, dependencies)
# - authuser.modules.user_management.infrastructure.external (course client)
#
# 🔄 Connected Modules / Calls From:
# - authuser.api.router (router inclusion)

"""
Users API Endpoints

Endpoints:
- GET /: List users (filters, pagination, self links)
- GET /{userId}: Get one user
- DELETE /{userId}: Delete user, publishes DELETE
- PUT /{userId}: Update profile fields, publishes UPDATE
- PUT /{userId}/password: Change password, publishes nothing
- PUT /{userId}/image: Change profile image, publishes UPDATE
- GET /{userId}/courses: Courses of the user from the course service
"""

import logging

from fastapi import APIRouter, Depends, Request

from authuser.shared.core.pagination import Page, PageRequest

from ....domain.models.course import CourseSummary
from ....domain.models.user import User
from ....domain.repositories.user_repository import UserFilter
from ....domain.services.user_service import UserService
from ....infrastructure.external.course_client import CourseClient
from ...dependencies import (
    get_course_client,
    get_course_page_request,
    get_existing_user,
    get_page_request,
    get_user_filter,
    get_user_service,
)
from ..schemas.user_schemas import (
    ImageUpdateRequest,
    MessageResponse,
    PasswordChangeRequest,
    UserPageResponse,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

users_router = APIRouter()

NOT_FOUND_RESPONSE = {404: {"description": "User not found"}}


@users_router.get(
    "",
    response_model=UserPageResponse,
    summary="List users",
    description="Page through users, optionally filtered by type, status, email, username, name or creation date.",
)
async def get_all_users(
    request: Request,
    user_filter: UserFilter = Depends(get_user_filter),
    page_request: PageRequest = Depends(get_page_request),
    user_service: UserService = Depends(get_user_service),
) -> UserPageResponse:
    page = await user_service.find_all(user_filter, page_request)

    content = [
        UserResponse.from_domain(
            user,
            self_href=str(request.url_for("get_one_user", userId=str(user.user_id))),
        )
        for user in page.content
    ]
    return UserPageResponse.of(content, page.total_elements, page_request)


@users_router.get(
    "/{userId}",
    name="get_one_user",
    response_model=UserResponse,
    summary="Get user",
    responses=NOT_FOUND_RESPONSE,
)
async def get_one_user(user: User = Depends(get_existing_user)) -> UserResponse:
    return UserResponse.from_domain(user)


@users_router.delete(
    "/{userId}",
    response_model=MessageResponse,
    summary="Delete user",
    description="Remove the user and broadcast a DELETE user event.",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_user(
    user: User = Depends(get_existing_user),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    logger.debug(f"DELETE delete_user userId received {user.user_id}")
    await user_service.delete_user(user)
    logger.info(f"User deleted successfully userId {user.user_id}")
    return MessageResponse(message="User deleted successfully")


@users_router.put(
    "/{userId}",
    response_model=UserResponse,
    summary="Update user profile",
    description="Update full name, phone number and national ID; other fields in the body are ignored.",
    responses=NOT_FOUND_RESPONSE,
)
async def update_user(
    update: UserUpdateRequest,
    user: User = Depends(get_existing_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    updated = await user_service.update_profile(
        user,
        full_name=update.full_name,
        phone_number=update.phone_number,
        national_id=update.national_id,
    )
    logger.info(f"User updated successfully userId {updated.user_id}")
    return UserResponse.from_domain(updated)


@users_router.put(
    "/{userId}/password",
    response_model=MessageResponse,
    summary="Change password",
    responses={
        **NOT_FOUND_RESPONSE,
        409: {"description": "Mismatched old password"},
    },
)
async def update_password(
    password_change: PasswordChangeRequest,
    user: User = Depends(get_existing_user),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await user_service.change_password(
        user,
        old_password=password_change.old_password,
        new_password=password_change.password,
    )
    logger.info(f"Password updated successfully userId {user.user_id}")
    return MessageResponse(message="Password updated successfully")


@users_router.put(
    "/{userId}/image",
    response_model=UserResponse,
    summary="Change profile image",
    responses=NOT_FOUND_RESPONSE,
)
async def update_image(
    image_update: ImageUpdateRequest,
    user: User = Depends(get_existing_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    updated = await user_service.update_image(user, image_update.image_url)
    logger.info(f"Image updated successfully userId {updated.user_id}")
    return UserResponse.from_domain(updated)


@users_router.get(
    "/{userId}/courses",
    response_model=Page[CourseSummary],
    summary="List courses of a user",
    description="Courses the user is enrolled in, as reported by the course service. "
                "Empty when the course service cannot be reached.",
    responses=NOT_FOUND_RESPONSE,
)
async def get_user_courses(
    user: User = Depends(get_existing_user),
    page_request: PageRequest = Depends(get_course_page_request),
    course_client: CourseClient = Depends(get_course_client),
) -> Page[CourseSummary]:
    return await course_client.get_all_courses_by_user(user.user_id, page_request)
