# 📄 File: authuser/modules/user_management/presentation/api/v1/auth.py
# 🧭 Purpose (Layman Explanation):
# The sign-up door of the platform: new users open their account here.
#
# 🧪 Purpose (Technical Summary):
# POST /auth/signup. Checks username then email availability (409), registers the user
# as an ACTIVE STUDENT and publishes a CREATE user event through the user service.
#
# 🔗 Dependencies:
# - FastAPI router, status codes
# - authuser.modules.user_management.presentation (schemas, dependencies)
#
# 🔄 Connected Modules / Calls From:
# - authuser.api.router (router inclusion)

import logging

from fastapi import APIRouter, Depends, status

from authuser.shared.core.exceptions import EmailAlreadyTakenError, UsernameAlreadyTakenError

from ....domain.services.user_service import UserService
from ...dependencies import get_user_service
from ..schemas.auth_schemas import UserRegistrationRequest
from ..schemas.user_schemas import UserResponse

logger = logging.getLogger(__name__)

auth_router = APIRouter()


@auth_router.post(
    "/signup",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a student account. Username and email must be unused.",
    responses={
        201: {"description": "User registered"},
        409: {"description": "Username or email already taken"},
        422: {"description": "Invalid registration data"},
    }
)
async def register_user(
    registration: UserRegistrationRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    logger.debug(f"POST register_user username received {registration.username}")

    if await user_service.exists_by_username(registration.username):
        logger.warning(f"Username {registration.username} is already taken")
        raise UsernameAlreadyTakenError(registration.username)

    if await user_service.exists_by_email(registration.email):
        logger.warning(f"Email {registration.email} is already taken")
        raise EmailAlreadyTakenError(registration.email)

    user = await user_service.register_user(
        username=registration.username,
        email=registration.email,
        password=registration.password,
        full_name=registration.full_name,
        phone_number=registration.phone_number,
        national_id=registration.national_id,
        image_url=registration.image_url,
    )
    logger.info(f"User saved successfully userId {user.user_id}")
    return UserResponse.from_domain(user)
