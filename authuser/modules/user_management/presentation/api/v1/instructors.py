# 📄 File: authuser/modules/user_management/presentation/api/v1/instructors.py
# 🧭 Purpose (Layman Explanation):
# Lets an existing user become an instructor so they can teach courses.
#
# 🧪 Purpose (Technical Summary):
# POST /instructors/subscription: promotes the referenced user to INSTRUCTOR and
# publishes an UPDATE user event.
#
# 🔗 Dependencies:
# - FastAPI router
# - authuser.modules.user_management.presentation (schemas, dependencies)
#
# 🔄 Connected Modules / Calls From:
# - authuser.api.router (router inclusion)

import logging

from fastapi import APIRouter, Depends

from authuser.shared.core.exceptions import UserNotFoundError

from ....domain.services.user_service import UserService
from ...dependencies import get_user_service
from ..schemas.user_schemas import InstructorSubscriptionRequest, UserResponse

logger = logging.getLogger(__name__)

instructors_router = APIRouter()


@instructors_router.post(
    "/subscription",
    response_model=UserResponse,
    summary="Subscribe user as instructor",
    responses={404: {"description": "User not found"}},
)
async def save_subscription_instructor(
    subscription: InstructorSubscriptionRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.find_by_id(subscription.user_id)
    if user is None:
        logger.warning(f"User not found: {subscription.user_id}")
        raise UserNotFoundError(subscription.user_id)

    promoted = await user_service.subscribe_instructor(user)
    logger.info(f"User subscribed as instructor userId {promoted.user_id}")
    return UserResponse.from_domain(promoted)
