# 📄 File: authuser/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shapes of the data sent to and returned by the user endpoints.
# 🧪 Purpose (Technical Summary):
# Request/response schema exports.
# 🔗 Dependencies:
# auth_schemas.py, user_schemas.py
# 🔄 Connected Modules / Calls From:
# API v1 routers

from .auth_schemas import UserRegistrationRequest
from .user_schemas import (
    ImageUpdateRequest,
    InstructorSubscriptionRequest,
    LinkSchema,
    MessageResponse,
    PasswordChangeRequest,
    UserPageResponse,
    UserResponse,
    UserUpdateRequest,
)

__all__ = [
    "ImageUpdateRequest",
    "InstructorSubscriptionRequest",
    "LinkSchema",
    "MessageResponse",
    "PasswordChangeRequest",
    "UserPageResponse",
    "UserRegistrationRequest",
    "UserResponse",
    "UserUpdateRequest",
]
