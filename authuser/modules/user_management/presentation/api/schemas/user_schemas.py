# 📄 File: authuser/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what user data looks like when it leaves the service (never with the password)
# and what a client is allowed to send when changing a profile, a password or a picture.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for user endpoints. Each request schema is a view
# profile: only the fields it declares are read, everything else in the body is ignored.
# JSON is camelCase; snake_case input is accepted too.
#
# 🔗 Dependencies:
# - pydantic (CamelModel base, Field constraints)
# - authuser.modules.user_management.domain.models (User, enums, CourseSummary)
#
# 🔄 Connected Modules / Calls From:
# - authuser.modules.user_management.presentation.api.v1.users
# - authuser.modules.user_management.presentation.api.v1.instructors

import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from authuser.shared.core.pagination import CamelModel, Page

from ....domain.models.user import User, UserStatus, UserType


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class LinkSchema(CamelModel):
    rel: str
    href: str


class UserResponse(CamelModel):
    """
    Public user representation. The password is never part of it.
    """
    user_id: uuid.UUID
    username: str
    email: str
    full_name: str
    phone_number: Optional[str] = None
    national_id: Optional[str] = None
    image_url: Optional[str] = None
    user_status: UserStatus
    user_type: UserType
    creation_date: Optional[datetime] = None
    last_update_date: Optional[datetime] = None
    links: List[LinkSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, user: User, self_href: Optional[str] = None) -> "UserResponse":
        links = [LinkSchema(rel="self", href=self_href)] if self_href else []
        return cls(
            user_id=user.user_id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            phone_number=user.phone_number,
            national_id=user.national_id,
            image_url=user.image_url,
            user_status=user.user_status,
            user_type=user.user_type,
            creation_date=user.creation_date,
            last_update_date=user.last_update_date,
            links=links,
        )


UserPageResponse = Page[UserResponse]


class MessageResponse(CamelModel):
    message: str


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class UserUpdateRequest(CamelModel):
    """Profile fields a user may change."""
    full_name: str = Field(..., min_length=1, max_length=150)
    phone_number: Optional[str] = Field(None, max_length=20)
    national_id: Optional[str] = Field(None, max_length=20)


class PasswordChangeRequest(CamelModel):
    """Current password plus the replacement."""
    old_password: str = Field(..., min_length=1, max_length=20)
    password: str = Field(..., min_length=6, max_length=20)


class ImageUpdateRequest(CamelModel):
    image_url: str = Field(..., min_length=1)

    @field_validator("image_url")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Image URL must not be blank")
        return v.strip()


class InstructorSubscriptionRequest(CamelModel):
    user_id: uuid.UUID
