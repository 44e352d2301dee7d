# 📄 File: authuser/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is on the learning platform: who they are, how to reach them,
# whether their account is active and whether they are a student, an instructor or an admin.
# 🧪 Purpose (Technical Summary):
# User domain entity with status and role enumerations. Timestamps are always assigned
# by the service layer in UTC; the store never fills them in.
# 🔗 Dependencies:
# pydantic, datetime, uuid
# 🔄 Connected Modules / Calls From:
# user_service.py, user_repository.py, user_repository_impl.py, user_events.py, API schemas

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class UserStatus(str, Enum):
    """Account status"""
    ACTIVE = "ACTIVE"
    BLOCKED = "BLOCKED"


class UserType(str, Enum):
    """Role on the platform"""
    STUDENT = "STUDENT"
    INSTRUCTOR = "INSTRUCTOR"
    ADMIN = "ADMIN"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    """
    User domain model.

    Fields:
    - user_id (UUID): Unique identifier, generated on registration
    - username / email: Unique across all users
    - password: Stored as provided by the client
    - full_name, phone_number, national_id, image_url: Profile data
    - user_status / user_type: Account status and role
    - creation_date / last_update_date: UTC timestamps owned by the service layer
    """

    model_config = ConfigDict(validate_assignment=True)

    user_id: uuid.UUID = Field(default_factory=uuid.uuid4)
    username: str
    email: str
    password: str
    full_name: str
    phone_number: Optional[str] = None
    national_id: Optional[str] = None
    image_url: Optional[str] = None
    user_status: UserStatus = UserStatus.ACTIVE
    user_type: UserType = UserType.STUDENT
    creation_date: Optional[datetime] = None
    last_update_date: Optional[datetime] = None

    def touch(self, now: Optional[datetime] = None) -> None:
        """Stamp the last update time."""
        self.last_update_date = now or utc_now()

    @property
    def is_instructor(self) -> bool:
        return self.user_type == UserType.INSTRUCTOR

    def __repr__(self) -> str:
        return f"<User(user_id={self.user_id}, username={self.username}, user_type={self.user_type.value})>"
