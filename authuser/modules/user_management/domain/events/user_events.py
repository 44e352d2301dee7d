# 📄 File: authuser/modules/user_management/domain/events/user_events.py
# 🧭 Purpose (Layman Explanation):
# The message other services receive when a user is created, changed or removed.
# It carries the public profile only, never the password.
# 🧪 Purpose (Technical Summary):
# UserEvent integration event: denormalized projection of a User (no password, no
# timestamps) with enums rendered as text and an action tag stamped at publish time.
# 🔗 Dependencies:
# shared.events.base (IntegrationEvent), domain models
# 🔄 Connected Modules / Calls From:
# user_event_publisher.py, user_service.py

import uuid
from typing import Optional

from authuser.shared.events.base import IntegrationEvent

from ..models.user import User


class UserEvent(IntegrationEvent):
    user_id: uuid.UUID
    username: str
    email: str
    full_name: str
    user_status: str
    user_type: str
    phone_number: Optional[str] = None
    national_id: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserEvent":
        """Project a user onto the event fields."""
        return cls(
            user_id=user.user_id,
            username=user.username,
            email=user.email,
            full_name=user.full_name,
            user_status=user.user_status.value,
            user_type=user.user_type.value,
            phone_number=user.phone_number,
            national_id=user.national_id,
            image_url=user.image_url,
        )
