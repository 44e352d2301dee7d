# 📄 File: authuser/modules/user_management/domain/events/publisher.py
# 🧭 Purpose (Layman Explanation):
# The promise the user service relies on: "someone will announce this user change".
# Who actually does the announcing (a message broker, a test recorder) is decided elsewhere.
# 🧪 Purpose (Technical Summary):
# Abstract user event publisher. Implemented by the kombu-backed publisher in
# infrastructure/messaging; UserService depends only on this interface.
# 🔗 Dependencies:
# abc, shared.events.base (ActionType), domain user events
# 🔄 Connected Modules / Calls From:
# user_service.py, infrastructure/messaging/user_event_publisher.py, presentation/dependencies.py

from abc import ABC, abstractmethod

from authuser.shared.events.base import ActionType

from .user_events import UserEvent


class UserEventPublisher(ABC):
    """Announces user lifecycle changes to other services."""

    @abstractmethod
    async def publish_user_event(self, event: UserEvent, action_type: ActionType) -> bool:
        """
        Publish one user event tagged with ``action_type``.

        Returns:
            True when the message was handed over, False otherwise.
            Implementations report failures through the result, not by raising.
        """
        pass
