# 📄 File: authuser/modules/user_management/infrastructure/messaging/user_event_publisher.py
# 🧭 Purpose (Layman Explanation):
# Announces "a user was created / changed / removed" on the platform's user broadcast channel.
# 🧪 Purpose (Technical Summary):
# Stamps the action tag onto a UserEvent and hands the JSON payload to the kombu
# fan-out publisher bound to the user event exchange.
# 🔗 Dependencies:
# shared.events (ActionType, FanoutEventPublisher), domain user events and publisher interface
# 🔄 Connected Modules / Calls From:
# authuser.main (lifecycle); used by user_service.py through domain/events/publisher.py

import logging

from authuser.shared.events.base import ActionType
from authuser.shared.events.publisher import FanoutEventPublisher

from ...domain.events.publisher import UserEventPublisher
from ...domain.events.user_events import UserEvent

logger = logging.getLogger(__name__)


class UserEventPublisherImpl(UserEventPublisher):
    """Publishes user lifecycle events on the user event exchange."""

    def __init__(self, publisher: FanoutEventPublisher):
        self.publisher = publisher

    async def publish_user_event(self, event: UserEvent, action_type: ActionType) -> bool:
        """
        Publish one user event.

        Returns:
            True when the broker accepted the message
        """
        payload = event.with_action(action_type).to_payload()
        published = await self.publisher.publish_async(payload)
        if published:
            logger.info(f"📣 User event {action_type.value} published for user {event.user_id}")
        return published
