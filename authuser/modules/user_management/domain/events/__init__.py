# 📄 File: authuser/modules/user_management/domain/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Messages this module announces to the rest of the platform.
# 🧪 Purpose (Technical Summary):
# User integration event and publisher interface exports.
# 🔗 Dependencies:
# user_events.py, publisher.py
# 🔄 Connected Modules / Calls From:
# user_service.py, user_event_publisher.py

from .publisher import UserEventPublisher
from .user_events import UserEvent

__all__ = ["UserEvent", "UserEventPublisher"]
