# 📄 File: authuser/shared/events/__init__.py
# 🧭 Purpose (Layman Explanation):
# Broadcasting messages to the rest of the platform.
# 🧪 Purpose (Technical Summary):
# Exports the integration event base, action tags and the kombu fan-out publisher.
# 🔗 Dependencies:
# base.py, publisher.py
# 🔄 Connected Modules / Calls From:
# User events, user event publisher, authuser.main

from .base import ActionType, IntegrationEvent
from .publisher import FanoutEventPublisher

__all__ = ["ActionType", "FanoutEventPublisher", "IntegrationEvent"]
