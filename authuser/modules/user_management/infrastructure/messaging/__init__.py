# 📄 File: authuser/modules/user_management/infrastructure/messaging/__init__.py
# 🧭 Purpose (Layman Explanation):
# How this module talks to the message broker.
# 🧪 Purpose (Technical Summary):
# Kombu-backed user event publisher export.
# 🔗 Dependencies:
# user_event_publisher.py
# 🔄 Connected Modules / Calls From:
# user_service.py, presentation/dependencies.py

from .user_event_publisher import UserEventPublisherImpl

__all__ = ["UserEventPublisherImpl"]
