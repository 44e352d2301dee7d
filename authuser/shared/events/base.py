# 📄 File: authuser/shared/events/base.py

# 🧭 Purpose (Layman Explanation):
# Defines what every message we broadcast to other services looks like, and the short
# tags (created / updated / deleted) that tell receivers what just happened.

# 🧪 Purpose (Technical Summary):
# Base integration-event contract (JSON payload with an action tag) shared by every
# event published on a fan-out exchange.

# 🔗 Dependencies:
# - pydantic: Event payload models and serialization
# - enum: Action type tags

# 🔄 Connected Modules / Calls From:
# Used by: user events (domain/events/user_events.py), fan-out publisher,
# user event publisher

from abc import ABC
from enum import Enum
from typing import Any, Dict, Optional

from authuser.shared.core.pagination import CamelModel


class ActionType(str, Enum):
    """Lifecycle change carried by an integration event."""
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class IntegrationEvent(CamelModel, ABC):
    """
    Base class for events leaving the service.

    Subclasses add their own fields; ``action_type`` is stamped right
    before publication.
    """

    action_type: Optional[ActionType] = None

    def with_action(self, action_type: ActionType) -> "IntegrationEvent":
        """Return a copy tagged with ``action_type``."""
        return self.model_copy(update={"action_type": action_type})

    def to_payload(self) -> Dict[str, Any]:
        """JSON-safe dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
