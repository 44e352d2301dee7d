# 📄 File: authuser/shared/events/publisher.py
# 🧭 Purpose (Layman Explanation):
# The service's loudspeaker: when something important happens to a user, it announces it once
# on a broadcast channel, and every other service listening to that channel gets its own copy.
# 🧪 Purpose (Technical Summary):
# kombu fan-out publisher. Declares a durable fanout exchange, sends JSON payloads with an
# empty routing key through the kombu producer pool and reports delivery as a boolean.
# Best effort: failures are logged, never raised, and no subscriber acknowledgement is awaited.
# 🔗 Dependencies:
# kombu (Connection, Exchange, producer pool), asyncio, logging
# 🔄 Connected Modules / Calls From:
# User event publisher, authuser.main (lifecycle)

import asyncio
import logging
from typing import Any, Dict, Optional

from kombu import Connection, Exchange
from kombu.pools import producers

logger = logging.getLogger(__name__)


class FanoutEventPublisher:
    """
    Publishes JSON messages on a fanout exchange.

    Every queue bound to the exchange receives each message; routing keys
    are ignored by the broker.
    """

    def __init__(
        self,
        connection: Connection,
        exchange_name: str,
        retry_policy: Optional[Dict[str, Any]] = None,
    ):
        self.connection = connection
        self.exchange = Exchange(exchange_name, type="fanout", durable=True)
        self.retry_policy = retry_policy or {"max_retries": 3}

    @classmethod
    def from_url(
        cls,
        broker_url: str,
        exchange_name: str,
        retry_policy: Optional[Dict[str, Any]] = None,
    ) -> "FanoutEventPublisher":
        """Create a publisher on a lazily opened broker connection."""
        return cls(Connection(broker_url), exchange_name, retry_policy)

    def publish(self, payload: Dict[str, Any]) -> bool:
        """
        Send one message to the exchange.

        Args:
            payload: JSON-serializable message body

        Returns:
            True when the broker accepted the message, False otherwise
        """
        try:
            with producers[self.connection].acquire(block=True) as producer:
                producer.publish(
                    payload,
                    exchange=self.exchange,
                    routing_key="",
                    declare=[self.exchange],
                    serializer="json",
                    retry=True,
                    retry_policy=self.retry_policy,
                )
        except Exception as e:
            logger.error(f"❌ Failed to publish message to exchange '{self.exchange.name}': {e}")
            return False

        logger.debug(f"Message published to exchange '{self.exchange.name}'")
        return True

    async def publish_async(self, payload: Dict[str, Any]) -> bool:
        """Run :meth:`publish` in a worker thread."""
        return await asyncio.to_thread(self.publish, payload)

    def close(self) -> None:
        """Release the broker connection."""
        self.connection.release()
        logger.info(f"Broker connection released for exchange '{self.exchange.name}'")
