"""
Fan-out publication over kombu's in-memory transport.
"""
import uuid
from unittest.mock import MagicMock, patch

import pytest
from kombu import Connection, Queue

from authuser.modules.user_management.domain.events.publisher import UserEventPublisher
from authuser.modules.user_management.domain.events.user_events import UserEvent
from authuser.modules.user_management.domain.models.user import User
from authuser.modules.user_management.infrastructure.messaging.user_event_publisher import (
    UserEventPublisherImpl,
)
from authuser.shared.events.base import ActionType
from authuser.shared.events.publisher import FanoutEventPublisher


@pytest.fixture
def connection():
    conn = Connection("memory://")
    yield conn
    conn.release()


@pytest.fixture
def exchange_name():
    return f"ead.userevent.{uuid.uuid4().hex}"


@pytest.fixture
def publisher(connection, exchange_name):
    return FanoutEventPublisher(connection, exchange_name, retry_policy={"max_retries": 1})


def bind_queue(connection, publisher, name):
    queue = Queue(f"{name}.{uuid.uuid4().hex}", exchange=publisher.exchange, routing_key="")
    return connection.SimpleQueue(queue)


def make_user() -> User:
    return User(
        username="alice",
        email="alice@example.com",
        password="secret123",
        full_name="Alice Liddell",
        national_id="12345678900",
    )


def test_every_bound_queue_receives_a_copy(connection, publisher):
    course_queue = bind_queue(connection, publisher, "ead.course")
    notification_queue = bind_queue(connection, publisher, "ead.notification")

    assert publisher.publish({"userId": "42", "actionType": "CREATE"}) is True

    for simple in (course_queue, notification_queue):
        message = simple.get(timeout=1)
        assert message.payload == {"userId": "42", "actionType": "CREATE"}
        message.ack()
        simple.close()


def test_exchange_is_durable_fanout(publisher, exchange_name):
    assert publisher.exchange.name == exchange_name
    assert publisher.exchange.type == "fanout"
    assert publisher.exchange.durable is True


def test_broker_failure_returns_false(publisher):
    broken = MagicMock()
    broken.__getitem__.side_effect = OSError("broker unreachable")

    with patch("authuser.shared.events.publisher.producers", broken):
        assert publisher.publish({"userId": "42"}) is False


async def test_user_event_payload_shape(connection, publisher):
    listener = bind_queue(connection, publisher, "ead.course")
    user = make_user()

    published = await UserEventPublisherImpl(publisher).publish_user_event(
        UserEvent.from_user(user), ActionType.UPDATE
    )

    assert published is True
    message = listener.get(timeout=1)
    payload = message.payload
    message.ack()
    listener.close()

    assert payload["actionType"] == "UPDATE"
    assert payload["userId"] == str(user.user_id)
    assert payload["fullName"] == "Alice Liddell"
    assert payload["nationalId"] == "12345678900"
    assert payload["userStatus"] == "ACTIVE"
    assert payload["userType"] == "STUDENT"
    assert "password" not in payload
    assert "creationDate" not in payload


async def test_user_event_publisher_reports_failure(publisher):
    broken = MagicMock()
    broken.__getitem__.side_effect = OSError("broker unreachable")

    with patch("authuser.shared.events.publisher.producers", broken):
        published = await UserEventPublisherImpl(publisher).publish_user_event(
            UserEvent.from_user(make_user()), ActionType.DELETE
        )

    assert published is False


def test_action_is_stamped_on_a_copy():
    event = UserEvent.from_user(make_user())

    tagged = event.with_action(ActionType.CREATE)

    assert event.action_type is None
    assert tagged.action_type == ActionType.CREATE


def test_kombu_publisher_implements_the_domain_interface(publisher):
    assert isinstance(UserEventPublisherImpl(publisher), UserEventPublisher)
