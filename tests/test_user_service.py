"""
UserService ordering and publication rules, exercised over the real
SQLAlchemy repository and a recording publisher.
"""
from unittest.mock import AsyncMock

import pytest

from authuser.modules.user_management.domain.events.publisher import UserEventPublisher
from authuser.modules.user_management.domain.models.user import User, UserStatus, UserType
from authuser.modules.user_management.domain.repositories.user_repository import UserFilter
from authuser.modules.user_management.domain.services.user_service import UserService
from authuser.modules.user_management.infrastructure.database.user_repository_impl import (
    UserRepositoryImpl,
)
from authuser.shared.core.exceptions import DatabaseError, DuplicateResourceError, PasswordMismatchError
from authuser.shared.core.pagination import PageRequest
from authuser.shared.events.base import ActionType

from .conftest import RecordingUserEventPublisher


@pytest.fixture
def service(session, publisher):
    return UserService(UserRepositoryImpl(session), publisher)


async def _register(service, username="alice", email="alice@example.com"):
    return await service.register_user(
        username=username,
        email=email,
        password="secret123",
        full_name="Alice Liddell",
    )


async def test_register_user_sets_defaults_and_publishes_create(service, publisher):
    user = await _register(service)

    assert user.user_status == UserStatus.ACTIVE
    assert user.user_type == UserType.STUDENT
    assert user.creation_date == user.last_update_date
    assert publisher.actions == [ActionType.CREATE]
    assert await service.exists_by_username("alice")
    assert await service.exists_by_email("alice@example.com")


async def test_each_mutation_publishes_exactly_once(service, publisher):
    user = await _register(service)
    user = await service.update_profile(user, full_name="Alice K", phone_number="1", national_id="2")
    user = await service.update_image(user, "https://cdn.example.com/a.png")
    user = await service.subscribe_instructor(user)
    await service.delete_user(user)

    assert publisher.actions == [
        ActionType.CREATE,
        ActionType.UPDATE,
        ActionType.UPDATE,
        ActionType.UPDATE,
        ActionType.DELETE,
    ]
    assert await service.find_by_id(user.user_id) is None


async def test_password_change_publishes_nothing(service, publisher):
    user = await _register(service)
    publisher.events.clear()

    updated = await service.change_password(user, old_password="secret123", new_password="newsecret")

    assert updated.password == "newsecret"
    assert publisher.events == []
    stored = await service.find_by_id(user.user_id)
    assert stored.password == "newsecret"


async def test_password_mismatch_leaves_user_untouched(service, publisher):
    user = await _register(service)
    publisher.events.clear()
    before = user.last_update_date

    with pytest.raises(PasswordMismatchError):
        await service.change_password(user, old_password="nope", new_password="newsecret")

    stored = await service.find_by_id(user.user_id)
    assert stored.password == "secret123"
    assert stored.last_update_date == before
    assert publisher.events == []


async def test_duplicate_write_rolls_back_and_publishes_nothing(service, publisher):
    await _register(service)
    publisher.events.clear()

    with pytest.raises(DuplicateResourceError):
        await _register(service, email="someone@example.com")

    assert publisher.events == []
    page = await service.find_all(UserFilter(), PageRequest())
    assert page.total_elements == 1


async def test_commit_failure_publishes_nothing(publisher):
    repository = AsyncMock()
    repository.create.side_effect = lambda user: user
    repository.commit.side_effect = DatabaseError("Failed to commit", operation="commit")
    service = UserService(repository, publisher)

    with pytest.raises(DatabaseError):
        await service.save_user(
            User(username="alice", email="alice@example.com", password="secret123", full_name="Alice")
        )

    repository.rollback.assert_awaited_once()
    assert publisher.events == []


async def test_undelivered_event_keeps_the_write(session):
    publisher = RecordingUserEventPublisher(deliver=False)
    service = UserService(UserRepositoryImpl(session), publisher)

    user = await _register(service)

    assert publisher.actions == [ActionType.CREATE]
    assert await service.find_by_id(user.user_id) is not None


async def test_publisher_exception_does_not_fail_the_operation(session):
    publisher = AsyncMock()
    publisher.publish_user_event.side_effect = RuntimeError("broker gone")
    service = UserService(UserRepositoryImpl(session), publisher)

    user = await _register(service)

    assert await service.find_by_id(user.user_id) is not None
    publisher.publish_user_event.assert_awaited_once()


async def test_promoting_an_instructor_again_still_publishes(service, publisher):
    user = await _register(service)
    user = await service.subscribe_instructor(user)
    user = await service.subscribe_instructor(user)

    assert user.user_type == UserType.INSTRUCTOR
    assert publisher.actions == [ActionType.CREATE, ActionType.UPDATE, ActionType.UPDATE]


def test_service_depends_only_on_domain_publisher_interface():
    import authuser.modules.user_management.domain.services.user_service as user_service_module

    assert user_service_module.UserEventPublisher is UserEventPublisher
    assert "infrastructure" not in UserEventPublisher.__module__
    with pytest.raises(TypeError):
        UserEventPublisher()
