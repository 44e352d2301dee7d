# 📄 File: authuser/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# This file contains the business logic for managing users: signing them up, updating their
# profile, changing passwords, promoting them to instructors and removing them, and telling
# the rest of the platform whenever one of those changes happened.
# 🧪 Purpose (Technical Summary):
# Domain service orchestrating repository writes, the commit boundary and user event
# publication. Order is always persist -> commit -> publish; a failed write publishes
# nothing, and a failed publication is logged without undoing the committed write.
# 🔗 Dependencies:
# User domain models, repository interface, user events, user event publisher
# 🔄 Connected Modules / Calls From:
# API endpoints (auth, users, instructors) through presentation/dependencies.py

import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from authuser.shared.core.exceptions import PasswordMismatchError
from authuser.shared.core.pagination import Page, PageRequest
from authuser.shared.events.base import ActionType

from ..events.publisher import UserEventPublisher
from ..events.user_events import UserEvent
from ..models.user import User, UserStatus, UserType, utc_now
from ..repositories.user_repository import UserFilter, UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Domain service for user management business logic.

    Mutations:
    - save_user: insert, publishes CREATE
    - update_user: update, publishes UPDATE
    - update_password: update, publishes nothing
    - delete_user: delete, publishes DELETE
    """

    def __init__(self, user_repository: UserRepository, event_publisher: UserEventPublisher):
        self.user_repository = user_repository
        self.event_publisher = event_publisher

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def exists_by_username(self, username: str) -> bool:
        return await self.user_repository.exists_by_username(username)

    async def exists_by_email(self, email: str) -> bool:
        return await self.user_repository.exists_by_email(email)

    async def find_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return await self.user_repository.get_by_id(user_id)

    async def find_all(self, user_filter: UserFilter, page_request: PageRequest) -> Page[User]:
        return await self.user_repository.find_all(user_filter, page_request)

    # =========================================================================
    # MUTATIONS
    # =========================================================================

    @asynccontextmanager
    async def _transactional(self, operation: str):
        """Commit staged writes on success, roll back on any failure."""
        try:
            yield
            await self.user_repository.commit()
        except Exception as e:
            await self.user_repository.rollback()
            logger.error(f"❌ {operation} rolled back: {e}")
            raise

    async def _publish(self, user: User, action_type: ActionType) -> None:
        try:
            published = await self.event_publisher.publish_user_event(
                UserEvent.from_user(user), action_type
            )
        except Exception as e:
            logger.error(f"❌ User event {action_type.value} for {user.user_id} raised: {e}")
            return

        if not published:
            logger.warning(f"User event {action_type.value} for {user.user_id} was not delivered")

    async def save_user(self, user: User) -> User:
        async with self._transactional("save_user"):
            saved = await self.user_repository.create(user)
        logger.info(f"✅ User created: {saved.user_id}")

        await self._publish(saved, ActionType.CREATE)
        return saved

    async def update_user(self, user: User) -> User:
        async with self._transactional("update_user"):
            updated = await self.user_repository.update(user)
        logger.info(f"✅ User updated: {updated.user_id}")

        await self._publish(updated, ActionType.UPDATE)
        return updated

    async def update_password(self, user: User) -> User:
        async with self._transactional("update_password"):
            updated = await self.user_repository.update(user)
        logger.info(f"✅ Password updated for user: {updated.user_id}")
        return updated

    async def delete_user(self, user: User) -> None:
        async with self._transactional("delete_user"):
            await self.user_repository.delete(user.user_id)
        logger.info(f"✅ User deleted: {user.user_id}")

        await self._publish(user, ActionType.DELETE)

    # =========================================================================
    # USE CASES
    # =========================================================================

    async def register_user(
        self,
        username: str,
        email: str,
        password: str,
        full_name: str,
        phone_number: Optional[str] = None,
        national_id: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> User:
        """
        Register a new student account.

        The new user is ACTIVE, a STUDENT, and has identical creation
        and last update timestamps.
        """
        now = utc_now()
        user = User(
            username=username,
            email=email,
            password=password,
            full_name=full_name,
            phone_number=phone_number,
            national_id=national_id,
            image_url=image_url,
            user_status=UserStatus.ACTIVE,
            user_type=UserType.STUDENT,
            creation_date=now,
            last_update_date=now,
        )
        return await self.save_user(user)

    async def update_profile(
        self,
        user: User,
        full_name: str,
        phone_number: Optional[str] = None,
        national_id: Optional[str] = None,
    ) -> User:
        user.full_name = full_name
        user.phone_number = phone_number
        user.national_id = national_id
        user.touch()
        return await self.update_user(user)

    async def change_password(self, user: User, old_password: str, new_password: str) -> User:
        """
        Replace the password after checking the current one.

        Raises:
            PasswordMismatchError: If ``old_password`` differs from the stored password
        """
        if user.password != old_password:
            logger.warning(f"Mismatched old password for user: {user.user_id}")
            raise PasswordMismatchError(user.user_id)

        user.password = new_password
        user.touch()
        return await self.update_password(user)

    async def update_image(self, user: User, image_url: str) -> User:
        user.image_url = image_url
        user.touch()
        return await self.update_user(user)

    async def subscribe_instructor(self, user: User) -> User:
        # An existing instructor is saved again and still publishes an UPDATE
        if user.is_instructor:
            logger.info(f"User {user.user_id} is already an instructor")
        user.user_type = UserType.INSTRUCTOR
        user.touch()
        return await self.update_user(user)
