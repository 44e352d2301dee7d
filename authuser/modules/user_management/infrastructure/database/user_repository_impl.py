# 📄 File: authuser/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for user accounts: adding new users, finding them,
# changing their details, removing them, and listing them page by page with filters.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of UserRepository. Writes are flushed, not committed; the
# user service owns commit/rollback. Unique-constraint violations surface as 409 conflicts.
#
# 🔗 Dependencies:
# - authuser.modules.user_management.domain (interface, filter, domain model)
# - authuser.modules.user_management.infrastructure.database.models (UserModel)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - authuser.modules.user_management.presentation.dependencies (repository wiring)
# - authuser.modules.user_management.domain.services.user_service

"""
User Repository Implementation

Maps between domain User entities and UserModel rows and translates
UserFilter criteria and PageRequest sort strings into SQL.
"""

import logging
from datetime import datetime, timezone
from typing import Any, List, Optional
from uuid import UUID

from fastapi import Depends
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from authuser.modules.user_management.domain.models.user import User, UserStatus, UserType
from authuser.modules.user_management.domain.repositories.user_repository import (
    UserFilter,
    UserRepository,
)
from authuser.modules.user_management.infrastructure.database.models import UserModel
from authuser.shared.core.exceptions import (
    DatabaseError,
    DuplicateResourceError,
    UserNotFoundError,
    ValidationError,
)
from authuser.shared.core.pagination import Page, PageRequest
from authuser.shared.infrastructure.database.session import get_db_session

logger = logging.getLogger(__name__)

# Sortable fields, JSON (camelCase) and Python names
SORTABLE_COLUMNS = {
    "userId": UserModel.user_id,
    "username": UserModel.username,
    "email": UserModel.email,
    "fullName": UserModel.full_name,
    "userStatus": UserModel.user_status,
    "userType": UserModel.user_type,
    "creationDate": UserModel.creation_date,
    "lastUpdateDate": UserModel.last_update_date,
}
SORTABLE_COLUMNS.update({column.key: column for column in list(SORTABLE_COLUMNS.values())})


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Naive values are UTC: SQLite drops tzinfo on the way back
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.
    """

    def __init__(self, session: AsyncSession = Depends(get_db_session)):
        """
        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    # =========================================================================
    # WRITES
    # =========================================================================

    async def create(self, user: User) -> User:
        try:
            user_model = self._domain_to_model(user)
            self._session.add(user_model)
            await self._session.flush()

            logger.debug(f"Staged user with ID: {user_model.user_id}")
            return self._model_to_domain(user_model)

        except IntegrityError as e:
            logger.warning(f"User creation failed - unique constraint violated: {user.username}")
            raise self._duplicate_error(e) from e

        except SQLAlchemyError as e:
            logger.error(f"Database error during user creation: {str(e)}")
            raise DatabaseError(f"Failed to create user: {str(e)}", operation="create") from e

    async def update(self, user: User) -> User:
        try:
            user_model = await self._session.get(UserModel, user.user_id)
            if user_model is None:
                raise UserNotFoundError(user.user_id)

            self._apply_domain(user_model, user)
            await self._session.flush()

            logger.debug(f"Staged update for user: {user.user_id}")
            return self._model_to_domain(user_model)

        except IntegrityError as e:
            logger.warning(f"User update failed - unique constraint violated: {user.user_id}")
            raise self._duplicate_error(e) from e

        except SQLAlchemyError as e:
            logger.error(f"Database error updating user {user.user_id}: {str(e)}")
            raise DatabaseError(f"Failed to update user: {str(e)}", operation="update") from e

    async def delete(self, user_id: UUID) -> bool:
        try:
            result = await self._session.execute(
                delete(UserModel).where(UserModel.user_id == user_id)
            )
            deleted = result.rowcount > 0
            logger.debug(f"Staged delete for user {user_id}: {deleted}")
            return deleted

        except SQLAlchemyError as e:
            logger.error(f"Database error deleting user {user_id}: {str(e)}")
            raise DatabaseError(f"Failed to delete user: {str(e)}", operation="delete") from e

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except IntegrityError as e:
            raise self._duplicate_error(e) from e
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {str(e)}")
            raise DatabaseError(f"Failed to commit: {str(e)}", operation="commit") from e

    async def rollback(self) -> None:
        await self._session.rollback()

    # =========================================================================
    # READS
    # =========================================================================

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        try:
            user_model = await self._session.get(UserModel, user_id)
            if user_model is None:
                logger.debug(f"User not found: {user_id}")
                return None
            return self._model_to_domain(user_model)

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {str(e)}")
            raise DatabaseError(f"Failed to retrieve user: {str(e)}", operation="get_by_id") from e

    async def exists_by_username(self, username: str) -> bool:
        return await self._exists(UserModel.username == username)

    async def exists_by_email(self, email: str) -> bool:
        return await self._exists(UserModel.email == email)

    async def find_all(self, user_filter: UserFilter, page_request: PageRequest) -> Page[User]:
        conditions = self._build_conditions(user_filter)
        order_by = self._build_order_by(page_request)

        try:
            count_stmt = select(func.count()).select_from(UserModel).where(*conditions)
            total = (await self._session.execute(count_stmt)).scalar_one()

            stmt = (
                select(UserModel)
                .where(*conditions)
                .order_by(*order_by)
                .offset(page_request.offset)
                .limit(page_request.size)
            )
            result = await self._session.execute(stmt)
            users = [self._model_to_domain(model) for model in result.scalars().all()]

            logger.debug(f"Listed {len(users)} of {total} users (page {page_request.page})")
            return Page[User].of(users, total, page_request)

        except SQLAlchemyError as e:
            logger.error(f"Database error listing users: {str(e)}")
            raise DatabaseError(f"Failed to list users: {str(e)}", operation="find_all") from e

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _exists(self, condition) -> bool:
        try:
            stmt = select(UserModel.user_id).where(condition).limit(1)
            result = await self._session.execute(stmt)
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Database error checking user existence: {str(e)}")
            raise DatabaseError(f"Failed to check user existence: {str(e)}", operation="exists") from e

    def _build_conditions(self, user_filter: UserFilter) -> List[Any]:
        conditions = []
        if user_filter.is_empty():
            return conditions
        if user_filter.user_type is not None:
            conditions.append(UserModel.user_type == user_filter.user_type.value)
        if user_filter.user_status is not None:
            conditions.append(UserModel.user_status == user_filter.user_status.value)
        if user_filter.email:
            conditions.append(
                func.lower(UserModel.email).contains(user_filter.email.lower(), autoescape=True)
            )
        if user_filter.username:
            conditions.append(UserModel.username == user_filter.username)
        if user_filter.full_name:
            conditions.append(
                func.lower(UserModel.full_name).contains(user_filter.full_name.lower(), autoescape=True)
            )
        if user_filter.created_after is not None:
            conditions.append(UserModel.creation_date >= _as_utc(user_filter.created_after))
        if user_filter.created_before is not None:
            conditions.append(UserModel.creation_date <= _as_utc(user_filter.created_before))
        return conditions

    def _build_order_by(self, page_request: PageRequest) -> List[Any]:
        column = SORTABLE_COLUMNS.get(page_request.sort_field)
        if column is None:
            raise ValidationError(
                f"Unsupported sort field: {page_request.sort_field}",
                field="sort",
                value=page_request.sort
            )

        order = [column.desc() if page_request.sort_direction == "desc" else column.asc()]
        if column is not UserModel.user_id:
            order.append(UserModel.user_id.asc())
        return order

    @staticmethod
    def _duplicate_error(error: IntegrityError) -> DuplicateResourceError:
        message = str(error.orig).lower()
        if "username" in message:
            field = "username"
        elif "email" in message:
            field = "email"
        else:
            field = None
        return DuplicateResourceError(
            message=f"User with this {field or 'value'} already exists",
            resource_type="user",
            field=field
        )

    def _model_to_domain(self, model: UserModel) -> User:
        return User(
            user_id=model.user_id,
            username=model.username,
            email=model.email,
            password=model.password,
            full_name=model.full_name,
            phone_number=model.phone_number,
            national_id=model.national_id,
            image_url=model.image_url,
            user_status=UserStatus(model.user_status),
            user_type=UserType(model.user_type),
            creation_date=_as_utc(model.creation_date),
            last_update_date=_as_utc(model.last_update_date),
        )

    def _domain_to_model(self, user: User) -> UserModel:
        model = UserModel(user_id=user.user_id)
        self._apply_domain(model, user)
        return model

    @staticmethod
    def _apply_domain(model: UserModel, user: User) -> None:
        model.username = user.username
        model.email = user.email
        model.password = user.password
        model.full_name = user.full_name
        model.phone_number = user.phone_number
        model.national_id = user.national_id
        model.image_url = user.image_url
        model.user_status = user.user_status.value
        model.user_type = user.user_type.value
        model.creation_date = user.creation_date
        model.last_update_date = user.last_update_date
