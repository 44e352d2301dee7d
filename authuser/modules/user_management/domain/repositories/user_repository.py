# 📄 File: authuser/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to save, find, update and delete users without saying
# which database actually stores them.
# 🧪 Purpose (Technical Summary):
# Repository interface for the User aggregate plus the explicit UserFilter used by the
# paginated listing. Writes are staged until commit() so the service owns the transaction.
# 🔗 Dependencies:
# Domain models (User, UserStatus, UserType), shared pagination, abc, dataclasses
# 🔄 Connected Modules / Calls From:
# user_service.py, user_repository_impl.py, users API (filter query parameters)

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

from authuser.shared.core.pagination import Page, PageRequest

from ..models.user import User, UserStatus, UserType


@dataclass
class UserFilter:
    """
    Optional listing criteria, combined with AND.

    - user_type, user_status, username: equality
    - email, full_name: case-insensitive substring
    - created_after / created_before: inclusive range on creation_date
    """
    user_type: Optional[UserType] = None
    user_status: Optional[UserStatus] = None
    email: Optional[str] = None
    username: Optional[str] = None
    full_name: Optional[str] = None
    created_after: Optional[datetime] = None
    created_before: Optional[datetime] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not database models
    - create/update/delete stage changes; commit() makes them durable
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Stage a new user.

        Raises:
            DuplicateResourceError: If username or email violates a unique constraint
            DatabaseError: If database operation fails
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Stage changes to an existing user.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, user_id: uuid.UUID) -> bool:
        """
        Stage removal of a user.

        Returns:
            True if a row was removed, False if it did not exist
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """
        Get user by ID.

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def find_all(self, user_filter: UserFilter, page_request: PageRequest) -> Page[User]:
        """
        Page through users matching ``user_filter``.

        Args:
            user_filter: Criteria, all optional
            page_request: Page index, size and sort ("<field>,<asc|desc>")

        Returns:
            Page of User entities with total counts
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make staged changes durable."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard staged changes."""
        pass
