# 📄 File: authuser/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Shared building blocks every part of the user service relies on: error types and paging.
# 🧪 Purpose (Technical Summary):
# Core package exports for the exception hierarchy and pagination value objects.
# 🔗 Dependencies:
# exceptions.py, pagination.py
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, API layer, external clients

from .exceptions import (
    AuthUserException,
    DatabaseError,
    DuplicateResourceError,
    EmailAlreadyTakenError,
    ExternalServiceError,
    NotFoundError,
    PasswordMismatchError,
    UserNotFoundError,
    UsernameAlreadyTakenError,
    ValidationError,
)
from .pagination import CamelModel, Page, PageRequest

__all__ = [
    "AuthUserException",
    "DatabaseError",
    "DuplicateResourceError",
    "EmailAlreadyTakenError",
    "ExternalServiceError",
    "NotFoundError",
    "PasswordMismatchError",
    "UserNotFoundError",
    "UsernameAlreadyTakenError",
    "ValidationError",
    "CamelModel",
    "Page",
    "PageRequest",
]
