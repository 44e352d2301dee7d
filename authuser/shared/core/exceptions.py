# 📄 File: authuser/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the user service uses to explain
# what went wrong (user missing, username taken, wrong old password...) instead of generic errors.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, course client, exception handlers in authuser.main

from typing import Any, Dict, Optional

from fastapi import status


class AuthUserException(Exception):
    """
    Base exception class for the user account service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(AuthUserException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(AuthUserException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class UserNotFoundError(NotFoundError):
    """Raised when a referenced user id does not exist."""

    def __init__(self, user_id: Any):
        super().__init__(
            message="User not found",
            resource_type="user",
            resource_id=str(user_id)
        )


class DuplicateResourceError(AuthUserException):
    """
    Exception raised when attempting to create duplicate resources.
    Used for unique constraint violations and advisory pre-checks.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field
        if value:
            details["value"] = value

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


class UsernameAlreadyTakenError(DuplicateResourceError):
    def __init__(self, username: str):
        super().__init__(
            message="Error: Username is already taken.",
            resource_type="user",
            field="username",
            value=username
        )


class EmailAlreadyTakenError(DuplicateResourceError):
    def __init__(self, email: str):
        super().__init__(
            message="Error: Email is already taken.",
            resource_type="user",
            field="email",
            value=email
        )


class PasswordMismatchError(AuthUserException):
    """
    Raised when the old password supplied on a password change
    does not match the stored one.
    """

    def __init__(self, user_id: Any):
        super().__init__(
            message="Error: Mismatched old password",
            status_code=status.HTTP_409_CONFLICT,
            details={"user_id": str(user_id)},
            error_code="PASSWORD_MISMATCH"
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalServiceError(AuthUserException):
    """
    Exception raised when an external service call fails.

    ``retryable`` tells the retry policy whether re-issuing the same
    request may succeed (transport failures, 5xx responses).
    """

    def __init__(
        self,
        message: str = "External service error",
        service_name: Optional[str] = None,
        remote_status: Optional[int] = None,
        retryable: bool = False,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if service_name:
            details["service"] = service_name
        if remote_status is not None:
            details["remote_status"] = remote_status

        self.service_name = service_name
        self.remote_status = remote_status
        self.retryable = retryable

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_SERVICE_ERROR"
        )


# =============================================================================
# INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(AuthUserException):
    """
    Exception raised for database operation failures.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="DATABASE_ERROR"
        )

