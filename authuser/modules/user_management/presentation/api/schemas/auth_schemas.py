# 📄 File: authuser/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes the sign-up form: what a new user must send to open an account.
#
# 🧪 Purpose (Technical Summary):
# Registration request schema. Status and role are not accepted from the client; any such
# field in the body is ignored and the service assigns ACTIVE / STUDENT.
#
# 🔗 Dependencies:
# - pydantic (EmailStr via email-validator, field validators)
#
# 🔄 Connected Modules / Calls From:
# - authuser.modules.user_management.presentation.api.v1.auth

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from authuser.shared.core.pagination import CamelModel


class UserRegistrationRequest(CamelModel):
    """
    Sign-up payload.

    Validation:
    - username: 4 to 50 characters, no whitespace
    - email: valid address, at most 50 characters
    - password: 6 to 20 characters
    """
    username: str = Field(..., min_length=4, max_length=50)
    email: EmailStr = Field(..., max_length=50)
    password: str = Field(..., min_length=6, max_length=20)
    full_name: str = Field(..., min_length=1, max_length=150)
    phone_number: Optional[str] = Field(None, max_length=20)
    national_id: Optional[str] = Field(None, max_length=20)
    image_url: Optional[str] = None

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError("Username must not contain whitespace")
        return v
