# 📄 File: authuser/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how user accounts are stored in the database table, column by column.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the users table with unique constraints on username and email
# and check constraints restricting status and role to their enumerated values.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - authuser.shared.infrastructure.database.connection (declarative Base)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - migrations/env.py (metadata), migrations/versions/001_create_users_table.py

from uuid import uuid4

from sqlalchemy import CheckConstraint, Column, DateTime, String, Text, Uuid

from authuser.shared.infrastructure.database.connection import Base


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(Base):
    """
    SQLAlchemy model for user accounts.

    Timestamps carry no server default; the service layer assigns them.
    """
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("user_status IN ('ACTIVE', 'BLOCKED')", name="ck_users_user_status"),
        CheckConstraint("user_type IN ('STUDENT', 'INSTRUCTOR', 'ADMIN')", name="ck_users_user_type"),
    )

    # Primary identification
    user_id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
        nullable=False,
        comment="Unique identifier for each user"
    )

    # Account identity
    username = Column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
        comment="Unique login name"
    )
    email = Column(
        String(50),
        unique=True,
        nullable=False,
        index=True,
        comment="Unique e-mail address"
    )
    password = Column(
        String(255),
        nullable=False,
        comment="Password as provided by the client"
    )

    # Profile
    full_name = Column(String(150), nullable=False)
    phone_number = Column(String(20), nullable=True)
    national_id = Column(String(20), nullable=True)
    image_url = Column(Text, nullable=True)

    # Status and role
    user_status = Column(String(20), nullable=False, comment="ACTIVE / BLOCKED")
    user_type = Column(String(20), nullable=False, comment="STUDENT / INSTRUCTOR / ADMIN")

    # Timestamps (set by the service layer, UTC)
    creation_date = Column(DateTime(timezone=True), nullable=False, index=True)
    last_update_date = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(user_id={self.user_id}, username={self.username})>"
