"""Create users table

Revision ID: 001
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users table"""

    op.create_table('users',
        sa.Column('user_id', sa.Uuid(as_uuid=True), nullable=False, comment='Unique identifier for each user'),
        sa.Column('username', sa.String(50), nullable=False, comment='Unique login name'),
        sa.Column('email', sa.String(50), nullable=False, comment='Unique e-mail address'),
        sa.Column('password', sa.String(255), nullable=False, comment='Password as provided by the client'),
        sa.Column('full_name', sa.String(150), nullable=False),
        sa.Column('phone_number', sa.String(20), nullable=True),
        sa.Column('national_id', sa.String(20), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('user_status', sa.String(20), nullable=False, comment='ACTIVE / BLOCKED'),
        sa.Column('user_type', sa.String(20), nullable=False, comment='STUDENT / INSTRUCTOR / ADMIN'),
        sa.Column('creation_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_update_date', sa.DateTime(timezone=True), nullable=False),

        sa.PrimaryKeyConstraint('user_id'),
        sa.CheckConstraint("user_status IN ('ACTIVE', 'BLOCKED')", name='ck_users_user_status'),
        sa.CheckConstraint("user_type IN ('STUDENT', 'INSTRUCTOR', 'ADMIN')", name='ck_users_user_type'),
    )

    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_creation_date', 'users', ['creation_date'])


def downgrade() -> None:
    """Drop users table"""

    op.drop_index('ix_users_creation_date', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
