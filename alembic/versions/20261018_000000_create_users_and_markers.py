"""Create users, markers and user_markers

Revision ID: 20261018_000000
Revises: None
Create Date: 2026-10-18 00:00:00.000000

Creates the tables behind registration and progress tracking:
- users: registered users with their issued token
- markers: catalogue of markers (unique key)
- user_markers: a user reaching a marker at a point in time

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261018_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("first_name", sa.String(128), nullable=False),
        sa.Column("last_name", sa.String(128), nullable=False),
        sa.Column("email", sa.String(256), nullable=False),
        sa.Column("email_normalized", sa.String(256), nullable=True),
        sa.Column("registration_date", sa.DateTime(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("token", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"])
    op.create_index("ix_users_email_normalized", "users", ["email_normalized"])
    op.create_index("ix_users_is_active", "users", ["is_active"])

    # Create markers table
    op.create_table(
        "markers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("key", sa.String(64), nullable=False),
        sa.Column("value", sa.String(16), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_markers_key", "markers", ["key"], unique=True)

    # Create user_markers table
    op.create_table(
        "user_markers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("marker_id", sa.Integer(), nullable=False),
        sa.Column("date_time", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["marker_id"], ["markers.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_user_markers_user_id", "user_markers", ["user_id"])
    op.create_index("ix_user_markers_marker_id", "user_markers", ["marker_id"])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index("ix_user_markers_marker_id", table_name="user_markers")
    op.drop_index("ix_user_markers_user_id", table_name="user_markers")
    op.drop_table("user_markers")
    op.drop_index("ix_markers_key", table_name="markers")
    op.drop_table("markers")
    op.drop_index("ix_users_is_active", table_name="users")
    op.drop_index("ix_users_email_normalized", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
