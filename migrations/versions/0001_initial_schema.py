"""initial_schema

Create the stamp card schema:
- Users (stamp counter and admin marker)
- Stamp events (append-only ledger history)
- User profiles (one per user)
- Auth identities (local mail or OAuth subject -> user)

Revision ID: 0001_initial_schema
Revises:
Create Date: 2025-11-02 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE stamp_event_type AS ENUM ('ADD', 'RESET');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("stamps", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # STAMP_EVENTS table (append-only)
    # ========================================================================
    op.create_table(
        "stamp_events",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column(
            "event_type",
            postgresql.ENUM("ADD", "RESET", name="stamp_event_type", create_type=False),
            nullable=False,
            server_default="ADD",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_stamp_events_user_created",
        "stamp_events",
        ["user_id", sa.text("created_at DESC"), sa.text("id DESC")],
    )

    # ========================================================================
    # USER_PROFILES table
    # ========================================================================
    op.create_table(
        "user_profiles",
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("mail_address", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("job", sa.String(255), nullable=False, server_default=""),
        sa.Column("hobbies", sa.Text(), nullable=False, server_default=""),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id"),
    )

    # ========================================================================
    # AUTH_IDENTITIES table
    # ========================================================================
    op.create_table(
        "auth_identities",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("provider", sa.String(50), nullable=False),  # 'local', 'google'
        sa.Column(
            "provider_key", sa.String(255), nullable=False
        ),  # normalized mail or subject id
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "provider", "provider_key", name="uq_auth_identity_provider_key"
        ),
    )
    op.create_index("idx_auth_identities_user_id", "auth_identities", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("auth_identities")
    op.drop_table("user_profiles")
    op.drop_table("stamp_events")
    op.drop_table("users")

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS stamp_event_type")
