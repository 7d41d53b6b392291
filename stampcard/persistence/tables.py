"""SQLAlchemy table definitions for the stamp card.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("stamps", Integer, nullable=False, server_default="0"),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
)

# ============================================================================
# STAMP EVENTS TABLE (append-only ledger history)
# ============================================================================
stamp_events_table = Table(
    "stamp_events",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("user_id", String(255), ForeignKey("users.id"), nullable=False),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("reason", Text, nullable=False),
    Column(
        "event_type",
        postgresql.ENUM("ADD", "RESET", name="stamp_event_type", create_type=False),
        nullable=False,
        server_default="ADD",
    ),
)

# Serves both the recent-history query and MAX(created_at)
Index(
    "idx_stamp_events_user_created",
    stamp_events_table.c.user_id,
    stamp_events_table.c.created_at.desc(),
    stamp_events_table.c.id.desc(),
)

# ============================================================================
# USER PROFILES TABLE (one-to-one with users)
# ============================================================================
user_profiles_table = Table(
    "user_profiles",
    metadata,
    Column("user_id", String(255), ForeignKey("users.id"), primary_key=True),
    Column("username", String(255), nullable=False),
    Column("mail_address", String(255), nullable=True),
    Column("description", Text, nullable=False, server_default=""),
    Column("job", String(255), nullable=False, server_default=""),
    Column("hobbies", Text, nullable=False, server_default=""),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# AUTH IDENTITIES TABLE (local + OAuth logins)
# ============================================================================
auth_identities_table = Table(
    "auth_identities",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("user_id", String(255), ForeignKey("users.id"), nullable=False),
    Column("provider", String(50), nullable=False),  # 'local', 'google'
    Column("provider_key", String(255), nullable=False),  # mail or subject id
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("provider", "provider_key", name="uq_auth_identity_provider_key"),
)

Index("idx_auth_identities_user_id", auth_identities_table.c.user_id)
