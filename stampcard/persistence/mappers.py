"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM mapping. The stored stamp counter is clamped
here so every read sees a value in range.
"""

from typing import Any, Dict

from stampcard.domain.model import AuthIdentity, Profile, StampEvent, User
from stampcard.domain.value import (
    AuthIdentityId,
    AuthProvider,
    MailAddress,
    StampEventId,
    StampEventType,
    UserId,
    clamp_stamps,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        stamps=clamp_stamps(row["stamps"]),
        is_admin=bool(row["is_admin"]),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion
    """
    return user.model_dump()


def row_to_stamp_event(row: Dict[str, Any]) -> StampEvent:
    """Convert database row to StampEvent domain model.

    Args:
        row: Database row as dict

    Returns:
        StampEvent domain model
    """
    return StampEvent(
        id=StampEventId(row["id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
        reason=row["reason"],
        event_type=StampEventType(row["event_type"]),
    )


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model.

    Args:
        row: Database row as dict

    Returns:
        Profile domain model
    """
    mail = row.get("mail_address")
    return Profile(
        user_id=UserId(row["user_id"]),
        username=row["username"],
        mail_address=MailAddress(mail) if mail else None,
        description=row.get("description") or "",
        job=row.get("job") or "",
        hobbies=row.get("hobbies") or "",
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    """Convert Profile domain model to database dict.

    Args:
        profile: Profile domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return profile.model_dump()


def row_to_auth_identity(row: Dict[str, Any]) -> AuthIdentity:
    """Convert database row to AuthIdentity domain model.

    Args:
        row: Database row as dict

    Returns:
        AuthIdentity domain model
    """
    return AuthIdentity(
        id=AuthIdentityId(row["id"]),
        user_id=UserId(row["user_id"]),
        provider=AuthProvider(row["provider"]),
        provider_key=row["provider_key"],
        created_at=row["created_at"],
    )


def auth_identity_to_dict(identity: AuthIdentity) -> Dict[str, Any]:
    """Convert AuthIdentity domain model to database dict.

    The store assigns ``id``, so it is left out.

    Args:
        identity: AuthIdentity domain model

    Returns:
        Dict suitable for database insertion
    """
    data = identity.model_dump(exclude={"id"})
    data["provider"] = identity.provider.value
    return data
