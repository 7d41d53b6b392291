"""Identity and profile domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from stampcard.domain.error import (
    ConflictError,
    DuplicateIdentityError,
    MailImmutableError,
    NotFoundError,
    UsernameMismatchError,
    ValidationError,
)
from stampcard.domain.model import AuthIdentity, Profile, User
from stampcard.domain.repository import AuthIdentityRepository, ProfileRepository
from stampcard.domain.value import (
    MAX_JOB_LENGTH,
    MAX_MAIL_LENGTH,
    MAX_PROVIDER_KEY_LENGTH,
    MAX_USERNAME_LENGTH,
    AuthProvider,
    MailAddress,
    UserId,
    normalize_mail,
    normalize_username,
)

from .base import Service

# Username used when an OAuth payload carries neither a name nor a mail
DEFAULT_USERNAME = "user"


class IdentityService(Service):
    """Domain service resolving login identities to users.

    Local identities are keyed by normalized mail address; at most one
    local identity exists per address. The username check on local login
    is a weak secondary factor, not a password.
    """

    def __init__(
        self,
        auth_identity_repository: AuthIdentityRepository,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize identity service.

        Args:
            auth_identity_repository: Auth identity repository
            profile_repository: Profile repository
        """
        self.auth_identity_repository = auth_identity_repository
        self.profile_repository = profile_repository

    async def resolve_local(self, mail_address: str) -> UserId | None:
        """Find the user owning a local identity.

        Args:
            mail_address: Mail address in any case

        Returns:
            User ID if a local identity exists, None otherwise
        """
        key = normalize_mail(mail_address)
        with logfire.span("identity_service.resolve_local", mail_address=key):
            identity = await self.auth_identity_repository.find_by_provider(
                AuthProvider.LOCAL, key
            )
            if identity:
                logfire.info("Local identity found", user_id=identity.user_id)
                return identity.user_id
            logfire.warn("Local identity not found", mail_address=key)
            return None

    async def signup_local(
        self,
        username: str,
        mail_address: str,
        description: str = "",
        job: str = "",
        hobbies: str = "",
    ) -> UserId:
        """Register a new local account.

        Creates user, profile and local identity together.

        Args:
            username: Display name (trimmed, case preserved)
            mail_address: Mail address (trimmed and lowercased)
            description: Free-text profile description
            job: Profile job
            hobbies: Profile hobbies

        Returns:
            ID of the new user

        Raises:
            ValidationError: If username or mail address is empty or too long
            ConflictError: If a local account already exists for the address
        """
        name = normalize_username(username)
        key = normalize_mail(mail_address)
        if not name:
            raise ValidationError("username is required.")
        if not key:
            raise ValidationError("mailAddress is required.")
        if len(key) > MAX_MAIL_LENGTH:
            raise ValidationError(
                f"mailAddress must be at most {MAX_MAIL_LENGTH} characters."
            )
        _check_profile_lengths(name, job)

        with logfire.span("identity_service.signup_local", mail_address=key):
            existing = await self.auth_identity_repository.find_by_provider(
                AuthProvider.LOCAL, key
            )
            if existing:
                logfire.warn("Duplicate local signup", mail_address=key)
                raise ConflictError(key)

            now = datetime.now(timezone.utc)
            user_id = UserId(str(uuid4()))
            profile = Profile(
                user_id=user_id,
                username=name,
                mail_address=MailAddress(key),
                description=description,
                job=job,
                hobbies=hobbies,
                updated_at=now,
            )
            identity = AuthIdentity(
                user_id=user_id,
                provider=AuthProvider.LOCAL,
                provider_key=key,
                created_at=now,
            )

            try:
                await self.auth_identity_repository.register(
                    User(id=user_id), profile, identity
                )
            except DuplicateIdentityError:
                # Lost a race against a concurrent signup for the same address
                logfire.warn("Concurrent local signup rejected", mail_address=key)
                raise ConflictError(key)

            logfire.info("Local account created", user_id=user_id)
            return user_id

    async def login_local(self, username: str, mail_address: str) -> UserId:
        """Resolve a local login.

        Args:
            username: Username as typed by the user
            mail_address: Mail address in any case

        Returns:
            ID of the matching user

        Raises:
            NotFoundError: If no local identity exists for the address
            UsernameMismatchError: If the stored username differs
        """
        key = normalize_mail(mail_address)
        with logfire.span("identity_service.login_local", mail_address=key):
            identity = await self.auth_identity_repository.find_by_provider(
                AuthProvider.LOCAL, key
            )
            if not identity:
                logfire.warn("Login for unknown account", mail_address=key)
                raise NotFoundError("Account", key)

            profile = await self.profile_repository.find_by_user_id(identity.user_id)
            if profile is None or normalize_username(
                profile.username
            ) != normalize_username(username):
                logfire.warn("Username mismatch on login", user_id=identity.user_id)
                raise UsernameMismatchError()

            logfire.info("Local login", user_id=identity.user_id)
            return identity.user_id

    async def resolve_or_create_oauth(
        self,
        provider: AuthProvider,
        provider_key: str,
        display_name: str | None,
        email: str | None,
    ) -> UserId:
        """Resolve an OAuth identity, creating the account on first login.

        Args:
            provider: OAuth provider
            provider_key: Provider subject id
            display_name: Name from the provider profile
            email: Mail address from the provider profile

        Returns:
            ID of the mapped user

        Raises:
            ValidationError: If the subject id is empty or too long
        """
        with logfire.span(
            "identity_service.resolve_or_create_oauth",
            provider=provider.value,
            provider_key=provider_key,
        ):
            if not provider_key or len(provider_key) > MAX_PROVIDER_KEY_LENGTH:
                logfire.warn("Unusable OAuth subject id", provider=provider.value)
                raise ValidationError("OAuth subject id is missing or too long.")

            existing = await self.auth_identity_repository.find_by_provider(
                provider, provider_key
            )
            if existing:
                logfire.info(
                    "OAuth identity found",
                    provider=provider.value,
                    user_id=existing.user_id,
                )
                return existing.user_id

            now = datetime.now(timezone.utc)
            user_id = UserId(str(uuid4()))
            mail = normalize_mail(email) if email else ""
            if len(mail) > MAX_MAIL_LENGTH:
                # Provider addresses that do not fit are not stored
                logfire.warn("OAuth mail address dropped", provider=provider.value)
                mail = ""
            profile = Profile(
                user_id=user_id,
                username=_username_from_payload(display_name, mail),
                mail_address=MailAddress(mail) if mail else None,
                updated_at=now,
            )
            identity = AuthIdentity(
                user_id=user_id,
                provider=provider,
                provider_key=provider_key,
                created_at=now,
            )

            try:
                await self.auth_identity_repository.register(
                    User(id=user_id), profile, identity
                )
            except DuplicateIdentityError:
                # Someone else created it first; use their row
                winner = await self.auth_identity_repository.find_by_provider(
                    provider, provider_key
                )
                if winner is None:
                    raise
                logfire.info(
                    "OAuth identity created concurrently",
                    provider=provider.value,
                    user_id=winner.user_id,
                )
                return winner.user_id

            logfire.info(
                "OAuth account created", provider=provider.value, user_id=user_id
            )
            return user_id

    async def get_profile(self, user_id: UserId) -> Profile | None:
        """Get a user's profile.

        Args:
            user_id: User ID

        Returns:
            Profile if one exists, None otherwise
        """
        with logfire.span("identity_service.get_profile", user_id=user_id):
            return await self.profile_repository.find_by_user_id(user_id)

    async def get_identities(self, user_id: UserId) -> list[AuthIdentity]:
        """Get all identities linked to a user.

        Args:
            user_id: User ID

        Returns:
            Identities ordered by creation
        """
        with logfire.span("identity_service.get_identities", user_id=user_id):
            return await self.auth_identity_repository.find_all_by_user_id(user_id)

    async def update_profile(
        self,
        user_id: UserId,
        username: str,
        description: str | None = None,
        job: str | None = None,
        hobbies: str | None = None,
        mail_address: str | None = None,
    ) -> Profile:
        """Edit a profile.

        Fields passed as None keep their stored value. The stored profile is
        left unchanged when validation fails.

        Args:
            user_id: Owner of the profile
            username: New username (required)
            description: New description
            job: New job
            hobbies: New hobbies
            mail_address: Mail address echoed by the client; must match

        Returns:
            The saved profile

        Raises:
            ValidationError: If username is empty or a field is too long
            NotFoundError: If the user has no profile
            MailImmutableError: If a different mail address is supplied
        """
        name = normalize_username(username)
        if not name:
            raise ValidationError("username is required.")
        _check_profile_lengths(name, job)

        with logfire.span("identity_service.update_profile", user_id=user_id):
            profile = await self.profile_repository.find_by_user_id(user_id)
            if profile is None:
                logfire.warn("Profile not found", user_id=user_id)
                raise NotFoundError("Profile", user_id)

            if mail_address and (
                profile.mail_address is None
                or not profile.mail_address.matches(mail_address)
            ):
                logfire.warn("Attempt to change mail address", user_id=user_id)
                raise MailImmutableError()

            updated = profile.model_copy(
                update={
                    "username": name,
                    "description": description
                    if description is not None
                    else profile.description,
                    "job": job if job is not None else profile.job,
                    "hobbies": hobbies if hobbies is not None else profile.hobbies,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
            saved = await self.profile_repository.save(updated)
            logfire.info("Profile updated", user_id=user_id)
            return saved


def _username_from_payload(display_name: str | None, mail: str) -> str:
    name = normalize_username(display_name or "")[:MAX_USERNAME_LENGTH].strip()
    if name:
        return name
    if mail:
        return mail.split("@", 1)[0]
    return DEFAULT_USERNAME


def _check_profile_lengths(username: str, job: str | None) -> None:
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError(
            f"username must be at most {MAX_USERNAME_LENGTH} characters."
        )
    if job is not None and len(job) > MAX_JOB_LENGTH:
        raise ValidationError(f"job must be at most {MAX_JOB_LENGTH} characters.")
