"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (missing or empty required field)."""

    pass


class BadRequestError(DomainError):
    """Raised when a required identifier is missing from a request."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a local account already exists for a mail address."""

    def __init__(self, mail_address: str):
        self.mail_address = mail_address
        super().__init__(f"An account already exists for {mail_address}")


class UsernameMismatchError(DomainError):
    """Raised when the supplied username does not match the stored profile."""

    def __init__(self) -> None:
        super().__init__("Username does not match the registered account")


class MailImmutableError(DomainError):
    """Raised when a profile edit tries to change the mail address."""

    def __init__(self) -> None:
        super().__init__("Mail address cannot be changed")


class UnauthorizedError(DomainError):
    """Raised when an admin token does not match the configured secret."""

    def __init__(self, message: str = "Unauthorized.") -> None:
        super().__init__(message)


class StoreUnavailableError(DomainError):
    """Raised when the underlying store cannot complete an operation."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Store unavailable during {operation}")


class DuplicateIdentityError(DomainError):
    """Raised by repositories when (provider, provider_key) is already mapped."""

    def __init__(self, provider: str, provider_key: str):
        self.provider = provider
        self.provider_key = provider_key
        super().__init__(f"Identity already registered: {provider}:{provider_key}")
