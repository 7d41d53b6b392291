"""User profile entity."""

from datetime import datetime, timezone

from pydantic import Field

from stampcard.domain.model.common import DomainModel
from stampcard.domain.value import MailAddress, UserId


class Profile(DomainModel):
    """Editable profile, one per user.

    The mail address is fixed when the identity is created.
    """

    user_id: UserId
    username: str
    mail_address: MailAddress | None = None
    description: str = ""
    job: str = ""
    hobbies: str = ""
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
