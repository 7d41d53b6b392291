"""Stamp event entity.

Append-only history of ledger mutations.
"""

from datetime import datetime

from stampcard.domain.model.common import DomainModel
from stampcard.domain.value import StampEventId, StampEventType, UserId


class StampEvent(DomainModel):
    """Immutable record of one grant or reset.

    Ordered by ``created_at``; ``id`` is assigned by the store in insertion
    order and breaks ties between events with the same timestamp.
    """

    id: StampEventId
    user_id: UserId
    created_at: datetime
    reason: str
    event_type: StampEventType
