"""Stamp ledger use cases."""

from .get_stamp_status import GetStampStatusUseCase
from .reset_stamps import ResetStampsUseCase

__all__ = ["GetStampStatusUseCase", "ResetStampsUseCase"]
