"""Reset stamps use case."""

from pydantic import BaseModel

from stampcard.application.usecase.base import BaseUseCase, CamelModel
from stampcard.domain.service import LedgerService
from stampcard.domain.value import UserId


class ResetStampsRequest(BaseModel):
    """Reset stamps request."""

    user_id: str  # From resolved caller


class ResetStampsResponse(CamelModel):
    """Reset stamps response."""

    id: str
    stamps: int


class ResetStampsUseCase(BaseUseCase):
    """Use case for a user clearing their own card."""

    def __init__(self, ledger_service: LedgerService) -> None:
        self.ledger_service = ledger_service

    async def execute(self, request: ResetStampsRequest) -> ResetStampsResponse:
        """Reset the caller's counter to zero and record a RESET event."""
        stamps = await self.ledger_service.reset(UserId(request.user_id))
        return ResetStampsResponse(id=request.user_id, stamps=stamps)
