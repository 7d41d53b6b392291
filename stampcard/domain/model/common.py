"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for stamp card entities.

    Entities are frozen; services build updated copies with ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)
