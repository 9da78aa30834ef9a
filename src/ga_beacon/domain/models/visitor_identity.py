"""Visitor identity domain model."""

from pydantic import BaseModel, ConfigDict, Field


class VisitorIdentity(BaseModel):
    """Persistent client identifier sent as the ``cid`` hit field and cookie."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(min_length=1)
    minted: bool = False
