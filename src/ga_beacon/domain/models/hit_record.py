"""Measurement Protocol hit domain model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

PROTOCOL_VERSION = "1"


class HitType(Enum):
    """Hit types understood by the collector."""

    PAGE_VIEW = "PageView"

    @property
    def wire_name(self) -> str:
        """Name sent in the ``t`` field (``pageview``)."""
        return self.value.lower()


class HitRecord(BaseModel):
    """A single page-view hit.

    Construction fails with a ``ValidationError`` when any identifying
    field is empty; a hit is never sent with partial data.
    """

    model_config = ConfigDict(frozen=True)

    tracking_id: str = Field(min_length=1)
    client_id: str = Field(min_length=1)
    page_path: str = Field(min_length=1)
    ip_address: str = Field(min_length=1)
    hit_type: HitType = HitType.PAGE_VIEW
    protocol_version: str = PROTOCOL_VERSION

    def to_form(self) -> dict[str, str]:
        """Form fields for the ``application/x-www-form-urlencoded`` body."""
        return {
            "v": self.protocol_version,
            "tid": self.tracking_id,
            "cid": self.client_id,
            "t": self.hit_type.wire_name,
            "dp": self.page_path,
            "uip": self.ip_address,
        }
