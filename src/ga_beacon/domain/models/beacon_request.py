"""Inbound beacon request domain model."""

from pydantic import BaseModel, ConfigDict, field_validator


class BeaconRequest(BaseModel):
    """Everything the beacon needs from one inbound HTTP request."""

    model_config = ConfigDict(frozen=True)

    tracking_id: str
    remote_ip_address: str | None = None
    existing_client_id: str | None = None
    query_options: frozenset[str] = frozenset()
    referer: str | None = None
    explicit_url_path: str | None = None
    user_agent: str | None = None

    @field_validator("query_options", mode="before")
    @classmethod
    def normalize_query_options(cls, v: object) -> frozenset[str]:
        """Store option names lowercased so lookups are case-insensitive."""
        if v is None:
            return frozenset()
        return frozenset(str(option).lower() for option in v)  # type: ignore[attr-defined]

    def has_option(self, name: str) -> bool:
        return name.lower() in self.query_options
