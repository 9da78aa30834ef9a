"""Page path resolution result."""

from pydantic import BaseModel, ConfigDict


class PathResolution(BaseModel):
    """Outcome of deciding which page path a hit should log.

    Exactly one of ``page_path`` and ``failure_reason`` is set.
    """

    model_config = ConfigDict(frozen=True)

    page_path: str | None = None
    failure_reason: str | None = None

    @property
    def resolved(self) -> bool:
        """True when a non-empty page path was found."""
        return bool(self.page_path)

    @classmethod
    def success(cls, page_path: str) -> "PathResolution":
        return cls(page_path=page_path)

    @classmethod
    def failure(cls, reason: str) -> "PathResolution":
        return cls(failure_reason=reason)
