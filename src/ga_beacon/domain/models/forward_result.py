"""Result of forwarding a hit to the analytics collector."""

from pydantic import BaseModel, ConfigDict

from ga_beacon.domain.models.error_details import ErrorDetails


class ForwardResult(BaseModel):
    """Outcome of a single collector call. Never raised, always returned."""

    model_config = ConfigDict(frozen=True)

    attempted: bool
    status_code: int | None = None
    error: ErrorDetails | None = None

    @property
    def succeeded(self) -> bool:
        return self.attempted and self.error is None

    @classmethod
    def skipped(cls) -> "ForwardResult":
        return cls(attempted=False)

    @classmethod
    def delivered(cls, status_code: int) -> "ForwardResult":
        return cls(attempted=True, status_code=status_code)

    @classmethod
    def failed(cls, reason: str, status_code: int | None = None) -> "ForwardResult":
        return cls(
            attempted=True,
            status_code=status_code,
            error=ErrorDetails(status_code=status_code, reason=reason),
        )
