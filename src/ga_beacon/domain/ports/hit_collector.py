"""Hit collector port."""

from typing import Protocol

from ga_beacon.domain.models.forward_result import ForwardResult


class HitCollector(Protocol):
    """Port for delivering form-encoded hits to an analytics collection endpoint."""

    async def post_hit(self, form: dict[str, str], user_agent: str) -> ForwardResult:
        """Send one hit.

        Implementations make exactly one attempt and report transport
        failures and timeouts through the returned result.

        Args:
            form: Form fields for the request body.
            user_agent: Value for the ``User-Agent`` header, possibly empty.

        Returns:
            The outcome of the call.
        """
        ...
