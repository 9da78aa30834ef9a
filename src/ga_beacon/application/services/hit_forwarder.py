"""Forwarding of page-view hits to the analytics collector."""

import logging
from typing import TYPE_CHECKING

from ga_beacon.domain.models import ForwardResult, HitRecord, Severity

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ga_beacon.domain.ports import DiagnosticSink, HitCollector


class HitForwarder:
    """Sends one hit per beacon request and reports the outcome as diagnostics.

    There is no retry and no queue. Whatever goes wrong is recorded and
    returned, never raised.
    """

    def __init__(self, collector: "HitCollector", diagnostics: "DiagnosticSink") -> None:
        """Initialize with a collector port and a diagnostic sink."""
        self._collector = collector
        self._diagnostics = diagnostics

    async def forward(self, hit: HitRecord, user_agent: str | None) -> ForwardResult:
        """Post ``hit`` to the collector, mirroring the caller's user agent."""
        summary = (
            f"Tracking ID: {hit.tracking_id}, client ID: {hit.client_id}, "
            f"IP address: {hit.ip_address}, page path: {hit.page_path}."
        )

        try:
            result = await self._collector.post_hit(hit.to_form(), user_agent or "")
        except Exception as e:
            logger.debug("Collector raised while forwarding hit", exc_info=True)
            self._diagnostics.record(Severity.ERROR, f"Forwarding the hit failed: {e}. {summary}")
            return ForwardResult.failed(str(e))

        if result.succeeded:
            self._diagnostics.record(Severity.INFORMATION, f"GA hit was logged. {summary}")
        elif result.status_code is not None:
            self._diagnostics.record(
                Severity.ERROR,
                f"The collector returned status {result.status_code}. {summary}",
            )
        else:
            reason = result.error.reason if result.error else "unknown error"
            self._diagnostics.record(
                Severity.ERROR, f"The collector could not be reached: {reason}. {summary}"
            )
        return result
