"""HTTP client for the Measurement Protocol collection endpoint.

API Documentation: https://developers.google.com/analytics/devguides/collection/protocol/v1
"""

import asyncio
import logging
from typing import TYPE_CHECKING

import aiohttp

from ga_beacon.adapters.api_request_logger import log_collector_request
from ga_beacon.domain.models import ForwardResult

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

DEFAULT_COLLECTOR_URL = "http://www.google-analytics.com/collect"


class MeasurementProtocolCollector:
    """Posts form-encoded hits to the collector with a bounded timeout."""

    def __init__(
        self,
        session: "ClientSession",
        url: str = DEFAULT_COLLECTOR_URL,
        timeout_seconds: float = 5.0,
    ) -> None:
        """Initialize with a shared aiohttp session.

        Args:
            session: Session reused for every hit.
            url: Collection endpoint.
            timeout_seconds: Total time allowed for one request.
        """
        self._session = session
        self._url = url
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def post_hit(self, form: dict[str, str], user_agent: str) -> ForwardResult:
        """Send one hit; transport errors and timeouts come back as failed results."""
        headers = {"User-Agent": user_agent}
        log_collector_request(self._url, form, headers)

        try:
            async with self._session.post(
                self._url, data=form, headers=headers, timeout=self._timeout
            ) as response:
                if 200 <= response.status < 300:
                    return ForwardResult.delivered(response.status)
                body = await response.text()
                logger.warning(
                    f"Collector returned status {response.status} for {self._url}: {body[:200]}"
                )
                return ForwardResult.failed(
                    f"collector returned status {response.status}", status_code=response.status
                )
        except asyncio.TimeoutError:
            logger.warning(f"Timed out posting hit to {self._url}")
            return ForwardResult.failed("timed out waiting for the collector")
        except aiohttp.ClientError as e:
            logger.warning(f"Error posting hit to {self._url}: {e}")
            return ForwardResult.failed(str(e) or e.__class__.__name__)
