"""Starlette endpoint that turns beacon requests into image responses."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from email.utils import formatdate
from typing import TYPE_CHECKING

from starlette.responses import Response

from ga_beacon.adapters.web.client_info import (
    CLIENT_ID_COOKIE,
    extract_client_ip,
    find_client_id_cookie,
)
from ga_beacon.domain.models import BeaconRequest

if TYPE_CHECKING:
    from starlette.requests import Request

    from ga_beacon.adapters.web.image_store import ImageStore
    from ga_beacon.domain.ports import BeaconHandler

logger = logging.getLogger(__name__)

COOKIE_PATH = "/"


class BeaconEndpoint:
    """Handles ``GET /api/{tracking_id}/{url_path}``.

    The response is always a 200 carrying the selected image, a refreshed
    ``cid`` cookie and an ``Expires`` header set to the current time.
    """

    def __init__(
        self,
        service: BeaconHandler,
        images: ImageStore,
        trust_forwarded_for: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.service = service
        self.images = images
        self.trust_forwarded_for = trust_forwarded_for
        self._clock = clock

    def build_request(self, request: Request) -> BeaconRequest:
        """Collect the beacon inputs from an HTTP request."""
        return BeaconRequest(
            tracking_id=request.path_params.get("tracking_id", ""),
            remote_ip_address=extract_client_ip(request, self.trust_forwarded_for),
            existing_client_id=find_client_id_cookie(request.cookies),
            query_options=frozenset(request.query_params.keys()),
            referer=request.headers.get("Referer"),
            explicit_url_path=request.path_params.get("url_path") or None,
            user_agent=request.headers.get("User-Agent"),
        )

    async def handle(self, request: Request) -> Response:
        beacon_request = self.build_request(request)
        result = await self.service.handle(beacon_request)

        response = Response(
            content=self.images.load(result.image),
            media_type=result.image.content_type,
        )
        response.set_cookie(CLIENT_ID_COOKIE, result.identity.client_id, path=COOKIE_PATH)
        response.headers["Expires"] = formatdate(self._clock(), usegmt=True)

        logger.debug(
            f"Served '{result.image.name}' for {beacon_request.tracking_id} "
            f"(forwarded={result.forward.succeeded})"
        )
        return response
