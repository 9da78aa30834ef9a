"""Beacon request orchestration."""

import logging
import re
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ga_beacon.application.services.hit_forwarder import HitForwarder
from ga_beacon.application.services.identity_resolver import IdentityResolver
from ga_beacon.application.services.image_selector import ImageSelector
from ga_beacon.application.services.path_resolver import PathResolver
from ga_beacon.domain.models import (
    BeaconRequest,
    BeaconResult,
    ForwardResult,
    HitRecord,
    HitType,
    PathResolution,
    Severity,
    VisitorIdentity,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ga_beacon.domain.ports import DiagnosticSink

TRACKING_ID_PATTERN = re.compile(r"^UA-\d+-\d+$")
USE_REFERER_OPTION = "usereferer"


class BeaconService:
    """Handles one beacon request: identity, path, forwarding and image choice.

    Every step reports failure as a value. Failures only decide whether the
    hit is forwarded; the caller always gets an image back.
    """

    def __init__(
        self,
        forwarder: HitForwarder,
        diagnostics: "DiagnosticSink",
        identity_resolver: IdentityResolver | None = None,
        path_resolver: PathResolver | None = None,
        image_selector: ImageSelector | None = None,
    ) -> None:
        """Initialize with the forwarder and sink; resolvers default to stock instances."""
        self._forwarder = forwarder
        self._diagnostics = diagnostics
        self._identity_resolver = identity_resolver or IdentityResolver()
        self._path_resolver = path_resolver or PathResolver()
        self._image_selector = image_selector or ImageSelector()

    async def handle(self, request: BeaconRequest) -> BeaconResult:
        """Process ``request`` and describe the response to send."""
        can_forward = self._check_tracking_id(request.tracking_id)

        if not request.remote_ip_address:
            self._diagnostics.record(Severity.ERROR, "Couldn't get the remote IP address.")
            can_forward = False

        identity = self._resolve_identity(request)
        path = self._resolve_path(request)
        if not path.resolved:
            can_forward = False

        forward = ForwardResult.skipped()
        if can_forward:
            forward = await self._forward(request, identity, path)

        return BeaconResult(
            identity=identity,
            path=path,
            forward=forward,
            image=self._image_selector.select(request.query_options),
        )

    def _check_tracking_id(self, tracking_id: str) -> bool:
        if not tracking_id:
            self._diagnostics.record(
                Severity.ERROR, "No tracking ID was found in the request URL."
            )
            return False
        if not TRACKING_ID_PATTERN.match(tracking_id):
            self._diagnostics.record(
                Severity.ERROR, f"Tracking ID '{tracking_id}' does not match UA-<digits>-<digits>."
            )
            return False
        return True

    def _resolve_identity(self, request: BeaconRequest) -> VisitorIdentity:
        identity = self._identity_resolver.resolve(request.existing_client_id)
        if identity.minted:
            self._diagnostics.record(
                Severity.INFORMATION,
                f"No 'cid' cookie was found in the request. "
                f"A new value was computed: {identity.client_id}.",
            )
        return identity

    def _resolve_path(self, request: BeaconRequest) -> PathResolution:
        use_referer = request.has_option(USE_REFERER_OPTION)
        path = self._path_resolver.resolve(use_referer, request.referer, request.explicit_url_path)
        if not path.resolved:
            if use_referer:
                message = (
                    "The 'useReferer' query string parameter was used in the request "
                    "but no referrer HTTP header was found."
                )
            else:
                message = (
                    "The 'useReferer' query string parameter was not used "
                    "but the trailing URL path is missing."
                )
            self._diagnostics.record(Severity.ERROR, message)
        return path

    async def _forward(
        self, request: BeaconRequest, identity: VisitorIdentity, path: PathResolution
    ) -> ForwardResult:
        try:
            hit = HitRecord(
                tracking_id=request.tracking_id,
                client_id=identity.client_id,
                page_path=path.page_path or "",
                ip_address=request.remote_ip_address or "",
                hit_type=HitType.PAGE_VIEW,
            )
        except ValidationError as e:
            self._diagnostics.record(Severity.ERROR, f"Hit record is incomplete: {e}")
            return ForwardResult.skipped()

        logger.debug(f"Forwarding page view for {hit.tracking_id} at '{hit.page_path}'")
        return await self._forwarder.forward(hit, request.user_agent)
