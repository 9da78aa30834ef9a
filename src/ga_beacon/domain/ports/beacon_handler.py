"""Beacon handler port."""

from typing import Protocol

from ga_beacon.domain.models.beacon_request import BeaconRequest
from ga_beacon.domain.models.beacon_result import BeaconResult


class BeaconHandler(Protocol):
    """Port for turning one beacon request into the description of its response."""

    async def handle(self, request: BeaconRequest) -> BeaconResult:
        """Handle a beacon request.

        Never raises for input or upstream defects; those only decide
        whether a hit was forwarded.

        Args:
            request: Inputs collected from the inbound HTTP request.

        Returns:
            Identity, path, forwarding outcome and selected image.
        """
        ...
