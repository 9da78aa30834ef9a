"""Application services (use cases) for handling beacon requests."""

from ga_beacon.application.services.beacon_service import BeaconService
from ga_beacon.application.services.hit_forwarder import HitForwarder
from ga_beacon.application.services.identity_resolver import IdentityResolver
from ga_beacon.application.services.image_selector import ImageSelector
from ga_beacon.application.services.path_resolver import PathResolver

__all__ = [
    "BeaconService",
    "HitForwarder",
    "IdentityResolver",
    "ImageSelector",
    "PathResolver",
]
