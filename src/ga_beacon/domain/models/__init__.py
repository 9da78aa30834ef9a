"""Domain models for the tracking beacon."""

from ga_beacon.domain.models.beacon_request import BeaconRequest
from ga_beacon.domain.models.beacon_result import BeaconResult
from ga_beacon.domain.models.error_details import ErrorDetails
from ga_beacon.domain.models.forward_result import ForwardResult
from ga_beacon.domain.models.hit_record import HitRecord, HitType
from ga_beacon.domain.models.image_choice import IMAGE_VARIANTS, ImageChoice
from ga_beacon.domain.models.path_resolution import PathResolution
from ga_beacon.domain.models.severity import Severity
from ga_beacon.domain.models.visitor_identity import VisitorIdentity

__all__ = [
    "IMAGE_VARIANTS",
    "BeaconRequest",
    "BeaconResult",
    "ErrorDetails",
    "ForwardResult",
    "HitRecord",
    "HitType",
    "ImageChoice",
    "PathResolution",
    "Severity",
    "VisitorIdentity",
]
