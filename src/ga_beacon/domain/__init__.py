"""Domain layer - beacon models and ports."""

from ga_beacon.domain.models import (
    BeaconRequest,
    BeaconResult,
    HitRecord,
    HitType,
    ImageChoice,
    VisitorIdentity,
)
from ga_beacon.domain.ports import BeaconHandler, DiagnosticSink, HitCollector

__all__ = [
    "BeaconHandler",
    "BeaconRequest",
    "BeaconResult",
    "DiagnosticSink",
    "HitCollector",
    "HitRecord",
    "HitType",
    "ImageChoice",
    "VisitorIdentity",
]
