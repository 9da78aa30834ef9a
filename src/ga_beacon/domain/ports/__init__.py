"""Ports (interfaces) for the ports-and-adapters architecture."""

from ga_beacon.domain.ports.beacon_handler import BeaconHandler
from ga_beacon.domain.ports.diagnostic_sink import DiagnosticSink
from ga_beacon.domain.ports.hit_collector import HitCollector

__all__ = [
    "BeaconHandler",
    "DiagnosticSink",
    "HitCollector",
]
