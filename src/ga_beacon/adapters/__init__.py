"""Adapters layer - external system integrations."""

from ga_beacon.adapters.collector import MeasurementProtocolCollector
from ga_beacon.adapters.config import AppConfig
from ga_beacon.adapters.logging_diagnostic_sink import LoggingDiagnosticSink

__all__ = [
    "AppConfig",
    "LoggingDiagnosticSink",
    "MeasurementProtocolCollector",
]
