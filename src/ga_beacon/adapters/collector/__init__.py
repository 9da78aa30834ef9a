"""Analytics collector adapters."""

from ga_beacon.adapters.collector.measurement_protocol_collector import (
    MeasurementProtocolCollector,
)

__all__ = ["MeasurementProtocolCollector"]
