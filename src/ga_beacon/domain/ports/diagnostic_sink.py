"""Diagnostic sink port."""

from typing import Protocol

from ga_beacon.domain.models.severity import Severity


class DiagnosticSink(Protocol):
    """Port for recording diagnostic events produced while handling beacons."""

    def record(self, severity: Severity, message: str) -> None:
        """Record a single diagnostic event.

        Args:
            severity: How serious the event is.
            message: Human-readable description.
        """
        ...
