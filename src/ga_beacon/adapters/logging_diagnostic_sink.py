"""Diagnostic sink that writes events to the standard logging system."""

import logging

from ga_beacon.domain.models import Severity

_LEVELS = {
    Severity.VERBOSE: logging.DEBUG,
    Severity.INFORMATION: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class LoggingDiagnosticSink:
    """Records diagnostic events as log records on a named logger."""

    def __init__(self, logger_name: str = "ga_beacon.diagnostics") -> None:
        self._logger = logging.getLogger(logger_name)

    def record(self, severity: Severity, message: str) -> None:
        self._logger.log(_LEVELS.get(severity, logging.INFO), message)
