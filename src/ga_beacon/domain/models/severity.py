"""Diagnostic severity levels."""

from enum import Enum


class Severity(Enum):
    """Severity of a diagnostic event."""

    VERBOSE = "verbose"
    INFORMATION = "information"
    WARNING = "warning"
    ERROR = "error"
