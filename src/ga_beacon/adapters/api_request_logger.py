"""Logging of outbound collector requests when GA_BEACON_LOG_REQUESTS is enabled."""

import json
import logging
import os

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}
SENSITIVE_FIELDS = {"uip"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via GA_BEACON_LOG_REQUESTS environment variable."""
    return os.getenv("GA_BEACON_LOG_REQUESTS", "").lower() == "true"


def _redact(values: dict[str, str], sensitive: set[str]) -> dict[str, str]:
    return {k: "***REDACTED***" if k.lower() in sensitive else v for k, v in values.items()}


def log_collector_request(
    url: str,
    form: dict[str, str],
    headers: dict[str, str] | None = None,
) -> None:
    """Log a form POST to the collector if GA_BEACON_LOG_REQUESTS is enabled.

    The visitor IP (``uip``) and credential-like headers are redacted.

    Args:
        url: Collector URL.
        form: Form fields of the request body.
        headers: Request headers (optional).
    """
    if not should_log_requests():
        return

    log_parts = [f"POST {url}"]

    if headers:
        log_parts.append(f"Headers: {json.dumps(_redact(headers, SENSITIVE_HEADERS), indent=2)}")

    log_parts.append(f"Form: {json.dumps(_redact(form, SENSITIVE_FIELDS), indent=2)}")

    logger.info("Collector Request:\n" + "\n".join(log_parts))
