"""Helpers for extracting beacon inputs from Starlette requests."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.requests import Request

logger = logging.getLogger(__name__)

CLIENT_ID_COOKIE = "cid"


def extract_client_ip(request: Request, trust_forwarded_for: bool = False) -> str | None:
    """Extract the client IP address of a request.

    When ``trust_forwarded_for`` is set the first entry of X-Forwarded-For
    (the original client behind a proxy chain) wins. Otherwise, and when the
    header is empty, the direct connection address is used. Returns None when
    neither is available.
    """
    if trust_forwarded_for:
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            client_ip = forwarded_for.split(",")[0].strip()
            if client_ip:
                return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.debug("Request carries no client address")
    return None


def find_client_id_cookie(cookies: Mapping[str, str]) -> str | None:
    """Return the ``cid`` cookie value, matching the name case-insensitively."""
    for name, value in cookies.items():
        if name.lower() == CLIENT_ID_COOKIE:
            return value
    return None
