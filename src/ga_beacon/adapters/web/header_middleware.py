"""ASGI middleware that adds fixed headers to every HTTP response."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

    from starlette.types import ASGIApp

NO_CACHE_DIRECTIVE = "no-cache, no-store, must-revalidate, private"


class _HeaderInjectingMiddleware:
    """Sets headers on ``http.response.start``, replacing any with the same name."""

    headers: dict[str, str] = {}

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    def _encoded_headers(self) -> list[tuple[bytes, bytes]]:
        return [(k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in self.headers.items()]

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        extra = self._encoded_headers()
        names = {name for name, _ in extra}

        async def send_with_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = [h for h in message.get("headers", []) if h[0].lower() not in names]
                message["headers"] = headers + extra
            await send(message)

        await self.app(scope, receive, send_with_headers)


class NoCacheMiddleware(_HeaderInjectingMiddleware):
    """Forbids any caching of responses, so every beacon load reaches the server."""

    headers = {"Cache-Control": NO_CACHE_DIRECTIVE, "Pragma": "no-cache"}


class HstsMiddleware(_HeaderInjectingMiddleware):
    """Adds Strict-Transport-Security to every response."""

    def __init__(self, app: ASGIApp, max_age_seconds: int = 2592000) -> None:
        super().__init__(app)
        self.headers = {"Strict-Transport-Security": f"max-age={max_age_seconds}"}
