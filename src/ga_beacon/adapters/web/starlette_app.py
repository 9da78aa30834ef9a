"""Starlette web adapter serving the tracking beacon."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.responses import Response
from starlette.routing import Route

from ga_beacon.adapters.config import AppConfig
from ga_beacon.adapters.web import convertors  # noqa: F401  registers the tracking_id convertor
from ga_beacon.adapters.web.beacon_endpoint import BeaconEndpoint
from ga_beacon.adapters.web.header_middleware import HstsMiddleware, NoCacheMiddleware
from ga_beacon.adapters.web.image_store import ImageStore

if TYPE_CHECKING:
    from ga_beacon.domain.ports import BeaconHandler

logger = logging.getLogger(__name__)


async def healthz(_request: Any) -> Response:
    """Health check endpoint for load balancers and monitoring."""
    return Response(content="Ok", media_type="text/plain")


def create_app(config: AppConfig, service: BeaconHandler, images: ImageStore) -> Starlette:
    """Build the ASGI application.

    Args:
        config: Application configuration.
        service: Beacon orchestration service.
        images: Store holding the response images.
    """
    endpoint = BeaconEndpoint(service, images, trust_forwarded_for=config.trust_forwarded_for)

    routes = [
        Route("/api/{tracking_id:tracking_id}", endpoint.handle, methods=["GET"]),
        Route("/api/{tracking_id:tracking_id}/{url_path:path}", endpoint.handle, methods=["GET"]),
        Route("/healthz", healthz, methods=["GET"]),
    ]

    middleware = [Middleware(NoCacheMiddleware)]
    if config.enforce_https:
        middleware = [
            Middleware(HTTPSRedirectMiddleware),
            Middleware(HstsMiddleware, max_age_seconds=config.hsts_max_age_seconds),
            *middleware,
        ]
        logger.info("HTTPS redirection and HSTS enabled")

    return Starlette(routes=routes, middleware=middleware)


class StarletteWebAdapter:
    """Runs the beacon application under uvicorn."""

    def __init__(self, config: AppConfig, service: BeaconHandler) -> None:
        """Initialize the web adapter.

        Args:
            config: Application configuration.
            service: Beacon orchestration service.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(getattr(service, "handle", None)):
            raise TypeError("service must provide an async handle() method")

        self.config = config
        self.service = service
        self.images = ImageStore(config.static_dir)
        self._server: Any | None = None

    def build_app(self) -> Starlette:
        self.images.preload()
        return create_app(self.config, self.service, self.images)

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        app = self.build_app()
        uvicorn_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(uvicorn_config)
        logger.info(f"Serving beacon on {self.config.host}:{self.config.port}")

        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
