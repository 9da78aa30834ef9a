"""Main entry point for the tracking beacon service."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from ga_beacon.adapters import AppConfig, LoggingDiagnosticSink, MeasurementProtocolCollector
from ga_beacon.adapters.web import StarletteWebAdapter
from ga_beacon.application.services import BeaconService, HitForwarder

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    logger.info(
        f"Forwarding hits to {config.collector_url} "
        f"(timeout {config.collector_timeout_seconds}s)"
    )

    # One session for the process lifetime, shared by every beacon request
    async with aiohttp.ClientSession() as session:
        collector = MeasurementProtocolCollector(
            session,
            url=config.collector_url,
            timeout_seconds=config.collector_timeout_seconds,
        )
        diagnostics = LoggingDiagnosticSink()
        service = BeaconService(HitForwarder(collector, diagnostics), diagnostics)

        web_adapter = StarletteWebAdapter(config, service)

        try:
            await web_adapter.start()
        except FileNotFoundError as e:
            logger.error(str(e))
            sys.exit(1)
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
