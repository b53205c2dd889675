"""Entry point for the sportsfeed mapping service."""

from __future__ import annotations

import asyncio
import logging

from sportsfeed.api.client import FeedClient
from sportsfeed.config import Settings, load_settings
from sportsfeed.services.mapping_service import EventMappingService

log = logging.getLogger(__name__)


async def run(settings: Settings) -> None:
    client = FeedClient(settings.mappings_api, timeout=settings.request_timeout)
    service = EventMappingService.create(settings, client)
    service.start_polling(settings.polling_interval)
    try:
        await asyncio.Event().wait()
    finally:
        service.stop_polling()
        await client.close()


def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        log.info("Shutting down")


if __name__ == "__main__":
    main()
