"""Client lifecycle: build the shared services and clean them up.

Hey future me - create_services() is the ONLY place a SessionTokenStore gets built for real
use. AuthClient and ChatClient MUST share the same store and pipeline, otherwise login on one
side won't show up as a bearer header on the other.

Usage:
    async with client_lifespan() as services:
        user = await services.auth.login("alice", "pw")
        conversations = await services.chat.get_conversations()
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from expertchat.config import Settings, get_settings
from expertchat.infrastructure.integrations import AuthClient, ChatClient, RequestPipeline
from expertchat.infrastructure.observability import configure_logging
from expertchat.infrastructure.session import SessionTokenStore

logger = logging.getLogger(__name__)


@dataclass
class ExpertChatServices:
    """Wired-up client services sharing one token store and one pipeline."""

    settings: Settings
    token_store: SessionTokenStore
    pipeline: RequestPipeline
    auth: AuthClient
    chat: ChatClient

    async def close(self) -> None:
        await self.pipeline.close()


def create_services(settings: Settings | None = None) -> ExpertChatServices:
    """Build the token store, pipeline and both clients."""
    settings = settings or get_settings()
    token_store = SessionTokenStore()
    pipeline = RequestPipeline(settings.api, token_store)
    return ExpertChatServices(
        settings=settings,
        token_store=token_store,
        pipeline=pipeline,
        auth=AuthClient(pipeline, token_store),
        chat=ChatClient(pipeline),
    )


@asynccontextmanager
async def client_lifespan(
    settings: Settings | None = None,
    setup_logging: bool = True,
) -> AsyncGenerator[ExpertChatServices, None]:
    """Yield ready-to-use services and close the HTTP client on exit.

    Args:
        settings: Settings to use (defaults to get_settings())
        setup_logging: Configure root logging from settings.logging
    """
    settings = settings or get_settings()

    if setup_logging:
        configure_logging(
            log_level=settings.logging.log_level,
            json_format=settings.logging.json_format,
            app_name=settings.app_name,
        )

    services = create_services(settings)
    logger.info("Starting %s client (base_url=%s)", settings.app_name, settings.api.base_url)
    try:
        yield services
    finally:
        await services.close()
        logger.info("%s client closed", settings.app_name)
