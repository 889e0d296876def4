"""Async client for the expert chat backend."""

from expertchat.infrastructure.lifecycle import (
    ExpertChatServices,
    client_lifespan,
    create_services,
)

__version__ = "0.1.0"

__all__ = ["ExpertChatServices", "client_lifespan", "create_services"]
