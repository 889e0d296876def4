"""Backend integration client implementations."""

from expertchat.infrastructure.integrations.auth_client import AuthClient
from expertchat.infrastructure.integrations.chat_client import ChatClient
from expertchat.infrastructure.integrations.http_pipeline import (
    RequestPipeline,
    extract_error_message,
)

__all__ = [
    "AuthClient",
    "ChatClient",
    "RequestPipeline",
    "extract_error_message",
]
