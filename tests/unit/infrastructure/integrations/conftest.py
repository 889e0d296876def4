"""Shared fixtures for backend integration client tests."""

from collections.abc import AsyncGenerator

import pytest

from expertchat.config.settings import ApiSettings
from expertchat.infrastructure.integrations import AuthClient, ChatClient, RequestPipeline
from expertchat.infrastructure.session import SessionTokenStore

BASE_URL = "https://chat.example.com"


@pytest.fixture
def api_settings() -> ApiSettings:
    """Create API settings pointing at the mocked backend."""
    return ApiSettings(base_url=BASE_URL, timeout=5.0, retry_attempts=3)


@pytest.fixture
def token_store() -> SessionTokenStore:
    """Create an empty token store."""
    return SessionTokenStore()


@pytest.fixture
async def pipeline(
    api_settings: ApiSettings, token_store: SessionTokenStore
) -> AsyncGenerator[RequestPipeline, None]:
    """Create a request pipeline and close it after the test."""
    async with RequestPipeline(api_settings, token_store) as pipeline:
        yield pipeline


@pytest.fixture
def auth_client(pipeline: RequestPipeline, token_store: SessionTokenStore) -> AuthClient:
    """Create auth client sharing the pipeline's token store."""
    return AuthClient(pipeline, token_store)


@pytest.fixture
def chat_client(pipeline: RequestPipeline) -> ChatClient:
    """Create chat client on the shared pipeline."""
    return ChatClient(pipeline)
