"""Session state held by the client process."""

from expertchat.infrastructure.session.token_store import SessionTokenStore

__all__ = ["SessionTokenStore"]
