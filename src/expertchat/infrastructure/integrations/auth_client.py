"""Auth client: login, registration and session token lifecycle."""

import asyncio
import logging
from typing import Any, cast

from expertchat.domain.dtos import AuthResponse, RegisterRequest, User
from expertchat.domain.exceptions import ApiClientError, InvalidResponseError
from expertchat.domain.ports import IAuthService, ISessionTokenStore
from expertchat.infrastructure.integrations.http_pipeline import RequestPipeline

logger = logging.getLogger(__name__)


class AuthClient(IAuthService):
    """Session lifecycle controller built on the shared request pipeline.

    This is the only component that writes the token store. The session
    state (anonymous vs authenticated) is whatever the store holds.
    """

    def __init__(self, pipeline: RequestPipeline, token_store: ISessionTokenStore) -> None:
        """
        Initialize auth client.

        Args:
            pipeline: Shared request pipeline
            token_store: The same store the pipeline reads from
        """
        self.pipeline = pipeline
        self.token_store = token_store

    @property
    def is_authenticated(self) -> bool:
        """Check if a session token is currently held."""
        return self.token_store.get() is not None

    # Hey future me, the token is stored ONLY after the whole body checks out. A 200 without a
    # token must not leave us half-logged-in with the old token wiped.
    def _accept_auth_response(self, payload: Any, operation: str) -> User:
        """Store the token from an auth response and return its user."""
        if not isinstance(payload, dict) or not payload.get("token"):
            raise InvalidResponseError(f"{operation} response did not include a token")

        auth = cast(AuthResponse, payload)
        self.token_store.set(auth["token"])
        return auth.get("user", cast(User, {}))

    async def login(self, username: str, password: str) -> User:
        """
        Authenticate with username and password.

        Args:
            username: Account name
            password: Account password

        Returns:
            Identity of the logged-in user

        Raises:
            HttpError: If the backend rejects the credentials (token untouched)
            NetworkError: If the backend is unreachable (token untouched)
        """
        payload = await self.pipeline.request(
            "POST",
            "/auth/login",
            json={"user": {"username": username, "password": password}},
        )
        user = self._accept_auth_response(payload, "login")
        logger.info("Logged in as %s", username)
        return user

    async def register(self, user_data: RegisterRequest) -> User:
        """
        Create an account and start a session for it.

        Args:
            user_data: Registration fields, sent as ``{"user": user_data}``

        Returns:
            Identity of the new user
        """
        payload = await self.pipeline.request(
            "POST", "/auth/register", json={"user": user_data}
        )
        user = self._accept_auth_response(payload, "register")
        logger.info("Registered user %s", user_data.get("username", "<unknown>"))
        return user

    # Listen up: local logout ALWAYS wins. The finally block clears the token whether the revoke
    # call succeeds, fails, or the task gets cancelled mid-request. Only ApiClientError is
    # swallowed - CancelledError still propagates after the clear.
    async def logout(self) -> None:
        """Revoke the session on the backend (best-effort) and clear it locally."""
        try:
            await self.pipeline.request("POST", "/auth/logout", expect_body=False)
        except ApiClientError as e:
            logger.warning("Logout request failed: %s", e)
        finally:
            self.token_store.clear()
            logger.info("Session cleared")

    # TODO: refresh failure keeps the old token. Decide with product whether a 401 here
    # should clear it like get_current_user does.
    async def refresh_token(self) -> User:
        """
        Exchange the current session for a rotated token.

        Returns:
            Identity of the session owner

        Raises:
            HttpError: If the backend refuses the refresh (stored token unchanged)
            NetworkError: If the backend is unreachable (stored token unchanged)
        """
        payload = await self.pipeline.request("POST", "/auth/refresh")
        user = self._accept_auth_response(payload, "refresh")
        logger.debug("Session token refreshed")
        return user

    # Hey future me, this is the silent-downgrade path for stale sessions. It NEVER raises an
    # Exception: any failure means "not logged in" -> clear token, return None. Callers use it
    # on startup to decide whether to show the login screen. Cancellation clears too, then re-raises.
    async def get_current_user(self) -> User | None:
        """Return the identity behind the current session, or None."""
        try:
            user = await self.pipeline.request("GET", "/auth/me")
        except asyncio.CancelledError:
            self.token_store.clear()
            raise
        except Exception as e:
            logger.warning("Failed to get current user: %s", e)
            self.token_store.clear()
            return None

        # No identity in the body means no session
        if user is None:
            logger.warning("Current user request returned no body")
            self.token_store.clear()
            return None

        return cast(User, user)
