"""In-memory session token slot."""

from expertchat.domain.ports import ISessionTokenStore


# Hey future me, this is ONE slot, not a cache. Last write wins and nothing is remembered.
# There's no lock - every call is a single attribute assignment and we only run on one event
# loop. Build one instance at startup (see lifecycle.create_services) and pass it around;
# don't turn it back into a module-level singleton or tests will leak tokens into each other.
class SessionTokenStore(ISessionTokenStore):
    """Process-local holder of at most one opaque token."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None

    def reset(self) -> None:
        """Return to the initial anonymous state (test isolation)."""
        self.clear()

    @property
    def has_token(self) -> bool:
        return self._token is not None

    def __repr__(self) -> str:
        # Never print the token itself
        return f"SessionTokenStore(has_token={self.has_token})"
