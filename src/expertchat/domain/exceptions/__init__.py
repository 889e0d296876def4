"""Domain exceptions."""

from typing import Any


class DomainException(Exception):
    """Base exception for all expertchat exceptions."""

    # Hey future me, we store message as an attribute so code can inspect it without parsing str(exception).
    # DON'T raise this directly - always use a specific subclass so callers can catch precisely.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


# =============================================================================
# API client exceptions
# Everything the request pipeline raises derives from ApiClientError, so
# "any failure of a backend call" is a single except clause.
# =============================================================================


class ApiClientError(DomainException):
    """Base exception for failed backend calls."""

    pass


class NetworkError(ApiClientError):
    """No response was obtained from the backend.

    Raised for connection failures, timeouts and malformed URLs. The original
    httpx exception is chained as ``__cause__``.
    """

    pass


class HttpError(ApiClientError):
    """The backend answered with a non-success status.

    Message precedence: the body's ``error`` field, then the body's
    ``errors`` list joined with ", ", then "Request failed with status <code>".
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code

    @property
    def is_unauthorized(self) -> bool:
        """Check if the backend rejected our credentials."""
        return self.status_code in (401, 403)

    def __repr__(self) -> str:
        return f"HttpError(status_code={self.status_code}, message={self.message!r})"


class InvalidResponseError(ApiClientError):
    """Success status but the body is not JSON or lacks a required field."""

    pass


class OperationNotImplementedError(DomainException, NotImplementedError):
    """Operation is declared on a port but has no backend integration.

    Also a NotImplementedError, so generic callers that probe capabilities
    with ``except NotImplementedError`` keep working.
    """

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} method not implemented")
        self.operation = operation


__all__ = [
    # Base
    "DomainException",
    # API client
    "ApiClientError",
    "NetworkError",
    "HttpError",
    "InvalidResponseError",
    "OperationNotImplementedError",
]
