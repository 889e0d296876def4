"""Payload shapes exchanged with the backend.

These are TypedDicts and aliases for readability only. Responses are trusted
as-is and never validated at runtime; the backend owns the schema.
"""

from typing import Any, TypedDict


class User(TypedDict, total=False):
    """Minimal identity record returned by the auth endpoints."""

    id: str
    username: str
    role: str


class AuthResponse(TypedDict):
    """Body of login, register and refresh responses."""

    user: User
    token: str


class ExpertQueue(TypedDict, total=False):
    """Body of GET /expert/queue."""

    waitingConversations: list[dict[str, Any]]
    assignedConversations: list[dict[str, Any]]


# Opaque records - shape is defined by the backend contract
Conversation = dict[str, Any]
Message = dict[str, Any]
ExpertProfile = dict[str, Any]
ExpertAssignment = dict[str, Any]

# Request bodies
RegisterRequest = dict[str, Any]
CreateConversationRequest = dict[str, Any]
UpdateConversationRequest = dict[str, Any]
SendMessageRequest = dict[str, Any]
UpdateExpertProfileRequest = dict[str, Any]

__all__ = [
    "AuthResponse",
    "Conversation",
    "CreateConversationRequest",
    "ExpertAssignment",
    "ExpertProfile",
    "ExpertQueue",
    "Message",
    "RegisterRequest",
    "SendMessageRequest",
    "UpdateConversationRequest",
    "UpdateExpertProfileRequest",
    "User",
]
