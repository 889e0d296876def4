"""Domain ports (interfaces) for dependency inversion."""

from abc import ABC, abstractmethod

from expertchat.domain.dtos import (
    Conversation,
    CreateConversationRequest,
    ExpertAssignment,
    ExpertProfile,
    ExpertQueue,
    Message,
    RegisterRequest,
    SendMessageRequest,
    UpdateConversationRequest,
    UpdateExpertProfileRequest,
    User,
)


class ISessionTokenStore(ABC):
    """Holder of at most one session token."""

    @abstractmethod
    def get(self) -> str | None:
        """Return the current token or None."""
        pass

    @abstractmethod
    def set(self, token: str) -> None:
        """Replace the current token."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop the current token."""
        pass


# Hey future me, IAuthService is the SESSION LIFECYCLE contract. Only implementations of this
# port are allowed to write the token store. Resource clients just read it (via the pipeline).
class IAuthService(ABC):
    """Interface for login/logout and session management."""

    @abstractmethod
    async def login(self, username: str, password: str) -> User:
        """Authenticate and store the issued token."""
        pass

    @abstractmethod
    async def register(self, user_data: RegisterRequest) -> User:
        """Create an account and store the issued token."""
        pass

    @abstractmethod
    async def logout(self) -> None:
        """Revoke the session remotely (best-effort) and always clear it locally."""
        pass

    @abstractmethod
    async def refresh_token(self) -> User:
        """Rotate the stored token."""
        pass

    @abstractmethod
    async def get_current_user(self) -> User | None:
        """Return the identity behind the current session, or None if it is stale."""
        pass


# Yo, this port declares the FULL backend surface - including the operations nobody integrated
# yet (update/delete conversation, mark read). Those stay here on purpose so capability checks
# can see them; implementations raise OperationNotImplementedError for them.
class IChatService(ABC):
    """Interface for conversations, messages and expert operations."""

    # Conversations
    @abstractmethod
    async def get_conversations(self) -> list[Conversation]:
        pass

    @abstractmethod
    async def get_conversation(self, conversation_id: str) -> Conversation:
        pass

    @abstractmethod
    async def create_conversation(
        self, request: CreateConversationRequest
    ) -> Conversation:
        pass

    @abstractmethod
    async def update_conversation(
        self, conversation_id: str, request: UpdateConversationRequest
    ) -> Conversation:
        pass

    @abstractmethod
    async def delete_conversation(self, conversation_id: str) -> None:
        pass

    # Messages
    @abstractmethod
    async def get_messages(self, conversation_id: str) -> list[Message]:
        pass

    @abstractmethod
    async def send_message(self, request: SendMessageRequest) -> Message:
        pass

    @abstractmethod
    async def mark_message_as_read(self, message_id: str) -> None:
        pass

    # Expert operations
    @abstractmethod
    async def get_expert_queue(self) -> ExpertQueue:
        pass

    @abstractmethod
    async def claim_conversation(self, conversation_id: str) -> None:
        pass

    @abstractmethod
    async def unclaim_conversation(self, conversation_id: str) -> None:
        pass

    @abstractmethod
    async def get_expert_profile(self) -> ExpertProfile:
        pass

    @abstractmethod
    async def update_expert_profile(
        self, request: UpdateExpertProfileRequest
    ) -> ExpertProfile:
        pass

    @abstractmethod
    async def get_expert_assignment_history(self) -> list[ExpertAssignment]:
        pass


__all__ = ["IAuthService", "IChatService", "ISessionTokenStore"]
