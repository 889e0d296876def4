"""Chat client: conversations, messages and expert queue operations."""

from typing import cast

from expertchat.domain.dtos import (
    Conversation,
    CreateConversationRequest,
    ExpertAssignment,
    ExpertProfile,
    ExpertQueue,
    Message,
    SendMessageRequest,
    UpdateConversationRequest,
    UpdateExpertProfileRequest,
)
from expertchat.domain.exceptions import OperationNotImplementedError
from expertchat.domain.ports import IChatService
from expertchat.infrastructure.integrations.http_pipeline import RequestPipeline


class ChatClient(IChatService):
    """Thin catalog of backend resource operations.

    Every method is exactly one pipeline call. No caching, no state, and
    errors from the pipeline are passed through unchanged.
    """

    def __init__(self, pipeline: RequestPipeline) -> None:
        self.pipeline = pipeline

    # =========================================================================
    # CONVERSATIONS
    # =========================================================================

    async def get_conversations(self) -> list[Conversation]:
        return cast(list[Conversation], await self.pipeline.request("GET", "/conversations"))

    async def get_conversation(self, conversation_id: str) -> Conversation:
        return cast(
            Conversation,
            await self.pipeline.request("GET", f"/conversations/{conversation_id}"),
        )

    async def create_conversation(
        self, request: CreateConversationRequest
    ) -> Conversation:
        return cast(
            Conversation,
            await self.pipeline.request("POST", "/conversations", json=request),
        )

    # Hey future me, the backend has no update/delete/mark-read endpoints wired up. These raise
    # BEFORE touching the network. Don't turn them into silent no-ops - a caller that thinks a
    # conversation got deleted when it didn't is way worse than an exception.
    async def update_conversation(
        self, conversation_id: str, request: UpdateConversationRequest
    ) -> Conversation:
        raise OperationNotImplementedError("updateConversation")

    async def delete_conversation(self, conversation_id: str) -> None:
        raise OperationNotImplementedError("deleteConversation")

    # =========================================================================
    # MESSAGES
    # =========================================================================

    async def get_messages(self, conversation_id: str) -> list[Message]:
        return cast(
            list[Message],
            await self.pipeline.request(
                "GET", f"/conversations/{conversation_id}/messages"
            ),
        )

    async def send_message(self, request: SendMessageRequest) -> Message:
        return cast(Message, await self.pipeline.request("POST", "/messages", json=request))

    async def mark_message_as_read(self, message_id: str) -> None:
        raise OperationNotImplementedError("markMessageAsRead")

    # =========================================================================
    # EXPERT OPERATIONS
    # =========================================================================

    async def get_expert_queue(self) -> ExpertQueue:
        """Fetch waiting and assigned conversations for the current expert."""
        return cast(ExpertQueue, await self.pipeline.request("GET", "/expert/queue"))

    # Listen up: claim/unclaim are fire-and-forget. Two experts claiming the same conversation
    # at once is the SERVER's problem - no local reservation, no retry on 409. The loser just
    # gets the HttpError.
    async def claim_conversation(self, conversation_id: str) -> None:
        """Take ownership of a waiting conversation."""
        await self.pipeline.request(
            "POST",
            f"/expert/conversations/{conversation_id}/claim",
            expect_body=False,
        )

    async def unclaim_conversation(self, conversation_id: str) -> None:
        """Release a claimed conversation back to the queue."""
        await self.pipeline.request(
            "POST",
            f"/expert/conversations/{conversation_id}/unclaim",
            expect_body=False,
        )

    async def get_expert_profile(self) -> ExpertProfile:
        return cast(ExpertProfile, await self.pipeline.request("GET", "/expert/profile"))

    async def update_expert_profile(
        self, request: UpdateExpertProfileRequest
    ) -> ExpertProfile:
        return cast(
            ExpertProfile,
            await self.pipeline.request("PUT", "/expert/profile", json=request),
        )

    async def get_expert_assignment_history(self) -> list[ExpertAssignment]:
        return cast(
            list[ExpertAssignment],
            await self.pipeline.request("GET", "/expert/assignments/history"),
        )
