"""Tests for the chat resource client."""

import json

import pytest
from pytest_httpx import HTTPXMock

from expertchat.domain.exceptions import DomainException, HttpError, OperationNotImplementedError
from expertchat.domain.ports import IChatService
from expertchat.infrastructure.integrations import ChatClient

BASE_URL = "https://chat.example.com"


class TestConversations:
    """Test conversation operations."""

    async def test_get_conversations(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/conversations",
            json=[{"id": "c1"}, {"id": "c2"}],
        )

        conversations = await chat_client.get_conversations()

        assert [c["id"] for c in conversations] == ["c1", "c2"]

    async def test_get_conversation(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/conversations/c1",
            json={"id": "c1", "title": "Billing"},
        )

        conversation = await chat_client.get_conversation("c1")

        assert conversation["title"] == "Billing"

    async def test_create_conversation(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/conversations",
            json={"id": "c3", "title": "New"},
        )

        conversation = await chat_client.create_conversation({"title": "New"})

        assert conversation["id"] == "c3"
        request = httpx_mock.get_request()
        assert request is not None
        assert json.loads(request.content) == {"title": "New"}

    async def test_get_conversation_not_found_propagates(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        """Test that pipeline errors reach the caller unchanged."""
        httpx_mock.add_response(status_code=404, json={"error": "Conversation not found"})

        with pytest.raises(HttpError) as exc_info:
            await chat_client.get_conversation("missing")

        assert exc_info.value.message == "Conversation not found"
        assert exc_info.value.status_code == 404


class TestMessages:
    """Test message operations."""

    async def test_get_messages(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/conversations/c1/messages",
            json=[{"id": "m1", "content": "hello"}],
        )

        messages = await chat_client.get_messages("c1")

        assert messages[0]["content"] == "hello"

    async def test_send_message(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/messages",
            json={"id": "m2", "conversationId": "c1", "content": "hi"},
        )

        message = await chat_client.send_message({"conversationId": "c1", "content": "hi"})

        assert message["id"] == "m2"
        request = httpx_mock.get_request()
        assert request is not None
        assert json.loads(request.content) == {"conversationId": "c1", "content": "hi"}


class TestExpertOperations:
    """Test expert queue, claims and profile."""

    async def test_get_expert_queue(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/expert/queue",
            json={
                "waitingConversations": [{"id": "c1"}],
                "assignedConversations": [],
            },
        )

        queue = await chat_client.get_expert_queue()

        assert queue["waitingConversations"] == [{"id": "c1"}]
        assert queue["assignedConversations"] == []

    async def test_claim_conversation(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/expert/conversations/c1/claim",
            status_code=204,
        )

        assert await chat_client.claim_conversation("c1") is None

    async def test_claim_ignores_response_body(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/expert/conversations/c1/claim",
            json={"waitingConversations": [], "assignedConversations": [{"id": "c1"}]},
        )

        assert await chat_client.claim_conversation("c1") is None

    async def test_claim_conflict_is_not_retried(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        """Test that a lost claim race surfaces the server's verdict once."""
        httpx_mock.add_response(
            status_code=409, json={"error": "Conversation is already assigned"}
        )

        with pytest.raises(HttpError) as exc_info:
            await chat_client.claim_conversation("c1")

        assert exc_info.value.message == "Conversation is already assigned"
        assert len(httpx_mock.get_requests()) == 1

    async def test_unclaim_conversation(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/expert/conversations/c1/unclaim",
            status_code=204,
        )

        assert await chat_client.unclaim_conversation("c1") is None

    async def test_get_expert_profile(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/expert/profile",
            json={"id": "e1", "bio": "Tax expert"},
        )

        profile = await chat_client.get_expert_profile()

        assert profile["bio"] == "Tax expert"

    async def test_update_expert_profile(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE_URL}/expert/profile",
            json={"id": "e1", "bio": "Updated"},
        )

        profile = await chat_client.update_expert_profile({"bio": "Updated"})

        assert profile["bio"] == "Updated"
        request = httpx_mock.get_request()
        assert request is not None
        assert json.loads(request.content) == {"bio": "Updated"}

    async def test_get_expert_assignment_history(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE_URL}/expert/assignments/history",
            json=[{"id": "a1", "status": "resolved"}],
        )

        history = await chat_client.get_expert_assignment_history()

        assert history == [{"id": "a1", "status": "resolved"}]


class TestUnimplementedOperations:
    """Test operations without backend integration fail fast."""

    async def test_update_conversation(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        with pytest.raises(OperationNotImplementedError) as exc_info:
            await chat_client.update_conversation("c1", {"title": "x"})

        assert exc_info.value.operation == "updateConversation"
        assert httpx_mock.get_requests() == []

    async def test_delete_conversation(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        with pytest.raises(OperationNotImplementedError):
            await chat_client.delete_conversation("c1")

        assert httpx_mock.get_requests() == []

    async def test_mark_message_as_read(
        self, chat_client: ChatClient, httpx_mock: HTTPXMock
    ) -> None:
        with pytest.raises(OperationNotImplementedError):
            await chat_client.mark_message_as_read("m1")

        assert httpx_mock.get_requests() == []

    async def test_error_is_catchable_as_builtin_and_domain(
        self, chat_client: ChatClient
    ) -> None:
        """Test the distinct error kind also matches generic handlers."""
        with pytest.raises(NotImplementedError):
            await chat_client.delete_conversation("c1")
        with pytest.raises(DomainException):
            await chat_client.mark_message_as_read("m1")

    async def test_operations_stay_declared_on_port(
        self, chat_client: ChatClient
    ) -> None:
        """Test that unimplemented operations are part of the service surface."""
        assert isinstance(chat_client, IChatService)
        for name in ("update_conversation", "delete_conversation", "mark_message_as_read"):
            assert name in IChatService.__abstractmethods__
            assert callable(getattr(chat_client, name))
