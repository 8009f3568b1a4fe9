"""Tests for the chat HTTP server."""

import json

import pytest
from starlette.testclient import TestClient

from chat_forms.errors import ChatNotFoundError, ChatOwnershipError
from chat_forms.models.messages import ChatMessage
from chat_forms.server import InMemoryChatStore, SessionStore, create_app


class FakeOrchestrator:
    """Streams a fixed turn and records what it was asked."""

    def __init__(self, store: InMemoryChatStore):
        self.store = store
        self.calls = []

    async def stream_turn(self, chat_id, user_id, messages):
        self.calls.append((chat_id, user_id, list(messages)))
        yield {"type": "text-delta", "delta": "Here "}
        yield {"type": "text-delta", "delta": "you go."}
        reply = ChatMessage(id="a1", role="assistant", content="Here you go.")
        self.store.save_chat(chat_id, user_id, [*messages, reply])
        yield {"type": "finish", "message": reply.to_wire()}


@pytest.fixture
def store():
    return InMemoryChatStore()


@pytest.fixture
def sessions():
    return SessionStore({"token-ana": "ana", "token-bo": "bo"})


@pytest.fixture
def orchestrator(store):
    return FakeOrchestrator(store)


@pytest.fixture
def client(orchestrator, store, sessions):
    return TestClient(create_app(orchestrator, store, sessions))


def _auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


CHAT_BODY = {
    "id": "chat-1",
    "messages": [{"id": "m1", "role": "user", "content": "leave feedback"}],
}


class TestChatEndpoint:
    """Tests for POST /api/chat."""

    def test_requires_session(self, client):
        """Test that requests without a session are rejected."""
        response = client.post("/api/chat", json=CHAT_BODY)
        assert response.status_code == 401

    def test_unknown_token(self, client):
        """Test that an unknown token is rejected."""
        response = client.post("/api/chat", json=CHAT_BODY, headers=_auth("nope"))
        assert response.status_code == 401

    def test_streams_ndjson(self, client, orchestrator):
        """Test the streamed turn events."""
        response = client.post("/api/chat", json=CHAT_BODY, headers=_auth("token-ana"))
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/x-ndjson")

        events = [json.loads(line) for line in response.text.splitlines() if line]
        assert [e["type"] for e in events] == ["text-delta", "text-delta", "finish"]
        assert events[-1]["message"]["content"] == "Here you go."

        chat_id, user_id, messages = orchestrator.calls[0]
        assert (chat_id, user_id) == ("chat-1", "ana")
        assert messages[0].text == "leave feedback"

    def test_bad_body(self, client):
        """Test a body without a chat id."""
        response = client.post("/api/chat", json={"messages": []}, headers=_auth("token-ana"))
        assert response.status_code == 400

    def test_other_users_chat(self, client, store, orchestrator):
        """Test that a chat owned by someone else cannot be continued."""
        store.save_chat("chat-1", "ana", [ChatMessage(role="user", content="ana wrote this")])
        body = {"id": "chat-1", "messages": [{"role": "user", "content": "bo wrote this"}]}
        response = client.post("/api/chat", json=body, headers=_auth("token-bo"))
        assert response.status_code == 401
        assert orchestrator.calls == []
        chat = store.get_chat("chat-1")
        assert chat.user_id == "ana"
        assert [m.text for m in chat.messages] == ["ana wrote this"]

    def test_owner_continues_chat(self, client, store):
        """Test that the owner can post to an existing chat."""
        store.save_chat("chat-1", "ana", [])
        response = client.post("/api/chat", json=CHAT_BODY, headers=_auth("token-ana"))
        assert response.status_code == 200


class TestDeleteEndpoint:
    """Tests for DELETE /api/chat."""

    def test_missing_id(self, client):
        """Test that a missing id is not found."""
        response = client.delete("/api/chat", headers=_auth("token-ana"))
        assert response.status_code == 404

    def test_requires_session(self, client, store):
        """Test that deletion needs a session."""
        store.save_chat("chat-1", "ana", [])
        response = client.delete("/api/chat?id=chat-1")
        assert response.status_code == 401

    def test_owner_only(self, client, store):
        """Test that another user's chat cannot be deleted."""
        store.save_chat("chat-1", "ana", [])
        response = client.delete("/api/chat?id=chat-1", headers=_auth("token-bo"))
        assert response.status_code == 401
        assert store.get_chat("chat-1").user_id == "ana"

    def test_delete(self, client, store):
        """Test deleting an owned chat."""
        store.save_chat("chat-1", "ana", [])
        response = client.delete("/api/chat?id=chat-1", headers=_auth("token-ana"))
        assert response.status_code == 200
        assert response.text == "Chat deleted"
        with pytest.raises(ChatNotFoundError):
            store.get_chat("chat-1")

    def test_unknown_chat(self, client):
        """Test that a failed lookup is a server error."""
        response = client.delete("/api/chat?id=missing", headers=_auth("token-ana"))
        assert response.status_code == 500


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        """Test the health payload."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestStores:
    """Tests for the in-memory stores."""

    def test_save_replaces_messages(self, store):
        """Test that saving again replaces the owner's messages."""
        store.save_chat("c", "ana", [ChatMessage(role="user", content="a")])
        store.save_chat("c", "ana", [ChatMessage(role="user", content="b")])
        chat = store.get_chat("c")
        assert chat.user_id == "ana"
        assert [m.text for m in chat.messages] == ["b"]

    def test_save_refuses_other_owner(self, store):
        """Test that another user cannot overwrite a chat."""
        store.save_chat("c", "ana", [ChatMessage(role="user", content="a")])
        with pytest.raises(ChatOwnershipError):
            store.save_chat("c", "bo", [ChatMessage(role="user", content="b")])
        assert [m.text for m in store.get_chat("c").messages] == ["a"]

    def test_delete_missing(self, store):
        """Test deleting an unknown chat."""
        with pytest.raises(ChatNotFoundError):
            store.delete_chat("nope")

    def test_sessions(self):
        """Test creating and revoking sessions."""
        sessions = SessionStore()
        token = sessions.create("ana")
        assert sessions.user_for(token) == "ana"
        assert sessions.user_for(None) is None
        sessions.revoke(token)
        assert sessions.user_for(token) is None
