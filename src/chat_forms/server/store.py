"""
In-memory stores for the chat server.

Chats are kept per id together with the id of the user that owns them.
Sessions map bearer tokens to user ids.
"""

import logging
import secrets
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone

from chat_forms.errors import ChatNotFoundError, ChatOwnershipError
from chat_forms.models.messages import ChatMessage

logger = logging.getLogger("chat-forms.server")


@dataclass
class StoredChat:
    """A saved chat."""

    id: str
    user_id: str
    messages: list[ChatMessage] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class InMemoryChatStore:
    """Chat storage keyed by chat id."""

    def __init__(self):
        self._chats: dict[str, StoredChat] = {}
        self._lock = threading.Lock()

    def save_chat(self, chat_id: str, user_id: str, messages: list[ChatMessage]) -> None:
        """
        Create or replace a chat's messages.

        Raises:
            ChatOwnershipError: If the chat exists and belongs to another user.
        """
        with self._lock:
            existing = self._chats.get(chat_id)
            if existing is None:
                self._chats[chat_id] = StoredChat(id=chat_id, user_id=user_id, messages=list(messages))
            elif existing.user_id != user_id:
                raise ChatOwnershipError(f"Chat {chat_id} belongs to another user")
            else:
                existing.messages = list(messages)
        logger.debug("Saved chat %s (%d messages)", chat_id, len(messages))

    def get_chat(self, chat_id: str) -> StoredChat:
        with self._lock:
            chat = self._chats.get(chat_id)
        if chat is None:
            raise ChatNotFoundError(f"Chat not found: {chat_id}")
        return chat

    def delete_chat(self, chat_id: str) -> None:
        with self._lock:
            if self._chats.pop(chat_id, None) is None:
                raise ChatNotFoundError(f"Chat not found: {chat_id}")
        logger.info("Deleted chat %s", chat_id)

    def __len__(self) -> int:
        return len(self._chats)


class SessionStore:
    """Bearer token to user id lookup."""

    def __init__(self, sessions: dict[str, str] | None = None):
        self._sessions: dict[str, str] = dict(sessions or {})

    def create(self, user_id: str) -> str:
        """Open a session for a user and return its token."""
        token = secrets.token_urlsafe(24)
        self._sessions[token] = user_id
        return token

    def user_for(self, token: str | None) -> str | None:
        if not token:
            return None
        return self._sessions.get(token)

    def revoke(self, token: str) -> None:
        self._sessions.pop(token, None)
