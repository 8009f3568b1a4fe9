"""
Chat HTTP client.

Talks to the chat server on behalf of a Conversation: sends the message
history, reads the NDJSON turn stream back into an assistant message and
mounts any form it carries.

Usage:
    async with ChatClient("http://localhost:9110", token) as client:
        conversation = Conversation()
        conversation.add_user_text("send an email")
        reply = await client.send(conversation)

        form = conversation.form(reply.tool_invocations[0].tool_call_id)
        form.control("to").set_text("ana@example.com")
        await client.submit_form(conversation, reply.tool_invocations[0].tool_call_id)
"""

import json
import logging
import uuid
from typing import Any

import httpx

from chat_forms.models.messages import ChatMessage, ToolInvocation
from chat_forms.renderer.transcript import Conversation

logger = logging.getLogger("chat-forms")


class ChatClient:
    """Async client for the chat server."""

    def __init__(
        self,
        base_url: str,
        token: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 60.0,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {token}"},
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "ChatClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def send(self, conversation: Conversation) -> ChatMessage:
        """
        Run a turn for the conversation and append the assistant reply.

        Returns:
            The assistant message, with any form it carries already mounted.

        Raises:
            httpx.HTTPStatusError: If the server rejects the request.
        """
        body = {
            "id": conversation.chat_id,
            "messages": [m.to_wire() for m in conversation.messages],
        }
        async with self._http.stream("POST", "/api/chat", json=body) as response:
            response.raise_for_status()
            events = [json.loads(line) async for line in response.aiter_lines() if line.strip()]

        reply = assemble_reply(events)
        conversation.add_message(reply)
        return reply

    async def submit_form(self, conversation: Conversation, tool_call_id: str) -> ChatMessage | None:
        """
        Submit a mounted form and send its echo to the server.

        Returns:
            The assistant reply, or None when the form was already submitted.
        """
        line = conversation.form(tool_call_id).submit()
        if line is None:
            return None
        conversation.take_outbox()
        return await self.send(conversation)

    async def delete_chat(self, chat_id: str) -> str:
        """Delete a chat on the server."""
        response = await self._http.delete("/api/chat", params={"id": chat_id})
        response.raise_for_status()
        return response.text


def assemble_reply(events: list[dict[str, Any]]) -> ChatMessage:
    """
    Build the assistant message of a turn from its stream events.

    The finish event carries the whole message; without one the message is
    put together from the text deltas and tool results seen so far.
    """
    for event in events:
        if event.get("type") == "finish":
            return ChatMessage.model_validate(event["message"])

    logger.warning("Turn stream ended without a finish event")
    text = "".join(e.get("delta", "") for e in events if e.get("type") == "text-delta")
    invocations = [
        ToolInvocation.model_validate(e["toolInvocation"])
        for e in events
        if e.get("type") == "tool-result"
    ]
    return ChatMessage(
        id=uuid.uuid4().hex,
        role="assistant",
        content=text,
        tool_invocations=invocations,
    )
