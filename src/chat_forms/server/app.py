"""
Chat HTTP server.

Endpoints:
1. POST /api/chat    run a chat turn, streamed back as NDJSON events
2. DELETE /api/chat  delete a chat owned by the caller
3. GET /health       health check

Requests authenticate with ``Authorization: Bearer <token>``.
"""

import json
import logging
from typing import Any, AsyncIterator, Protocol, Sequence

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response, StreamingResponse
from starlette.routing import Route

from chat_forms.config import get_config
from chat_forms.errors import ChatNotFoundError
from chat_forms.models.messages import ChatMessage
from chat_forms.server.store import InMemoryChatStore, SessionStore

logger = logging.getLogger("chat-forms.server")

NDJSON_MEDIA_TYPE = "application/x-ndjson"


class TurnRunner(Protocol):
    def stream_turn(
        self,
        chat_id: str,
        user_id: str,
        messages: Sequence[ChatMessage],
    ) -> AsyncIterator[dict[str, Any]]: ...


def bearer_token(request: Request) -> str | None:
    header = request.headers.get("authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def create_app(
    orchestrator: TurnRunner,
    store: InMemoryChatStore,
    sessions: SessionStore,
    debug: bool = False,
) -> Starlette:
    """
    Create the chat Starlette app.

    Args:
        orchestrator: Runs the chat turns (usually a ChatOrchestrator).
        store: Chat storage, shared with the orchestrator.
        sessions: Token to user lookup.
        debug: Starlette debug mode.
    """

    async def handle_chat(request: Request) -> Response:
        """Run one chat turn: POST {id, messages}."""
        user_id = sessions.user_for(bearer_token(request))
        if user_id is None:
            return PlainTextResponse("Unauthorized", status_code=401)

        try:
            body = await request.json()
            chat_id = body["id"]
            messages = [ChatMessage.model_validate(m) for m in body.get("messages", [])]
        except (json.JSONDecodeError, KeyError, TypeError, ValidationError) as e:
            logger.warning("Rejected chat request: %s", e)
            return PlainTextResponse("Bad Request", status_code=400)

        try:
            chat = store.get_chat(chat_id)
        except ChatNotFoundError:
            chat = None
        if chat is not None and chat.user_id != user_id:
            logger.warning("User %s tried to write to chat %s", user_id, chat_id)
            return PlainTextResponse("Unauthorized", status_code=401)

        async def events() -> AsyncIterator[str]:
            async for event in orchestrator.stream_turn(chat_id, user_id, messages):
                yield json.dumps(event) + "\n"

        return StreamingResponse(events(), media_type=NDJSON_MEDIA_TYPE)

    async def handle_delete(request: Request) -> Response:
        """Delete a chat: DELETE ?id=<chat id>."""
        chat_id = request.query_params.get("id")
        if not chat_id:
            return PlainTextResponse("Not Found", status_code=404)

        user_id = sessions.user_for(bearer_token(request))
        if user_id is None:
            return PlainTextResponse("Unauthorized", status_code=401)

        try:
            chat = store.get_chat(chat_id)
            if chat.user_id != user_id:
                return PlainTextResponse("Unauthorized", status_code=401)
            store.delete_chat(chat_id)
        except Exception:
            logger.exception("Failed to delete chat %s", chat_id)
            return PlainTextResponse(
                "An error occurred while processing your request",
                status_code=500,
            )

        return PlainTextResponse("Chat deleted", status_code=200)

    async def health_check(request: Request) -> Response:
        """Health check endpoint."""
        config = get_config()
        return JSONResponse({
            "status": "healthy",
            "service": "chat-forms",
            "port": config.server_port,
            "chats": len(store),
        })

    return Starlette(
        debug=debug,
        routes=[
            Route("/api/chat", handle_chat, methods=["POST"]),
            Route("/api/chat", handle_delete, methods=["DELETE"]),
            Route("/health", health_check, methods=["GET"]),
        ],
    )


async def run_server(
    app: Starlette,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """
    Serve the app with uvicorn.

    Args:
        app: App from create_app.
        host: Host to bind to. If None, uses config.server_host.
        port: Port to listen on. If None, uses config.server_port.
    """
    import uvicorn

    config = get_config()
    host = host or config.server_host
    port = port or config.server_port

    logger.info("Starting chat server on %s:%s...", host, port)

    uv_config = uvicorn.Config(app, host=host, port=port, log_level=config.log_level.lower())
    server_instance = uvicorn.Server(uv_config)
    await server_instance.serve()
