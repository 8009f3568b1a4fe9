"""
Chat Turn Orchestrator.

This is the main entry point of the chat backend. It takes the message
history of a chat, runs one agent turn over it and streams the turn back
as events:

- ``{"type": "text-delta", "delta": "..."}`` for assistant text;
- ``{"type": "tool-result", "toolInvocation": {...}}`` for every renderForm
  call, including skipped ones;
- ``{"type": "finish", "message": {...}}`` with the full assistant message.
"""

import json
import logging
import uuid
from typing import Any, AsyncIterator, Protocol, Sequence

from agents import Agent, RunConfig, Runner

from chat_forms.agents.form_agent import create_form_agent
from chat_forms.config import get_config
from chat_forms.models.messages import ChatMessage, ToolInvocation, message_text
from chat_forms.tools.render_form import FormTurn
from chat_forms.tracing import setup_tracing

logger = logging.getLogger("chat-forms")

TEXT_DELTA_EVENT = "response.output_text.delta"


class ChatStore(Protocol):
    def save_chat(self, chat_id: str, user_id: str, messages: list[ChatMessage]) -> None: ...


class ChatOrchestrator:
    """
    Runs chat turns against the form agent.

    Usage:
        orchestrator = ChatOrchestrator(store)

        async for event in orchestrator.stream_turn(chat_id, user_id, messages):
            send(event)
    """

    def __init__(
        self,
        store: ChatStore | None = None,
        model: str | None = None,
        enable_tracing: bool | None = None,
        trace_to_console: bool | None = None,
        trace_verbose: bool = False,
    ):
        """
        Initialize the orchestrator.

        Args:
            store: Where finished turns are saved. None disables persistence.
            model: OpenAI model for the agents. If None, uses config.default_model.
            enable_tracing: Whether to enable tracing. If None, uses config.
            trace_to_console: Whether to log traces to console. If None, uses config.
            trace_verbose: Whether to log detailed span information.
        """
        config = get_config()
        self.store = store
        self.model = model or config.default_model
        self.workflow_name = config.trace_workflow_name

        setup_tracing(
            enabled=config.enable_tracing if enable_tracing is None else enable_tracing,
            console=config.trace_to_console if trace_to_console is None else trace_to_console,
            verbose=trace_verbose,
        )

        self._form_agent = create_form_agent(model=self.model)
        self._acknowledger = create_form_agent(model=self.model, allow_forms=False)

    def select_agent(self, turn: FormTurn) -> Agent[FormTurn]:
        """
        Pick the agent for a turn.

        A turn answering a submitted form gets the agent without the
        renderForm tool; the tool's own guard still covers the other one.
        """
        if turn.is_form_submission:
            return self._acknowledger
        return self._form_agent

    @staticmethod
    def to_model_input(messages: Sequence[ChatMessage]) -> list[dict[str, Any]]:
        """
        Convert chat messages to model input items.

        Text becomes a role message. Finished tool invocations become a
        function call followed by its output, so a form the assistant
        offered stays in the history even when its turn had no text.
        Messages with neither text nor finished tool calls are dropped.
        """
        items: list[dict[str, Any]] = []
        for message in messages:
            text = message_text(message)
            if text:
                items.append({"role": message.role, "content": text})
            for invocation in message.tool_invocations:
                if invocation.state != "result":
                    continue
                items.append({
                    "type": "function_call",
                    "call_id": invocation.tool_call_id,
                    "name": invocation.tool_name,
                    "arguments": json.dumps(invocation.args),
                })
                items.append({
                    "type": "function_call_output",
                    "call_id": invocation.tool_call_id,
                    "output": json.dumps(invocation.result),
                })
        return items

    async def stream_turn(
        self,
        chat_id: str,
        user_id: str,
        messages: Sequence[ChatMessage],
    ) -> AsyncIterator[dict[str, Any]]:
        """
        Run one turn and yield its events.

        Args:
            chat_id: Id of the chat the turn belongs to.
            user_id: Owner of the chat, used when saving.
            messages: The full message history, latest user message last.
        """
        turn = FormTurn.from_messages(messages)
        agent = self.select_agent(turn)
        logger.info(
            "Chat %s: running %s (form submission: %s)",
            chat_id, agent.name, turn.is_form_submission,
        )

        result = Runner.run_streamed(
            agent,
            self.to_model_input(messages),
            context=turn,
            run_config=RunConfig(
                workflow_name=self.workflow_name,
                group_id=chat_id,
            ),
        )

        text_parts: list[str] = []
        async for event in result.stream_events():
            delta = _text_delta(event)
            if delta:
                text_parts.append(delta)
                yield {"type": "text-delta", "delta": delta}
            for invocation in turn.drain():
                yield _tool_result_event(invocation)

        for invocation in turn.drain():
            yield _tool_result_event(invocation)

        reply = ChatMessage(
            id=uuid.uuid4().hex,
            role="assistant",
            content="".join(text_parts),
            tool_invocations=turn.tool_results,
        )
        self._save(chat_id, user_id, [*messages, reply])
        yield {"type": "finish", "message": reply.to_wire()}

    def _save(self, chat_id: str, user_id: str, messages: list[ChatMessage]) -> None:
        if self.store is None:
            return
        try:
            self.store.save_chat(chat_id, user_id, messages)
        except Exception:
            logger.exception("Failed to save chat %s", chat_id)


def _text_delta(event: Any) -> str:
    if getattr(event, "type", None) != "raw_response_event":
        return ""
    data = event.data
    if getattr(data, "type", None) != TEXT_DELTA_EVENT:
        return ""
    return getattr(data, "delta", "") or ""


def _tool_result_event(invocation: ToolInvocation) -> dict[str, Any]:
    return {"type": "tool-result", "toolInvocation": invocation.model_dump(mode="json", by_alias=True)}
