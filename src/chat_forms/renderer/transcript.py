"""
Chat transcript view.

Holds the client side of a conversation: its messages and one mounted
form per renderForm tool call. The conversation owns the chat-message
boundary, so it is the one place that prefixes a submitted form's line
with "Form submitted: " before it becomes the next user message.
"""

import json
import logging
import uuid
from typing import Literal

from pydantic import BaseModel, ConfigDict

from chat_forms.errors import FormSchemaError
from chat_forms.models.form_schema import is_skip_render
from chat_forms.models.messages import (
    RENDER_FORM_TOOL,
    ChatMessage,
    ToolInvocation,
    format_submission,
    is_form_submission,
)
from chat_forms.renderer.form import FormRenderer
from chat_forms.renderer.views import FormView, SubmittedView

logger = logging.getLogger("chat-forms.renderer")


class ToolView(BaseModel):
    """What a tool invocation shows inside a message."""

    model_config = ConfigDict(frozen=True)

    tool_call_id: str
    kind: Literal["form", "placeholder", "json", "error"]
    form: FormView | SubmittedView | None = None
    text: str | None = None


class MessageView(BaseModel):
    """One visible message."""

    model_config = ConfigDict(frozen=True)

    message_id: str | None
    role: str
    text: str
    tools: list[ToolView]


class Conversation:
    """
    Client-side state of one chat.

    Forms are mounted once per tool call id and kept for the life of the
    conversation, so re-rendering never resets what the user typed.
    """

    def __init__(self, chat_id: str | None = None, messages: list[ChatMessage] | None = None):
        self.chat_id = chat_id or uuid.uuid4().hex
        self.messages: list[ChatMessage] = []
        self._forms: dict[str, FormRenderer] = {}
        self._errors: dict[str, str] = {}
        self._outbox: list[ChatMessage] = []
        for message in messages or []:
            self.add_message(message)

    def add_message(self, message: ChatMessage) -> None:
        self.messages.append(message)
        for invocation in message.tool_invocations:
            self._mount(invocation)

    def add_user_text(self, text: str) -> ChatMessage:
        message = ChatMessage(id=uuid.uuid4().hex, role="user", content=text)
        self.add_message(message)
        return message

    def form(self, tool_call_id: str) -> FormRenderer:
        """The form mounted for a renderForm call."""
        return self._forms[tool_call_id]

    @property
    def forms(self) -> dict[str, FormRenderer]:
        return dict(self._forms)

    def take_outbox(self) -> list[ChatMessage]:
        """User messages produced by form submissions and not yet sent."""
        pending, self._outbox = self._outbox, []
        return pending

    def _mount(self, invocation: ToolInvocation) -> None:
        if invocation.tool_name != RENDER_FORM_TOOL or invocation.state != "result":
            return
        if is_skip_render(invocation.result) or invocation.tool_call_id in self._forms:
            return
        result = invocation.result
        if isinstance(result, dict) and "error" in result and "fields" not in result:
            self._errors[invocation.tool_call_id] = str(result["error"])
            return
        try:
            self._forms[invocation.tool_call_id] = FormRenderer(
                invocation.result,
                on_submit=self._on_form_submit,
            )
        except FormSchemaError as e:
            logger.error("renderForm call %s returned an invalid form: %s", invocation.tool_call_id, e)
            self._errors[invocation.tool_call_id] = str(e)

    def _on_form_submit(self, line: str) -> None:
        message = self.add_user_text(format_submission(line))
        self._outbox.append(message)

    def _tool_view(self, invocation: ToolInvocation) -> ToolView | None:
        if invocation.tool_name != RENDER_FORM_TOOL:
            if invocation.state != "result":
                return None
            return ToolView(
                tool_call_id=invocation.tool_call_id,
                kind="json",
                text=json.dumps(invocation.result, indent=2),
            )
        if invocation.state == "call":
            return ToolView(tool_call_id=invocation.tool_call_id, kind="placeholder")
        if invocation.tool_call_id in self._errors:
            return ToolView(
                tool_call_id=invocation.tool_call_id,
                kind="error",
                text=self._errors[invocation.tool_call_id],
            )
        form = self._forms.get(invocation.tool_call_id)
        if form is None:
            return None
        return ToolView(tool_call_id=invocation.tool_call_id, kind="form", form=form.render())

    def view(self) -> list[MessageView]:
        """Visible messages. Submission echoes are hidden."""
        views = []
        for message in self.messages:
            if message.role == "user" and is_form_submission(message.text):
                continue
            tools = [t for t in map(self._tool_view, message.tool_invocations) if t is not None]
            views.append(MessageView(
                message_id=message.id,
                role=message.role,
                text=message.text,
                tools=tools,
            ))
        return views
