"""
Chat message models.

Messages arrive from the chat client as an ordered list. A message's
content is either plain text or a list of parts (text, attachments); tool
calls made by the model travel alongside as tool invocation records.
"""

from typing import Any, Literal, Sequence

from pydantic import BaseModel, ConfigDict, Field

# Prefix of the user message a submitted form re-enters the chat with.
# The submit path and the submission-echo guard must both use this value.
FORM_SUBMITTED_PREFIX = "Form submitted: "

RENDER_FORM_TOOL = "renderForm"


class ContentPart(BaseModel):
    """One part of a multi-part message (text, image, file...)."""

    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="Part type, e.g. 'text' or 'image'")
    text: str | None = Field(default=None, description="Text for text parts")


class ToolInvocation(BaseModel):
    """A tool call made by the model and, once finished, its result."""

    model_config = ConfigDict(populate_by_name=True)

    tool_call_id: str = Field(..., alias="toolCallId")
    tool_name: str = Field(..., alias="toolName")
    state: Literal["call", "result"] = Field(default="result")
    args: dict[str, Any] = Field(default_factory=dict)
    result: Any = Field(default=None)


class ChatMessage(BaseModel):
    """A single chat message."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(default=None)
    role: Literal["user", "assistant", "system"]
    content: str | list[ContentPart] | None = Field(default="")
    tool_invocations: list[ToolInvocation] = Field(default_factory=list, alias="toolInvocations")

    @property
    def text(self) -> str:
        return message_text(self)

    def to_wire(self) -> dict[str, Any]:
        """Dump with wire (camelCase) keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def message_text(message: ChatMessage) -> str:
    """
    Extract the text of a message.

    String content is returned as is. For multi-part content the first
    text part wins; attachment-only or empty content yields "".
    """
    content = message.content
    if isinstance(content, str):
        return content
    for part in content or []:
        if part.type == "text":
            return part.text or ""
    return ""


def latest_user_text(messages: Sequence[ChatMessage]) -> str:
    """Text of the most recent user message, or "" when there is none."""
    for message in reversed(messages):
        if message.role == "user":
            return message_text(message)
    return ""


def is_form_submission(text: str) -> bool:
    """Whether a message text is the echo of a submitted form."""
    return text.startswith(FORM_SUBMITTED_PREFIX)


def format_submission(line: str) -> str:
    """Turn a serialized form line into the message that re-enters the chat."""
    return f"{FORM_SUBMITTED_PREFIX}{line}"
