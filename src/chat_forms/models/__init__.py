"""
Data models for Chat Forms.

This module contains Pydantic models for:
- Form schemas (the renderForm tool payload)
- Chat messages and tool invocation records
"""

from chat_forms.models.form_schema import (
    AccentColor,
    FieldType,
    FormField,
    FormSchema,
    IconName,
    OPTION_TYPES,
    is_skip_render,
    load_form_schema,
    skip_render,
)
from chat_forms.models.messages import (
    FORM_SUBMITTED_PREFIX,
    RENDER_FORM_TOOL,
    ChatMessage,
    ContentPart,
    ToolInvocation,
    format_submission,
    is_form_submission,
    latest_user_text,
    message_text,
)

__all__ = [
    # Form schema
    "AccentColor",
    "FieldType",
    "FormField",
    "FormSchema",
    "IconName",
    "OPTION_TYPES",
    "is_skip_render",
    "load_form_schema",
    "skip_render",
    # Messages
    "FORM_SUBMITTED_PREFIX",
    "RENDER_FORM_TOOL",
    "ChatMessage",
    "ContentPart",
    "ToolInvocation",
    "format_submission",
    "is_form_submission",
    "latest_user_text",
    "message_text",
]
