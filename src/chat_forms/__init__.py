"""
Chat Forms: dynamic forms inside an AI chat.

The assistant describes a form by calling the renderForm tool; the client
renders it in the conversation, and the submitted values come back as the
next user message ("Form submitted: to: a@b.com, subject: Hi").

Server:
    from chat_forms import ChatOrchestrator
    from chat_forms.server import InMemoryChatStore, SessionStore, create_app

    store = InMemoryChatStore()
    app = create_app(ChatOrchestrator(store), store, SessionStore())

Rendering a form payload:
    from chat_forms import FormRenderer

    form = FormRenderer({
        "title": "New Message",
        "fields": [
            {"id": "to", "label": "To", "type": "email"},
            {"id": "subject", "label": "Subject", "type": "text"},
        ],
    })
    form.control("to").set_text("a@b.com")
    form.control("subject").set_text("Hi")
    form.submit()  # "to: a@b.com, subject: Hi"

Tracing:
    from chat_forms.tracing import setup_tracing

    # Log traces to the console
    setup_tracing(console=True, verbose=True)
"""

from chat_forms.client import ChatClient
from chat_forms.errors import (
    ChatFormsError,
    ChatNotFoundError,
    ChatOwnershipError,
    FieldValueError,
    FormSchemaError,
    FormSubmittedError,
)
from chat_forms.models.form_schema import (
    AccentColor,
    FieldType,
    FormField,
    FormSchema,
    IconName,
    load_form_schema,
)
from chat_forms.models.messages import ChatMessage, ToolInvocation
from chat_forms.orchestrator import ChatOrchestrator
from chat_forms.renderer.form import FormRenderer, mount_form
from chat_forms.renderer.transcript import Conversation
from chat_forms.tools.render_form import FormTurn, render_form_tool
from chat_forms.tracing import (
    disable_tracing,
    enable_tracing,
    setup_tracing,
)

__all__ = [
    # Main interface
    "ChatOrchestrator",
    "ChatClient",
    "Conversation",
    # Producer
    "FormTurn",
    "render_form_tool",
    # Schema
    "AccentColor",
    "FieldType",
    "FormField",
    "FormSchema",
    "IconName",
    "load_form_schema",
    # Messages
    "ChatMessage",
    "ToolInvocation",
    # Renderer
    "FormRenderer",
    "mount_form",
    # Errors
    "ChatFormsError",
    "ChatNotFoundError",
    "ChatOwnershipError",
    "FieldValueError",
    "FormSchemaError",
    "FormSubmittedError",
    # Tracing
    "setup_tracing",
    "disable_tracing",
    "enable_tracing",
]

__version__ = "0.1.0"
