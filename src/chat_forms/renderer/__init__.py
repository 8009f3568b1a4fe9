"""
Form renderer for Chat Forms.

This module contains:
- Value encoding rules shared by every control
- One interactive control per field type
- The FormRenderer that mounts a schema and handles submission
- Theme lookup and HTML rendering of views
- The client-side conversation that hosts mounted forms
"""

from chat_forms.renderer.controls import CONTROL_TYPES, FieldControl, control_for
from chat_forms.renderer.form import FormRenderer, mount_form
from chat_forms.renderer.html import render_html
from chat_forms.renderer.state import RenderState
from chat_forms.renderer.theme import ColorTheme, get_theme
from chat_forms.renderer.transcript import Conversation, MessageView, ToolView
from chat_forms.renderer.views import FormView, SubmittedView

__all__ = [
    "CONTROL_TYPES",
    "FieldControl",
    "control_for",
    "FormRenderer",
    "mount_form",
    "render_html",
    "RenderState",
    "ColorTheme",
    "get_theme",
    "Conversation",
    "MessageView",
    "ToolView",
    "FormView",
    "SubmittedView",
]
