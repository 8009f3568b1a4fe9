"""
Function tools for Chat Forms.

These tools are attached to the form agent.
"""

from chat_forms.tools.render_form import (
    FormTurn,
    render_form_tool,
)

__all__ = [
    "FormTurn",  # Per-turn run context with the one-form-per-turn guards
    "render_form_tool",  # renderForm function tool
]
