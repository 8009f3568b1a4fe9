"""
Agent definitions for Chat Forms.

This module contains the form agent and its instructions.
"""

from chat_forms.agents.form_agent import create_form_agent
from chat_forms.agents.instructions import ACKNOWLEDGE_INSTRUCTIONS, FORM_AGENT_INSTRUCTIONS

__all__ = [
    "create_form_agent",
    "ACKNOWLEDGE_INSTRUCTIONS",
    "FORM_AGENT_INSTRUCTIONS",
]
