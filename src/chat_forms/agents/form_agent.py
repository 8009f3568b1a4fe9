"""
Form Agent.

The chat agent that decides, once per user turn, whether a form is
needed and describes it through the renderForm tool.
"""

from agents import Agent

from chat_forms.agents.instructions import ACKNOWLEDGE_INSTRUCTIONS, FORM_AGENT_INSTRUCTIONS
from chat_forms.config import get_config
from chat_forms.tools.render_form import FormTurn, render_form_tool


def create_form_agent(
    model: str | None = None,
    allow_forms: bool = True,
) -> Agent[FormTurn]:
    """
    Create the Form agent.

    Args:
        model: The OpenAI model to use. If None, uses config.default_model.
        allow_forms: Attach the renderForm tool. With False the agent can
            only reply with text; used for turns answering a submitted form.

    Returns:
        Configured Agent instance.
    """
    config = get_config()
    model = model or config.default_model

    if not allow_forms:
        return Agent[FormTurn](
            name="Form Acknowledger",
            instructions=ACKNOWLEDGE_INSTRUCTIONS,
            model=model,
            model_settings=config.get_model_settings(),
        )

    return Agent[FormTurn](
        name="Form Agent",
        instructions=FORM_AGENT_INSTRUCTIONS,
        model=model,
        model_settings=config.get_model_settings(),
        tools=[render_form_tool],
        # The tool result is the turn's output: one model step per request
        tool_use_behavior="stop_on_first_tool",
    )
