"""
renderForm tool.

The model describes a form by calling ``renderForm`` with a FormSchema
payload. Two guards keep it to at most one form per turn:

- re-entrancy: every call after the first in the same turn returns the
  skip sentinel instead of a form;
- submission echo: when the latest user message is a submitted form
  ("Form submitted: ..."), every call returns the skip sentinel.

The per-turn state lives in a FormTurn passed to the agent run as its
context, so it is created when a request starts and dropped when it ends.
"""

import json
import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Sequence

from agents import FunctionTool, RunContextWrapper

from chat_forms.errors import FormSchemaError
from chat_forms.models.form_schema import FormSchema, is_skip_render, load_form_schema, skip_render
from chat_forms.models.messages import (
    RENDER_FORM_TOOL,
    ChatMessage,
    ToolInvocation,
    is_form_submission,
    latest_user_text,
)

logger = logging.getLogger("chat-forms")

RENDER_FORM_DESCRIPTION = (
    "Render a dynamic form in the chat. Reason about what the user needs and "
    "compose the right fields; do not wait for the user to specify them."
)


@dataclass
class FormTurn:
    """Form-emission state of a single chat turn."""

    latest_user_text: str = ""
    invocations: int = 0
    tool_results: list[ToolInvocation] = field(default_factory=list)
    _drained: int = field(default=0, init=False, repr=False)

    @classmethod
    def from_messages(cls, messages: Sequence[ChatMessage]) -> "FormTurn":
        """Start a turn for the given message history."""
        return cls(latest_user_text=latest_user_text(messages))

    @property
    def is_form_submission(self) -> bool:
        """Whether this turn answers a submitted form (no new form allowed)."""
        return is_form_submission(self.latest_user_text)

    @property
    def forms_emitted(self) -> int:
        return sum(
            1 for r in self.tool_results
            if not is_skip_render(r.result) and "fields" in (r.result or {})
        )

    def render_form(self, payload: Any, tool_call_id: str | None = None) -> dict[str, Any]:
        """
        Handle one renderForm call.

        Args:
            payload: The tool-call arguments.
            tool_call_id: Id of the model's tool call, generated if missing.

        Returns:
            The form payload with defaults applied, or the skip sentinel.

        Raises:
            FormSchemaError: If this call would emit a form but the payload
                is malformed.
        """
        self.invocations += 1
        call_id = tool_call_id or f"call_{uuid.uuid4().hex[:24]}"
        args = payload if isinstance(payload, dict) else {}

        if self.is_form_submission:
            logger.info("Skipping renderForm: latest user message is a form submission")
            result = skip_render()
        elif self.invocations > 1:
            logger.info("Skipping renderForm call %d: one form per turn", self.invocations)
            result = skip_render()
        else:
            try:
                schema = load_form_schema(payload)
            except FormSchemaError as e:
                logger.warning("renderForm payload rejected: %s", e)
                self._record(call_id, args, {"error": str(e)})
                raise
            logger.info("Emitting form '%s' with %d field(s)", schema.title, len(schema.fields))
            result = schema.to_payload()

        self._record(call_id, args, result)
        return result

    def drain(self) -> list[ToolInvocation]:
        """Tool results recorded since the previous drain."""
        fresh = self.tool_results[self._drained:]
        self._drained = len(self.tool_results)
        return fresh

    def _record(self, call_id: str, args: dict[str, Any], result: Any) -> None:
        self.tool_results.append(ToolInvocation(
            tool_call_id=call_id,
            tool_name=RENDER_FORM_TOOL,
            state="result",
            args=args,
            result=result,
        ))


async def _invoke_render_form(ctx: RunContextWrapper[Any], args_json: str) -> str:
    turn = ctx.context
    if not isinstance(turn, FormTurn):
        raise TypeError("renderForm must run with a FormTurn as the run context")

    try:
        payload = json.loads(args_json or "{}")
    except json.JSONDecodeError as e:
        turn.invocations += 1
        return json.dumps({"error": f"Invalid JSON arguments: {e}"})

    try:
        result = turn.render_form(payload, tool_call_id=getattr(ctx, "tool_call_id", None))
    except FormSchemaError as e:
        return json.dumps({"error": str(e)})
    return json.dumps(result)


render_form_tool = FunctionTool(
    name=RENDER_FORM_TOOL,
    description=RENDER_FORM_DESCRIPTION,
    params_json_schema=FormSchema.model_json_schema(by_alias=True),
    on_invoke_tool=_invoke_render_form,
    strict_json_schema=False,
)
