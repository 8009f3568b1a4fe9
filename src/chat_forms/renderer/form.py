"""
Form Renderer.

Turns a form schema into a set of interactive controls bound to one
RenderState, and serializes the collected values into a single line of
text when the user submits.

Usage:
    form = FormRenderer(schema, on_submit=lambda line: print(line))
    form.control("rating").click_star(4)
    form.submit()          # prints "rating: 4"
"""

import logging
from typing import Any, Callable, Mapping

from chat_forms.errors import FormSubmittedError
from chat_forms.models.form_schema import FormSchema, load_form_schema
from chat_forms.renderer import encoding
from chat_forms.renderer.controls import FieldControl, control_for
from chat_forms.renderer.state import RenderState
from chat_forms.renderer.theme import get_glyph, get_theme
from chat_forms.renderer.views import FieldBlock, FormView, SubmittedView

logger = logging.getLogger("chat-forms.renderer")

SubmitCallback = Callable[[str], None]


class FormRenderer:
    """
    One mounted form.

    State is allocated once, when the form is mounted. Rendering never
    changes it; only control interactions and submit() do. Submission is a
    single-fire latch: the callback runs at most once and the controls are
    gone afterwards.
    """

    def __init__(
        self,
        schema: FormSchema | Mapping[str, Any],
        on_submit: SubmitCallback | None = None,
    ):
        """
        Mount a form.

        Args:
            schema: The form schema, or a raw renderForm payload.
            on_submit: Called with the serialized "id: value" line on
                submission (without the "Form submitted: " prefix).

        Raises:
            FormSchemaError: If the payload is not a valid form.
        """
        self.schema = load_form_schema(schema)
        self._state = RenderState.initial(self.schema)
        self._controls: dict[str, FieldControl] = {
            f.id: control_for(f, self._state) for f in self.schema.fields
        }
        self._on_submit = on_submit

    @property
    def submitted(self) -> bool:
        return self._state.submitted

    @property
    def values(self) -> Mapping[str, str]:
        return self._state.snapshot()

    def control(self, field_id: str) -> FieldControl:
        """Get the control of a field. Not available once submitted."""
        if self._state.submitted:
            raise FormSubmittedError("Form already submitted; its controls are gone")
        try:
            return self._controls[field_id]
        except KeyError:
            raise KeyError(f"Unknown field '{field_id}'") from None

    def serialize(self) -> str:
        return encoding.serialize_values(self.schema.fields, self._state.values)

    def submit(self) -> str | None:
        """
        Submit the form.

        Returns:
            The serialized line, or None if the form was already submitted.
        """
        if self._state.submitted:
            logger.debug("Ignoring repeated submit")
            return None

        final_values = {
            f.id: encoding.resolve_submitted_value(f, self._state.get(f.id))
            for f in self.schema.fields
        }
        self._state.freeze(final_values)
        line = self.serialize()
        logger.info("Form submitted with %d field(s)", len(final_values))

        if self._on_submit is not None:
            self._on_submit(line)
        return line

    def render(self) -> FormView | SubmittedView:
        """Describe what the form shows right now."""
        if self._state.submitted:
            return SubmittedView()

        schema = self.schema
        blocks = [
            FieldBlock(
                field_id=control.field_id,
                label=control.field.label if control.shows_label else None,
                control=control.view(),
            )
            for control in self._controls.values()
        ]
        return FormView(
            title=schema.title,
            icon=schema.icon,
            glyph=get_glyph(schema.icon),
            accent_color=schema.accent_color,
            theme=get_theme(schema.accent_color),
            fields=blocks,
            submit_label=schema.submit_label,
        )


def mount_form(
    schema: FormSchema | Mapping[str, Any],
    on_submit: SubmitCallback | None = None,
) -> FormRenderer:
    """Mount a form from a schema or raw payload."""
    return FormRenderer(schema, on_submit=on_submit)
