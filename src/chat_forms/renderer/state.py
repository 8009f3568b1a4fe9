"""
Render state.

The only mutable state of a mounted form: the current values and the
submitted flag. A RenderState belongs to exactly one FormRenderer.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from chat_forms.errors import FormSubmittedError
from chat_forms.models.form_schema import FormSchema


@dataclass
class RenderState:
    """Current values of a form plus its submitted latch."""

    values: dict[str, str] = field(default_factory=dict)
    submitted: bool = False

    @classmethod
    def initial(cls, schema: FormSchema) -> "RenderState":
        """Every declared field id mapped to "", in declaration order."""
        return cls(values={f.id: "" for f in schema.fields})

    def get(self, field_id: str) -> str:
        return self.values.get(field_id, "")

    def set(self, field_id: str, value: str) -> None:
        if self.submitted:
            raise FormSubmittedError(f"Form already submitted; cannot change '{field_id}'")
        if field_id not in self.values:
            raise KeyError(field_id)
        self.values[field_id] = value

    def freeze(self, final_values: Mapping[str, str]) -> None:
        """Store the submitted values and close the form. Irreversible."""
        if self.submitted:
            raise FormSubmittedError("Form already submitted")
        self.values = dict(final_values)
        self.submitted = True

    def snapshot(self) -> Mapping[str, str]:
        """Read-only copy of the current values."""
        return MappingProxyType(dict(self.values))
