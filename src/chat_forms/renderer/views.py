"""
View models produced by the renderer.

A view is a plain description of what a control shows right now. Views
carry no behavior; interaction goes through the controls.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from chat_forms.models.form_schema import AccentColor, IconName
from chat_forms.renderer.theme import ColorTheme


class ControlView(BaseModel):
    """Common part of every control view."""

    model_config = ConfigDict(frozen=True)

    kind: str
    field_id: str
    value: str


class InputView(ControlView):
    kind: Literal["input"] = "input"
    input_type: str = Field(..., description="HTML input type")
    placeholder: str | None = None
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | None = None


class TextAreaView(ControlView):
    kind: Literal["textarea"] = "textarea"
    placeholder: str | None = None


class OptionView(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    selected: bool = False


class ChoiceView(ControlView):
    kind: Literal["choice"] = "choice"
    options: list[OptionView]
    compact: bool = Field(..., description="Large glyph pills when every option is short")


class SelectView(ControlView):
    kind: Literal["select"] = "select"
    placeholder: str = Field(..., description="Label of the no-selection entry")
    options: list[OptionView]


class CheckboxView(ControlView):
    kind: Literal["checkbox"] = "checkbox"
    label: str = Field(..., description="Inline label beside the box")
    checked: bool


class CheckboxGroupView(ControlView):
    kind: Literal["checkboxGroup"] = "checkboxGroup"
    options: list[OptionView]


class SwitchView(ControlView):
    kind: Literal["toggle"] = "toggle"
    on: bool


class SliderView(ControlView):
    kind: Literal["slider"] = "slider"
    min: int | float
    max: int | float
    step: int | float
    position: int | float
    display: str = Field(..., description="Current value shown next to the slider")


class RatingView(ControlView):
    kind: Literal["rating"] = "rating"
    stars: list[bool] = Field(..., description="Filled flag per star")


class RankView(ControlView):
    kind: Literal["rank"] = "rank"
    items: list[str]


class FieldBlock(BaseModel):
    """One field of the form: optional label above, control below."""

    model_config = ConfigDict(frozen=True)

    field_id: str
    label: str | None
    control: SerializeAsAny[ControlView]


class FormView(BaseModel):
    """An open form."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["form"] = "form"
    title: str
    icon: IconName
    glyph: str | None
    accent_color: AccentColor
    theme: ColorTheme
    fields: list[FieldBlock]
    submit_label: str


class SubmittedView(BaseModel):
    """Terminal acknowledgement shown once a form is submitted."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["submitted"] = "submitted"
    message: str = "Submitted successfully"
