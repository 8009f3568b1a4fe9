"""
Interactive controls, one class per field type.

``CONTROL_TYPES`` maps every FieldType to its control class; the module
refuses to import if a FieldType has no control. Controls read and write
their own field's slot in the RenderState and never touch another field.
"""

import logging

from chat_forms.errors import FieldValueError
from chat_forms.models.form_schema import FieldType, FormField
from chat_forms.renderer import encoding
from chat_forms.renderer.state import RenderState
from chat_forms.renderer.views import (
    CheckboxGroupView,
    CheckboxView,
    ChoiceView,
    ControlView,
    InputView,
    OptionView,
    RankView,
    RatingView,
    SelectView,
    SliderView,
    SwitchView,
    TextAreaView,
)

logger = logging.getLogger("chat-forms.renderer")

SELECT_PLACEHOLDER = "Select..."


class FieldControl:
    """Base class for a control bound to one field of a mounted form."""

    # Whether the form shows the field label above the control
    shows_label = True

    def __init__(self, field: FormField, state: RenderState):
        self.field = field
        self._state = state

    @property
    def field_id(self) -> str:
        return self.field.id

    @property
    def value(self) -> str:
        return self._state.get(self.field.id)

    def view(self) -> ControlView:
        raise NotImplementedError

    def _write(self, value: str) -> None:
        self._state.set(self.field.id, value)
        logger.debug("Field %s (%s) set to %r", self.field.id, self.field.type.value, value)

    def _require_option(self, option: str) -> None:
        if option not in self.field.option_list:
            raise FieldValueError(self.field.id, f"'{option}' is not one of the options")

    def _option_views(self, selected: set[str]) -> list[OptionView]:
        return [OptionView(label=o, selected=o in selected) for o in self.field.option_list]


class InputControl(FieldControl):
    """Single-line input: text, email, tel, url, password, date, time."""

    @property
    def input_type(self) -> str:
        return self.field.type.value

    def set_text(self, text: str) -> None:
        self._write(text)

    def view(self) -> InputView:
        return InputView(
            field_id=self.field.id,
            value=self.value,
            input_type=self.input_type,
            placeholder=self.field.placeholder,
            min=self.field.min,
            max=self.field.max,
            step=self.field.step,
        )


class NumberControl(InputControl):
    """Numeric input. The value is still a string."""

    def set_text(self, text: str) -> None:
        self._write(encoding.clean_number_text(text))


class DateTimeControl(InputControl):
    """Combined date and time input."""

    @property
    def input_type(self) -> str:
        return "datetime-local"

    def set_datetime(self, date: str, time: str) -> None:
        self._write(f"{date}T{time}")


class TextAreaControl(FieldControl):
    def set_text(self, text: str) -> None:
        self._write(text)

    def view(self) -> TextAreaView:
        return TextAreaView(
            field_id=self.field.id,
            value=self.value,
            placeholder=self.field.placeholder,
        )


class ChoiceControl(FieldControl):
    """Mutually exclusive pill buttons, one per option."""

    def choose(self, option: str) -> None:
        self._require_option(option)
        self._write(option)

    def view(self) -> ChoiceView:
        options = self.field.option_list
        return ChoiceView(
            field_id=self.field.id,
            value=self.value,
            options=self._option_views({self.value}),
            compact=encoding.is_compact_choice(options),
        )


class SelectControl(FieldControl):
    """Dropdown with a leading no-selection entry."""

    def select(self, option: str) -> None:
        if option != "":
            self._require_option(option)
        self._write(option)

    def view(self) -> SelectView:
        return SelectView(
            field_id=self.field.id,
            value=self.value,
            placeholder=self.field.placeholder or SELECT_PLACEHOLDER,
            options=self._option_views({self.value}),
        )


class CheckboxControl(FieldControl):
    """Single checkbox with its label inline."""

    shows_label = False

    @property
    def checked(self) -> bool:
        return encoding.decode_bool(self.value)

    def set_checked(self, checked: bool) -> None:
        self._write(encoding.encode_bool(checked))

    def toggle(self) -> None:
        self.set_checked(not self.checked)

    def view(self) -> CheckboxView:
        return CheckboxView(
            field_id=self.field.id,
            value=self.value,
            label=self.field.label,
            checked=self.checked,
        )


class CheckboxGroupControl(FieldControl):
    """Independent checkboxes, one per option."""

    @property
    def selected(self) -> list[str]:
        return encoding.decode_list(self.value)

    def toggle(self, option: str) -> None:
        self._require_option(option)
        self._write(encoding.toggle_option(self.value, option))

    def view(self) -> CheckboxGroupView:
        return CheckboxGroupView(
            field_id=self.field.id,
            value=self.value,
            options=self._option_views(set(self.selected)),
        )


class SwitchControl(FieldControl):
    """On/off switch."""

    @property
    def on(self) -> bool:
        return encoding.decode_bool(self.value)

    def set_on(self, on: bool) -> None:
        self._write(encoding.encode_bool(on))

    def toggle(self) -> None:
        self.set_on(not self.on)

    def view(self) -> SwitchView:
        return SwitchView(field_id=self.field.id, value=self.value, on=self.on)


class SliderControl(FieldControl):
    """Numeric range with the current value shown as text."""

    @property
    def position(self) -> int | float:
        return encoding.slider_value(self.field, self.value)

    def slide(self, value: int | float) -> None:
        self._write(encoding.snap_slider(self.field, value))

    def view(self) -> SliderView:
        low, high, step = encoding.slider_bounds(self.field)
        position = self.position
        return SliderView(
            field_id=self.field.id,
            value=self.value,
            min=low,
            max=high,
            step=step,
            position=position,
            display=encoding.format_number(position),
        )


class RatingControl(FieldControl):
    """Five stars; clicking star i sets the rating to i."""

    @property
    def rating(self) -> int:
        return encoding.decode_rating(self.value)

    def click_star(self, index: int) -> None:
        self._write(encoding.encode_rating(self.field.id, index))

    def view(self) -> RatingView:
        return RatingView(
            field_id=self.field.id,
            value=self.value,
            stars=encoding.star_states(self.value),
        )


class RankControl(FieldControl):
    """Reorderable list of the options."""

    @property
    def order(self) -> list[str]:
        return encoding.rank_order(self.field, self.value)

    def move(self, from_index: int, to_index: int) -> None:
        try:
            order = encoding.move_item(self.order, from_index, to_index)
        except IndexError as e:
            raise FieldValueError(self.field.id, str(e)) from e
        self._write(encoding.encode_list(order))

    def move_up(self, index: int) -> None:
        if index > 0:
            self.move(index, index - 1)

    def move_down(self, index: int) -> None:
        if index < len(self.order) - 1:
            self.move(index, index + 1)

    def view(self) -> RankView:
        return RankView(field_id=self.field.id, value=self.value, items=self.order)


CONTROL_TYPES: dict[FieldType, type[FieldControl]] = {
    FieldType.TEXT: InputControl,
    FieldType.EMAIL: InputControl,
    FieldType.TEL: InputControl,
    FieldType.URL: InputControl,
    FieldType.PASSWORD: InputControl,
    FieldType.DATE: InputControl,
    FieldType.TIME: InputControl,
    FieldType.NUMBER: NumberControl,
    FieldType.DATETIME: DateTimeControl,
    FieldType.TEXTAREA: TextAreaControl,
    FieldType.CHOICE: ChoiceControl,
    FieldType.SELECT: SelectControl,
    FieldType.CHECKBOX: CheckboxControl,
    FieldType.CHECKBOX_GROUP: CheckboxGroupControl,
    FieldType.TOGGLE: SwitchControl,
    FieldType.SLIDER: SliderControl,
    FieldType.RATING: RatingControl,
    FieldType.RANK: RankControl,
}

_unhandled = set(FieldType) - set(CONTROL_TYPES)
if _unhandled:
    raise RuntimeError(f"No control registered for field types: {sorted(t.value for t in _unhandled)}")


def control_for(field: FormField, state: RenderState) -> FieldControl:
    """Build the control for a field."""
    return CONTROL_TYPES[field.type](field, state)
