"""
Value encoding rules.

Every form value is a string, whatever the field's semantic type. This
module is the single place that knows how numbers, booleans, multi-select
sets, ratings and rankings are written to and read from those strings.
"""

from typing import Iterable, Mapping, Sequence

from chat_forms.errors import FieldValueError
from chat_forms.models.form_schema import LIST_SEPARATOR, FieldType, FormField

TRUE = "true"
FALSE = "false"

PAIR_SEPARATOR = ", "

RATING_STARS = 5

SLIDER_DEFAULT_MIN = 0
SLIDER_DEFAULT_MAX = 100
SLIDER_DEFAULT_STEP = 1

# Options at or below this length render as large glyph pills
COMPACT_OPTION_LENGTH = 4

NUMERIC_CHARS = frozenset("0123456789.-+eE")


def format_number(value: int | float) -> str:
    """Render a number the way the value string stores it (no trailing .0)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_number(raw: str) -> int | float:
    """Parse a stored numeric string, keeping integers as int."""
    number = float(raw)
    return int(number) if number.is_integer() else number


def encode_bool(flag: bool) -> str:
    return TRUE if flag else FALSE


def decode_bool(raw: str) -> bool:
    return raw == TRUE


def decode_list(raw: str) -> list[str]:
    """Split a comma-joined value, dropping empty parts."""
    if not raw:
        return []
    return [part for part in raw.split(LIST_SEPARATOR) if part]


def encode_list(items: Iterable[str]) -> str:
    return LIST_SEPARATOR.join(items)


def toggle_option(raw: str, option: str) -> str:
    """
    Toggle one option of a checkbox group.

    Newly selected options go to the end, so the encoded value lists
    options in the order they were selected, not declaration order.
    """
    selected = decode_list(raw)
    if option in selected:
        selected = [s for s in selected if s != option]
    else:
        selected.append(option)
    return encode_list(selected)


def encode_rating(field_id: str, stars: int) -> str:
    if isinstance(stars, bool) or not isinstance(stars, int) or not 1 <= stars <= RATING_STARS:
        raise FieldValueError(field_id, f"rating must be an integer from 1 to {RATING_STARS}, got {stars!r}")
    return str(stars)


def decode_rating(raw: str) -> int:
    """Current rating, 0 when unset or unreadable."""
    try:
        return int(raw)
    except ValueError:
        return 0


def star_states(raw: str) -> list[bool]:
    """Filled flag for each star; stars at or below the rating are filled."""
    rating = decode_rating(raw)
    return [i <= rating for i in range(1, RATING_STARS + 1)]


def slider_bounds(field: FormField) -> tuple[int | float, int | float, int | float]:
    """(min, max, step) for a slider, with defaults 0, 100 and 1."""
    low = field.min if field.min is not None else SLIDER_DEFAULT_MIN
    high = field.max if field.max is not None else SLIDER_DEFAULT_MAX
    step = field.step if field.step else SLIDER_DEFAULT_STEP
    return low, high, step


def slider_value(field: FormField, raw: str) -> int | float:
    """
    Numeric value a slider shows.

    An unset slider shows its minimum. This is display only; the stored
    value stays "" until the user moves the slider.
    """
    low, _, _ = slider_bounds(field)
    if raw == "":
        return low
    try:
        return parse_number(raw)
    except ValueError:
        return low


def snap_slider(field: FormField, value: int | float) -> str:
    """Clamp a slider position to its bounds and snap it to the step grid."""
    low, high, step = slider_bounds(field)
    clamped = min(max(value, low), high)
    steps = round((clamped - low) / step)
    snapped = min(low + steps * step, high)
    return format_number(round(snapped, 10))


def rank_order(field: FormField, raw: str) -> list[str]:
    """Current ranking; an untouched rank field keeps declaration order."""
    if raw == "":
        return field.option_list
    return decode_list(raw)


def move_item(order: Sequence[str], from_index: int, to_index: int) -> list[str]:
    """Move one entry of a ranking to a new position."""
    if not 0 <= from_index < len(order) or not 0 <= to_index < len(order):
        raise IndexError(f"cannot move item {from_index} to {to_index} in a list of {len(order)}")
    items = list(order)
    item = items.pop(from_index)
    items.insert(to_index, item)
    return items


def clean_number_text(text: str) -> str:
    """Keep only the characters a number input accepts."""
    return "".join(ch for ch in text if ch in NUMERIC_CHARS)


def is_compact_choice(options: Sequence[str]) -> bool:
    return all(len(option) <= COMPACT_OPTION_LENGTH for option in options)


def resolve_submitted_value(field: FormField, raw: str) -> str:
    """
    Value frozen into the submission for a field.

    Untouched controls that show a value submit what they show: a slider
    its minimum, a ranking its declaration order, a checkbox or switch
    "false". Every other value is submitted as stored.
    """
    if raw != "":
        return raw
    if field.type is FieldType.SLIDER:
        return format_number(slider_bounds(field)[0])
    if field.type is FieldType.RANK:
        return encode_list(field.option_list)
    if field.type in (FieldType.CHECKBOX, FieldType.TOGGLE):
        return FALSE
    return raw


def serialize_values(fields: Sequence[FormField], values: Mapping[str, str]) -> str:
    """Join "id: value" pairs in field declaration order."""
    return PAIR_SEPARATOR.join(f"{f.id}: {values.get(f.id, '')}" for f in fields)
