"""
Form schema models.

These models are the wire contract between the model-side tool call that
describes a form and the client that renders it. Wire names are camelCase
(``accentColor``, ``submitLabel``); Python code uses the snake_case names.
"""

from collections import Counter
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from chat_forms.errors import FormSchemaError


class FieldType(str, Enum):
    """Closed set of field types a form may declare."""

    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"
    TEXTAREA = "textarea"
    PASSWORD = "password"
    CHOICE = "choice"
    SELECT = "select"
    RATING = "rating"
    RANK = "rank"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    TEL = "tel"
    URL = "url"
    TOGGLE = "toggle"
    SLIDER = "slider"
    CHECKBOX = "checkbox"
    CHECKBOX_GROUP = "checkboxGroup"


class IconName(str, Enum):
    """Header icons."""

    SEND = "send"
    MESSAGE = "message"
    CARD = "card"
    HEADPHONES = "headphones"
    CLIPBOARD = "clipboard"
    PARTY = "party"
    STAR = "star"
    LOCK = "lock"
    CALENDAR = "calendar"
    USER = "user"
    SETTINGS = "settings"
    SEARCH = "search"
    HEART = "heart"
    BELL = "bell"
    NONE = "none"


class AccentColor(str, Enum):
    """Accent colors for the form theme."""

    BLUE = "blue"
    AMBER = "amber"
    EMERALD = "emerald"
    RED = "red"
    INDIGO = "indigo"
    PURPLE = "purple"
    PINK = "pink"
    ZINC = "zinc"


# Types whose control is built from the options list
OPTION_TYPES = frozenset({
    FieldType.CHOICE,
    FieldType.SELECT,
    FieldType.CHECKBOX_GROUP,
    FieldType.RANK,
})

# Types whose value is a comma-joined list of options
LIST_VALUE_TYPES = frozenset({
    FieldType.CHECKBOX_GROUP,
    FieldType.RANK,
})

LIST_SEPARATOR = ","

SKIP_RENDER_KEY = "__skipRender"


class FormField(BaseModel):
    """A single declared input."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Short field key")
    label: str = Field(default="", description="Label shown above the input")
    type: FieldType = Field(..., description="Input type")
    options: list[str] | None = Field(
        default=None,
        description="Options for choice, select, checkboxGroup or rank fields",
    )
    placeholder: str | None = Field(default=None, description="Placeholder hint text")
    min: int | float | None = Field(default=None, description="Minimum value for number or slider fields")
    max: int | float | None = Field(default=None, description="Maximum value for number or slider fields")
    step: int | float | None = Field(default=None, description="Step size for number or slider fields")

    @model_validator(mode="after")
    def _require_options(self) -> "FormField":
        if self.type in OPTION_TYPES and self.options is None:
            raise FormSchemaError(
                f"Field '{self.id}' of type '{self.type.value}' requires options",
                field_id=self.id,
            )
        if self.type in LIST_VALUE_TYPES:
            for option in self.options or []:
                if not option or LIST_SEPARATOR in option:
                    raise FormSchemaError(
                        f"Field '{self.id}' of type '{self.type.value}' has option {option!r}; "
                        f"options must be non-empty and must not contain '{LIST_SEPARATOR}'",
                        field_id=self.id,
                    )
        return self

    @property
    def option_list(self) -> list[str]:
        """Options as a list, empty when none were declared."""
        return list(self.options or [])


class FormSchema(BaseModel):
    """
    One renderable form.

    Immutable once built. Optional presentation keys that arrive as null
    or are missing take their defaults, so consumers can rely on all of
    them being present.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(default="", description="Form header title")
    icon: IconName = Field(default=IconName.NONE, description="Icon shown in the header")
    accent_color: AccentColor = Field(
        default=AccentColor.BLUE,
        alias="accentColor",
        description="Accent color for the form theme",
    )
    fields: list[FormField] = Field(..., description="Ordered form fields")
    submit_label: str = Field(
        default="Submit",
        alias="submitLabel",
        description="Button text, e.g. Send, Pay, Submit",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_null_defaults(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            keys = ("title", "icon", "accentColor", "accent_color", "submitLabel", "submit_label")
            return {k: v for k, v in data.items() if not (k in keys and v is None)}
        return data

    @model_validator(mode="after")
    def _require_unique_ids(self) -> "FormSchema":
        counts = Counter(f.id for f in self.fields)
        duplicates = [field_id for field_id, n in counts.items() if n > 1]
        if duplicates:
            raise FormSchemaError(
                f"Duplicate field id '{duplicates[0]}'",
                field_id=duplicates[0],
            )
        return self

    @property
    def field_ids(self) -> list[str]:
        return [f.id for f in self.fields]

    def field(self, field_id: str) -> FormField:
        """Look up a field by id."""
        for f in self.fields:
            if f.id == field_id:
                return f
        raise KeyError(field_id)

    def to_payload(self) -> dict[str, Any]:
        """Export the camelCase payload with every default filled in."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def skip_render() -> dict[str, Any]:
    """Sentinel tool result telling the client to render nothing."""
    return {SKIP_RENDER_KEY: True}


def is_skip_render(result: Any) -> bool:
    """Check whether a tool result is the skip sentinel."""
    return isinstance(result, Mapping) and result.get(SKIP_RENDER_KEY) is True


def _field_id_at(payload: Any, index: Any) -> str | None:
    if not isinstance(payload, Mapping) or not isinstance(index, int):
        return None
    fields = payload.get("fields")
    if not isinstance(fields, list) or index >= len(fields):
        return None
    item = fields[index]
    if isinstance(item, Mapping) and isinstance(item.get("id"), str):
        return item["id"]
    return f"#{index}"


def _schema_error(exc: ValidationError, payload: Any) -> FormSchemaError:
    error = exc.errors()[0]
    original = (error.get("ctx") or {}).get("error")
    if isinstance(original, FormSchemaError):
        return original

    loc = error.get("loc", ())
    field_id = None
    if len(loc) >= 2 and loc[0] == "fields":
        field_id = _field_id_at(payload, loc[1])

    where = ".".join(str(part) for part in loc) or "form"
    if field_id is not None:
        message = f"Invalid field '{field_id}' ({where}): {error['msg']}"
    else:
        message = f"Invalid form ({where}): {error['msg']}"
    return FormSchemaError(message, field_id=field_id)


def load_form_schema(payload: "FormSchema | Mapping[str, Any]") -> FormSchema:
    """
    Validate a raw form payload.

    Args:
        payload: A tool-call payload dict, or an already built FormSchema.

    Returns:
        The validated FormSchema.

    Raises:
        FormSchemaError: If the payload is malformed. The error carries the
            id of the offending field when one can be identified.
    """
    if isinstance(payload, FormSchema):
        return payload
    try:
        return FormSchema.model_validate(payload)
    except ValidationError as exc:
        raise _schema_error(exc, payload) from exc
