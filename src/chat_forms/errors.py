"""
Exceptions for Chat Forms.

Schema problems are raised when a form is loaded, value problems when a
control is driven with input it cannot encode.
"""


class ChatFormsError(Exception):
    """Base class for all Chat Forms errors."""


class FormSchemaError(ChatFormsError, ValueError):
    """Raised when a form payload does not describe a renderable form."""

    def __init__(self, message: str, field_id: str | None = None):
        super().__init__(message)
        self.field_id = field_id


class FieldValueError(ChatFormsError, ValueError):
    """Raised when a control receives a value its field type cannot hold."""

    def __init__(self, field_id: str, message: str):
        super().__init__(f"Field '{field_id}': {message}")
        self.field_id = field_id


class FormSubmittedError(ChatFormsError):
    """Raised when input reaches a form that has already been submitted."""


class ChatNotFoundError(ChatFormsError, LookupError):
    """Raised when a chat id is not present in the store."""


class ChatOwnershipError(ChatFormsError, PermissionError):
    """Raised when a user writes to a chat owned by someone else."""
