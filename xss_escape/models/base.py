"""Result models returned by the context dispatch service."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from xss_escape.utils.errors import (
    EscapeError,
    InputTypeError,
    SerializationError,
    UnsupportedFormatError,
    ValidationError,
)


class ErrorKind(str, Enum):
    """Kinds of failure an escaping call can report."""

    INPUT_TYPE = "input_type"
    VALIDATION = "validation"
    SERIALIZATION = "serialization"
    UNSUPPORTED_FORMAT = "unsupported_format"


ERROR_CLASSES = {
    ErrorKind.INPUT_TYPE: InputTypeError,
    ErrorKind.VALIDATION: ValidationError,
    ErrorKind.SERIALIZATION: SerializationError,
    ErrorKind.UNSUPPORTED_FORMAT: UnsupportedFormatError,
}


def error_kind_for(error: EscapeError) -> ErrorKind:
    """Map an exception instance to its ErrorKind."""
    for kind, error_class in ERROR_CLASSES.items():
        if isinstance(error, error_class):
            return kind
    raise TypeError(f"No error kind for {type(error).__name__}")


class BaseResult(BaseModel):
    """Base result model with common fields."""

    status: str
    message: Optional[str] = None


class EscapeResult(BaseResult):
    """Outcome of escaping one value for one context.

    On success ``value`` holds the escaped text. On failure ``value`` is None
    and ``error`` names the kind of failure; the escaped text is never
    partially filled in.
    """

    context: str
    value: Optional[str] = None
    error: Optional[ErrorKind] = None

    @classmethod
    def success(cls, context: str, value: str) -> "EscapeResult":
        """Build a successful result."""
        return cls(status="success", context=context, value=value)

    @classmethod
    def failure(cls, context: str, error: EscapeError) -> "EscapeResult":
        """Build a failed result from a raised error."""
        return cls(
            status="error",
            context=context,
            error=error_kind_for(error),
            message=str(error),
        )

    @property
    def ok(self) -> bool:
        """True when the value was escaped."""
        return self.status == "success"

    def unwrap(self) -> str:
        """Return the escaped value or raise the error it carries."""
        if self.ok and self.value is not None:
            return self.value
        error_class = ERROR_CLASSES.get(self.error, EscapeError)
        raise error_class(self.message or "Value could not be escaped")
