"""General utility functions for the library."""

# Standard library imports
import logging
from typing import Any

# Local imports
from xss_escape.utils.errors import InputTypeError

logger = logging.getLogger(__name__)

NON_TEXT_TYPES = (bool, bytes, bytearray, memoryview)


def is_stringable(value: Any) -> bool:
    """Check if the value's type defines its own text conversion."""
    return type(value).__str__ is not object.__str__


def to_text(value: Any) -> str:
    """
    Convert a value to its canonical text form.

    Accepts text, integers, floats, None (converted to an empty string) and
    objects whose type defines ``__str__``. Booleans, byte strings and
    containers that only inherit ``object.__str__`` are rejected.

    Args:
        value: The value to convert

    Returns:
        The text form of the value

    Raises:
        InputTypeError: If the value cannot be converted to text

    Example:
        to_text(None) → ""
        to_text(42) → "42"
    """
    if value is None:
        return ""
    if isinstance(value, str):
        # The string's own value, even when a subclass overrides __str__
        return str.__str__(value)
    if isinstance(value, NON_TEXT_TYPES):
        logger.debug("Rejected non-text value of type %s", type(value).__name__)
        raise InputTypeError("Variable must be a string or convertible to a string")
    if isinstance(value, (int, float)) or is_stringable(value):
        try:
            return str(value)
        except TypeError as e:
            logger.debug("__str__ of %s did not return text", type(value).__name__)
            raise InputTypeError(
                "Variable must be a string or convertible to a string"
            ) from e

    logger.debug("Rejected non-text value of type %s", type(value).__name__)
    raise InputTypeError("Variable must be a string or convertible to a string")


def string_to_boolean(value: str) -> bool:
    """Convert a string to a boolean value."""
    return value.lower() in ("true", "t", "yes", "y", "1")
