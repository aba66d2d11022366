"""Typed exceptions raised by the escaping functions."""


class EscapeError(ValueError):
    """Base class for every error raised by the library."""


class InputTypeError(EscapeError, TypeError):
    """Raised when a value cannot be converted to text."""


class ValidationError(EscapeError):
    """Raised when an attribute name or URL is not allowed."""


class SerializationError(EscapeError):
    """Raised when a value cannot be represented as JSON."""


class UnsupportedFormatError(EscapeError):
    """Raised when no escape syntax exists for the requested format."""
