"""Contextual output encoding following the OWASP XSS Prevention Cheat Sheet."""

import logging

from xss_escape.config import settings
from xss_escape.models.base import EscapeResult, ErrorKind
from xss_escape.services.escaping import EscapeContext, escape_for, escape_many
from xss_escape.services.templating import create_environment, install_filters
from xss_escape.utils.errors import (
    EscapeError,
    InputTypeError,
    SerializationError,
    UnsupportedFormatError,
    ValidationError,
)
from xss_escape.utils.helpers import to_text
from xss_escape.utils.safe_encoding import (
    EscapeFormat,
    css_value,
    encode,
    html_attr,
    html_attr_value,
    html_body,
    js_var,
    json_in_html,
    url_param,
)
from xss_escape.utils.validation import (
    HTML_ATTRS_ALLOWED,
    is_allowed_attribute,
    validate_url,
)

__version__ = "1.0.0"

# Configure logging
logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())
_level = logging.getLevelName(settings.LOG_LEVEL)
if isinstance(_level, int):
    logger.setLevel(_level)

__all__ = [
    "HTML_ATTRS_ALLOWED",
    "EscapeContext",
    "EscapeError",
    "EscapeFormat",
    "EscapeResult",
    "ErrorKind",
    "InputTypeError",
    "SerializationError",
    "UnsupportedFormatError",
    "ValidationError",
    "create_environment",
    "css_value",
    "encode",
    "escape_for",
    "escape_many",
    "html_attr",
    "html_attr_value",
    "html_body",
    "install_filters",
    "is_allowed_attribute",
    "js_var",
    "json_in_html",
    "to_text",
    "url_param",
    "validate_url",
]
