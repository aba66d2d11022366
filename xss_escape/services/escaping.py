"""Escape values by context name and report the outcome as a result model."""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Tuple, Union

from xss_escape.models.base import EscapeResult
from xss_escape.utils.errors import EscapeError, UnsupportedFormatError
from xss_escape.utils.safe_encoding import (
    css_value,
    html_attr,
    html_attr_value,
    html_body,
    js_var,
    json_in_html,
    url_param,
)
from xss_escape.utils.validation import validate_url

logger = logging.getLogger(__name__)


class EscapeContext(str, Enum):
    """Output sinks untrusted data can be written to."""

    HTML_BODY = "html_body"
    HTML_ATTR_VALUE = "html_attr_value"
    HTML_ATTR = "html_attr"
    URL = "url"
    JS_VAR = "js_var"
    CSS_VALUE = "css_value"
    URL_PARAM = "url_param"
    JSON_IN_HTML = "json_in_html"


def _html_attr(value: Any, attr_name: str = "", wrap: bool = True) -> str:
    return html_attr(attr_name, value, wrap=wrap)


def _url(value: Any) -> str:
    # A validated URL is written as an attribute value
    validate_url(value)
    return html_attr_value(value)


HANDLERS: Dict[EscapeContext, Callable[..., str]] = {
    EscapeContext.HTML_BODY: html_body,
    EscapeContext.HTML_ATTR_VALUE: html_attr_value,
    EscapeContext.HTML_ATTR: _html_attr,
    EscapeContext.URL: _url,
    EscapeContext.JS_VAR: js_var,
    EscapeContext.CSS_VALUE: css_value,
    EscapeContext.URL_PARAM: url_param,
    EscapeContext.JSON_IN_HTML: json_in_html,
}

# Options each handler accepts; anything else is dropped
HANDLER_OPTIONS: Dict[EscapeContext, Tuple[str, ...]] = {
    EscapeContext.HTML_ATTR: ("attr_name", "wrap"),
}


def escape_for(
    context: Union[EscapeContext, str], value: Any, **options: Any
) -> EscapeResult:
    """
    Escape a value for the named context without raising.

    Args:
        context: An EscapeContext or its string value
        value: The untrusted value
        **options: attr_name and wrap for html_attr; options a context does
            not use are ignored

    Returns:
        EscapeResult with the escaped value, or the error kind and message

    Example:
        result = escape_for("html_attr", user_title, attr_name="title")
        if not result.ok:
            ...  # do not render the value
    """
    try:
        escape_context = EscapeContext(context)
    except ValueError:
        logger.debug("Unknown escape context: %r", context)
        return EscapeResult.failure(
            str(context), UnsupportedFormatError(f"Unknown escape context: {context!r}")
        )

    accepted = HANDLER_OPTIONS.get(escape_context, ())
    ignored = sorted(name for name in options if name not in accepted)
    if ignored:
        logger.debug("Ignoring options for %s: %s", escape_context.value, ignored)
    handler_options = {k: v for k, v in options.items() if k in accepted}

    try:
        escaped = HANDLERS[escape_context](value, **handler_options)
    except EscapeError as e:
        logger.debug("Escaping for %s failed: %s", escape_context.value, str(e))
        return EscapeResult.failure(escape_context.value, e)

    return EscapeResult.success(escape_context.value, escaped)


def escape_many(
    context: Union[EscapeContext, str], values: Iterable[Any], **options: Any
) -> List[EscapeResult]:
    """Escape each value for the same context."""
    return [escape_for(context, value, **options) for value in values]
