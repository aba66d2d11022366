r"""
Safe encoding utilities for preventing XSS in untrusted output.

This module implements the per-context rules of the OWASP Cross Site
Scripting Prevention Cheat Sheet:
- HTML body text (entity-encode & < > " ')
- HTML attributes (allow-listed names, &#xHH; for every non-alphanumeric)
- JavaScript variables (\u{HH} unicode escapes)
- CSS values (\HHHHHH zero-padded escapes)
- URL parameters (%HH escapes)
- JSON placed inside a hidden HTML element

Alphanumeric ASCII characters and every code point from U+0100 upwards are
passed through unchanged; everything else is escaped.

Usage:
    from xss_escape.utils.safe_encoding import html_body, html_attr, js_var

    # For text inside an element:
    f"<span>{html_body(username)}</span>"

    # For attributes (name is checked against the allow-list):
    f"<a{html_attr('href', profile_url)}>profile</a>"

    # For quoted JavaScript strings:
    f"<script>var name = '{js_var(username)}';</script>"

    # For JSON read back with JSON.parse(el.textContent):
    f"<div id='data' hidden>{json_in_html(payload)}</div>"
"""

import html
import json
import logging
import re
import warnings
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from pydantic import BaseModel

from xss_escape.config import settings
from xss_escape.utils.errors import SerializationError, UnsupportedFormatError
from xss_escape.utils.helpers import to_text
from xss_escape.utils.validation import (
    is_url_attribute,
    validate_attribute,
    validate_url,
)

logger = logging.getLogger(__name__)


class EscapeFormat(str, Enum):
    """Escape syntax applied to code points outside the safe class."""

    HTML = "html"
    UNICODE = "unicode"
    CSS = "css"
    URL = "url"


def _html_entity(hex_value: str) -> str:
    return "&#x" + hex_value + ";"


def _unicode_escape(hex_value: str) -> str:
    return "\\u{" + hex_value + "}"


def _css_escape(hex_value: str) -> str:
    return "\\" + hex_value.zfill(settings.CSS_ESCAPE_WIDTH)


def _percent_escape(hex_value: str) -> str:
    return "%" + hex_value


ESCAPERS: Dict[EscapeFormat, Callable[[str], str]] = {
    EscapeFormat.HTML: _html_entity,
    EscapeFormat.UNICODE: _unicode_escape,
    EscapeFormat.CSS: _css_escape,
    EscapeFormat.URL: _percent_escape,
}

# Matches a whole JSON escape sequence or a character that needs hex-escaping
_JSON_HTML_UNSAFE = re.compile(r"\\.|[&<>'/]")
_JSON_HTML_REPLACEMENTS = {
    "&": "\\u0026",
    "<": "\\u003C",
    ">": "\\u003E",
    "'": "\\u0027",
    '\\"': "\\u0022",
    "/": "\\/",
}


def is_safe_code_point(code_point: int) -> bool:
    """Check if a code point is passed through without escaping."""
    return (
        code_point >= settings.SAFE_CODE_POINT_FLOOR
        or 48 <= code_point <= 57  # 0-9
        or 65 <= code_point <= 90  # A-Z
        or 97 <= code_point <= 122  # a-z
    )


def _resolve_format(fmt: Union[EscapeFormat, str]) -> Optional[EscapeFormat]:
    """Look up the escape format, or None when legacy formats are enabled."""
    try:
        return EscapeFormat(fmt)
    except ValueError:
        if not settings.LEGACY_FORMATS:
            raise UnsupportedFormatError(
                f"Unsupported escape format: {fmt!r}"
            ) from None

    logger.warning("Unsupported escape format %r, dropping unsafe characters", fmt)
    warnings.warn(
        "Unknown escape formats are deprecated and will raise UnsupportedFormatError",
        DeprecationWarning,
        stacklevel=3,
    )
    return None


def encode(value: Any, fmt: Union[EscapeFormat, str]) -> str:
    r"""
    Escape every unsafe code point of a value with the given syntax.

    The value is handled as a sequence of code points, never bytes. Unsafe
    code points are rendered from their uppercase hexadecimal value:

        html     &#x3C;
        unicode  \u{3C}
        css      \00003C
        url      %3C

    The url format writes the code point value, not its UTF-8 bytes, and does
    not pad single hex digits (a tab becomes %9).

    Args:
        value: The value to encode (will be converted to string)
        fmt: One of EscapeFormat or its string value

    Returns:
        The encoded string

    Raises:
        InputTypeError: If the value cannot be converted to a string
        UnsupportedFormatError: If fmt is not a known format
    """
    text = to_text(value)
    escaper = ESCAPERS.get(_resolve_format(fmt))

    encoded = []
    for char in text:
        code_point = ord(char)
        if is_safe_code_point(code_point):
            encoded.append(char)
        elif escaper is not None:
            encoded.append(escaper(format(code_point, "X")))
    return "".join(encoded)


def html_body(value: Any) -> str:
    """
    Escape text placed in the HTML body.

    Context: <span>UNTRUSTED DATA</span>

    Converts: & < > " ' to their HTML entity equivalents with html.escape,
    which replaces the ampersand first so entities are not escaped twice.

    Args:
        value: The value to escape (will be converted to string)

    Returns:
        HTML-escaped string safe for display

    Example:
        html_body("<script>alert('xss')</script>")
        → "&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;"
    """
    return html.escape(to_text(value), quote=True)


def html_attr_value(value: Any) -> str:
    """
    Escape a value for an HTML attribute.

    Context: <div class="class1 class2 UNTRUSTED DATA">

    Every character except alphanumerics is written as an &#xHH; entity,
    including spaces.
    """
    return encode(value, EscapeFormat.HTML)


def html_attr(attr_name: str, value: Any, wrap: bool = True) -> str:
    """
    Escape a value for a named, allow-listed HTML attribute.

    Context: <input type="text" name="field_name" value="UNTRUSTED DATA">

    href and src values must also pass validate_url.

    Args:
        attr_name: The attribute name, matched case-insensitively
        value: The value to escape (will be converted to string)
        wrap: Return ' name="value"' instead of the bare encoded value

    Returns:
        The attribute fragment, or only the encoded value if wrap is False

    Raises:
        ValidationError: If the attribute is not allowed or the URL is not HTTPS
        InputTypeError: If the value cannot be converted to a string

    Example:
        f"<input{html_attr('value', query)}>"
    """
    attr = validate_attribute(attr_name)
    text = to_text(value)
    if is_url_attribute(attr):
        validate_url(text)

    encoded = html_attr_value(text)
    return f' {attr}="{encoded}"' if wrap else encoded


def js_var(value: Any) -> str:
    """
    Escape a value for a quoted JavaScript variable.

    Context: <script>var someValue='UNTRUSTED DATA';</script>

    The result must be placed inside quotes by the caller. Use json_in_html
    for JSON data instead.
    """
    return encode(value, EscapeFormat.UNICODE)


def css_value(value: Any) -> str:
    """
    Escape a CSS property value.

    Context: <div style="width: UNTRUSTED DATA;">
    """
    return encode(value, EscapeFormat.CSS)


def url_param(value: Any) -> str:
    """
    Escape a URL query parameter value.

    Context: <a href="/site/search?value=UNTRUSTED DATA">link</a>

    When the URL goes into an href or another attribute, also encode it with
    html_attr.
    """
    return encode(value, EscapeFormat.URL)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _hex_escape_json(match: "re.Match[str]") -> str:
    token = match.group(0)
    return _JSON_HTML_REPLACEMENTS.get(token, token)


def json_in_html(value: Any) -> str:
    """
    Serialize a value to JSON that is safe as text inside an HTML element.

    Context: <div id="data" hidden>UNTRUSTED JSON</div>
    read back with JSON.parse(document.getElementById('data').textContent)

    & < > ' and quotes inside strings are written as \\uXXXX escapes, slashes
    as \\/ and non-ASCII characters as \\uXXXX.

    Args:
        value: Any JSON-serializable value; pydantic models are dumped first

    Returns:
        Compact JSON text

    Raises:
        SerializationError: If the value contains cycles, NaN/Infinity or
            unsupported types
    """
    try:
        encoded = json.dumps(
            value,
            ensure_ascii=True,
            allow_nan=False,
            separators=settings.JSON_SEPARATORS,
            default=_json_default,
        )
    except (TypeError, ValueError, RecursionError) as e:
        logger.debug("JSON serialization failed: %s", str(e))
        raise SerializationError(f"Value cannot be encoded as JSON: {e}") from e

    return _JSON_HTML_UNSAFE.sub(_hex_escape_json, encoded) or settings.JSON_FALLBACK
