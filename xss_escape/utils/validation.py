"""Validation utilities for attribute names and URLs."""

import logging
from typing import Any

from xss_escape.config import settings
from xss_escape.utils.errors import InputTypeError, ValidationError
from xss_escape.utils.helpers import to_text

logger = logging.getLogger(__name__)

# Safe attributes, from https://github.com/cure53/DOMPurify/blob/main/src/attrs.js
# fmt: off
HTML_ATTRS_ALLOWED = frozenset(
    [
        "accept", "action", "align", "alt", "autocapitalize", "autocomplete",
        "autopictureinpicture", "autoplay", "background", "bgcolor", "border",
        "capture", "cellpadding", "cellspacing", "checked", "cite", "class",
        "clear", "color", "cols", "colspan", "controls", "controlslist",
        "coords", "crossorigin", "datetime", "decoding", "default", "dir",
        "disabled", "disablepictureinpicture", "disableremoteplayback",
        "download", "draggable", "enctype", "enterkeyhint", "face", "for",
        "headers", "height", "hidden", "high", "href", "hreflang", "id",
        "inputmode", "integrity", "ismap", "kind", "label", "lang", "list",
        "loading", "loop", "low", "max", "maxlength", "media", "method", "min",
        "minlength", "multiple", "muted", "name", "nonce", "noshade",
        "novalidate", "nowrap", "open", "optimum", "pattern", "placeholder",
        "playsinline", "popover", "popovertarget", "popovertargetaction",
        "poster", "preload", "pubdate", "radiogroup", "readonly", "rel",
        "required", "rev", "reversed", "role", "rows", "rowspan", "spellcheck",
        "scope", "selected", "shape", "size", "sizes", "span", "srclang",
        "start", "src", "srcset", "step", "style", "summary", "tabindex",
        "title", "translate", "type", "usemap", "valign", "value", "width",
        "wrap", "xmlns", "slot",
    ]
)
# fmt: on


def is_allowed_attribute(attr: str) -> bool:
    """Returns True if the attribute name is in the allow-list, False otherwise."""
    if not isinstance(attr, str):
        return False
    return attr.lower() in HTML_ATTRS_ALLOWED


def validate_attribute(attr: Any) -> str:
    """
    Normalize an attribute name and check it against the allow-list.

    Args:
        attr: The attribute name

    Returns:
        The lowercased attribute name

    Raises:
        InputTypeError: If the attribute name is not a string
        ValidationError: If the attribute is not in HTML_ATTRS_ALLOWED
    """
    if not isinstance(attr, str):
        raise InputTypeError("HTML attribute name must be a string")

    attr = attr.lower()
    if attr not in HTML_ATTRS_ALLOWED:
        logger.debug("Rejected HTML attribute: %r", attr[:64])
        raise ValidationError("HTML attribute is not allowed")
    return attr


def is_url_attribute(attr: str) -> bool:
    """Check if the attribute carries a URL that needs validation."""
    return attr in settings.URL_ATTRIBUTES


def validate_url(value: Any) -> bool:
    """
    Validate an untrusted URL for a src or href attribute.

    Only https URLs are allowed. The comparison is case-sensitive and the URL
    is not canonicalized, so apply additional validation depending on the
    use-case.

    Args:
        value: The URL (will be converted to string)

    Returns:
        True if the URL starts with https://

    Raises:
        InputTypeError: If the value cannot be converted to a string
        ValidationError: If the URL protocol is not HTTPS

    Example:
        validate_url("https://example.com") → True
        validate_url("javascript:alert(1)") → ValidationError
    """
    url = to_text(value)
    prefix = settings.URL_REQUIRED_PREFIX
    if url[: len(prefix)] != prefix:
        logger.debug("Rejected URL with prefix %r", url[: len(prefix)])
        raise ValidationError("URL is not HTTPS")
    return True
