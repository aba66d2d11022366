"""Configuration settings for the library."""

import os

from xss_escape.utils.helpers import string_to_boolean

# Environment Variables
LOG_LEVEL: str = os.environ.get("XSS_ESCAPE_LOG_LEVEL", "WARNING").upper()
LEGACY_FORMATS: bool = string_to_boolean(
    os.environ.get("XSS_ESCAPE_LEGACY_FORMATS", "false").strip()
)

# URL Validation
URL_REQUIRED_PREFIX: str = "https://"
URL_ATTRIBUTES = ("href", "src")

# Encoding
CSS_ESCAPE_WIDTH: int = 6
SAFE_CODE_POINT_FLOOR: int = 256

# JSON in HTML
JSON_FALLBACK: str = "[]"
JSON_SEPARATORS = (",", ":")
