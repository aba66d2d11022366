"""Fuzzing tests for attribute and URL validation using Hypothesis."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from hypothesis import given, strategies as st, assume, settings
from hypothesis import HealthCheck

from xss_escape.utils.errors import EscapeError, InputTypeError, ValidationError
from xss_escape.utils.safe_encoding import html_attr
from xss_escape.utils.validation import (
    HTML_ATTRS_ALLOWED,
    is_allowed_attribute,
    validate_attribute,
    validate_url,
)


class TestValidationFuzzing:
    """Fuzzing tests for validation utility functions."""

    @given(st.text())
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_validate_url_only_raises_validation_error(self, url_input):
        """Test that validate_url returns True or raises ValidationError."""
        try:
            assert validate_url(url_input) is True
            assert url_input.startswith("https://")
        except ValidationError:
            assert not url_input.startswith("https://")
        except Exception as e:
            raise AssertionError(
                f"validate_url crashed on input: {repr(url_input)}"
            ) from e

    @given(st.text())
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_validate_url_accepts_https_prefix(self, rest):
        """Test that any text after https:// is accepted."""
        assert validate_url("https://" + rest) is True

    @given(
        st.sampled_from(
            [
                "http://example.com",
                "HTTPS://example.com",
                "Https://example.com",
                "//example.com",
                "javascript:alert(1)",
                "data:text/html,<script>alert(1)</script>",
                " https://example.com",
                "https:/example.com",
                "",
            ]
        )
    )
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_validate_url_rejects_unsafe_schemes(self, url):
        """Test that validate_url rejects everything without the exact prefix."""
        with pytest.raises(ValidationError, match="URL is not HTTPS"):
            validate_url(url)

    @given(
        st.one_of(
            st.lists(st.text()),
            st.dictionaries(st.text(), st.text()),
            st.booleans(),
            st.binary(),
        )
    )
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_validate_url_rejects_wrong_types(self, wrong_type_input):
        """Test that validate_url rejects values that are not text."""
        with pytest.raises(InputTypeError):
            validate_url(wrong_type_input)

    @given(st.sampled_from(sorted(HTML_ATTRS_ALLOWED)))
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_allowed_attributes_accept_any_case(self, attr):
        """Test that allow-listed names match case-insensitively."""
        assert is_allowed_attribute(attr.upper())
        assert validate_attribute(attr.title()) == attr

    @given(st.text())
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_unknown_attributes_are_rejected(self, attr):
        """Test that names outside the allow-list are never accepted."""
        assume(attr.lower() not in HTML_ATTRS_ALLOWED)
        assert is_allowed_attribute(attr) is False
        with pytest.raises(ValidationError, match="HTML attribute is not allowed"):
            html_attr(attr, "value")

    @given(
        st.sampled_from(
            [
                "onclick",
                "onerror",
                "onload",
                "onmouseover",
                "formaction",
                "srcdoc",
                "xlink:href",
                "style ",
                " href",
            ]
        )
    )
    @settings(suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_dangerous_attributes_are_rejected(self, attr):
        """Test that event handlers and look-alike names are rejected."""
        with pytest.raises(ValidationError):
            html_attr(attr, "x")

    @given(st.sampled_from(sorted(HTML_ATTRS_ALLOWED - {"href", "src"})), st.text())
    @settings(
        suppress_health_check=[HealthCheck.function_scoped_fixture],
        max_examples=100,
    )
    def test_html_attr_fragment_shape(self, attr, value):
        """Test that wrapped output is a single quoted attribute."""
        fragment = html_attr(attr, value)
        assert fragment.startswith(f' {attr}="')
        assert fragment.endswith('"')
        assert '"' not in fragment[len(attr) + 3 : -1]
        assert "<" not in fragment and ">" not in fragment

    @given(st.sampled_from(["href", "src", "HREF", "Src"]), st.text())
    @settings(
        suppress_health_check=[HealthCheck.function_scoped_fixture],
        max_examples=100,
    )
    def test_url_attributes_require_https(self, attr, value):
        """Test that href and src go through URL validation."""
        try:
            html_attr(attr, value)
            assert value.startswith("https://")
        except ValidationError:
            assert not value.startswith("https://")
        except EscapeError as e:
            raise AssertionError(f"Unexpected error for {repr(value)}") from e
