#!/usr/bin/env python3
"""Atheris fuzz targets for validation functions."""

import sys
import os
import atheris

# Add project root to path
project_root = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
sys.path.insert(0, project_root)

with atheris.instrument_imports():
    from xss_escape.utils.errors import ValidationError
    from xss_escape.utils.safe_encoding import html_attr
    from xss_escape.utils.validation import HTML_ATTRS_ALLOWED, validate_url


def TestValidateUrl(data):
    """Fuzz test for validate_url function."""
    fdp = atheris.FuzzedDataProvider(data)
    url = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 256))

    try:
        result = validate_url(url)
    except ValidationError:
        assert not url.startswith("https://"), "validate_url rejected an https URL"
        return
    assert result is True, "validate_url must return True"
    assert url.startswith("https://"), "validate_url accepted a non-https URL"


def TestHtmlAttr(data):
    """Fuzz test for html_attr function."""
    fdp = atheris.FuzzedDataProvider(data)
    attr = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 32))
    value = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 256))

    try:
        result = html_attr(attr, value)
    except ValidationError:
        return
    assert attr.lower() in HTML_ATTRS_ALLOWED, "html_attr accepted an unknown attribute"
    assert result.count('"') == 2, "html_attr must emit exactly one quoted value"


def TestAll(data):
    """Dispatch to one target based on the first byte."""
    if not data:
        return
    targets = (TestValidateUrl, TestHtmlAttr)
    targets[data[0] % len(targets)](data[1:])


def main():
    """Main fuzzing entry point."""
    atheris.Setup(sys.argv, TestAll)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
