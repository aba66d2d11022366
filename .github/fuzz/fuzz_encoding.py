#!/usr/bin/env python3
"""Atheris fuzz targets for the encoder core and context functions."""

import sys
import os
import json
import atheris

# Add project root to path
project_root = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
sys.path.insert(0, project_root)

with atheris.instrument_imports():
    from xss_escape.utils.errors import SerializationError
    from xss_escape.utils.safe_encoding import (
        EscapeFormat,
        encode,
        html_body,
        is_safe_code_point,
        json_in_html,
    )

FORMATS = list(EscapeFormat)
SYNTAX_CHARACTERS = {
    EscapeFormat.HTML: "&#;",
    EscapeFormat.UNICODE: "\\{}",
    EscapeFormat.CSS: "\\",
    EscapeFormat.URL: "%",
}


def TestEncode(data):
    """Fuzz test for encode with every escape format."""
    fdp = atheris.FuzzedDataProvider(data)
    fmt = FORMATS[fdp.ConsumeIntInRange(0, len(FORMATS) - 1)]
    text = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 512))

    result = encode(text, fmt)
    assert isinstance(result, str), "encode must return a string"
    for char in result:
        assert (
            is_safe_code_point(ord(char)) or char in SYNTAX_CHARACTERS[fmt]
        ), f"encode leaked {char!r} for {fmt.value}"


def TestHtmlBody(data):
    """Fuzz test for html_body function."""
    fdp = atheris.FuzzedDataProvider(data)
    text = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 512))

    result = html_body(text)
    for char in "<>\"'":
        assert char not in result, f"html_body leaked {char!r}"


def TestJsonInHtml(data):
    """Fuzz test for json_in_html function."""
    fdp = atheris.FuzzedDataProvider(data)

    # Generate a random dictionary
    dict_size = fdp.ConsumeIntInRange(0, 10)
    test_dict = {}
    for _ in range(dict_size):
        key = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(1, 50))
        if fdp.ConsumeBool():
            test_dict[key] = fdp.ConsumeUnicodeNoSurrogates(fdp.ConsumeIntInRange(0, 100))
        else:
            test_dict[key] = fdp.ConsumeRegularFloat()

    try:
        result = json_in_html(test_dict)
    except SerializationError:
        # NaN and Infinity have no JSON form
        return

    for char in "<>&'":
        assert char not in result, f"json_in_html leaked {char!r}"
    assert json.loads(result) == test_dict, "json_in_html must round-trip"


def TestAll(data):
    """Dispatch to one target based on the first byte."""
    if not data:
        return
    targets = (TestEncode, TestHtmlBody, TestJsonInHtml)
    targets[data[0] % len(targets)](data[1:])


def main():
    """Main fuzzing entry point."""
    atheris.Setup(sys.argv, TestAll)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
