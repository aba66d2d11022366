import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import BaseModel

from xss_escape.models.base import ErrorKind, EscapeResult
from xss_escape.services.escaping import EscapeContext, escape_for, escape_many
from xss_escape.utils.errors import (
    InputTypeError,
    SerializationError,
    UnsupportedFormatError,
    ValidationError,
)
from xss_escape.utils.safe_encoding import json_in_html


class Profile(BaseModel):
    name: str
    homepage: str


class EscapingServiceTestCase(unittest.TestCase):
    """
    Tests for escape_for and the EscapeResult model.
    """

    def test_success_result(self):
        result = escape_for("html_body", "<b>")
        self.assertTrue(result.ok)
        self.assertEqual(result.status, "success")
        self.assertEqual(result.context, "html_body")
        self.assertEqual(result.value, "&lt;b&gt;")
        self.assertIsNone(result.error)
        self.assertEqual(result.unwrap(), "&lt;b&gt;")

    def test_every_context_dispatches(self):
        expected = {
            EscapeContext.HTML_BODY: "a&amp;b",
            EscapeContext.HTML_ATTR_VALUE: "a&#x26;b",
            EscapeContext.JS_VAR: "a\\u{26}b",
            EscapeContext.CSS_VALUE: "a\\000026b",
            EscapeContext.URL_PARAM: "a%26b",
            EscapeContext.JSON_IN_HTML: '"a\\u0026b"',
        }
        for context, value in expected.items():
            with self.subTest(context=context):
                self.assertEqual(escape_for(context, "a&b").unwrap(), value)

    def test_html_attr_options(self):
        result = escape_for("html_attr", "x y", attr_name="Title")
        self.assertEqual(result.value, ' title="x&#x20;y"')
        result = escape_for(EscapeContext.HTML_ATTR, "x", attr_name="id", wrap=False)
        self.assertEqual(result.value, "x")

    def test_url_context_validates_then_encodes(self):
        result = escape_for("url", "https://a.io")
        self.assertEqual(result.value, "https&#x3A;&#x2F;&#x2F;a&#x2E;io")
        result = escape_for("url", "http://a.io")
        self.assertFalse(result.ok)
        self.assertEqual(result.error, ErrorKind.VALIDATION)
        self.assertEqual(result.message, "URL is not HTTPS")

    def test_error_kinds(self):
        cases = [
            (escape_for("html_attr", "x", attr_name="onclick"), ErrorKind.VALIDATION),
            (escape_for("js_var", [1, 2]), ErrorKind.INPUT_TYPE),
            (escape_for("json_in_html", {"a": object()}), ErrorKind.SERIALIZATION),
            (escape_for("sql", "x"), ErrorKind.UNSUPPORTED_FORMAT),
        ]
        for result, kind in cases:
            with self.subTest(kind=kind):
                self.assertFalse(result.ok)
                self.assertEqual(result.status, "error")
                self.assertEqual(result.error, kind)
                self.assertIsNone(result.value)

    def test_unwrap_raises_matching_error(self):
        cases = [
            (escape_for("html_attr", "x", attr_name="onclick"), ValidationError),
            (escape_for("css_value", b"x"), InputTypeError),
            (escape_for("json_in_html", float("nan")), SerializationError),
            (escape_for("sql", "x"), UnsupportedFormatError),
        ]
        for result, error_class in cases:
            with self.subTest(error_class=error_class):
                with self.assertRaises(error_class):
                    result.unwrap()

    def test_unused_options_are_ignored(self):
        """
        Options a context does not take must not turn into a raised TypeError.
        """
        result = escape_for("html_body", "<x>", attr_name="title", wrap=False)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, "&lt;x&gt;")
        result = escape_for("json_in_html", [1], unknown=True)
        self.assertEqual(result.value, "[1]")
        results = escape_many("css_value", ["a", "b c"], attr_name="id")
        self.assertEqual([r.value for r in results], ["a", "b\\000020c"])

    def test_escape_many(self):
        results = escape_many("url_param", ["a b", True, 3])
        self.assertEqual([r.ok for r in results], [True, False, True])
        self.assertEqual(results[0].value, "a%20b")
        self.assertEqual(results[2].value, "3")

    def test_result_serializes(self):
        result = escape_for("html_attr", "x", attr_name="onclick")
        self.assertEqual(
            result.model_dump(mode="json"),
            {
                "status": "error",
                "message": "HTML attribute is not allowed",
                "context": "html_attr",
                "value": None,
                "error": "validation",
            },
        )
        self.assertEqual(EscapeResult.model_validate_json(result.model_dump_json()), result)

    def test_json_in_html_dumps_models(self):
        profile = Profile(name="<Ann>", homepage="https://a.io/")
        self.assertEqual(
            json_in_html(profile),
            '{"name":"\\u003CAnn\\u003E","homepage":"https:\\/\\/a.io\\/"}',
        )


if __name__ == "__main__":
    unittest.main()
