from __future__ import annotations

import logging
import re
import unittest
from unittest.mock import patch

from textsub.core.models import LiteralReplacement, TemplateReplacement
from textsub.processing.replace_driver import ReplaceDriver
from textsub.processing.template_compiler import TemplateCompiler
from textsub.processing.text_ops import TextTransformer


class ParseReplaceSpecTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tx = TextTransformer()

    def test_full_spec(self) -> None:
        rule = self.tx.parse_replace_spec("/foo/bar/gi")
        self.assertEqual(rule.pattern.pattern, "foo")
        self.assertTrue(rule.pattern.flags & re.IGNORECASE)
        self.assertEqual(rule.replacement, "bar")
        self.assertTrue(rule.is_global)

    def test_delete_form_is_global(self) -> None:
        rule = self.tx.parse_replace_spec("/foo/")
        self.assertEqual(rule.replacement, "")
        self.assertTrue(rule.is_global)

    def test_no_flags_is_first_only(self) -> None:
        self.assertFalse(self.tx.parse_replace_spec("/a/b/").is_global)

    def test_escaped_delimiter(self) -> None:
        rule = self.tx.parse_replace_spec(r"/a\/b/c\/d/g")
        self.assertEqual(rule.pattern.pattern, "a/b")
        self.assertEqual(rule.replacement, "c/d")

    def test_other_escapes_are_kept(self) -> None:
        rule = self.tx.parse_replace_spec(r"/(\d+)/\$$1/g")
        self.assertEqual(rule.pattern.pattern, r"(\d+)")
        self.assertEqual(rule.replacement, r"\$$1")

    def test_quotes_are_stripped(self) -> None:
        self.assertEqual(self.tx.parse_replace_spec("'/a/b/g'").replacement, "b")

    def test_rule_carries_resolved_spec(self) -> None:
        self.assertEqual(self.tx.parse_replace_spec(r"/a/\$/g").spec, LiteralReplacement("$"))
        self.assertIsInstance(self.tx.parse_replace_spec("/(a)/$1$1/g").spec, TemplateReplacement)

    def test_replacement_compiled_once_per_spec(self) -> None:
        compiler = TemplateCompiler(cache_size=0)
        tx = TextTransformer(driver=ReplaceDriver(compiler=compiler))
        with patch.object(compiler, "compile", wraps=compiler.compile) as compile_:
            self.assertEqual(tx.apply_replacements("aa", ["/(a)/<$1>/g"], None), "<a><a>")
        compile_.assert_called_once_with("<$1>")

    def test_invalid_specs_are_logged_and_ignored(self) -> None:
        for spec in ("foo", "/a/b/c/d", "/(/x/g", "/a/$x/g"):
            with self.subTest(spec=spec):
                with self.assertLogs("textsub.textops", level=logging.WARNING):
                    self.assertIsNone(self.tx.parse_replace_spec(spec))

    def test_custom_delimiter(self) -> None:
        tx = TextTransformer(regex_delim="|")
        self.assertEqual(tx.parse_replace_spec("|a/b|c|g").pattern.pattern, "a/b")
        with self.assertRaises(ValueError):
            TextTransformer(regex_delim="||")


class ApplyReplacementsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tx = TextTransformer(logger=logging.getLogger("textsub.textops"))

    def test_group_template(self) -> None:
        out = self.tx.apply_replacements("John Smith", [r"/(\w+) (\w+)/$2, $1/g"], None)
        self.assertEqual(out, "Smith, John")

    def test_first_only(self) -> None:
        self.assertEqual(self.tx.apply_replacements("a a a", ["/a/b/"], None), "b a a")

    def test_rules_apply_in_order(self) -> None:
        self.assertEqual(self.tx.apply_replacements("abc", ["/a/b/g", "/b/c/g"], None), "ccc")

    def test_preserve_regions(self) -> None:
        out = self.tx.apply_replacements("foo keep_foo foo", ["/foo/bar/g"], ["/keep_foo/"])
        self.assertEqual(out, "bar keep_foo bar")

    def test_no_specs_returns_text(self) -> None:
        self.assertEqual(self.tx.apply_replacements("abc", None, None), "abc")
        self.assertEqual(self.tx.apply_replacements("abc", [], ["/b/"]), "abc")

    def test_all_invalid_returns_text(self) -> None:
        with self.assertLogs("textsub.textops", level=logging.WARNING):
            self.assertEqual(self.tx.apply_replacements("abc", ["/b/$/g"], None), "abc")


if __name__ == "__main__":
    unittest.main()
