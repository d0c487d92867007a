from __future__ import annotations

import io
import logging
import tempfile
import unittest
from pathlib import Path

from textsub.cli import EXIT_IO_ERROR, EXIT_OK, EXIT_USAGE_ERROR, main


def _run(argv, stdin: str = ""):
    out = io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin), stdout=out)
    return code, out.getvalue()


class CliTests(unittest.TestCase):
    def tearDown(self) -> None:
        # main() attaches a stderr handler to the base logger; keep tests isolated.
        base = logging.getLogger("textsub")
        base.handlers.clear()
        base.propagate = True
        base.setLevel(logging.NOTSET)

    def test_replace_from_stdin(self) -> None:
        code, out = _run(["replace", r"(\w+)@(\w+)", "$2 at $1"], "me@host you@there")
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "host at me there at you")

    def test_replace_first(self) -> None:
        self.assertEqual(_run(["replace", "--first", "o", "0"], "foo")[1], "f0o")

    def test_replace_literal_keeps_dollar(self) -> None:
        self.assertEqual(_run(["replace", "--literal", ".", "$1"], "a.b")[1], "a$1b")

    def test_ignore_case(self) -> None:
        self.assertEqual(_run(["replace", "-i", "abc", "x"], "ABC abc")[1], "x x")

    def test_replace_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "in.txt"
            path.write_text("swap first two words", encoding="utf-8")
            code, out = _run(["replace", "--first", r"(\w+)(\s+)(\w+)", "$3$2$1", str(path)])
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "first swap two words")

    def test_split(self) -> None:
        self.assertEqual(_run(["split", ",", "--limit", "2"], "a,b,c,d")[1], "a\nb,c,d\n")
        self.assertEqual(_run(["split", "--literal", "."], "a.b")[1], "a\nb\n")

    def test_quote(self) -> None:
        self.assertEqual(_run(["quote", "$1\\"])[1], "\\$1\\\\\n")

    def test_apply(self) -> None:
        code, out = _run(
            ["apply", "-y", r"/(\w+) (\w+)/$2 $1/g", "-y", "/x/X/", "-Y", "/keep me/"],
            "ab cd keep me x x",
        )
        self.assertEqual(code, EXIT_OK)
        self.assertEqual(out, "cd ab keep me X x")

    def test_invalid_template_exit_code(self) -> None:
        self.assertEqual(_run(["replace", "a", "$"], "abc"), (EXIT_USAGE_ERROR, ""))

    def test_invalid_regex_exit_code(self) -> None:
        self.assertEqual(_run(["replace", "(", "x"], "abc")[0], EXIT_USAGE_ERROR)

    def test_missing_file_exit_code(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            code, _ = _run(["replace", "a", "b", str(Path(td) / "missing.txt")])
        self.assertEqual(code, EXIT_IO_ERROR)


if __name__ == "__main__":
    unittest.main()
