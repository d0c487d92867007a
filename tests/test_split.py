from __future__ import annotations

import re
import unittest

from textsub.errors import InvalidArguments
from textsub.processing.replace_driver import ReplaceDriver


class SplitTests(unittest.TestCase):
    def setUp(self) -> None:
        self.driver = ReplaceDriver()

    def test_unlimited(self) -> None:
        self.assertEqual(self.driver.split("a,b,c,d", ","), ["a", "b", "c", "d"])

    def test_limit_caps_pieces(self) -> None:
        self.assertEqual(self.driver.split("a,b,c,d", ",", 2), ["a", "b,c,d"])
        self.assertEqual(self.driver.split("a,b,c,d", ",", 3), ["a", "b", "c,d"])

    def test_limit_one_keeps_subject_whole(self) -> None:
        self.assertEqual(self.driver.split("a,b,c,d", ",", 1), ["a,b,c,d"])

    def test_limit_larger_than_matches(self) -> None:
        self.assertEqual(self.driver.split("a,b", ",", 10), ["a", "b"])

    def test_non_positive_limit_is_unlimited(self) -> None:
        for limit in (0, -1, -100, None):
            with self.subTest(limit=limit):
                self.assertEqual(self.driver.split("a,b,c,d", ",", limit), ["a", "b", "c", "d"])

    def test_regex_separator(self) -> None:
        self.assertEqual(self.driver.split("a1b22c", re.compile(r"\d+")), ["a", "b", "c"])
        self.assertEqual(self.driver.split("a1b22c", re.compile(r"\d+"), 2), ["a", "b22c"])

    def test_string_separator_is_literal(self) -> None:
        self.assertEqual(self.driver.split("a.b.c", "."), ["a", "b", "c"])

    def test_edges_keep_empty_pieces(self) -> None:
        self.assertEqual(self.driver.split(",a,,b,", ","), ["", "a", "", "b", ""])

    def test_no_match(self) -> None:
        self.assertEqual(self.driver.split("abc", ","), ["abc"])
        self.assertEqual(self.driver.split("", ","), [""])

    def test_zero_width_pattern(self) -> None:
        self.assertEqual(self.driver.split("abc", re.compile("")), ["", "a", "b", "c", ""])

    def test_result_is_fresh_list(self) -> None:
        first = self.driver.split("a,b", ",")
        first.append("mutated")
        self.assertEqual(self.driver.split("a,b", ","), ["a", "b"])

    def test_bad_limit_type(self) -> None:
        with self.assertRaises(InvalidArguments):
            self.driver.split("a,b", ",", "2")  # type: ignore[arg-type]

    def test_bad_pattern_type(self) -> None:
        with self.assertRaises(InvalidArguments):
            self.driver.split("a,b", None)  # type: ignore[arg-type]

    def test_bytes_pattern(self) -> None:
        with self.assertRaises(InvalidArguments):
            self.driver.split("a,b", re.compile(b","))


if __name__ == "__main__":
    unittest.main()
