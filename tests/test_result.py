"""
Tests for the Ok / Err result carrier.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from tallyscan.result import Ok, Err, UnwrapError, collect


class TestResult(unittest.TestCase):
    """Case tests and extraction."""

    def test_ok_case(self):
        result = Ok(42)
        self.assertTrue(result.is_ok())
        self.assertFalse(result.is_err())
        self.assertEqual(result.unwrap_ok(), 42)

    def test_err_case(self):
        result = Err("boom")
        self.assertTrue(result.is_err())
        self.assertFalse(result.is_ok())
        self.assertEqual(result.unwrap_err(), "boom")

    def test_unwrap_wrong_case_is_a_contract_violation(self):
        with self.assertRaises(UnwrapError):
            Err("boom").unwrap_ok()
        with self.assertRaises(UnwrapError):
            Ok(1).unwrap_err()

    def test_unwrap_or(self):
        self.assertEqual(Ok(1).unwrap_or(7), 1)
        self.assertEqual(Err("x").unwrap_or(7), 7)

    def test_equality_distinguishes_cases(self):
        self.assertEqual(Ok(1), Ok(1))
        self.assertNotEqual(Ok(1), Err(1))

    def test_map_and_map_err_touch_only_their_case(self):
        self.assertEqual(Ok(2).map(lambda v: v * 10), Ok(20))
        self.assertEqual(Err("e").map(lambda v: v * 10), Err("e"))
        self.assertEqual(Err("e").map_err(str.upper), Err("E"))
        self.assertEqual(Ok(2).map_err(str.upper), Ok(2))


class TestPropagation(unittest.TestCase):
    """Short-circuit behaviour of and_then and collect."""

    def test_and_then_chains_ok_values(self):
        result = Ok(3).and_then(lambda v: Ok(v + 1)).and_then(lambda v: Ok(v * 2))
        self.assertEqual(result, Ok(8))

    def test_and_then_returns_first_error_verbatim(self):
        calls = []

        def step(value):
            calls.append(value)
            return Ok(value)

        error = Err("first")
        result = error.and_then(step).and_then(step)

        self.assertIs(result, error)
        self.assertEqual(calls, [])

    def test_collect_gathers_values_in_order(self):
        self.assertEqual(collect([Ok(1), Ok(2), Ok(3)]), Ok([1, 2, 3]))
        self.assertEqual(collect([]), Ok([]))

    def test_collect_stops_at_first_error(self):
        produced = []

        def producer():
            for item in [Ok(1), Err("bad"), Err("worse"), Ok(4)]:
                produced.append(item)
                yield item

        result = collect(producer())

        self.assertEqual(result, Err("bad"))
        self.assertEqual(len(produced), 2)


if __name__ == '__main__':
    unittest.main()
