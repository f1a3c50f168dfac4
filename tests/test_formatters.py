#!/usr/bin/env python3
"""
Unit tests for duration and number formatting.
"""
import unittest

from extraction_pipeline.core.formatting import InvalidInput, format_duration, format_number, parse_duration


class TestFormatDuration(unittest.TestCase):
    """Duration rendering"""

    def test_known_values(self):
        self.assertEqual(format_duration(0), "0:00")
        self.assertEqual(format_duration(59), "0:59")
        self.assertEqual(format_duration(60), "1:00")
        self.assertEqual(format_duration(3599), "59:59")
        self.assertEqual(format_duration(3600), "1:00:00")
        self.assertEqual(format_duration(3661), "1:01:01")

    def test_hours_unbounded(self):
        self.assertEqual(format_duration(100 * 3600 + 5), "100:00:05")

    def test_digit_string_accepted(self):
        self.assertEqual(format_duration("125"), "2:05")
        self.assertEqual(format_duration(" 3661 "), "1:01:01")

    def test_invalid_input(self):
        for bad in (-1, "abc", "12.5", "²", "1²", 1.5, None, True, ""):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidInput):
                    format_duration(bad)

    def test_invalid_input_is_value_error(self):
        with self.assertRaises(ValueError):
            format_duration(-5)

    def test_round_trip_reconstructs_components(self):
        for seconds in (0, 1, 59, 60, 61, 599, 3599, 3600, 3661, 86399, 86400, 360000 + 59):
            with self.subTest(seconds=seconds):
                self.assertEqual(parse_duration(format_duration(seconds)), seconds)


class TestParseDuration(unittest.TestCase):
    """Inverse of format_duration"""

    def test_parse(self):
        self.assertEqual(parse_duration("0:00"), 0)
        self.assertEqual(parse_duration("12:05"), 725)
        self.assertEqual(parse_duration("1:01:01"), 3661)

    def test_malformed(self):
        for bad in ("", "1", "1:2:3:4", "a:00", "1:60", "1:00:75", "²:00"):
            with self.subTest(value=bad):
                with self.assertRaises(InvalidInput):
                    parse_duration(bad)


class TestFormatNumber(unittest.TestCase):
    """Thousands grouping"""

    def test_grouping(self):
        self.assertEqual(format_number(0), "0")
        self.assertEqual(format_number(999), "999")
        self.assertEqual(format_number(1000), "1,000")
        self.assertEqual(format_number(1234567), "1,234,567")


if __name__ == '__main__':
    unittest.main()
