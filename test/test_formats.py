"""Tests for string format detection."""

import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from jsoninfer.formats import detect_format, merge_formats


class TestDetectFormat(unittest.TestCase):
    """Test cases for detect_format."""

    def test_date_time(self):
        self.assertEqual(detect_format("2024-01-15T10:30:00Z"), "date-time")
        self.assertEqual(detect_format("2024-01-15T10:30:00.123Z"), "date-time")
        self.assertEqual(detect_format("2024-01-15T10:30:00+02:00"), "date-time")
        self.assertEqual(detect_format("2024-01-15T10:30:00-05:30"), "date-time")

    def test_date_time_requires_offset(self):
        """A timestamp without zone designator is not a date-time."""
        self.assertIsNone(detect_format("2024-01-15T10:30:00"))
        self.assertIsNone(detect_format("2024-01-15"))
        self.assertIsNone(detect_format("2024-01-15 10:30:00Z"))

    def test_email(self):
        self.assertEqual(detect_format("a@b.com"), "email")
        self.assertEqual(detect_format("first.last@example.co.uk"), "email")

    def test_email_rejects_malformed(self):
        self.assertIsNone(detect_format("a@b"))
        self.assertIsNone(detect_format("a b@c.com"))
        self.assertIsNone(detect_format("a@@b.com"))
        self.assertIsNone(detect_format("@b.com"))

    def test_uuid(self):
        self.assertEqual(detect_format("123e4567-e89b-12d3-a456-426614174000"), "uuid")
        self.assertEqual(detect_format("123E4567-E89B-12D3-A456-426614174000"), "uuid")
        self.assertIsNone(detect_format("123e4567-e89b-12d3-a456-42661417400"))

    def test_uri(self):
        self.assertEqual(detect_format("https://example.com/path"), "uri")
        self.assertEqual(detect_format("http://x"), "uri")
        self.assertIsNone(detect_format("http://"))
        self.assertIsNone(detect_format("ftp://example.com"))

    def test_ipv4(self):
        self.assertEqual(detect_format("192.168.0.1"), "ipv4")
        self.assertEqual(detect_format("255.255.255.255"), "ipv4")
        self.assertIsNone(detect_format("256.1.1.1"))
        self.assertIsNone(detect_format("1.2.3"))

    def test_ipv6(self):
        self.assertEqual(detect_format("2001:0db8:85a3:0000:0000:8a2e:0370:7334"), "ipv6")
        self.assertEqual(detect_format("fe80:0:0:0:0:0:0:1"), "ipv6")
        # compressed notation is not recognized
        self.assertIsNone(detect_format("fe80::1"))

    def test_no_format(self):
        self.assertIsNone(detect_format(""))
        self.assertIsNone(detect_format("hello world"))
        self.assertIsNone(detect_format("12345"))

    def test_trailing_newline_does_not_match(self):
        self.assertIsNone(detect_format("192.168.0.1\n"))
        self.assertIsNone(detect_format("a@b.com\n"))

    def test_priority_email_before_uri(self):
        """A URL with userinfo and no path also reads as an email; email wins."""
        self.assertEqual(detect_format("http://user@example.com"), "email")
        self.assertEqual(detect_format("http://example.com/user"), "uri")
        self.assertEqual(detect_format("user@example.com"), "email")


class TestMergeFormats(unittest.TestCase):
    """Test cases for merge_formats."""

    def test_single_format(self):
        self.assertEqual(merge_formats(["email", "email"]), "email")

    def test_conflicting_formats(self):
        self.assertIsNone(merge_formats(["email", "uri"]))

    def test_unformatted_string_vetoes(self):
        self.assertIsNone(merge_formats(["email", None]))

    def test_empty(self):
        self.assertIsNone(merge_formats([]))


if __name__ == '__main__':
    unittest.main()
