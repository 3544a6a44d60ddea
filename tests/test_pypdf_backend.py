"""
Test cases for the pypdf backend value conversions.
"""

import unittest
from datetime import datetime, timedelta, timezone

from pypdf.generic import BooleanObject, FloatObject, NumberObject, TextStringObject

from pdf_extract.backends.pypdf_backend import _chunk_runs, _info_value, _xmp_value
from pdf_extract.types import TextRun


class TestChunkRuns(unittest.TestCase):
    """Visitor chunks turned into text runs."""

    def test_line_break_only_chunks_are_dropped(self):
        self.assertEqual(_chunk_runs("\n", 0, 0), [])
        self.assertEqual(_chunk_runs("\r\n", 0, 0), [])
        self.assertEqual(_chunk_runs("", 0, 0), [])

    def test_whitespace_chunk_is_kept(self):
        self.assertEqual(_chunk_runs(" ", 5, 6), [TextRun(" ", 5, 6)])

    def test_chunk_stays_whole_by_default(self):
        runs = _chunk_runs("Hello\nWorld\n", 72, 700)
        self.assertEqual(runs, [TextRun("Hello\nWorld\n", 72, 700)])

    def test_disable_combine_splits_at_line_breaks(self):
        runs = _chunk_runs("Hello\nWorld\n", 72, 700, disable_combine_text_items=True)
        self.assertEqual(runs, [TextRun("Hello", 72, 700), TextRun("World", 72, 700)])

    def test_normalize_whitespace_replaces_each_character(self):
        runs = _chunk_runs("a\tb\nc", 1, 2, normalize_whitespace=True)
        self.assertEqual(runs, [TextRun("a b c", 1, 2)])

    def test_both_options_combined(self):
        runs = _chunk_runs(
            "one\ttwo\nthree", 1, 2, normalize_whitespace=True, disable_combine_text_items=True
        )
        self.assertEqual([run.text for run in runs], ["one two", "three"])


class TestInfoValue(unittest.TestCase):
    """Info dictionary values keep their PDF type."""

    def test_boolean(self):
        value = _info_value(BooleanObject(True))
        self.assertIs(value, True)

    def test_integer(self):
        value = _info_value(NumberObject(7))
        self.assertEqual(value, 7)
        self.assertIs(type(value), int)

    def test_real(self):
        value = _info_value(FloatObject(1.5))
        self.assertEqual(value, 1.5)
        self.assertIs(type(value), float)

    def test_text(self):
        value = _info_value(TextStringObject("Title"))
        self.assertEqual(value, "Title")
        self.assertIs(type(value), str)


class TestXmpValue(unittest.TestCase):
    """XMP property values flattened for serialization."""

    def test_naive_date_is_marked_utc(self):
        self.assertEqual(_xmp_value(datetime(2020, 1, 2, 3, 4, 5)), "2020-01-02T03:04:05Z")

    def test_aware_date_is_converted_to_utc(self):
        value = datetime(2020, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        self.assertEqual(_xmp_value(value), "2020-01-02T03:04:05Z")

    def test_lang_alt_prefers_default(self):
        self.assertEqual(_xmp_value({"de": "Titel", "x-default": "Title"}), "Title")
        self.assertEqual(_xmp_value({"de": "Titel"}), "Titel")

    def test_sequence_becomes_list(self):
        self.assertEqual(_xmp_value(("Alice", "Bob")), ["Alice", "Bob"])


if __name__ == '__main__':
    unittest.main()
