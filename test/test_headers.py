#!/usr/bin/env python3

from functools import partial
import unittest

from httpranges.field import RangeField
from httpranges.headers import (
    decode_header_value,
    decode_headers,
    get_range_field,
    set_range_field,
)
from httpranges.note import NoteList
from httpranges.ranges import ClosedRange, OpenRange
from httpranges.unit import RangeUnit


class GetRangeFieldTest(unittest.TestCase):
    def setUp(self) -> None:
        self.notes = NoteList()
        self.add_note = partial(self.notes.add_note, "header-range")

    def test_found(self) -> None:
        headers = [("Host", "example.com"), ("range", "bytes=0-50, 100-")]
        self.assertEqual(
            RangeField(RangeUnit.BYTES, [ClosedRange(0, 50), OpenRange(100)]),
            get_range_field(headers, self.add_note),
        )
        self.assertEqual([], self.notes.note_classes)

    def test_missing(self) -> None:
        self.assertIsNone(get_range_field([("Host", "example.com")], self.add_note))
        self.assertEqual([], self.notes.note_classes)

    def test_repeated(self) -> None:
        headers = [("Range", "bytes=0-1"), ("RANGE", "bytes=5-")]
        self.assertEqual(
            RangeField(RangeUnit.BYTES, [OpenRange(5)]),
            get_range_field(headers, self.add_note),
        )
        self.assertEqual(["RANGE_HEADER_REPEATED"], self.notes.note_classes)

    def test_unparseable(self) -> None:
        self.assertIsNone(get_range_field([("Range", "bytes 0-1")], self.add_note))
        self.assertEqual(["RANGE_UNIT_SEPARATOR_MISSING"], self.notes.note_classes)

    def test_notes_subject(self) -> None:
        get_range_field([("Range", "bytes=x")], self.add_note)
        self.assertEqual(
            {"header-range"}, {note.subject for note in self.notes}
        )


class SetRangeFieldTest(unittest.TestCase):
    def test_append(self) -> None:
        field = RangeField(RangeUnit.BYTES, [ClosedRange(0, 95)])
        self.assertEqual(
            [("Host", "example.com"), ("Range", "bytes=0-95")],
            set_range_field([("Host", "example.com")], field),
        )

    def test_replace(self) -> None:
        field = RangeField(RangeUnit.BYTES, [OpenRange(10)])
        headers = [("range", "bytes=0-1"), ("Accept", "*/*")]
        self.assertEqual(
            [("Accept", "*/*"), ("Range", "bytes=10-")], set_range_field(headers, field)
        )
        self.assertEqual([("range", "bytes=0-1"), ("Accept", "*/*")], headers)

    def test_round_trip(self) -> None:
        field = RangeField(RangeUnit.BYTES, [ClosedRange(0, 50), ClosedRange(100, 150)])
        self.assertEqual(field, get_range_field(set_range_field([], field)))


class DecodeTest(unittest.TestCase):
    def test_decode_header_value(self) -> None:
        self.assertEqual("bytes=0-1", decode_header_value(b"bytes=0-1"))
        self.assertEqual("bytes=\xe9", decode_header_value(b"bytes=\xe9"))

    def test_decode_headers(self) -> None:
        self.assertEqual(
            [("Range", "bytes=-5")], decode_headers([(b"Range", b"bytes=-5")])
        )


if __name__ == "__main__":
    unittest.main()
