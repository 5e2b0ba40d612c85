"""
Helpers for moving range fields in and out of header lists.

These work on plain lists of (name, value) tuples, the way most HTTP
libraries hand headers around; nothing here touches the network.
"""

from configparser import SectionProxy
from typing import Optional

from httpranges.field import RangeField, parse_range_field
from httpranges.note import RANGE_HEADER_REPEATED, ignore_note
from httpranges.type import AddNoteMethodType, RawHeaderListType, StrHeaderListType

FIELD_NAME = "Range"


def decode_header_value(value: bytes) -> str:
    "Decode a raw header value; fall back to iso-8859-1 if it isn't ASCII."
    try:
        return value.decode("ascii", "strict")
    except UnicodeError:
        return value.decode("iso-8859-1", "replace")


def decode_headers(headers: RawHeaderListType) -> StrHeaderListType:
    return [
        (name.decode("ascii", "ignore"), decode_header_value(value))
        for name, value in headers
    ]


def get_range_field(
    headers: StrHeaderListType,
    add_note: AddNoteMethodType = ignore_note,
    config: Optional[SectionProxy] = None,
) -> Optional[RangeField]:
    """
    Find and parse the Range field in headers.

    The field can't be a list, so if it appears more than once the last one
    is used. Returns None if there isn't one, or it can't be parsed.
    """
    values = [
        value for name, value in headers if name.strip().lower() == FIELD_NAME.lower()
    ]
    if not values:
        return None
    if len(values) > 1:
        add_note(RANGE_HEADER_REPEATED)
    return parse_range_field(values[-1], add_note, config)


def set_range_field(
    headers: StrHeaderListType, range_field: RangeField
) -> StrHeaderListType:
    "Return headers with any Range field replaced by range_field."
    out = [
        (name, value)
        for name, value in headers
        if name.strip().lower() != FIELD_NAME.lower()
    ]
    out.append((FIELD_NAME, range_field.to_raw()))
    return out
