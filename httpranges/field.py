"""
The value of a Range request header: a unit, then one or more ranges.

    bytes=0-50, 100-150

Parsing is lenient by default. Ranges that can't be understood are dropped
(and noted), and only a missing "=" makes the whole field fail. With the
strict setting on, any dropped range, or an empty result, fails the field.
"""

from configparser import SectionProxy
import re
from typing import Any, Iterable, List, Optional, Tuple

from httpranges.config import default_config
from httpranges.note import (
    RANGE_FIELD_EMPTY,
    RANGE_FIELD_TOO_MANY,
    RANGE_UNIT_BAD_SYNTAX,
    RANGE_UNIT_CASE,
    RANGE_UNIT_SEPARATOR_MISSING,
    RANGE_UNIT_UNKNOWN,
    ignore_note,
)
from httpranges.ranges import RANGE_TYPES, RangeSpec, parse_range
from httpranges.syntax import rfc7233
from httpranges.type import AddNoteMethodType
from httpranges.unit import KnownUnit, RangeUnit

RANGE_SEPARATOR = ", "
UNIT_SYNTAX = re.compile(rfc7233.range_unit, re.VERBOSE | re.IGNORECASE)


class RangeField:
    """
    A unit plus an ordered sequence of ranges.

    Order is kept as given; overlapping or out-of-order ranges are neither
    merged nor sorted.
    """

    __slots__ = ("unit", "ranges")

    def __init__(self, unit: RangeUnit, ranges: Iterable[RangeSpec]) -> None:
        if not isinstance(unit, RangeUnit):
            raise TypeError(f"unit must be a RangeUnit, not {type(unit).__name__}")
        ranges = tuple(ranges)
        for range_spec in ranges:
            if not isinstance(range_spec, RANGE_TYPES):
                raise TypeError(f"{range_spec!r} isn't a range")
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "ranges", ranges)

    @classmethod
    def from_raw(
        cls,
        raw: str,
        add_note: AddNoteMethodType = ignore_note,
        config: Optional[SectionProxy] = None,
    ) -> Optional["RangeField"]:
        "Parse the raw value of a header field; None if it can't be done."
        return parse_range_field(raw, add_note, config)

    def to_raw(self) -> str:
        "The value rendered for insertion in a header field."
        ranges = RANGE_SEPARATOR.join(r.to_raw() for r in self.ranges)
        return f"{self.unit.to_raw()}={ranges}"

    def _key(self) -> Tuple[RangeUnit, Tuple[RangeSpec, ...]]:
        return (self.unit, self.ranges)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, RangeField):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self) -> Tuple[Any, ...]:
        return (RangeField, (self.unit, self.ranges))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("RangeField is immutable")

    def __repr__(self) -> str:
        return f"RangeField({self.unit!r}, {list(self.ranges)!r})"

    def __str__(self) -> str:
        return self.to_raw()


def parse_range_field(
    raw: str,
    add_note: AddNoteMethodType = ignore_note,
    config: Optional[SectionProxy] = None,
) -> Optional[RangeField]:
    """
    Parse the raw value of a Range header field.

    Returns None if there's no "=" separating the unit from the ranges, or in
    strict mode, if any range had to be dropped or none were left. Problems
    are reported through add_note.
    """
    if config is None:
        config = default_config()
    strict = config.getboolean("strict", fallback=False)
    max_ranges = config.getint("max_ranges", fallback=0)

    field_value = raw.strip()
    unit_token, sep, ranges_value = field_value.partition("=")
    if not sep:
        add_note(RANGE_UNIT_SEPARATOR_MISSING, field_value=field_value)
        return None

    unit = RangeUnit.from_raw(unit_token)
    if not UNIT_SYNTAX.fullmatch(unit_token):
        add_note(RANGE_UNIT_BAD_SYNTAX, unit=unit_token)
    elif unit.known is None:
        if unit_token.lower() in [known.value for known in KnownUnit]:
            add_note(RANGE_UNIT_CASE, unit=unit_token, known_unit=unit_token.lower())
        else:
            add_note(RANGE_UNIT_UNKNOWN, unit=unit_token)

    expressions = ranges_value.split(RANGE_SEPARATOR)
    ranges = []  # type: List[RangeSpec]
    for expression in expressions:
        range_spec = parse_range(expression, add_note)
        if range_spec is not None:
            ranges.append(range_spec)

    if not ranges:
        add_note(RANGE_FIELD_EMPTY)
    if max_ranges and len(ranges) > max_ranges:
        add_note(RANGE_FIELD_TOO_MANY, range_count=len(ranges), max_ranges=max_ranges)
        if strict:
            return None
    if strict and (not ranges or len(ranges) < len(expressions)):
        return None
    return RangeField(unit, ranges)
