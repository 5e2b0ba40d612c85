"""
Single ranges, as found between the commas of a Range field.

There are three forms:

 - ClosedRange(first, last) -- "first-last"
 - OpenRange(first)         -- "first-", from first to the end
 - SuffixRange(length)      -- "-length", the last length units

All of them are immutable and compare by value (and by form, so that
OpenRange(5) is not SuffixRange(5)).
"""

import re
from typing import Any, Optional, Tuple, Union

from httpranges.note import RANGE_SPEC_BACKWARDS, RANGE_SPEC_UNPARSEABLE, ignore_note
from httpranges.syntax import rfc7233
from httpranges.type import AddNoteMethodType

CLOSED_RANGE = re.compile(rf"^{rfc7233.closed_range}$", re.VERBOSE)
OPEN_RANGE = re.compile(rf"^{rfc7233.open_range}$", re.VERBOSE)
SUFFIX_RANGE = re.compile(rf"^{rfc7233.suffix_byte_range_spec}$", re.VERBOSE)


def _check_position(name: str, value: Any, minimum: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, not {value}")
    return value


class _Range:
    __slots__ = ()

    def _key(self) -> Tuple[int, ...]:
        raise NotImplementedError

    def to_raw(self) -> str:
        raise NotImplementedError

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, _Range):
            return NotImplemented
        return self.__class__ is other.__class__ and self._key() == other._key()

    def __hash__(self) -> int:
        return hash((self.__class__.__name__,) + self._key())

    def __reduce__(self) -> Tuple[Any, ...]:
        return (self.__class__, self._key())

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __repr__(self) -> str:
        args = ", ".join(str(v) for v in self._key())
        return f"{self.__class__.__name__}({args})"

    def __str__(self) -> str:
        return self.to_raw()


class ClosedRange(_Range):
    "From first to last, inclusive."

    __slots__ = ("first", "last")

    def __init__(self, first: int, last: int) -> None:
        _check_position("first", first)
        _check_position("last", last)
        if first > last:
            raise ValueError(f"first ({first}) can't be after last ({last})")
        object.__setattr__(self, "first", first)
        object.__setattr__(self, "last", last)

    def _key(self) -> Tuple[int, ...]:
        return (self.first, self.last)

    def to_raw(self) -> str:
        return f"{self.first}-{self.last}"


class OpenRange(_Range):
    "From first to the end of the representation."

    __slots__ = ("first",)

    def __init__(self, first: int) -> None:
        object.__setattr__(self, "first", _check_position("first", first))

    def _key(self) -> Tuple[int, ...]:
        return (self.first,)

    def to_raw(self) -> str:
        return f"{self.first}-"


class SuffixRange(_Range):
    "The last length units of the representation."

    __slots__ = ("length",)

    def __init__(self, length: int) -> None:
        object.__setattr__(self, "length", _check_position("length", length, 1))

    def _key(self) -> Tuple[int, ...]:
        return (self.length,)

    def to_raw(self) -> str:
        return f"-{self.length}"


RangeSpec = Union[ClosedRange, OpenRange, SuffixRange]
RANGE_TYPES = (ClosedRange, OpenRange, SuffixRange)


def parse_range(
    expression: str, add_note: AddNoteMethodType = ignore_note
) -> Optional[RangeSpec]:
    """
    Parse a single range expression, e.g. "0-499", "500-" or "-500".

    Returns None (after making a note) if it can't be parsed; a closed range
    whose last position comes before its first isn't reinterpreted.
    """
    expression = expression.strip()
    match = CLOSED_RANGE.match(expression)
    if match:
        first, last = int(match.group("first")), int(match.group("last"))
        if first > last:
            add_note(RANGE_SPEC_BACKWARDS, range_spec=expression)
            return None
        return ClosedRange(first, last)
    match = OPEN_RANGE.match(expression)
    if match:
        return OpenRange(int(match.group("first")))
    match = SUFFIX_RANGE.match(expression)
    if match:
        length = int(match.group("length"))
        if length > 0:
            return SuffixRange(length)
    add_note(RANGE_SPEC_UNPARSEABLE, range_spec=expression)
    return None
