"""
httpranges: the HTTP Range request header, parsed and formatted.
"""

__version__ = "1.0.0"

from httpranges.field import RangeField, parse_range_field
from httpranges.ranges import ClosedRange, OpenRange, RangeSpec, SuffixRange, parse_range
from httpranges.unit import KnownUnit, RangeUnit

__all__ = [
    "ClosedRange",
    "KnownUnit",
    "OpenRange",
    "RangeField",
    "RangeSpec",
    "RangeUnit",
    "SuffixRange",
    "parse_range",
    "parse_range_field",
]
