"""
Regex for the Range request header, from the collected ABNF in RFC7233.

  <http://httpwg.org/specs/rfc7233.html#collected.abnf>

The range rules carry named groups (first, last, length) so that they
can be used to pull a single range apart as well as to check syntax.

They should be processed with re.VERBOSE.
"""

# pylint: disable=invalid-name

from .rfc5234 import DIGIT
from .rfc7230 import token

SPEC_URL = "http://httpwg.org/specs/rfc7233"


# bytes-unit = "bytes"

bytes_unit = r"bytes"

# other-range-unit = token

other_range_unit = token

# range-unit = bytes-unit / other-range-unit

range_unit = rf"(?: {bytes_unit} | {other_range_unit} )"

# first-byte-pos = 1*DIGIT

first_byte_pos = rf"{DIGIT}+"

# last-byte-pos = 1*DIGIT

last_byte_pos = rf"{DIGIT}+"

# suffix-length = 1*DIGIT

suffix_length = rf"{DIGIT}+"

# byte-range-spec = first-byte-pos "-" [ last-byte-pos ]
#
# split in two here, so that the closed and open forms can be told apart.

closed_range = rf"(?: (?P<first>{first_byte_pos}) \- (?P<last>{last_byte_pos}) )"

open_range = rf"(?: (?P<first>{first_byte_pos}) \- )"

# suffix-byte-range-spec = "-" suffix-length

suffix_byte_range_spec = rf"(?: \- (?P<length>{suffix_length}) )"
