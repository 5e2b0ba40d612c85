"""
Regex for the ABNF core rules that the range grammar needs.

  https://tools.ietf.org/html/rfc5234#appendix-B.1

They should be processed with re.VERBOSE.
"""

# ALPHA          =  %x41-5A / %x61-7A   ; A-Z / a-z

ALPHA = r"[\x41-\x5A\x61-\x7A]"

# DIGIT          =  %x30-39

DIGIT = r"[\x30-\x39]"

