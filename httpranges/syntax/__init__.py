"""
Regular expressions for the HTTP range grammar.

Everything here is meant to be processed with re.VERBOSE.
"""

import re
import sys

__all__ = [
    "rfc5234",
    "rfc7230",
    "rfc7233",
]


def check_regex() -> None:
    """Compile all the regex in this package, and complain about the bad ones."""
    for module_name in __all__:
        full_name = f"httpranges.syntax.{module_name}"
        __import__(full_name)
        module = sys.modules[full_name]
        for attr_name in dir(module):
            if attr_name.startswith("_"):
                continue
            attr_value = getattr(module, attr_name, None)
            if isinstance(attr_value, str) and attr_name != "SPEC_URL":
                try:
                    re.compile(attr_value, re.VERBOSE)
                except re.error as why:
                    sys.stderr.write(f"* {module_name} {attr_name} {why}\n")


if __name__ == "__main__":
    check_regex()
