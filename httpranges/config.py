"""
Configuration for range field parsing.

Settings live in the [httpranges] section of an INI file:

  strict      -- reject fields with any unusable range, or no ranges at all
  max_ranges  -- note fields with more ranges than this; 0 is unlimited
"""

from configparser import ConfigParser, SectionProxy
from typing import Iterable, Union

SECTION = "httpranges"
DEFAULTS = {
    "strict": "False",
    "max_ranges": "0",
}


def default_config() -> SectionProxy:
    "Get a config section holding the defaults."
    config_parser = ConfigParser()
    config_parser.read_dict({SECTION: DEFAULTS})
    return config_parser[SECTION]


def load_config(paths: Union[str, Iterable[str]]) -> SectionProxy:
    """
    Read the config files in paths on top of the defaults.

    Files that don't exist are skipped, as ConfigParser.read() does.
    """
    config_parser = ConfigParser()
    config_parser.read_dict({SECTION: DEFAULTS})
    config_parser.read(paths)
    return config_parser[SECTION]
