#!/usr/bin/env python

"""
CLI interface to httpranges: parse Range field values and show what's in them.
"""

from argparse import ArgumentParser
from functools import partial
import sys
import textwrap
from typing import List, Optional

from httpranges import __version__
from httpranges.config import load_config
from httpranges.field import parse_range_field
from httpranges.note import Note, NoteList, levels

NL = "\n"


def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgumentParser(description="Parse HTTP Range field values.")
    parser.set_defaults(output_format="text", strict=False, config_file=None)

    parser.add_argument("values", nargs="+", metavar="VALUE", help="field value to parse")
    parser.add_argument(
        "-c",
        "--config",
        action="store",
        dest="config_file",
        help="read settings from this INI file",
    )
    parser.add_argument(
        "-s",
        "--strict",
        action="store_true",
        dest="strict",
        help="fail on any range that can't be used",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        action="store",
        dest="output_format",
        choices=["text", "html"],
        help="output format for notes",
    )
    parser.add_argument("--version", action="version", version=__version__)
    args = parser.parse_args(argv)

    config = load_config(args.config_file or [])
    if args.strict:
        config["strict"] = "True"

    failed = False
    for value in args.values:
        notes = NoteList()
        range_field = parse_range_field(value, partial(notes.add_note, "field"), config)
        if range_field is None:
            failed = True
            error_output(f"can't parse {value!r}")
        else:
            output(range_field.to_raw() + NL)
            for range_spec in range_field.ranges:
                output(f"  {range_spec!r}{NL}")
        for note in notes:
            output(format_note(note, args.output_format, sys.stdout.isatty()))
    return 1 if failed else 0


def format_note(note: Note, output_format: str, tty_out: bool = False) -> str:
    if output_format == "html":
        return f"<h3>{note.show_summary()}</h3>{NL}{note.show_text()}{NL}"
    summary = colorize(note.level, note.summary % note.vars, tty_out)
    return f"  * {summary}{NL}"


def colorize(level: Optional[levels], instr: str, tty_out: bool) -> str:
    if not tty_out:
        return instr
    if level == levels.GOOD:
        color_start = "\033[1;32m"
    elif level == levels.BAD:
        color_start = "\033[1;31m"
    elif level == levels.WARN:
        color_start = "\033[1;33m"
    else:
        color_start = "\033[1;34m"
    return color_start + instr + "\033[0;39m"


def output(out: str) -> None:
    sys.stdout.write(out)


def error_output(message: str) -> None:
    sys.stderr.write(textwrap.fill(f"Error: {message}") + NL)


if __name__ == "__main__":
    sys.exit(main())
