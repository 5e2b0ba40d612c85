"""
Notes that can be raised while parsing a range field.

The summary is wrapped in Markup as-is, so it shouldn't contain anything that
needs escaping beyond the interpolated variables.

The longer text is Markdown; the variables interpolated into it are escaped
before it is rendered to HTML.
"""

from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Type, Union

from markdown import markdown
from markupsafe import Markup, escape


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    RANGE = "Partial Content"


class levels(Enum):
    "Note levels."
    GOOD = "good"
    WARN = "warning"
    BAD = "bad"
    INFO = "info"


class Note:
    """
    A note about a range field, or one of its parts.
    """

    category = None  # type: Optional[categories]
    level = None  # type: Optional[levels]
    summary = ""
    text = ""

    def __init__(
        self, subject: str, vrs: Optional[Dict[str, Union[str, int]]] = None
    ) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject!r} {self.vars!r}>"

    def show_summary(self) -> Markup:
        """
        Output a textual summary of the note.

        Variables are escaped; the summary itself is not.
        """
        return Markup(self.summary) % self.vars

    def show_text(self) -> Markup:
        """
        Show the HTML text for the note.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )


class NoteList:
    """
    Collects the notes raised while parsing, for later display or checking.
    """

    def __init__(self) -> None:
        self.notes = []  # type: List[Note]

    def add_note(self, subject: str, note: Type[Note], **kw: Union[str, int]) -> None:
        "Record a note about subject."
        self.notes.append(note(subject, kw))

    @property
    def note_classes(self) -> List[str]:
        return [note.__class__.__name__ for note in self.notes]

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)


def ignore_note(note: Type[Note], **kw: Union[str, int]) -> None:
    "An add_note that drops everything on the floor."


class RANGE_UNIT_SEPARATOR_MISSING(Note):
    category = categories.RANGE
    level = levels.BAD
    summary = "The Range field doesn't have a '=' after its unit."
    text = """\
A `Range` field starts with the unit its ranges are measured in, followed by `=` and then
the ranges themselves; for example, `bytes=0-499`.

This field doesn't contain `=` at all, so it can't be used:

> `%(field_value)s`"""


class RANGE_UNIT_BAD_SYNTAX(Note):
    category = categories.RANGE
    level = levels.WARN
    summary = "The Range field's unit '%(unit)s' isn't a valid token."
    text = """\
Range units have to be HTTP tokens; that is, they can't be empty and can't contain whitespace,
delimiters like `=` or `,`, or control characters.

Recipients are likely to ignore a `Range` field with this unit."""


class RANGE_UNIT_CASE(Note):
    category = categories.RANGE
    level = levels.INFO
    summary = "The Range field's unit '%(unit)s' isn't spelled '%(known_unit)s'."
    text = """\
Range units are case-insensitive, so most servers will treat `%(unit)s` the same as
`%(known_unit)s`. Some don't, though; using the registered spelling is safer."""


class RANGE_UNIT_UNKNOWN(Note):
    category = categories.RANGE
    level = levels.INFO
    summary = "The Range field uses the non-standard unit '%(unit)s'."
    text = """\
HTTP defines only one range unit, `bytes`. Other units can be registered, but servers that
don't know about `%(unit)s` will ignore the `Range` field and send the whole
representation."""


class RANGE_SPEC_UNPARSEABLE(Note):
    category = categories.RANGE
    level = levels.WARN
    summary = "The range '%(range_spec)s' couldn't be understood, and was ignored."
    text = """\
Each range in a `Range` field has to take one of three forms:

* `first-last`, for a closed range; e.g., `0-499`
* `first-`, for everything from `first` onwards; e.g., `500-`
* `-length`, for the last `length` units; e.g., `-500`

`%(range_spec)s` doesn't look like any of these, so it has been dropped from the field."""


class RANGE_SPEC_BACKWARDS(Note):
    category = categories.RANGE
    level = levels.WARN
    summary = "The range '%(range_spec)s' ends before it starts, and was ignored."
    text = """\
In a closed range like `first-last`, `last` can't be smaller than `first`. Such a range is
syntactically invalid; it isn't swapped around, but dropped from the field."""


class RANGE_FIELD_EMPTY(Note):
    category = categories.RANGE
    level = levels.WARN
    summary = "The Range field doesn't contain any usable ranges."
    text = """\
After dropping the ranges that couldn't be understood, nothing was left of this `Range` field.
A server will treat the request as if it had no `Range` field at all."""


class RANGE_FIELD_TOO_MANY(Note):
    category = categories.RANGE
    level = levels.WARN
    summary = "The Range field asks for %(range_count)s ranges."
    text = """\
Asking for lots of ranges at once makes responses expensive to produce, and servers are allowed
to refuse or coalesce such requests. This field asks for %(range_count)s ranges, more than the
limit of %(max_ranges)s."""


class RANGE_HEADER_REPEATED(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "Only one Range field is allowed in a message."
    text = """\
The `Range` field can't be combined into a list, so it should only appear once. When it
appears more than once, only the last one is used."""
