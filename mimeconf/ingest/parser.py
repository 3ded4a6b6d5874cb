"""
mime.types line parser.

Grammar of a data line, after the comment is stripped:

    line       := media-type WS extensions
    media-type := [A-Za-z0-9/+.-]+
    extensions := extension (" " extension)* " "?
    extension  := [A-Za-z0-9+.-]+

Each listed extension becomes one Observation with a leading ".".
Lines that are blank, hold only word characters, or do not match the
grammar produce no observations.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List

COMMENT_MARKER = "#"

_WORD_ONLY = re.compile(r"^\w*$")
_LINE = re.compile(
    r"^([a-z0-9/+.-]+)\s+([a-z0-9+.-]+(?: [a-z0-9+.-]+)* ?)$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Observation:
    """One (extension, media type) pair seen in the database."""

    extension: str
    media_type: str

    def __iter__(self) -> Iterator[str]:
        yield self.extension
        yield self.media_type


def strip_comment(line: str) -> str:
    """Drop the trailing newline and everything from the comment marker on."""
    line = line.rstrip("\n")
    marker = line.find(COMMENT_MARKER)
    if marker != -1:
        line = line[:marker]
    return line


def parse_line(line: str) -> List[Observation]:
    """
    Extract the observations on one line.

    Args:
        line: Raw line, with or without its newline.

    Returns:
        Observations in the order the extensions are listed; empty for
        comments, blank and malformed lines.
    """
    line = strip_comment(line)
    if _WORD_ONLY.match(line):
        return []

    match = _LINE.match(line)
    if match is None:
        return []

    media_type, extensions = match.groups()
    return [
        Observation(f".{ext}", media_type) for ext in extensions.split(" ") if ext
    ]


def iter_observations(lines: Iterable[str]) -> Iterator[Observation]:
    """Yield observations from a line stream, preserving order."""
    for line in lines:
        yield from parse_line(line)
