"""
Charset annotation for text/* media types.

text/* subtypes listed here are served as "text/...;charset=utf-8".

text/html IS NOT INCLUDED: html has its own method for defining charset
(<meta>), but the standards specify that content-type in HTTP wins over
the setting in the html document.

text/markdown doesn't have an official default charset, but requires
one being specified; UTF-8 is hardcoded for it.
"""

from typing import FrozenSet

UTF8_SUFFIX = ";charset=utf-8"

TEXT_UTF8: FrozenSet[str] = frozenset(
    {
        "css",
        "csv",
        "markdown",
        "plain",
        "x-bibtex",
        "x-boo",
        "x-c++hdr",
        "x-c++src",
        "x-chdr",
        "x-csh",
        "x-csrc",
        "x-dsrc",
        "x-diff",
        "x-haskell",
        "x-java",
        "x-lilypond",
        "x-literate-haskell",
        "x-makefile",
        "x-moc",
        "x-pascal",
        "x-perl",
        "x-python",
        "x-scala",
        "x-sh",
        "x-tcl",
        "x-tex",
    }
)


def annotate_charset(media_type: str, text_utf8: FrozenSet[str] = TEXT_UTF8) -> str:
    """Append the UTF-8 charset parameter where the subtype calls for it."""
    if media_type.startswith("text/") and media_type[len("text/") :] in text_utf8:
        return media_type + UTF8_SUFFIX
    return media_type
