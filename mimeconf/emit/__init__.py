"""Ordering and rendering of the mimetype.assign block."""

from mimeconf.emit.charset import TEXT_UTF8, annotate_charset
from mimeconf.emit.emitter import ordered_entries, render, sort_key, write

__all__ = [
    "TEXT_UTF8",
    "annotate_charset",
    "ordered_entries",
    "render",
    "sort_key",
    "write",
]
