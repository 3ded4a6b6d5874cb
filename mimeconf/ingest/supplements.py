"""
Mappings merged in after the database has been read.

IANA_GAPS go through the resolver like any database line. USEFUL_EXTRAS
are only added for extensions that have no entry at all.
"""

from typing import Tuple

from mimeconf.registry.registry import MimeRegistry

# missing in /etc/mime.types;
# from https://www.iana.org/assignments/media-types/media-types.xhtml
IANA_GAPS: Tuple[Tuple[str, str], ...] = (
    (".dtd", "application/xml-dtd"),
    # RFC 9239
    (".js", "text/javascript"),
    (".mjs", "text/javascript"),
)

USEFUL_EXTRAS: Tuple[Tuple[str, str], ...] = (
    (".tgz", "application/x-gtar-compressed"),
    (".tar.gz", "application/x-gtar-compressed"),
    (".gz", "application/gzip"),
    (".tbz", "application/x-bzip-compressed-tar"),
    (".tar.bz2", "application/x-bzip-compressed-tar"),
    (".bz2", "application/x-bzip2"),
    (".log", "text/plain"),
    (".conf", "text/plain"),
    (".spec", "text/plain"),
    ("README", "text/plain"),
    ("Makefile", "text/x-makefile"),
)


def apply_supplements(registry: MimeRegistry) -> MimeRegistry:
    """Merge IANA_GAPS, then USEFUL_EXTRAS, into registry."""
    registry.add_all(IANA_GAPS)
    for extension, media_type in USEFUL_EXTRAS:
        registry.add_if_missing(extension, media_type)
    return registry
