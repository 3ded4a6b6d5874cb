"""
mimetype.assign renderer.

lighttpd picks the first entry whose extension is a suffix of the
requested file name, so entries are emitted in this order:

1. number of "." in the extension, descending (".tar.gz" before ".gz")
2. media type with "x-" and "vnd." names sorted after everything else
3. extension

"README" and "Makefile" carry no dot; they are assumed not to be a
suffix of any other extension.
"""

import re
import sys
from typing import Iterator, List, Mapping, Optional, TextIO, Tuple

from mimeconf import __version__
from mimeconf.emit.charset import annotate_charset
from mimeconf.registry.media_type import OCTET_STREAM

_SORT_LAST = re.compile(r"(^|/)(x-|vnd\.)")

BANNER = """\
# created by mimeconf {version}

#######################################################################
##
##  MimeType handling
## -------------------
##
## https://wiki.lighttpd.net/mimetype_assignDetails

##
## mimetype.xattr-name
## Set the extended file attribute name used to obtain mime type
## (must also set mimetype.use-xattr = "enable")
##
## Default value is "Content-Type"
##
## freedesktop.org Shared MIME-info Database specification suggests
## user-defined value ("user.mime_type") as name for extended file attribute
#mimetype.xattr-name = "user.mime_type"

##
## Use extended attribute named in mimetype.xattr-name (default "Content-Type")
## to obtain mime type if possible.  Note: this feature is generally not used
## and is not recommended for high-traffic sites.
##
## Disabled by default
##
#mimetype.use-xattr = "enable"

##
## mimetype ("Content-Type" HTTP header) mapping for static file handling
##
## The first matching suffix is used. If no mapping is found
## 'application/octet-stream' is used, and caching (etag/last-modified handling)
## is disabled to prevent clients from caching "unknown" mime types.
##
## Therefore the last mapping is:
##   "" => "application/octet-stream"
## This matches all extensions and acts as default mime type, and enables
## caching for those.
"""

ASSIGN_OPEN = "mimetype.assign = (\n"

TRAILER = f"""
\t# enable caching for unknown mime types:
\t"" => "{OCTET_STREAM}"
)
"""


def media_type_sort_value(media_type: str) -> str:
    """Prefix "x-" and "vnd." names with "~" so they sort last."""
    return _SORT_LAST.sub(r"~\1\2", media_type)


def count_dots(extension: str) -> int:
    return extension.count(".")


def sort_key(entry: Tuple[str, str]) -> Tuple[int, str, str]:
    extension, media_type = entry
    return -count_dots(extension), media_type_sort_value(media_type), extension


def ordered_entries(entries: Mapping[str, str]) -> List[Tuple[str, str]]:
    """Return (extension, media type) pairs in emission order."""
    return sorted(entries.items(), key=sort_key)


def render_entry(extension: str, media_type: str) -> str:
    return f'\t"{extension}" => "{annotate_charset(media_type)}",\n'


def iter_assign_block(entries: Mapping[str, str]) -> Iterator[str]:
    """Yield the entry lines followed by the catch-all trailer."""
    for extension, media_type in ordered_entries(entries):
        yield render_entry(extension, media_type)
    yield TRAILER


def render(entries: Mapping[str, str], banner: bool = True) -> str:
    """
    Render a complete mime.conf.

    Args:
        entries: Resolved extension -> media type map.
        banner: Include the comment header.

    Returns:
        Configuration text.
    """
    parts: List[str] = []
    if banner:
        parts.append(BANNER.format(version=__version__))
    parts.append(ASSIGN_OPEN)
    parts.extend(iter_assign_block(entries))
    return "".join(parts)


def write(entries: Mapping[str, str], sink: Optional[TextIO] = None) -> None:
    """Write the rendered configuration to a text sink (stdout by default)."""
    out = sys.stdout if sink is None else sink
    out.write(render(entries))
