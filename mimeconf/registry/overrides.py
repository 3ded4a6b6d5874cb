"""
Manual conflict overrides.

Maps an extension to a table of incoming media type -> replacement.
Used for duplicate or legacy registrations in mime.types (fonts that
should use the IANA font/* types, chemical types that shadow common
extensions).
"""

from typing import Dict, Mapping

from mimeconf.registry.media_type import OCTET_STREAM

OVERRIDES: Dict[str, Dict[str, str]] = {
    ".ra": {
        "audio/x-pn-realaudio": "audio/x-realaudio",
    },
    # use font media types from iana registry
    ".otf": {
        "application/font-sfnt": "font/ttf",
        "font/sfnt": "font/ttf",
        "font/ttf": "font/ttf",
    },
    ".ttf": {
        "application/font-sfnt": "font/ttf",
        "font/otf": "font/ttf",
        "font/sfnt": "font/ttf",
    },
    ".woff": {
        "application/font-woff": "font/woff",
    },
    ".asn": {
        "chemical/x-ncbi-asn1-spec": OCTET_STREAM,
    },
    ".ent": {
        "chemical/x-ncbi-asn1-ascii": OCTET_STREAM,
    },
}


def apply_override(
    extension: str,
    media_type: str,
    overrides: Mapping[str, Mapping[str, str]] = OVERRIDES,
) -> str:
    """
    Return the replacement for media_type under extension, if any.

    The lookup is keyed on the exact extension string, so callers must
    pass the casing-normalized extension.
    """
    table = overrides.get(extension)
    if table:
        return table.get(media_type, media_type)
    return media_type
