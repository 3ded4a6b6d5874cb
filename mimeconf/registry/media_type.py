"""
Media-type helpers.

Two predicates drive conflict resolution:
- experimental: type or subtype begins with "x-"
- vendor: subtype begins with "vnd."
"""

from typing import Tuple

# Fallback default and "conflict could not be resolved" marker
OCTET_STREAM = "application/octet-stream"

EXPERIMENTAL_PREFIX = "x-"
VENDOR_PREFIX = "vnd."


def split_media_type(media_type: str) -> Tuple[str, str]:
    """Split "type/subtype"; a missing slash yields an empty subtype."""
    top, _, subtype = media_type.partition("/")
    return top, subtype


def is_experimental(media_type: str) -> bool:
    top, subtype = split_media_type(media_type)
    return top.startswith(EXPERIMENTAL_PREFIX) or subtype.startswith(
        EXPERIMENTAL_PREFIX
    )


def is_vendor(media_type: str) -> bool:
    _, subtype = split_media_type(media_type)
    return subtype.startswith(VENDOR_PREFIX)
