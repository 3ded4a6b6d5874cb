"""
Conflict resolution between two media types for the same extension.

mime.types may list one extension under several media types. The
ladder below is evaluated top to bottom and the first matching rule
decides:

    a. identical                            -> keep
    b. existing is application/octet-stream -> replace
    c. exactly one is experimental (x-)     -> non-experimental wins
    d. same subtype, text vs application    -> text wins
    e. exactly one is vendor (vnd.)         -> non-vendor wins
    f. anything else                        -> application/octet-stream

Rule order matters for real pairs (e.g. an x- vendor type against a
plain vendor type) and must not be rearranged.
"""

from enum import Enum
from typing import Tuple

from mimeconf.registry.media_type import (
    OCTET_STREAM,
    is_experimental,
    is_vendor,
    split_media_type,
)


class Resolution(str, Enum):
    """Outcome of resolving a new media type against the current one."""

    KEEP = "keep"
    REPLACE = "replace"
    CONFLICT = "conflict"


class Rule(str, Enum):
    """Ladder rule that produced a Resolution."""

    IDENTICAL = "identical"
    SENTINEL = "sentinel"
    EXPERIMENTAL = "experimental"
    TEXT_OVER_APPLICATION = "text-over-application"
    VENDOR = "vendor"
    UNRESOLVED = "unresolved"


def _prefer(have_loses: bool) -> Resolution:
    return Resolution.REPLACE if have_loses else Resolution.KEEP


def resolve_rule(have: str, media_type: str) -> Tuple[Resolution, Rule]:
    """
    Resolve media_type against the currently stored have.

    Args:
        have: Media type currently stored for the extension.
        media_type: Newly observed media type.

    Returns:
        (resolution, rule) pair naming the ladder rule that fired.
    """
    if have == media_type:
        return Resolution.KEEP, Rule.IDENTICAL

    if have == OCTET_STREAM:
        return Resolution.REPLACE, Rule.SENTINEL

    have_x = is_experimental(have)
    new_x = is_experimental(media_type)
    if have_x != new_x:
        return _prefer(have_x), Rule.EXPERIMENTAL

    have_type, have_subtype = split_media_type(have)
    new_type, new_subtype = split_media_type(media_type)
    if new_subtype == have_subtype:
        if new_type == "text" and have_type == "application":
            return Resolution.REPLACE, Rule.TEXT_OVER_APPLICATION
        if have_type == "text" and new_type == "application":
            return Resolution.KEEP, Rule.TEXT_OVER_APPLICATION

    have_vnd = is_vendor(have)
    new_vnd = is_vendor(media_type)
    if have_vnd != new_vnd:
        return _prefer(have_vnd), Rule.VENDOR

    return Resolution.CONFLICT, Rule.UNRESOLVED


def resolve(have: str, media_type: str) -> Resolution:
    """Resolve media_type against have; see resolve_rule()."""
    resolution, _ = resolve_rule(have, media_type)
    return resolution
