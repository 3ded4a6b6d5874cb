"""Registry and conflict resolution for extension to media-type mappings."""

from mimeconf.registry.media_type import OCTET_STREAM, is_experimental, is_vendor
from mimeconf.registry.registry import Conflict, MimeRegistry, normalize
from mimeconf.registry.resolver import Resolution, Rule, resolve, resolve_rule

__all__ = [
    "OCTET_STREAM",
    "Conflict",
    "MimeRegistry",
    "Resolution",
    "Rule",
    "is_experimental",
    "is_vendor",
    "normalize",
    "resolve",
    "resolve_rule",
]
