"""
Extension to media-type registry.

The registry accepts repeated observations of (extension, media type)
and keeps exactly one live media type per case-insensitive extension.
Every observation goes through:

1. Casing normalization: the first casing seen for an extension is
   kept, later observations are coerced to it.
2. Override substitution (see overrides.py), keyed on the normalized
   extension.
3. The resolver ladder (see resolver.py) when a value already exists.

Results depend on the order of observations, so callers must replay
them in source order.

Usage
-----
    registry = MimeRegistry()
    registry.add(".q", "text/x-foo")
    registry.add(".q", "application/foo")
    registry.get(".q")  # "application/foo"
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from mimeconf.core.logging import get_logger
from mimeconf.registry.media_type import OCTET_STREAM, is_vendor
from mimeconf.registry.overrides import OVERRIDES, apply_override
from mimeconf.registry.resolver import Resolution, resolve

logger = get_logger(__name__)


@dataclass(frozen=True)
class Conflict:
    """An observation that could not be resolved and was merged to octet-stream."""

    extension: str
    attempted: str
    previous: str

    def describe(self) -> str:
        return (
            f"Duplicate mimetype: '{self.extension}' => '{self.attempted}' "
            f"(already have '{self.previous}'), merging to '{OCTET_STREAM}'"
        )


def normalize(
    extension: str,
    media_type: str,
    seen_casing: Mapping[str, str],
    overrides: Mapping[str, Mapping[str, str]] = OVERRIDES,
) -> Tuple[str, str]:
    """
    Normalize an observation before resolution.

    Args:
        extension: Extension as observed.
        media_type: Media type as observed.
        seen_casing: Lower-cased extension -> first casing seen.
        overrides: Manual override table.

    Returns:
        (extension, media_type) with first-seen casing and any override applied.
    """
    extension = seen_casing.get(extension.lower(), extension)
    return extension, apply_override(extension, media_type, overrides)


class MimeRegistry:
    """
    Owned map from extension to its resolved media type.

    Built once by the pipeline and then read by the emitter.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, Mapping[str, str]]] = None,
    ) -> None:
        self.overrides = OVERRIDES if overrides is None else overrides
        self._extensions: Dict[str, str] = {}
        self._casing: Dict[str, str] = {}
        self.conflicts: List[Conflict] = []

    def __len__(self) -> int:
        return len(self._extensions)

    def __contains__(self, extension: object) -> bool:
        if not isinstance(extension, str):
            return False
        return extension.lower() in self._casing

    def __iter__(self) -> Iterator[str]:
        return iter(self._extensions)

    def get(self, extension: str, default: Optional[str] = None) -> Optional[str]:
        """Look up an extension case-insensitively."""
        stored = self._casing.get(extension.lower())
        if stored is None:
            return default
        return self._extensions[stored]

    def items(self) -> List[Tuple[str, str]]:
        """(extension, media type) pairs in insertion order."""
        return list(self._extensions.items())

    def as_dict(self) -> Dict[str, str]:
        return dict(self._extensions)

    def _set(self, extension: str, media_type: str) -> None:
        self._extensions[extension] = media_type
        self._casing[extension.lower()] = extension

    def add(self, extension: str, media_type: str) -> Tuple[str, str]:
        """
        Record one observation and resolve it against the current value.

        Args:
            extension: Extension including the leading dot (or a bare name).
            media_type: Observed media type.

        Returns:
            The normalized (extension, media_type) pair that was resolved.
        """
        extension, media_type = normalize(
            extension, media_type, self._casing, self.overrides
        )
        have = self._extensions.get(extension)

        if have is None:
            self._set(extension, media_type)
            return extension, media_type

        resolution = resolve(have, media_type)
        if resolution is Resolution.REPLACE:
            self._set(extension, media_type)
        elif resolution is Resolution.CONFLICT:
            self._record_conflict(Conflict(extension, media_type, have))
            self._set(extension, OCTET_STREAM)
        return extension, media_type

    def _record_conflict(self, conflict: Conflict) -> None:
        self.conflicts.append(conflict)
        logger.debug(conflict.describe())

    def reportable_conflicts(self) -> List[Conflict]:
        """Conflicts worth reporting to the user, in arrival order."""
        # two vendor types colliding is routine in mime.types
        return [c for c in self.conflicts if not is_vendor(c.attempted)]

    def add_if_missing(self, extension: str, media_type: str) -> bool:
        """
        Store a mapping only when the extension has no entry at all.

        Bypasses the resolver; any existing value, octet-stream included,
        suppresses the mapping.

        Returns:
            True if the mapping was stored.
        """
        if extension in self:
            return False
        self._set(extension, media_type)
        return True

    def add_all(self, observations: Iterable[Tuple[str, str]]) -> None:
        """add() every (extension, media_type) pair in order."""
        for extension, media_type in observations:
            self.add(extension, media_type)
