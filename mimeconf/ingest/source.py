"""
Media-type database reader.

open_source() opens the file eagerly so that an unreadable database is
reported before any output is produced; the returned iterator yields
lines lazily and closes the file once it is exhausted or discarded.
"""

from pathlib import Path
from typing import Iterator, TextIO, Union

from mimeconf.core.exceptions import SourceUnavailableError
from mimeconf.core.logging import get_logger

logger = get_logger(__name__)


def _lines(handle: TextIO) -> Iterator[str]:
    with handle:
        yield from handle


def open_source(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[str]:
    """
    Open the media-type database.

    Args:
        path: Path to a mime.types style file.
        encoding: Text encoding of the file.

    Returns:
        Lazy iterator over the raw lines.

    Raises:
        SourceUnavailableError: The file cannot be opened.
    """
    try:
        handle = open(path, "r", encoding=encoding, errors="replace")
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise SourceUnavailableError(f"open {path}: {reason}", path=str(path)) from exc

    logger.debug("Reading media-type database", source=str(path))
    return _lines(handle)
