"""
Generation pipeline.

    database lines -> parse -> MimeRegistry.add -> supplements -> render

build_registry() and generate() work on any line iterable; run()
opens the configured database first.
"""

from typing import Iterable, Optional, TextIO

from mimeconf.core.config import GeneratorConfig
from mimeconf.core.logging import get_logger
from mimeconf.emit.emitter import render, write
from mimeconf.ingest.parser import iter_observations
from mimeconf.ingest.source import open_source
from mimeconf.ingest.supplements import apply_supplements
from mimeconf.registry.registry import MimeRegistry

logger = get_logger(__name__)


def build_registry(lines: Iterable[str]) -> MimeRegistry:
    """
    Resolve every observation in lines, then merge the supplements.

    Args:
        lines: mime.types lines in file order.

    Returns:
        Populated registry.
    """
    registry = MimeRegistry()
    registry.add_all(iter_observations(lines))
    apply_supplements(registry)
    logger.debug(
        "Registry built",
        extensions=len(registry),
        conflicts=len(registry.conflicts),
    )
    return registry


def generate(lines: Iterable[str]) -> str:
    """Return the complete mime.conf text for lines."""
    return render(build_registry(lines).as_dict())


def run(config: GeneratorConfig, sink: Optional[TextIO] = None) -> MimeRegistry:
    """
    Read the configured database and write mime.conf to sink.

    Raises:
        SourceUnavailableError: The database cannot be opened. Nothing
            has been written in that case.
    """
    lines = open_source(config.source, encoding=config.encoding)
    registry = build_registry(lines)
    write(registry.as_dict(), sink)
    return registry
