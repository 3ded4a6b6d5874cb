"""Reading and parsing the media-type database."""

from mimeconf.ingest.parser import Observation, iter_observations, parse_line
from mimeconf.ingest.source import open_source
from mimeconf.ingest.supplements import IANA_GAPS, USEFUL_EXTRAS, apply_supplements

__all__ = [
    "IANA_GAPS",
    "USEFUL_EXTRAS",
    "Observation",
    "apply_supplements",
    "iter_observations",
    "open_source",
    "parse_line",
]
