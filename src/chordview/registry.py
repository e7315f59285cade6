import logging

from .exceptions import UnsupportedSourceError
from .sources.base import SongSource
from .sources.local import LocalFileSource
from .sources.web import HttpSource

logger = logging.getLogger(__name__)

_SOURCES: list[type[SongSource]] = [
    HttpSource,
    LocalFileSource,
]


def get_source(location: str) -> SongSource:
    """Return an instantiated source for the given location.

    Raises UnsupportedSourceError if no source matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(location):
            logger.debug("Using %s for %s", cls.__name__, location)
            return cls()
    raise UnsupportedSourceError(location)
