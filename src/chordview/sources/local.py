"""Source for song files on the local filesystem (``.cho``, ``.pro``, ``.txt``)."""

import logging
from pathlib import Path

from ..exceptions import FetchError
from .base import SongSource

logger = logging.getLogger(__name__)


class LocalFileSource(SongSource):
    """Read a song from a file path."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return "://" not in location

    def read(self, location: str) -> str:
        path = Path(location).expanduser()
        logger.debug("Reading song file %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(location) from exc
