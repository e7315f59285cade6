from abc import ABC, abstractmethod


class SongSource(ABC):
    """Abstract base class for places song text can be read from."""

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Return True if this source can read the given location."""

    @abstractmethod
    def read(self, location: str) -> str:
        """Return the ChordPro-style song text stored at *location*.

        Raises FetchError when the location cannot be read.
        """
