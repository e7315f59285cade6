class ChordViewError(Exception):
    """Base exception for chordview."""


class FetchError(ChordViewError):
    """Raised when a song source cannot be read."""

    def __init__(self, location: str, status_code: int = 0):
        self.location = location
        self.status_code = status_code
        if status_code:
            super().__init__(f"HTTP {status_code} fetching {location}")
        else:
            super().__init__(f"Could not read {location}")


class ParseError(ChordViewError):
    """Raised when song text cannot be extracted from a fetched page."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Parse error for {location}: {reason}")


class UnsupportedSourceError(ChordViewError):
    """Raised when no source matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No source found for: {location}")


class UnknownKeyError(ChordViewError):
    """Raised when a key given on the command line is not a known note name."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown key: {key!r} (expected one of C, C#, Db, D, ... B)")
