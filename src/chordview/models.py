from dataclasses import dataclass, field

from .transpose import transpose_lyrics
from .view import ViewLine, build_chordpro_view


@dataclass
class Song:
    """A song as stored by the application: lyrics plus the key they are written in.

    Lyrics use ChordPro-style inline chords, e.g.
    "{Verse 1}\\n[G]Amazing [C]grace, how [G]sweet the sound"
    """

    title: str
    lyrics: str = ""
    original_key: str | None = None  # e.g. "G", "Bb"; None when unknown
    artist: str | None = None

    def effective_key(self, current_key: str | None = None) -> str:
        """Return the key the song should be shown in."""
        return current_key or self.original_key or ""

    def view(self, current_key: str | None = None) -> list[ViewLine]:
        """Return the view lines for this song, transposed to *current_key* if given."""
        key = self.effective_key(current_key)
        if key and self.original_key:
            text = transpose_lyrics(self.lyrics, self.original_key, key)
        else:
            text = self.lyrics
        return build_chordpro_view(text)


@dataclass
class SetlistEntry:
    """A song in a setlist, optionally played in a different key."""

    song: Song
    key: str | None = None

    def view(self) -> list[ViewLine]:
        return self.song.view(self.key)


@dataclass
class Setlist:
    """An ordered list of songs for one service."""

    name: str
    date: str | None = None  # ISO date, e.g. "2026-10-18"
    entries: list[SetlistEntry] = field(default_factory=list)

    def views(self) -> list[tuple[SetlistEntry, list[ViewLine]]]:
        return [(entry, entry.view()) for entry in self.entries]
