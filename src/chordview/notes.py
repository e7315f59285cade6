"""Pitch-class model: the 12 chromatic note names and their arithmetic.

Only the canonical sharp spellings and five flat aliases are understood::

    C  C#  D  D#  E  F  F#  G  G#  A  A#  B
       Db     Eb        Gb     Ab     Bb

Anything else (``Cb``, ``E#``, ``F##``, ``Bbb``) is not a note.  Lookups
return ``None`` rather than raising because they run speculatively on every
token of a lyric sheet.
"""

NOTES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Upper-cased flat spelling -> canonical sharp spelling
_FLATS = {
    "DB": "C#",
    "EB": "D#",
    "GB": "F#",
    "AB": "G#",
    "BB": "A#",
}


def normalize_note(value: str) -> str | None:
    """Return the canonical spelling of *value*, or ``None`` if it is not a note."""
    up = value.strip().upper()
    if up in NOTES:
        return up
    return _FLATS.get(up)


def semitone_interval(from_note: str, to_note: str) -> int:
    """Return the upward distance in semitones (0-11) from one canonical note to another."""
    return (NOTES.index(to_note) - NOTES.index(from_note) + len(NOTES)) % len(NOTES)


def shift_note(note: str, semitones: int) -> str:
    """Return the canonical note *semitones* steps above *note*, wrapping at the octave."""
    return NOTES[(NOTES.index(note) + semitones) % len(NOTES)]
