"""Chord transposition for single chords and whole lyric sheets.

Two chord notations are handled line by line:

  "inline"   — ChordPro brackets inside the lyric:  ``[G]Amazing [D/F#]grace``
  "chord row" — bare chords separated by spaces:     ``G      D/F#    Em``

Transposition never fails.  An unrecognised key or chord root leaves the
text exactly as it was, and the number of lines is always preserved.
"""

import functools
import logging
import re

from .chords import is_chord_token, split_chord
from .notes import normalize_note, semitone_interval, shift_note

logger = logging.getLogger(__name__)

# Any [token] group; the first "]" closes it
BRACKET_GROUP_RE = re.compile(r"\[([^\]]+)\]")

# Whitespace runs, captured so re.split() keeps them
_WHITESPACE_RUN_RE = re.compile(r"(\s+)")


def transpose_chord(chord: str, from_key: str, to_key: str) -> str:
    """Return *chord* moved by the interval between *from_key* and *to_key*.

    The root comes back in canonical sharp spelling (``Eb`` becomes ``D#``
    before shifting); the suffix is kept verbatim.  If either key or the
    chord root is not recognised, *chord* is returned unchanged.
    """
    from_note = normalize_note(from_key)
    to_note = normalize_note(to_key)
    if not from_note or not to_note:
        return chord

    parts = split_chord(chord)
    if parts is None:
        return chord
    root_raw, suffix = parts
    root = normalize_note(root_raw)
    if not root:
        return chord

    return shift_note(root, semitone_interval(from_note, to_note)) + suffix


@functools.lru_cache(maxsize=256)
def transpose_lyrics(text: str, from_key: str | None, to_key: str) -> str:
    """Transpose every chord in *text* from *from_key* to *to_key*.

    Returns *text* untouched when there is no source key, when both keys
    are the same, or when either key is not a note name.  Non-chord words are
    never altered.
    """
    if not from_key or not from_key.strip() or from_key == to_key:
        return text

    if normalize_note(from_key) is None or normalize_note(to_key) is None:
        logger.debug("Skipping transposition: unrecognised key %r -> %r", from_key, to_key)
        return text

    return "\n".join(_transpose_line(line, from_key, to_key) for line in text.split("\n"))


def _transpose_line(line: str, from_key: str, to_key: str) -> str:
    if "[" in line:
        return BRACKET_GROUP_RE.sub(
            lambda m: "[" + _transpose_group(m.group(1), from_key, to_key) + "]",
            line,
        )

    # Chord-row style: keep the whitespace runs so columns stay aligned
    parts = _WHITESPACE_RUN_RE.split(line)
    return "".join(
        transpose_chord(part, from_key, to_key) if is_chord_token(part) else part
        for part in parts
    )


def _transpose_group(inner: str, from_key: str, to_key: str) -> str:
    """Transpose each ``/``-separated segment of a bracket group."""
    segments = []
    for segment in inner.split("/"):
        trimmed = segment.strip()
        if is_chord_token(trimmed):
            segments.append(transpose_chord(trimmed, from_key, to_key))
        else:
            segments.append(segment)
    return "/".join(segments)
