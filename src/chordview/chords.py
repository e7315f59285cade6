"""Chord token classification.

A token is treated as a chord when it looks like ``<root><suffix>``:

  root    one letter A-G (either case), optionally followed by ``b`` or ``#``
  suffix  empty, or at most four ASCII letters/digits (``m``, ``7``, ``maj7``, ``sus4``)

This is a heuristic for telling chord rows apart from lyric rows, not a
chord grammar.  Some words pass (``Be``, ``Ad``) and some real chords fail
(``sus2add4``, ``G/B`` as a single token); callers split slash chords into
segments before asking.
"""

import re

# Root letter with optional accidental, then everything else
CHORD_ROOT_RE = re.compile(r"^([A-Ga-g][b#]?)(.*)$")

_SUFFIX_RE = re.compile(r"^[A-Za-z0-9]+$")

MAX_SUFFIX_LEN = 4


def split_chord(chord: str) -> tuple[str, str] | None:
    """Split *chord* into ``(root, suffix)``, or return ``None`` if it has no root."""
    m = CHORD_ROOT_RE.match(chord)
    if not m:
        return None
    return m.group(1), m.group(2)


def is_chord_token(token: str) -> bool:
    """Return True if *token* looks like a chord symbol.

    Never raises; every string has an answer.
    """
    t = token.strip()
    if not t:
        return False
    parts = split_chord(t)
    if parts is None:
        return False
    _, suffix = parts
    if not suffix:
        return True
    if len(suffix) > MAX_SUFFIX_LEN:
        return False
    return bool(_SUFFIX_RE.match(suffix))
