"""Build a renderable line model from ChordPro-style lyric text.

Each input line becomes exactly one record, classified in this order:

+------------------------------+--------------------------------------------+
| Input line (trimmed)         | Record                                     |
+==============================+============================================+
| empty                        | ``TextLine("")``                           |
+------------------------------+--------------------------------------------+
| ``{Chorus}``                 | ``SectionLine(label="Chorus")``            |
+------------------------------+--------------------------------------------+
| ``# capo 2`` / ``; note``    | ``CommentLine(text="capo 2")``             |
+------------------------------+--------------------------------------------+
| ``G   D   Em   C``           | ``ChordsLine`` (raw line, columns kept)    |
+------------------------------+--------------------------------------------+
| ``[G]Amazing [D]grace``      | ``ChordLyricsLine`` (chord row + lyrics)   |
+------------------------------+--------------------------------------------+
| anything else                | ``TextLine`` (raw line)                    |
+------------------------------+--------------------------------------------+

Lines are independent: nothing carries over from one line to the next.
Grouping lines under their section is left to whoever renders the records,
with :func:`section_kind` to tell verses from choruses.

Usage::

    from chordview.transpose import transpose_lyrics
    from chordview.view import build_chordpro_view

    lines = build_chordpro_view(transpose_lyrics(lyrics, "G", "A"))
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from .chords import is_chord_token

# Comment marker plus the whitespace after it
_COMMENT_MARKER_RE = re.compile(r"^[#;]\s*")


# ---------------------------------------------------------------------------
# View line records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SectionLine:
    """A ``{Label}`` directive line."""

    type: ClassVar[str] = "section"
    label: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "label": self.label}


@dataclass(frozen=True)
class CommentLine:
    """A ``#`` or ``;`` comment, marker removed."""

    type: ClassVar[str] = "comment"
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ChordLyricsLine:
    """A lyric line with inline chords, split into a chord row above a lyric row.

    Both rows are column-aligned: each chord starts at the column of the
    lyric character its bracket preceded.
    """

    type: ClassVar[str] = "chordLyrics"
    chords: str
    lyrics: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "chords": self.chords, "lyrics": self.lyrics}


@dataclass(frozen=True)
class ChordsLine:
    """A line made only of chord tokens, kept verbatim."""

    type: ClassVar[str] = "chords"
    chords: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "chords": self.chords}


@dataclass(frozen=True)
class TextLine:
    """Any other line, including blank ones."""

    type: ClassVar[str] = "text"
    text: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "text": self.text}


ViewLine = SectionLine | CommentLine | ChordLyricsLine | ChordsLine | TextLine


# ---------------------------------------------------------------------------
# Section labels
# ---------------------------------------------------------------------------


class SectionKind(Enum):
    VERSE = auto()
    CHORUS = auto()
    BRIDGE = auto()
    INTRO = auto()
    OUTRO = auto()
    PRE_CHORUS = auto()
    OTHER = auto()


# Case-insensitive label prefixes; "pre-chorus" does not start with "chorus"
_SECTION_PREFIXES = (
    ("verse", SectionKind.VERSE),
    ("chorus", SectionKind.CHORUS),
    ("bridge", SectionKind.BRIDGE),
    ("intro", SectionKind.INTRO),
    ("outro", SectionKind.OUTRO),
    ("pre-chorus", SectionKind.PRE_CHORUS),
)


def section_kind(label: str) -> SectionKind:
    """Classify a section label such as ``"Verse 2"`` or ``"CHORUS"``."""
    lower = label.lower()
    for prefix, kind in _SECTION_PREFIXES:
        if lower.startswith(prefix):
            return kind
    return SectionKind.OTHER


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def split_chord_lyrics(line: str) -> tuple[str, str]:
    """Split an inline-chord line into ``(chord_row, lyric_row)``.

    Example::

        split_chord_lyrics("[G]Praise the [C]Lord")
        # ("G          C", "Praise the Lord")

    A ``[`` with no closing ``]`` is kept as a lyric character.  A chord name
    overlays the chord-row columns after it, so it never pushes the next
    chord to the right of its lyric; only when two chords would touch is the
    second one moved one column right.  Tabs in the lyric are copied into the
    chord row so tab stops line up; every other character is matched by one
    space.  A tab that falls under a chord name is not copied, since the
    chord name already fills that column.
    """
    chords = ""
    lyrics = ""
    i = 0

    while i < len(line):
        ch = line[i]
        if ch == "[":
            end = line.find("]", i + 1)
            if end == -1:
                lyrics += ch
                if len(chords) < len(lyrics):
                    chords += " "
                i += 1
                continue
            chord_text = line[i + 1:end].strip()
            if len(chords) < len(lyrics):
                chords += " " * (len(lyrics) - len(chords))
            elif chords and not chords[-1].isspace():
                # previous chord name runs past this column
                chords += " "
            chords += chord_text
            i = end + 1
        else:
            lyrics += ch
            if len(chords) < len(lyrics):
                chords += "\t" if ch == "\t" else " "
            i += 1

    return chords, lyrics


def build_chordpro_view(text: str) -> list[ViewLine]:
    """Return one :data:`ViewLine` per line of *text*."""
    result: list[ViewLine] = []

    for raw in text.split("\n"):
        line = raw.removesuffix("\r")
        stripped = line.strip()

        if not stripped:
            result.append(TextLine(text=""))
            continue

        if stripped.startswith("{") and stripped.endswith("}"):
            result.append(SectionLine(label=stripped[1:-1].strip()))
            continue

        if stripped.startswith(("#", ";")):
            result.append(CommentLine(text=_COMMENT_MARKER_RE.sub("", stripped, count=1)))
            continue

        if all(is_chord_token(t) for t in stripped.split()):
            result.append(ChordsLine(chords=line))
            continue

        if "[" in line and "]" in line:
            chords, lyrics = split_chord_lyrics(line)
            if chords.strip():
                result.append(ChordLyricsLine(chords=chords, lyrics=lyrics))
                continue

        result.append(TextLine(text=line))

    return result
