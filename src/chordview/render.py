"""Plain-text renderer for view lines.

Turns the records from :func:`~chordview.view.build_chordpro_view` into
monospace text for a terminal or a printed sheet:

+--------------------+--------------------------------------------+
| Record             | Output                                     |
+====================+============================================+
| ``SectionLine``    | ``[CHORUS]`` (label upper-cased)           |
+--------------------+--------------------------------------------+
| ``SectionLine``    | nothing; metadata directives such as       |
| (``{key: G}``)     | ``{title: ...}``, ``{artist: ...}``,       |
|                    | ``{key: ...}``, ``{capo: ...}`` and        |
|                    | ``{tempo: ...}`` are left out of the sheet |
+--------------------+--------------------------------------------+
| ``CommentLine``    | ``# text``                                 |
+--------------------+--------------------------------------------+
| ``ChordLyricsLine``| chord row, then lyric row                  |
+--------------------+--------------------------------------------+
| ``ChordsLine``     | the chord line as written                  |
+--------------------+--------------------------------------------+
| ``TextLine``       | the text as written                        |
+--------------------+--------------------------------------------+

:meth:`ViewRenderer.render_song` puts a header block above the sheet: the
song title, the artist if known, then ``Key: X`` when the song has a key.

Usage::

    from chordview.render import ViewRenderer
    text = ViewRenderer().render(song.view("A"))
    sheet = ViewRenderer().render_song(song, "A")
"""

import re
from collections.abc import Iterable

from .models import Song
from .view import ChordLyricsLine, ChordsLine, CommentLine, SectionLine, TextLine, ViewLine

# Section labels that are song metadata rather than song structure
METADATA_LABEL_RE = re.compile(
    r"^(?:title|t|subtitle|st|artist|key|capo|tempo)\s*:",
    re.IGNORECASE,
)


class ViewRenderer:
    """Render view lines to plain text."""

    def render(self, lines: Iterable[ViewLine]) -> str:
        """Return the text for *lines*.

        Leading and trailing blank lines are dropped.  The returned string
        ends with a single newline and uses Unix line endings (``\\n``)
        throughout.
        """
        parts: list[str] = []
        for line in lines:
            parts.extend(_render_line(line))
        return "\n".join(parts).strip("\n") + "\n"

    def render_song(self, song: Song, current_key: str | None = None) -> str:
        """Return a title/key header followed by *song* rendered in *current_key*."""
        header = [song.title]
        if song.artist:
            header.append(song.artist)
        # without an original key the sheet is shown untransposed
        key = song.effective_key(current_key) if song.original_key else ""
        if key:
            header.append(f"Key: {key}")
        return "\n".join(header) + "\n\n" + self.render(song.view(current_key))


def _render_line(line: ViewLine) -> list[str]:
    match line:
        case SectionLine(label=label):
            if METADATA_LABEL_RE.match(label):
                return []
            return [f"[{label.upper()}]"]
        case CommentLine(text=text):
            return [f"# {text}"]
        case ChordLyricsLine(chords=chords, lyrics=lyrics):
            return [chords.rstrip(), lyrics]
        case ChordsLine(chords=chords):
            return [chords]
        case TextLine(text=text):
            return [text]
    raise TypeError(f"Not a view line: {line!r}")
